"""
Application form PDF endpoint
"""

from typing import Any, Dict

import structlog
from fastapi import APIRouter, Body, Depends
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response

from hrapply.api.deps import failure_response, get_context
from hrapply.context import AppContext

logger = structlog.get_logger()

router = APIRouter()

PDF_FILENAME = "employment-application.pdf"


@router.post("/generate-pdf")
async def generate_pdf(
    record: Dict[str, Any] = Body(...),
    context: AppContext = Depends(get_context)
):
    """Render the two-page employment application form for a record"""
    try:
        pdf_bytes = await run_in_threadpool(context.renderer.render, record)
    except Exception as e:
        logger.error("Error generating PDF", error=str(e))
        return failure_response(e)

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename={PDF_FILENAME}"}
    )

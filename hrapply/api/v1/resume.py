"""
Resume parsing endpoint
Extracts text from an uploaded resume and pre-fills the application form
"""

import asyncio
from typing import Optional

import structlog
from fastapi import APIRouter, Depends, File, UploadFile

from hrapply.api.deps import failure_response, get_context
from hrapply.context import AppContext
from hrapply.services.text_extractor import extract_text, scoped_upload

logger = structlog.get_logger()

router = APIRouter()


@router.post("/parse-resume")
async def parse_resume(
    resume: Optional[UploadFile] = File(None, description="Resume file (PDF or text)"),
    context: AppContext = Depends(get_context)
):
    """
    Parse a resume with the completion service
    Returns the extracted fields; unknown fields come back as empty strings
    """
    if resume is None or not resume.filename:
        return failure_response(Exception("No file uploaded"), status_code=400)

    settings = context.settings

    try:
        async with scoped_upload(resume, settings.upload_dir, settings.max_file_size_bytes) as path:
            # PyMuPDF parsing is blocking
            text = await asyncio.to_thread(extract_text, path, resume.content_type)

        logger.info("Resume text extracted", filename=resume.filename, text_length=len(text))

        data = await context.ai_processor.extract_fields(text)
        return {"success": True, "data": data}
    except Exception as e:
        logger.error("Error parsing resume", filename=resume.filename, error=str(e))
        return failure_response(e)

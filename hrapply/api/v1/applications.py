"""
Application submission and retrieval endpoints
"""

from typing import Any, Dict

import structlog
from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hrapply.api.deps import failure_response, get_db_session
from hrapply.services.application_store import ApplicationStore

logger = structlog.get_logger()

router = APIRouter()


@router.post("/submit")
async def submit_application(
    record: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db_session)
):
    """
    Store a submitted application
    Integer fields are coerced; everything else is stored as received
    """
    try:
        application_id = await ApplicationStore(db).create(record)
        return {"success": True, "id": application_id}
    except Exception as e:
        logger.error("Error submitting application", error=str(e))
        return failure_response(e)


@router.get("/applications")
async def list_applications(db: AsyncSession = Depends(get_db_session)):
    """All applications, newest first"""
    try:
        applications = await ApplicationStore(db).list()
        return {"success": True, "data": applications}
    except Exception as e:
        logger.error("Error fetching applications", error=str(e))
        return failure_response(e)


@router.get("/applications/{application_id}")
async def get_application(application_id: str, db: AsyncSession = Depends(get_db_session)):
    """One application by id"""
    try:
        application = await ApplicationStore(db).get(application_id)
        return {"success": True, "data": application}
    except Exception as e:
        logger.error("Error fetching application", application_id=application_id, error=str(e))
        return failure_response(e)

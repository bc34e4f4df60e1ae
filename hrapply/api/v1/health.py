"""
Health check endpoint
Simple status monitoring without authentication
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from hrapply.api.deps import get_context
from hrapply.context import AppContext

router = APIRouter()


@router.get("/health")
async def health_check(context: AppContext = Depends(get_context)) -> Dict[str, Any]:
    """
    Basic health check endpoint
    Returns application status and version
    """
    settings = context.settings
    return {
        "status": "healthy",
        "app_name": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
        "openai_configured": settings.openai_configured,
        "database_connected": await context.database.check_connection(),
    }

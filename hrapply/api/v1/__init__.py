"""
API v1 router configuration
Resume parsing, application storage and form rendering under /api
"""

from fastapi import APIRouter

from .applications import router as applications_router
from .documents import router as documents_router
from .health import router as health_router
from .resume import router as resume_router

# Create main API router
api_router = APIRouter()

# Include resume parsing router
api_router.include_router(
    resume_router,
    tags=["resume"]
)

# Include application storage router
api_router.include_router(
    applications_router,
    tags=["applications"]
)

# Include form rendering router
api_router.include_router(
    documents_router,
    tags=["documents"]
)

__all__ = ["api_router", "health_router"]

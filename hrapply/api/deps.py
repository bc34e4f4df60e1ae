"""
FastAPI dependencies and the shared failure response
"""

from typing import AsyncGenerator

import structlog
from fastapi import Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from hrapply.context import AppContext

logger = structlog.get_logger()


def get_context(request: Request) -> AppContext:
    return request.app.state.context


async def get_db_session(context: AppContext = Depends(get_context)) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for database sessions

    Yields:
        AsyncSession: Database session for dependency injection
    """
    async with context.database.session() as session:
        yield session


def failure_response(error: Exception, status_code: int = 500) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": str(error)})

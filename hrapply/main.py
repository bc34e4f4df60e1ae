#!/usr/bin/env python3
"""
Employment Application Service API
Resume pre-fill, application storage and the bilingual application form PDF
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from hrapply.api.v1 import api_router, health_router
from hrapply.context import AppContext
from hrapply.core.config import Settings, get_settings, log_settings_summary
from hrapply.core.logging import configure_logging

logger = structlog.get_logger()


def create_app(settings: Optional[Settings] = None, context: Optional[AppContext] = None) -> FastAPI:
    """
    Build the FastAPI application

    Args:
        settings: Settings to use; loaded from the environment when omitted
        context: Prebuilt application context (tests pass fakes through this)

    Returns:
        FastAPI: Configured application
    """
    if context is None:
        settings = settings or get_settings()
        configure_logging(settings.log_level, json_output=settings.is_production)
        context = AppContext.from_settings(settings)
    settings = context.settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log_settings_summary(settings)
        await context.startup()
        try:
            yield
        finally:
            await context.shutdown()

    app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)
    app.state.context = context

    # Add CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.error("Request validation failed", path=request.url.path, errors=exc.errors())
        return JSONResponse(status_code=500, content={"success": False, "error": "Invalid request body"})

    app.include_router(health_router)
    app.include_router(api_router, prefix="/api")

    static_dir = Path(settings.static_dir)

    @app.get("/", include_in_schema=False)
    async def index():
        """Serve the landing page"""
        return FileResponse(static_dir / "index.html")

    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir), name="static")
    else:
        logger.warning("Static directory not found", static_dir=str(static_dir))

    return app


def run():
    """Start the API server with uvicorn"""
    import uvicorn

    settings = get_settings()
    uvicorn.run("hrapply.main:create_app", factory=True, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()

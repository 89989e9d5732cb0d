"""FastAPI application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from . import __version__
from .api import router
from .config import Settings, get_settings
from .exceptions import ImageTagException
from .logging_config import log_version
from .models.errors import ErrorResponse
from .services.tag_resolver import TagResolver

logger = structlog.get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application for the given settings.

    Args:
        settings: Settings to serve with, or None to load them from the environment.

    Returns:
        The configured FastAPI application.
    """
    if settings is None:
        settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Application lifespan handler for startup/shutdown events."""
        log_version(__version__, settings.build_date)
        logger.info("service_starting", image_day=settings.image_day, port=settings.port)
        yield
        logger.info("service_stopping")

    app = FastAPI(
        title="Image Tag API",
        description="Resolves the dated image tag for a weekly maintenance window",
        version=__version__,
        lifespan=lifespan,
        redirect_slashes=False,
    )

    app.state.settings = settings
    app.state.tag_resolver = TagResolver(settings.image_day)

    app.include_router(router)

    @app.exception_handler(ImageTagException)
    async def image_tag_exception_handler(
        request: Request,
        exc: ImageTagException,
    ) -> JSONResponse:
        """Handle all ImageTagException subclasses with proper error response."""
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(
                detail=exc.message,
                code=exc.error_code.value,
            ).model_dump(),
        )

    return app

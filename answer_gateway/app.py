"""
Answer Gateway - FastAPI application factory.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from answer_gateway.api.routers import api_router
from answer_gateway.config.settings import Settings, get_settings
from answer_gateway.middleware.error_handling import ErrorHandlingMiddleware
from answer_gateway.middleware.request_logging import RequestLoggingMiddleware

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan context manager."""
        logger.info(f"Starting {settings.app_name} ({settings.environment})")
        yield
        logger.info("Shutting down...")

    app = FastAPI(
        title=settings.app_name,
        description="Forwards chat completion requests to OpenAI",
        version="1.0.0",
        lifespan=lifespan,
        debug=settings.debug,
        redirect_slashes=False,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_middleware(ErrorHandlingMiddleware, is_production=settings.is_production)
    if settings.enable_request_logging:
        app.add_middleware(RequestLoggingMiddleware)

    app.include_router(api_router)

    return app

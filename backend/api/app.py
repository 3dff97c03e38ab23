"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from shared.logging_config import setup_logging
from .dependencies import get_container
from .errors import register_exception_handlers
from .routes import health
from modules.exports.routes import router as exports_router
from modules.mirror.routes import router as directory_router
from modules.moderation.routes import router as moderation_router
from modules.stats.routes import router as stats_router
from modules.users.routes import router as users_router
from modules.verifications.routes import router as verifications_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Configures logging and builds the store and mirror before serving.
    """
    # Startup
    settings = get_settings()
    setup_logging(settings)
    container = get_container()
    logger.info(
        f"Starting {settings.app_name} on {settings.host}:{settings.port} "
        f"(mirror: {container.mirror.mode.value})"
    )
    yield
    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Student verification and post moderation admin API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(verifications_router, prefix="/api", tags=["verifications"])
    app.include_router(moderation_router, prefix="/api", tags=["moderation"])
    app.include_router(users_router, prefix="/api", tags=["users"])
    app.include_router(stats_router, prefix="/api", tags=["stats"])
    app.include_router(directory_router, prefix="/api", tags=["directory"])
    app.include_router(exports_router, prefix="/api", tags=["exports"])

    return app


# Application instance for uvicorn
app = create_app()

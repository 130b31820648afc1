"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import Settings, get_settings
from shared.logging_config import configure_logging
from .routes import health
from .routes.frontend import create_frontend_router
from modules.auth.routes import router as auth_router
from modules.wardrobe.routes import router as items_router, dashboard_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic. Missing required configuration
    aborts startup.
    """
    # Startup
    settings: Settings = app.state.settings
    configure_logging(settings.log_level)
    settings.ensure_required()
    logger.info("Starting StyleStash API on %s:%s", settings.host, settings.port)
    yield
    # Shutdown
    logger.info("Shutting down StyleStash API")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration to use (defaults to the cached settings)

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Wardrobe tracking API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )
    app.state.settings = settings

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
    app.include_router(dashboard_router, prefix="/api/dashboard", tags=["dashboard"])
    app.include_router(items_router, prefix="/api/items", tags=["items"])

    # Catch-all must come last
    app.include_router(create_frontend_router(settings.static_dir))

    return app


# Application instance for uvicorn
app = create_app()

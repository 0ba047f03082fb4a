"""
Application factory for FastAPI.

This module provides a factory function for creating FastAPI application instances.
The factory pattern allows for:
- Easy testing with custom settings
- Multiple app instances with different configurations
- Clear separation of app creation from route definitions

Usage:
    from backend.main import create_app
    from backend.settings import Settings

    # Default app (uses get_settings())
    app = create_app()

    # Test app with custom settings
    test_settings = Settings(environment="test", _env_file=None)
    test_app = create_app(settings=test_settings)
"""

import logging
from typing import Optional

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.settings import Settings, get_settings
from infrastructure.catalog_cache import TTLCache
from infrastructure.exercisedb_client import ExerciseDBClient
from services.catalog_provider import CatalogProvider

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    catalog_provider: Optional[CatalogProvider] = None,
) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.
        catalog_provider: Optional catalog provider. If not provided, one is
                  built from settings (ExerciseDB when a RapidAPI key is set).

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Initialize Sentry for error tracking
    _init_sentry(settings)

    app = FastAPI(
        title="Training Progression API",
        description="Progression suggestions, deload detection, adaptation and program generation",
        version="1.0.0",
    )

    app.state.settings = settings
    app.state.catalog_provider = catalog_provider or build_catalog_provider(settings)

    _configure_cors(app)
    _include_routers(app)

    return app


def build_catalog_provider(settings: Settings) -> CatalogProvider:
    """
    Build the catalog provider for the configured environment.

    Args:
        settings: Application settings

    Returns:
        CatalogProvider backed by ExerciseDB, or by the static library only
    """
    source = None
    if settings.exercisedb_configured:
        source = ExerciseDBClient(
            api_key=settings.rapidapi_key,
            host=settings.exercisedb_host,
            timeout=settings.exercisedb_timeout_seconds,
        )
        logger.info("ExerciseDB catalog source configured")

    cache = TTLCache(
        ttl_seconds=settings.catalog_cache_ttl_seconds,
        max_size=settings.catalog_cache_max_size,
    )
    return CatalogProvider(
        source=source,
        cache=cache,
        min_remote_exercises=settings.catalog_min_exercises,
    )


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,
            profiles_sample_rate=0.1,
        )
        logger.info("Sentry initialized for progression-api")


def _configure_cors(app: FastAPI) -> None:
    """Configure CORS middleware for the application."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://localhost:5173"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _include_routers(app: FastAPI) -> None:
    """Include all API routers in the application."""
    from api.routers import (
        generation_router,
        health_router,
        progression_router,
    )

    # Health router (no prefix - /health at root)
    app.include_router(health_router)

    # Domain routers
    app.include_router(progression_router)
    app.include_router(generation_router)


# Default app instance for uvicorn
# This allows: uvicorn backend.main:app --reload
app = create_app()

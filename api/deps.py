"""
FastAPI Dependency Providers for the Training Progression API.

Architecture:
- Settings are cached per-process (lru_cache)
- The catalog provider (and its TTL cache) lives on app.state so the
  cache survives across requests
- Engines and analyzers are created per-request; they hold no state

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_catalog_provider] = lambda: CatalogProvider()
"""

from fastapi import Depends, Request

from backend.settings import Settings, get_settings as _get_settings
from services.adaptation_analyzer import AdaptationAnalyzer
from services.catalog_provider import CatalogProvider
from services.exercise_catalog import ExerciseCatalog
from services.program_generator import ProgramGenerator
from services.progression_engine import ProgressionEngine


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings(request: Request) -> Settings:
    """
    Get application settings.

    Returns the Settings the app was created with, falling back to the
    cached instance from backend.settings.

    Returns:
        Settings: Application settings instance
    """
    return getattr(request.app.state, "settings", None) or _get_settings()


# =============================================================================
# Catalog Providers
# =============================================================================


def get_catalog_provider(request: Request) -> CatalogProvider:
    """
    Get the application's CatalogProvider.

    Args:
        request: Current request (used to reach app.state)

    Returns:
        CatalogProvider: Shared provider with its TTL cache
    """
    return request.app.state.catalog_provider


async def get_catalog(
    provider: CatalogProvider = Depends(get_catalog_provider),
) -> ExerciseCatalog:
    """Resolve the current exercise catalog (remote or static fallback)."""
    return await provider.get_catalog()


# =============================================================================
# Service Providers
# =============================================================================


def get_progression_engine(
    settings: Settings = Depends(get_settings),
) -> ProgressionEngine:
    return ProgressionEngine(deload_session_limit=settings.deload_session_limit)


def get_adaptation_analyzer(
    catalog: ExerciseCatalog = Depends(get_catalog),
) -> AdaptationAnalyzer:
    return AdaptationAnalyzer(catalog)


def get_program_generator(
    provider: CatalogProvider = Depends(get_catalog_provider),
) -> ProgramGenerator:
    return ProgramGenerator(provider)


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    "get_settings",
    "get_catalog_provider",
    "get_catalog",
    "get_progression_engine",
    "get_adaptation_analyzer",
    "get_program_generator",
]

"""
Health check router.

Liveness for load balancers, plus a catalog diagnostics endpoint showing
whether ExerciseDB is configured and how the catalog cache is doing.
"""

from fastapi import APIRouter, Depends

from api.deps import get_catalog_provider
from services.catalog_provider import CatalogProvider

router = APIRouter(
    tags=["Health"],
)


@router.get("/health")
def health():
    """Liveness check for progression-api."""
    return {"status": "ok", "service": "progression-api"}


@router.get("/health/catalog")
def catalog_health(provider: CatalogProvider = Depends(get_catalog_provider)):
    """
    Exercise catalog diagnostics.

    Returns:
        dict: Catalog source ("exercisedb" or "static") and cache statistics
    """
    return {
        "source": "exercisedb" if provider.is_remote_configured else "static",
        "cache": provider.cache_stats(),
    }

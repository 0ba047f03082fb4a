"""
Exercise catalog provider.

Supplies the catalog used for program generation. When a remote source is
configured its result is cached and merged with the static library; any
failure or short result falls back to the static library so generation
never fails because of the network.
"""

import logging
from typing import List, Optional

from application.ports.exercise_catalog_source import ExerciseCatalogSource
from core.constants import MIN_REMOTE_CATALOG_SIZE
from infrastructure.catalog_cache import TTLCache
from infrastructure.static_catalog import STATIC_EXERCISES
from models.exercise import Exercise
from services.exercise_catalog import ExerciseCatalog

logger = logging.getLogger(__name__)

CACHE_KEY = "all-exercises"


class CatalogProvider:
    """Provides an ExerciseCatalog from a remote source or the static library."""

    def __init__(
        self,
        source: Optional[ExerciseCatalogSource] = None,
        cache: Optional[TTLCache] = None,
        min_remote_exercises: int = MIN_REMOTE_CATALOG_SIZE,
        fallback_exercises: Optional[List[Exercise]] = None,
    ):
        """
        Initialize the provider.

        Args:
            source: Remote catalog source (None: static library only)
            cache: Cache for remote results
            min_remote_exercises: Remote results smaller than this are ignored
            fallback_exercises: Static library (default: built-in exercises)
        """
        self._source = source
        self._cache = cache if cache is not None else TTLCache()
        self._min_remote = min_remote_exercises
        self._fallback = list(fallback_exercises if fallback_exercises is not None else STATIC_EXERCISES)

    @property
    def is_remote_configured(self) -> bool:
        return self._source is not None

    def cache_stats(self) -> dict:
        """Statistics of the remote catalog cache."""
        return self._cache.stats()

    def static_catalog(self) -> ExerciseCatalog:
        return ExerciseCatalog(self._fallback)

    async def get_catalog(self) -> ExerciseCatalog:
        """
        Get the current exercise catalog.

        Returns:
            Remote exercises merged with missing static ones, or the static
            library when no usable remote result is available
        """
        if self._source is None:
            return self.static_catalog()

        remote = await self._fetch_remote()
        if remote is None:
            return self.static_catalog()

        if len(remote) < self._min_remote:
            logger.warning(
                f"ExerciseDB returned only {len(remote)} exercises, using fallback library"
            )
            return self.static_catalog()

        remote_ids = {ex.id for ex in remote}
        extra = [ex for ex in self._fallback if ex.id not in remote_ids]
        return ExerciseCatalog(remote + extra)

    async def _fetch_remote(self) -> Optional[List[Exercise]]:
        cached = self._cache.get(CACHE_KEY)
        if cached is not None:
            logger.debug(f"Using cached catalog ({len(cached)} exercises)")
            return cached

        try:
            exercises = await self._source.fetch_all_exercises()
        except Exception as e:
            logger.warning(f"ExerciseDB unavailable, using fallback exercises: {e}")
            return None

        exercises = list(exercises)
        if len(exercises) >= self._min_remote:
            self._cache.set(CACHE_KEY, exercises)
        return exercises

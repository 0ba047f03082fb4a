"""
Exercise catalog source port (interface).

Remote exercise databases are rate limited and may fail or return partial
data. Callers are expected to cache results and fall back to the built-in
library (see services.catalog_provider).
"""

from typing import List, Protocol

from models.exercise import Exercise


class ExerciseCatalogSource(Protocol):
    """Source of the full exercise catalog."""

    async def fetch_all_exercises(self) -> List[Exercise]:
        """
        Fetch every exercise the source knows about.

        Returns:
            List of exercises (may be short or empty)

        Raises:
            Exception: Any transport or decoding failure
        """
        ...

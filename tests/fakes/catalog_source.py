"""
Fake exercise catalog sources for testing.

These implement the ExerciseCatalogSource port without any network
access. FailingCatalogSource simulates an unreachable ExerciseDB.
"""

from typing import List, Optional

from infrastructure.exercisedb_client import ExerciseDBUnavailable
from models.exercise import Difficulty, Exercise, ExerciseCategory


def make_remote_exercises(count: int, prefix: str = "remote") -> List[Exercise]:
    """Build count distinct beginner barbell compounds hitting Chest and Back."""
    return [
        Exercise(
            id=f"{prefix}-{i}",
            name=f"Remote Exercise {i}",
            category=ExerciseCategory.COMPOUND,
            muscle_groups=["Chest", "Back"],
            equipment=["Barbell"],
            difficulty=Difficulty.BEGINNER,
        )
        for i in range(count)
    ]


class FakeCatalogSource:
    """In-memory catalog source that counts fetches."""

    def __init__(self, exercises: Optional[List[Exercise]] = None):
        self._exercises = list(exercises or [])
        self.fetch_count = 0

    def seed(self, exercises: List[Exercise]) -> None:
        self._exercises.extend(exercises)

    async def fetch_all_exercises(self) -> List[Exercise]:
        self.fetch_count += 1
        return list(self._exercises)


class FailingCatalogSource:
    """Catalog source whose every fetch fails."""

    def __init__(self, error: Optional[Exception] = None):
        self._error = error or ExerciseDBUnavailable("ExerciseDB is not available")
        self.fetch_count = 0

    async def fetch_all_exercises(self) -> List[Exercise]:
        self.fetch_count += 1
        raise self._error

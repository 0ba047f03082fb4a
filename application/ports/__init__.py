"""
Port interfaces (Protocols) for the progression engine.

This package defines the collaborator contracts the engine depends on.
Implementations live in infrastructure/ (or in tests/fakes for tests):
- WorkoutLogRepository: recent logged sessions for a user
- ExerciseCatalogSource: remote exercise catalog
"""

from application.ports.exercise_catalog_source import ExerciseCatalogSource
from application.ports.workout_log_repository import WorkoutLogRepository

__all__ = [
    "ExerciseCatalogSource",
    "WorkoutLogRepository",
]

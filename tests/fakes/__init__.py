"""
Fake implementations for testing.

This package provides in-memory implementations of the engine's ports
(workout log repository, exercise catalog source) plus builders for
workout sessions, so tests run without a database or network.
"""

from tests.fakes.catalog_source import (
    FailingCatalogSource,
    FakeCatalogSource,
    make_remote_exercises,
)
from tests.fakes.workout_log_repository import (
    FakeWorkoutLogRepository,
    day,
    make_session,
    make_sets,
    make_training_block,
)

__all__ = [
    "FakeCatalogSource",
    "FailingCatalogSource",
    "FakeWorkoutLogRepository",
    "day",
    "make_remote_exercises",
    "make_session",
    "make_sets",
    "make_training_block",
]

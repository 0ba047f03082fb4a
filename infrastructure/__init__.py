"""
Infrastructure layer package for the progression engine.

This package contains concrete implementations of the port interfaces
and the built-in exercise library.
"""

from infrastructure.catalog_cache import CacheEntry, TTLCache
from infrastructure.exercisedb_client import (
    ExerciseDBClient,
    ExerciseDBError,
    ExerciseDBUnavailable,
)
from infrastructure.static_catalog import BODYWEIGHT_PROGRESSIONS, STATIC_EXERCISES

__all__ = [
    "BODYWEIGHT_PROGRESSIONS",
    "CacheEntry",
    "ExerciseDBClient",
    "ExerciseDBError",
    "ExerciseDBUnavailable",
    "STATIC_EXERCISES",
    "TTLCache",
]

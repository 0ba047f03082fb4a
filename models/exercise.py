"""
Exercise catalog models.

Exercises are read-only reference data: they are loaded once from the
static library or the ExerciseDB API and never modified by the engine.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ExerciseCategory(str, Enum):
    """Exercise categories."""

    COMPOUND = "compound"
    ISOLATION = "isolation"
    CARDIO = "cardio"
    WARMUP = "warmup"
    STRETCH = "stretch"


class Difficulty(str, Enum):
    """Exercise difficulty tiers (also used as the user's experience level)."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class ProgressionRef(BaseModel):
    """Reference to a neighbouring variation in the progression graph."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class ProgressionEdges(BaseModel):
    """Easier, harder and sideways variations of an exercise."""

    model_config = ConfigDict(frozen=True)

    easier: Optional[ProgressionRef] = None
    harder: Optional[ProgressionRef] = None
    alternatives: List[ProgressionRef] = Field(default_factory=list)

    @property
    def alternative_ids(self) -> List[str]:
        return [ref.id for ref in self.alternatives]


class Exercise(BaseModel):
    """A single exercise in the catalog."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    category: ExerciseCategory
    muscle_groups: List[str] = Field(default_factory=list)
    equipment: List[str] = Field(default_factory=list)
    difficulty: Difficulty = Difficulty.BEGINNER
    is_timed: bool = False
    duration: Optional[int] = Field(
        None, ge=0, description="Duration in seconds for timed exercises"
    )
    progression: Optional[ProgressionEdges] = None
    secondary_muscles: List[str] = Field(default_factory=list)
    image_url: Optional[str] = None

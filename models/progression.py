"""
Result models for progression, deload and adaptation analysis.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from models.workout import SetSummary


class Trend(str, Enum):
    """Direction of a progression suggestion."""

    UP = "up"
    MAINTAIN = "maintain"
    DOWN = "down"
    DELOAD = "deload"


class AdaptationType(str, Enum):
    """Kinds of adaptation the analyzer can recommend."""

    INCREASE_VOLUME = "increase-volume"
    INCREASE_INTENSITY = "increase-intensity"
    DECREASE_VOLUME = "decrease-volume"
    SWAP_EXERCISE = "swap-exercise"
    DELOAD = "deload"
    MAINTAIN = "maintain"
    PROGRESS_VARIATION = "progress-variation"
    REGRESS_VARIATION = "regress-variation"


class VariationDifficulty(str, Enum):
    """Difficulty of a suggested variation relative to the current one."""

    EASIER = "easier"
    HARDER = "harder"
    SIMILAR = "similar"


class ProgressionScheme(str, Enum):
    """How an exercise is progressed over time."""

    LINEAR = "linear"
    DOUBLE_PROGRESSION = "double-progression"
    WAVE = "wave"


class RepsRange(BaseModel):
    """Inclusive rep range."""

    model_config = ConfigDict(frozen=True)

    min: int = Field(ge=0)
    max: int = Field(ge=0)

    @model_validator(mode="after")
    def check_order(self) -> "RepsRange":
        if self.min > self.max:
            raise ValueError(f"min ({self.min}) must not exceed max ({self.max})")
        return self


class ProgressionSuggestion(BaseModel):
    """Suggested weight and reps for the next session."""

    model_config = ConfigDict(frozen=True)

    weight: float
    reps: int
    recommendation: str
    trend: Trend
    previous_best: Optional[SetSummary] = None
    consecutive_failures: int = Field(0, ge=0)


class DeloadRecommendation(BaseModel):
    """Whether a deload week is warranted and how deep it should be."""

    model_config = ConfigDict(frozen=True)

    needed: bool
    reason: str
    suggested_weight_multiplier: float = Field(1.0, gt=0, le=1)
    suggested_volume_multiplier: float = Field(1.0, gt=0, le=1)


class ProgressionVariation(BaseModel):
    """A variation suggested in place of the current exercise."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    difficulty: VariationDifficulty


class AdaptationRecommendation(BaseModel):
    """Adaptation advice for one exercise."""

    model_config = ConfigDict(frozen=True)

    exercise_id: str
    exercise_name: str
    adaptation_type: AdaptationType
    reason: str
    suggested_sets: Optional[int] = None
    suggested_reps_range: Optional[RepsRange] = None
    suggested_rest_seconds: Optional[int] = None
    progression_variation: Optional[ProgressionVariation] = None
    alternative_exercises: Optional[List[str]] = None


class ProgramTarget(BaseModel):
    """Current program prescription for one exercise."""

    model_config = ConfigDict(frozen=True)

    exercise_id: str
    sets: int = Field(ge=1)
    reps_min: int = Field(ge=0)
    reps_max: int = Field(ge=0)


class ProgramTargetUpdate(BaseModel):
    """Post-workout feedback for a program exercise."""

    model_config = ConfigDict(frozen=True)

    sets: int
    reps_min: int
    reps_max: int
    recommendation: str


class ExercisePerformance(BaseModel):
    """Aggregated performance of one exercise in one session."""

    model_config = ConfigDict(frozen=True)

    avg_weight: float = 0.0
    avg_reps: float = 0.0
    avg_rir: float = 0.0
    completion_rate: float = Field(1.0, ge=0, le=1)


class ProgressionPath(BaseModel):
    """Names of the variations around a bodyweight exercise, for display."""

    model_config = ConfigDict(frozen=True)

    easier: Optional[str] = None
    harder: Optional[str] = None
    alternatives: List[str] = Field(default_factory=list)

"""
Workout log and exercise history models.

WorkoutSession/LoggedExercise/WorkoutSet mirror the records provided by the
workout log collaborator. ExerciseSession and ExerciseHistory are derived
per-exercise views built by the history aggregator.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WorkoutSet(BaseModel):
    """A single logged set."""

    model_config = ConfigDict(frozen=True)

    set_number: int = Field(1, ge=1)
    weight: float = 0.0
    reps: int = 0
    rir: Optional[float] = Field(None, ge=0, le=10, description="Reps in reserve")
    completed: bool = False
    duration: Optional[int] = Field(
        None, ge=0, description="Duration in seconds for timed exercises"
    )
    rest_seconds: Optional[int] = Field(None, ge=0)

    @field_validator("weight", mode="before")
    @classmethod
    def default_weight(cls, v: Any) -> float:
        """Treat a missing or malformed weight as 0."""
        try:
            return float(v)
        except (TypeError, ValueError):
            return 0.0

    @field_validator("reps", mode="before")
    @classmethod
    def default_reps(cls, v: Any) -> int:
        """Treat missing or malformed reps as 0."""
        try:
            return int(float(v))
        except (TypeError, ValueError):
            return 0


class LoggedExercise(BaseModel):
    """One exercise as logged inside a workout."""

    model_config = ConfigDict(frozen=True)

    exercise_id: str
    exercise_name: Optional[str] = None
    sets: List[WorkoutSet] = Field(default_factory=list)


class WorkoutSession(BaseModel):
    """A logged workout session."""

    model_config = ConfigDict(frozen=True)

    id: str
    date: str = Field(description="ISO date or datetime string")
    name: Optional[str] = None
    exercises: List[LoggedExercise] = Field(default_factory=list)


class SetSummary(BaseModel):
    """Weight and reps of a single set."""

    model_config = ConfigDict(frozen=True)

    weight: float
    reps: int


class ExerciseSession(BaseModel):
    """Completed work for one exercise within one workout."""

    model_config = ConfigDict(frozen=True)

    date: str
    workout_id: str
    sets: List[WorkoutSet]
    best_set: SetSummary
    total_volume: float


class ExerciseHistory(BaseModel):
    """Recent sessions of a single exercise, newest first."""

    model_config = ConfigDict(frozen=True)

    exercise_id: str
    exercise_name: str
    sessions: List[ExerciseSession]

"""
Request/response models for program generation.

ProgramWizardAnswers is the validated value object produced by the program
wizard; GeneratedProgram is the result handed back to the caller, which is
responsible for saving it.
"""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.constants import MAX_FOCUS_MUSCLES
from core.sanitization import sanitize_label
from models.exercise import Difficulty, Exercise
from models.progression import ProgressionScheme


class TrainingGoal(str, Enum):
    """Training goals offered by the wizard."""

    STRENGTH = "strength"
    HYPERTROPHY = "hypertrophy"
    ENDURANCE = "endurance"
    GENERAL = "general"


class SessionLength(str, Enum):
    """Session lengths: 30-45, 45-60 and 60-90 minutes."""

    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class SplitType(str, Enum):
    """Weekly training splits."""

    FULL_BODY = "full-body"
    UPPER_LOWER = "upper-lower"
    PUSH_PULL_LEGS = "push-pull-legs"
    BRO_SPLIT = "bro-split"
    AUTO = "auto"


class ProgramWizardAnswers(BaseModel):
    """Answers collected by the program wizard."""

    model_config = ConfigDict(frozen=True)

    goal: TrainingGoal = Field(description="Primary training goal")
    experience: Difficulty = Field(description="User's training experience level")
    days_per_week: int = Field(ge=2, le=6, description="Training days per week")
    session_length: SessionLength = Field(description="Typical session length")
    equipment: List[str] = Field(
        default_factory=list,
        description="Available equipment (e.g., 'Barbell', 'Dumbbell', 'Bodyweight')",
    )
    focus_muscles: List[str] = Field(
        default_factory=list,
        description="Muscle groups to emphasize (at most 3)",
    )
    split: SplitType = SplitType.AUTO

    @field_validator("equipment", mode="before")
    @classmethod
    def validate_equipment(cls, v: Any) -> List[str]:
        """Sanitize equipment names, dropping blanks and duplicates."""
        if not v:
            return []
        if not isinstance(v, list):
            raise ValueError("equipment must be a list of names")

        cleaned: List[str] = []
        for item in v:
            if not isinstance(item, str):
                continue
            label = sanitize_label(item)
            if label and label not in cleaned:
                cleaned.append(label)
        return cleaned

    @field_validator("focus_muscles", mode="before")
    @classmethod
    def validate_focus_muscles(cls, v: Any) -> List[str]:
        """Sanitize focus muscles and enforce the maximum count."""
        if not v:
            return []
        if not isinstance(v, list):
            raise ValueError("focus_muscles must be a list of names")

        cleaned: List[str] = []
        for item in v:
            if not isinstance(item, str):
                continue
            label = sanitize_label(item)
            if label and label not in cleaned:
                cleaned.append(label)

        if len(cleaned) > MAX_FOCUS_MUSCLES:
            raise ValueError(
                f"Too many focus muscles. Maximum allowed: {MAX_FOCUS_MUSCLES}"
            )
        return cleaned


class GeneratedExercise(BaseModel):
    """An exercise placed in a generated day with its prescription."""

    model_config = ConfigDict(frozen=True)

    exercise: Exercise
    sets: int = Field(ge=1)
    reps_min: int = Field(ge=0)
    reps_max: int = Field(ge=0)
    rest_seconds: int = Field(ge=0)
    duration: Optional[int] = Field(
        None, ge=0, description="Seconds per set for timed exercises"
    )
    is_timed: bool = False
    auto_progression_enabled: Optional[bool] = None
    progression_scheme: Optional[ProgressionScheme] = None


class GeneratedDay(BaseModel):
    """One training day of a generated program."""

    model_config = ConfigDict(frozen=True)

    name: str
    exercises: List[GeneratedExercise] = Field(default_factory=list)


class GeneratedProgram(BaseModel):
    """A complete generated program."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    split: SplitType
    days: List[GeneratedDay] = Field(default_factory=list)

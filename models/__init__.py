"""Models package for the progression engine."""

from models.exercise import (
    Difficulty,
    Exercise,
    ExerciseCategory,
    ProgressionEdges,
    ProgressionRef,
)
from models.generation import (
    GeneratedDay,
    GeneratedExercise,
    GeneratedProgram,
    ProgramWizardAnswers,
    SessionLength,
    SplitType,
    TrainingGoal,
)
from models.progression import (
    AdaptationRecommendation,
    AdaptationType,
    DeloadRecommendation,
    ExercisePerformance,
    ProgramTarget,
    ProgramTargetUpdate,
    ProgressionPath,
    ProgressionScheme,
    ProgressionSuggestion,
    ProgressionVariation,
    RepsRange,
    Trend,
    VariationDifficulty,
)
from models.workout import (
    ExerciseHistory,
    ExerciseSession,
    LoggedExercise,
    SetSummary,
    WorkoutSession,
    WorkoutSet,
)

__all__ = [
    # Exercises
    "Difficulty",
    "Exercise",
    "ExerciseCategory",
    "ProgressionEdges",
    "ProgressionRef",
    # Generation
    "GeneratedDay",
    "GeneratedExercise",
    "GeneratedProgram",
    "ProgramWizardAnswers",
    "SessionLength",
    "SplitType",
    "TrainingGoal",
    # Progression
    "AdaptationRecommendation",
    "AdaptationType",
    "DeloadRecommendation",
    "ExercisePerformance",
    "ProgramTarget",
    "ProgramTargetUpdate",
    "ProgressionPath",
    "ProgressionScheme",
    "ProgressionSuggestion",
    "ProgressionVariation",
    "RepsRange",
    "Trend",
    "VariationDifficulty",
    # Workout logs
    "ExerciseHistory",
    "ExerciseSession",
    "LoggedExercise",
    "SetSummary",
    "WorkoutSession",
    "WorkoutSet",
]

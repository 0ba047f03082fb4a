"""
Program exercise defaults and auto-progression.

Fills in the per-exercise settings a program needs beyond sets and reps:
- Timed flag and duration for holds, warmups and stretches
- Auto-progression flag and progression scheme
- Rest time by category and rep range

Also adjusts a program exercise after a session with poor completion.
"""

import logging

from models.exercise import Exercise, ExerciseCategory
from models.generation import GeneratedDay, GeneratedExercise, GeneratedProgram
from models.progression import ExercisePerformance, ProgressionScheme

logger = logging.getLogger(__name__)

TIMED_EXERCISE_KEYWORDS = [
    "plank",
    "side plank",
    "hollow hold",
    "dead bug",
    "wall sit",
    "l-sit",
    "front lever",
    "back lever",
    "handstand hold",
]

MOBILITY_CATEGORIES = (ExerciseCategory.WARMUP, ExerciseCategory.STRETCH)

DEFAULT_TIMED_DURATION = 30
PLANK_DURATION = 45

# Completion rates driving auto-progression
GOOD_COMPLETION_RATE = 0.8
POOR_COMPLETION_RATE = 0.5
REPS_REDUCTION = 2
MIN_REPS_FLOOR = 5
MAX_REPS_FLOOR = 8


def should_be_timed(exercise: Exercise) -> bool:
    """Warmups, stretches and isometric holds are performed for time."""
    if exercise.is_timed or exercise.category in MOBILITY_CATEGORIES:
        return True
    name = exercise.name.lower()
    return any(keyword in name for keyword in TIMED_EXERCISE_KEYWORDS)


def get_default_duration(exercise: Exercise) -> int:
    """Default seconds per set for a timed exercise."""
    if exercise.category in MOBILITY_CATEGORIES:
        return DEFAULT_TIMED_DURATION
    name = exercise.name.lower()
    if "plank" in name:
        return PLANK_DURATION
    return DEFAULT_TIMED_DURATION


def should_enable_auto_progression(exercise: Exercise) -> bool:
    return exercise.category in (ExerciseCategory.COMPOUND, ExerciseCategory.ISOLATION)


def get_default_progression_scheme(exercise: Exercise) -> ProgressionScheme:
    """Compounds progress linearly; isolations use double progression."""
    if exercise.category == ExerciseCategory.ISOLATION:
        return ProgressionScheme.DOUBLE_PROGRESSION
    return ProgressionScheme.LINEAR


def get_default_rest_time(category: ExerciseCategory, reps_max: int) -> int:
    """
    Default rest between sets.

    Args:
        category: Exercise category
        reps_max: Top of the prescribed rep range

    Returns:
        Rest in seconds
    """
    if category in MOBILITY_CATEGORIES:
        return 0

    if category == ExerciseCategory.COMPOUND:
        if reps_max <= 5:
            return 180
        if reps_max <= 8:
            return 150
        return 120

    if category == ExerciseCategory.ISOLATION:
        if reps_max <= 8:
            return 90
        return 60

    return 90


def enrich_program_exercise(item: GeneratedExercise) -> GeneratedExercise:
    """
    Fill in timing, auto-progression and rest defaults.

    Values already set on the item are kept.

    Args:
        item: Program exercise

    Returns:
        New GeneratedExercise with defaults applied
    """
    exercise = item.exercise
    update = {}

    if not item.is_timed and should_be_timed(exercise):
        update["is_timed"] = True
        if not item.duration:
            update["duration"] = exercise.duration or get_default_duration(exercise)

    auto_progression = item.auto_progression_enabled
    if auto_progression is None:
        auto_progression = should_enable_auto_progression(exercise)
        update["auto_progression_enabled"] = auto_progression

    if item.progression_scheme is None and auto_progression:
        update["progression_scheme"] = get_default_progression_scheme(exercise)

    if not item.rest_seconds and exercise.category not in MOBILITY_CATEGORIES:
        update["rest_seconds"] = get_default_rest_time(exercise.category, item.reps_max)

    if not update:
        return item
    return item.model_copy(update=update)


def apply_progression_to_exercise(
    item: GeneratedExercise,
    performance: ExercisePerformance,
) -> GeneratedExercise:
    """
    Adjust a program exercise after a session.

    Only sessions with poor completion change the prescription: below 50%
    completion the rep range drops by two (floors of 5 and 8). Weight
    increases are left to the progression suggestions.

    Args:
        item: Program exercise with auto-progression settings
        performance: Aggregated performance from the last session

    Returns:
        Updated GeneratedExercise (the same object when unchanged)
    """
    if not item.auto_progression_enabled or item.progression_scheme is None:
        return item

    if performance.completion_rate >= GOOD_COMPLETION_RATE:
        return item

    if performance.completion_rate < POOR_COMPLETION_RATE:
        logger.info(
            f"Lowering rep range for {item.exercise.id}: "
            f"completion {performance.completion_rate:.0%}"
        )
        return item.model_copy(
            update={
                "reps_min": max(item.reps_min - REPS_REDUCTION, MIN_REPS_FLOOR),
                "reps_max": max(item.reps_max - REPS_REDUCTION, MAX_REPS_FLOOR),
            }
        )

    return item


def update_program_with_defaults(program: GeneratedProgram) -> GeneratedProgram:
    """Apply enrich_program_exercise to every exercise of a program."""
    days = [
        GeneratedDay(
            name=day.name,
            exercises=[enrich_program_exercise(item) for item in day.exercises],
        )
        for day in program.days
    ]
    return program.model_copy(update={"days": days})

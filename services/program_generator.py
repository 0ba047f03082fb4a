"""
Rule-based program generator service.

Builds a multi-day training program from wizard answers:
1. Split Resolution - Pick a split from days/week and experience
2. Day Skeleton - Target muscles per training day
3. Pool Construction - Filter the catalog by equipment and experience
4. Slot Allocation - Compounds then isolations, focus muscles first
5. Scheme Assignment - Sets/reps/rest by goal and category
6. Warmup/Cooldown - Mobility work around the main block

Generation is deterministic: identical answers and catalog produce an
identical program.
"""

import logging
import math
from typing import Dict, List, NamedTuple, Optional, Sequence

from core.constants import (
    FULL_BODY_MAX_EXERCISES,
    MAX_STRETCHES_PER_DAY,
    MAX_WARMUPS_PER_DAY,
    PRIORITY_COMPOUND_SHARE,
    PRIORITY_ISOLATION_SHARE,
)
from models.exercise import Difficulty, Exercise, ExerciseCategory
from models.generation import (
    GeneratedDay,
    GeneratedExercise,
    GeneratedProgram,
    ProgramWizardAnswers,
    SessionLength,
    SplitType,
    TrainingGoal,
)
from services.catalog_provider import CatalogProvider
from services.exercise_catalog import ExerciseCatalog
from services.program_updater import enrich_program_exercise

logger = logging.getLogger(__name__)


class ProgramGenerationError(Exception):
    """Error during program generation."""

    pass


class SplitDay(NamedTuple):
    """A training day in a split and the muscles it targets."""

    name: str
    muscles: List[str]


class Scheme(NamedTuple):
    """Sets, rep range and rest for one exercise."""

    sets: int
    reps_min: int
    reps_max: int
    rest_seconds: int


# =============================================================================
# Reference tables
# =============================================================================

FULL_BODY_MUSCLES = ["Chest", "Back", "Shoulders", "Quads", "Hamstrings", "Glutes", "Core"]
UPPER_MUSCLES = ["Chest", "Back", "Shoulders", "Biceps", "Triceps"]
LOWER_MUSCLES = ["Quads", "Hamstrings", "Glutes", "Calves", "Core"]

PUSH_PULL_LEGS_DAYS = [
    SplitDay("Push", ["Chest", "Shoulders", "Triceps"]),
    SplitDay("Pull", ["Back", "Biceps", "Forearms"]),
    SplitDay("Legs", ["Quads", "Hamstrings", "Glutes", "Calves", "Core"]),
]

BRO_SPLIT_DAYS = [
    SplitDay("Chest Day", ["Chest"]),
    SplitDay("Back Day", ["Back"]),
    SplitDay("Shoulder Day", ["Shoulders"]),
    SplitDay("Leg Day", ["Quads", "Hamstrings", "Glutes", "Calves"]),
    SplitDay("Arms Day", ["Biceps", "Triceps"]),
    SplitDay("Core & Conditioning", ["Core", "Full Body"]),
]

EXERCISES_PER_SESSION: Dict[SessionLength, int] = {
    SessionLength.SHORT: 4,
    SessionLength.MEDIUM: 6,
    SessionLength.LONG: 8,
}

# (compound scheme, isolation scheme) per goal
SCHEMES: Dict[TrainingGoal, tuple] = {
    TrainingGoal.STRENGTH: (Scheme(5, 3, 5, 180), Scheme(3, 6, 8, 120)),
    TrainingGoal.HYPERTROPHY: (Scheme(4, 8, 12, 120), Scheme(3, 10, 15, 90)),
    TrainingGoal.ENDURANCE: (Scheme(3, 15, 20, 60), Scheme(3, 15, 25, 45)),
    TrainingGoal.GENERAL: (Scheme(3, 8, 12, 90), Scheme(3, 10, 15, 60)),
}

MOBILITY_SCHEME = Scheme(1, 1, 1, 0)

SPLIT_LABELS: Dict[SplitType, str] = {
    SplitType.FULL_BODY: "Full Body",
    SplitType.UPPER_LOWER: "Upper/Lower",
    SplitType.PUSH_PULL_LEGS: "Push Pull Legs",
    SplitType.BRO_SPLIT: "Bro Split",
}

GOAL_LABELS: Dict[TrainingGoal, str] = {
    TrainingGoal.STRENGTH: "Strength",
    TrainingGoal.HYPERTROPHY: "Hypertrophy",
    TrainingGoal.ENDURANCE: "Endurance",
    TrainingGoal.GENERAL: "General Fitness",
}


# =============================================================================
# Split and scheme helpers
# =============================================================================


def suggest_split(days_per_week: int, experience: Difficulty) -> SplitType:
    """
    Suggest a split for the given schedule and experience.

    Args:
        days_per_week: Training days per week
        experience: User's experience level

    Returns:
        Suggested split (never AUTO)
    """
    beginner = Difficulty(experience) == Difficulty.BEGINNER
    if days_per_week <= 2:
        return SplitType.FULL_BODY
    if days_per_week == 3:
        return SplitType.FULL_BODY if beginner else SplitType.PUSH_PULL_LEGS
    if days_per_week == 4:
        return SplitType.UPPER_LOWER
    return SplitType.UPPER_LOWER if beginner else SplitType.PUSH_PULL_LEGS


def resolve_split(answers: ProgramWizardAnswers) -> SplitType:
    """Use the requested split, or suggest one when it is AUTO."""
    if answers.split != SplitType.AUTO:
        return answers.split
    return suggest_split(answers.days_per_week, answers.experience)


def get_split_days(split: SplitType, days_per_week: int) -> List[SplitDay]:
    """
    Build the day skeleton for a split.

    Args:
        split: Resolved split
        days_per_week: Number of training days

    Returns:
        Ordered list of SplitDay
    """
    if split == SplitType.FULL_BODY:
        return [
            SplitDay(f"Full Body {chr(ord('A') + i)}", list(FULL_BODY_MUSCLES))
            for i in range(days_per_week)
        ]

    if split == SplitType.UPPER_LOWER:
        days = []
        for i in range(days_per_week):
            if i % 2 == 0:
                days.append(SplitDay(f"Upper {i // 2 + 1}", list(UPPER_MUSCLES)))
            else:
                days.append(SplitDay(f"Lower {math.ceil(i / 2)}", list(LOWER_MUSCLES)))
        return days

    if split == SplitType.PUSH_PULL_LEGS:
        days = []
        for i in range(days_per_week):
            base = PUSH_PULL_LEGS_DAYS[i % 3]
            label = f"{base.name} {i // 3 + 1}" if days_per_week > 3 else base.name
            days.append(SplitDay(label, list(base.muscles)))
        return days

    if split == SplitType.BRO_SPLIT:
        return [
            SplitDay(day.name, list(day.muscles))
            for day in BRO_SPLIT_DAYS[:days_per_week]
        ]

    raise ProgramGenerationError(f"Cannot build days for split: {split}")


def get_exercise_count(session_length: SessionLength, split: SplitType) -> int:
    """Main-block exercises per day; full-body days are capped."""
    count = EXERCISES_PER_SESSION[SessionLength(session_length)]
    if split == SplitType.FULL_BODY:
        return min(count, FULL_BODY_MAX_EXERCISES)
    return count


def get_scheme(goal: TrainingGoal, category: ExerciseCategory) -> Scheme:
    """
    Sets, reps and rest for an exercise.

    Warmups and stretches always get a single timed set. Anything that is
    not a compound uses the isolation scheme.
    """
    if category in (ExerciseCategory.WARMUP, ExerciseCategory.STRETCH):
        return MOBILITY_SCHEME
    compound, isolation = SCHEMES[TrainingGoal(goal)]
    return compound if category == ExerciseCategory.COMPOUND else isolation


def pick_best(
    pool: Sequence[Exercise],
    muscles: Sequence[str],
    count: int,
    prefer_compound: bool,
) -> List[Exercise]:
    """
    Pick the exercises that best cover the target muscles.

    Candidates hitting at least one target muscle are ordered by compound
    preference, then by number of matching muscles. The sort is stable so
    ties keep catalog order.

    Args:
        pool: Candidate exercises
        muscles: Target muscle groups
        count: Number of exercises wanted
        prefer_compound: Rank compound exercises first

    Returns:
        Up to count exercises, unique by id
    """
    if count <= 0:
        return []

    targets = set(muscles)
    matching = [ex for ex in pool if targets.intersection(ex.muscle_groups)]

    def rank(ex: Exercise) -> tuple:
        compound_rank = 1 if prefer_compound and ex.category == ExerciseCategory.COMPOUND else 0
        match_count = sum(1 for m in ex.muscle_groups if m in targets)
        return (compound_rank, match_count)

    ordered = sorted(matching, key=rank, reverse=True)

    picked: List[Exercise] = []
    used_ids = set()
    for ex in ordered:
        if len(picked) >= count:
            break
        if ex.id in used_ids:
            continue
        used_ids.add(ex.id)
        picked.append(ex)
    return picked


def _pick_with_priority(
    pool: List[Exercise],
    day: SplitDay,
    priority_muscles: List[str],
    count: int,
    priority_share: float,
    prefer_compound: bool,
) -> List[Exercise]:
    if not priority_muscles:
        return pick_best(pool, day.muscles, count, prefer_compound)

    priority = pick_best(
        pool, priority_muscles, math.ceil(count * priority_share), prefer_compound
    )
    priority_ids = {ex.id for ex in priority}
    remaining = [ex for ex in pool if ex.id not in priority_ids]
    other_muscles = [m for m in day.muscles if m not in priority_muscles]
    others = pick_best(
        remaining,
        other_muscles or day.muscles,
        count - len(priority),
        prefer_compound,
    )
    return priority + others


def _generate_program_name(goal: TrainingGoal, split: SplitType) -> str:
    return f"{GOAL_LABELS[goal]} {SPLIT_LABELS[split]}"


def _generate_program_description(answers: ProgramWizardAnswers) -> str:
    return (
        f"{answers.days_per_week} days/week · {GOAL_LABELS[answers.goal]} focus · "
        f"{answers.session_length.value} sessions"
    )


# =============================================================================
# Generator
# =============================================================================


class ProgramGenerator:
    """
    Service for generating training programs from wizard answers.

    The catalog is obtained through a CatalogProvider, which handles remote
    fetching, caching and the static fallback. Program building itself is
    synchronous and pure.
    """

    def __init__(self, catalog_provider: Optional[CatalogProvider] = None):
        """
        Initialize the program generator.

        Args:
            catalog_provider: Provider of the exercise catalog (default:
                static library only)
        """
        self._catalog_provider = catalog_provider or CatalogProvider()

    async def generate(self, answers: ProgramWizardAnswers) -> GeneratedProgram:
        """
        Generate a program for the given answers.

        Args:
            answers: Validated wizard answers

        Returns:
            GeneratedProgram

        Raises:
            ProgramGenerationError: If no exercise matches the equipment and
                experience filters
        """
        catalog = await self._catalog_provider.get_catalog()
        return self.build_program(answers, catalog)

    def build_program(
        self,
        answers: ProgramWizardAnswers,
        catalog: ExerciseCatalog,
    ) -> GeneratedProgram:
        """
        Build a program from answers and a catalog snapshot.

        Args:
            answers: Validated wizard answers
            catalog: Exercise catalog snapshot

        Returns:
            GeneratedProgram

        Raises:
            ProgramGenerationError: If the filtered exercise pool is empty
        """
        split = resolve_split(answers)
        split_days = get_split_days(split, answers.days_per_week)
        exercise_count = get_exercise_count(answers.session_length, split)

        logger.info(
            f"Generating program: goal={answers.goal.value}, split={split.value}, "
            f"days={answers.days_per_week}, exercises/day={exercise_count}"
        )

        pool = catalog.training_pool(answers.equipment, answers.experience)
        if not pool:
            raise ProgramGenerationError(
                "No exercises available for the selected equipment and experience. "
                "Try adding equipment or choosing a different experience level."
            )

        warmups = catalog.filter_by_category(ExerciseCategory.WARMUP)
        stretches = catalog.filter_by_category(ExerciseCategory.STRETCH)

        days = [
            self._build_day(
                day, split, exercise_count, answers, pool, warmups, stretches
            )
            for day in split_days
        ]

        return GeneratedProgram(
            name=_generate_program_name(answers.goal, split),
            description=_generate_program_description(answers),
            split=split,
            days=days,
        )

    def _build_day(
        self,
        day: SplitDay,
        split: SplitType,
        exercise_count: int,
        answers: ProgramWizardAnswers,
        pool: List[Exercise],
        warmups: List[Exercise],
        stretches: List[Exercise],
    ) -> GeneratedDay:
        """Select and prescribe the exercises of one day."""
        if split == SplitType.FULL_BODY:
            compound_count = min(len(day.muscles), exercise_count)
        else:
            compound_count = math.ceil(exercise_count * 0.5)
        isolation_count = exercise_count - compound_count

        focus = {m.casefold() for m in answers.focus_muscles}
        priority_muscles = [m for m in day.muscles if m.casefold() in focus]

        compound_pool = [ex for ex in pool if ex.category == ExerciseCategory.COMPOUND]
        compounds = _pick_with_priority(
            compound_pool,
            day,
            priority_muscles,
            compound_count,
            PRIORITY_COMPOUND_SHARE,
            prefer_compound=True,
        )

        compound_ids = {ex.id for ex in compounds}
        isolation_pool = [
            ex for ex in pool
            if ex.category == ExerciseCategory.ISOLATION and ex.id not in compound_ids
        ]
        isolations = _pick_with_priority(
            isolation_pool,
            day,
            priority_muscles,
            isolation_count,
            PRIORITY_ISOLATION_SHARE,
            prefer_compound=False,
        )

        main_block = (compounds + isolations)[:exercise_count]

        day_warmups = warmups[:MAX_WARMUPS_PER_DAY]
        targets = set(day.muscles)
        day_stretches = [ex for ex in stretches if targets.intersection(ex.muscle_groups)]
        if not day_stretches:
            day_stretches = stretches
        day_stretches = day_stretches[:MAX_STRETCHES_PER_DAY]

        exercises = [
            self._prescribe(ex, answers.goal)
            for ex in day_warmups + main_block + day_stretches
        ]

        if not main_block:
            logger.warning(f"No exercises matched the muscles of {day.name}")

        return GeneratedDay(name=day.name, exercises=exercises)

    def _prescribe(self, exercise: Exercise, goal: TrainingGoal) -> GeneratedExercise:
        scheme = get_scheme(goal, exercise.category)
        item = GeneratedExercise(
            exercise=exercise,
            sets=scheme.sets,
            reps_min=scheme.reps_min,
            reps_max=scheme.reps_max,
            rest_seconds=scheme.rest_seconds,
            duration=exercise.duration,
            is_timed=exercise.is_timed,
        )
        return enrich_program_exercise(item)

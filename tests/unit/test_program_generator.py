"""
Unit tests for the rule-based ProgramGenerator.

Tests:
- Split resolution and day skeletons
- Exercise counts and scheme tables
- Pool construction and the empty-pool error
- Slot allocation with focus muscles
- Warmup/cooldown augmentation
- Deterministic output
"""

import pytest

from models.exercise import Difficulty, Exercise, ExerciseCategory
from models.generation import ProgramWizardAnswers, SessionLength, SplitType, TrainingGoal
from models.progression import ProgressionScheme
from services.catalog_provider import CatalogProvider
from services.exercise_catalog import ExerciseCatalog
from services.program_generator import (
    ProgramGenerationError,
    ProgramGenerator,
    Scheme,
    get_exercise_count,
    get_scheme,
    get_split_days,
    pick_best,
    resolve_split,
    suggest_split,
)
from tests.fakes import FailingCatalogSource


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


def make_answers(**overrides) -> ProgramWizardAnswers:
    data = {
        "goal": "hypertrophy",
        "experience": "intermediate",
        "days_per_week": 4,
        "session_length": "medium",
        "equipment": ["Barbell", "Dumbbell", "Bodyweight"],
        "focus_muscles": [],
        "split": "auto",
    }
    data.update(overrides)
    return ProgramWizardAnswers(**data)


@pytest.fixture
def generator():
    """Create a ProgramGenerator backed by the static library."""
    return ProgramGenerator()


MOBILITY = (ExerciseCategory.WARMUP, ExerciseCategory.STRETCH)


def main_block(day):
    return [item for item in day.exercises if item.exercise.category not in MOBILITY]


# ---------------------------------------------------------------------------
# Split Resolution
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestSplitResolution:
    """Tests for suggest_split and resolve_split."""

    @pytest.mark.parametrize(
        "days,experience,expected",
        [
            (2, Difficulty.BEGINNER, SplitType.FULL_BODY),
            (2, Difficulty.ADVANCED, SplitType.FULL_BODY),
            (3, Difficulty.BEGINNER, SplitType.FULL_BODY),
            (3, Difficulty.INTERMEDIATE, SplitType.PUSH_PULL_LEGS),
            (4, Difficulty.BEGINNER, SplitType.UPPER_LOWER),
            (4, Difficulty.ADVANCED, SplitType.UPPER_LOWER),
            (5, Difficulty.BEGINNER, SplitType.UPPER_LOWER),
            (5, Difficulty.INTERMEDIATE, SplitType.PUSH_PULL_LEGS),
            (6, Difficulty.ADVANCED, SplitType.PUSH_PULL_LEGS),
        ],
    )
    def test_suggest_split(self, days, experience, expected):
        assert suggest_split(days, experience) == expected

    def test_explicit_split_is_kept(self):
        answers = make_answers(days_per_week=2, split="bro-split")

        assert resolve_split(answers) == SplitType.BRO_SPLIT

    def test_auto_split_is_resolved(self):
        assert resolve_split(make_answers(days_per_week=4)) == SplitType.UPPER_LOWER


# ---------------------------------------------------------------------------
# Day Skeleton
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestSplitDays:
    """Tests for get_split_days."""

    def test_full_body_labels(self):
        days = get_split_days(SplitType.FULL_BODY, 3)

        assert [d.name for d in days] == ["Full Body A", "Full Body B", "Full Body C"]
        assert days[0].muscles == days[2].muscles

    def test_upper_lower_alternates(self):
        days = get_split_days(SplitType.UPPER_LOWER, 4)

        assert [d.name for d in days] == ["Upper 1", "Lower 1", "Upper 2", "Lower 2"]
        assert "Chest" in days[0].muscles
        assert "Quads" in days[1].muscles

    def test_push_pull_legs_three_days_unnumbered(self):
        days = get_split_days(SplitType.PUSH_PULL_LEGS, 3)

        assert [d.name for d in days] == ["Push", "Pull", "Legs"]

    def test_push_pull_legs_repeats_numbered(self):
        days = get_split_days(SplitType.PUSH_PULL_LEGS, 5)

        assert [d.name for d in days] == ["Push 1", "Pull 1", "Legs 1", "Push 2", "Pull 2"]

    def test_bro_split_truncated(self):
        days = get_split_days(SplitType.BRO_SPLIT, 4)

        assert [d.name for d in days] == ["Chest Day", "Back Day", "Shoulder Day", "Leg Day"]

    def test_auto_is_not_a_buildable_split(self):
        with pytest.raises(ProgramGenerationError):
            get_split_days(SplitType.AUTO, 3)


# ---------------------------------------------------------------------------
# Counts and Schemes
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestCountsAndSchemes:
    """Tests for exercise counts and scheme tables."""

    @pytest.mark.parametrize(
        "length,split,expected",
        [
            (SessionLength.SHORT, SplitType.UPPER_LOWER, 4),
            (SessionLength.MEDIUM, SplitType.PUSH_PULL_LEGS, 6),
            (SessionLength.LONG, SplitType.BRO_SPLIT, 8),
            (SessionLength.LONG, SplitType.FULL_BODY, 7),
            (SessionLength.SHORT, SplitType.FULL_BODY, 4),
        ],
    )
    def test_exercise_count(self, length, split, expected):
        assert get_exercise_count(length, split) == expected

    @pytest.mark.parametrize(
        "goal,category,expected",
        [
            (TrainingGoal.STRENGTH, ExerciseCategory.COMPOUND, Scheme(5, 3, 5, 180)),
            (TrainingGoal.STRENGTH, ExerciseCategory.ISOLATION, Scheme(3, 6, 8, 120)),
            (TrainingGoal.HYPERTROPHY, ExerciseCategory.COMPOUND, Scheme(4, 8, 12, 120)),
            (TrainingGoal.HYPERTROPHY, ExerciseCategory.ISOLATION, Scheme(3, 10, 15, 90)),
            (TrainingGoal.ENDURANCE, ExerciseCategory.COMPOUND, Scheme(3, 15, 20, 60)),
            (TrainingGoal.ENDURANCE, ExerciseCategory.ISOLATION, Scheme(3, 15, 25, 45)),
            (TrainingGoal.GENERAL, ExerciseCategory.COMPOUND, Scheme(3, 8, 12, 90)),
            (TrainingGoal.GENERAL, ExerciseCategory.ISOLATION, Scheme(3, 10, 15, 60)),
            (TrainingGoal.STRENGTH, ExerciseCategory.WARMUP, Scheme(1, 1, 1, 0)),
            (TrainingGoal.GENERAL, ExerciseCategory.STRETCH, Scheme(1, 1, 1, 0)),
        ],
    )
    def test_scheme_table(self, goal, category, expected):
        assert get_scheme(goal, category) == expected


# ---------------------------------------------------------------------------
# Candidate Ranking
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestPickBest:
    """Tests for pick_best ordering."""

    def make(self, exercise_id, category, muscles):
        return Exercise(
            id=exercise_id,
            name=exercise_id,
            category=category,
            muscle_groups=muscles,
            equipment=["Barbell"],
        )

    def test_compound_then_match_count(self):
        pool = [
            self.make("iso-2", ExerciseCategory.ISOLATION, ["Chest", "Triceps"]),
            self.make("comp-1", ExerciseCategory.COMPOUND, ["Chest"]),
            self.make("comp-2", ExerciseCategory.COMPOUND, ["Chest", "Triceps"]),
        ]

        picked = pick_best(pool, ["Chest", "Triceps"], 3, prefer_compound=True)

        assert [ex.id for ex in picked] == ["comp-2", "comp-1", "iso-2"]

    def test_ties_keep_catalog_order(self):
        pool = [
            self.make("b", ExerciseCategory.COMPOUND, ["Back"]),
            self.make("a", ExerciseCategory.COMPOUND, ["Back"]),
        ]

        picked = pick_best(pool, ["Back"], 2, prefer_compound=True)

        assert [ex.id for ex in picked] == ["b", "a"]

    def test_skips_non_matching_and_duplicates(self):
        row = self.make("row", ExerciseCategory.COMPOUND, ["Back"])
        pool = [row, row, self.make("curl", ExerciseCategory.ISOLATION, ["Biceps"])]

        picked = pick_best(pool, ["Back"], 5, prefer_compound=False)

        assert [ex.id for ex in picked] == ["row"]

    def test_zero_count(self):
        assert pick_best([], ["Back"], 0, prefer_compound=True) == []


# ---------------------------------------------------------------------------
# Program Building
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestBuildProgram:
    """Tests for build_program against the static library."""

    def test_empty_equipment_raises(self, generator, static_catalog):
        with pytest.raises(ProgramGenerationError) as exc_info:
            generator.build_program(make_answers(equipment=[]), static_catalog)

        assert "No exercises available" in str(exc_info.value)

    def test_unknown_equipment_raises(self, generator, static_catalog):
        with pytest.raises(ProgramGenerationError):
            generator.build_program(make_answers(equipment=["Rowing Machine"]), static_catalog)

    def test_four_days_auto_is_upper_lower(self, generator, static_catalog):
        program = generator.build_program(make_answers(days_per_week=4), static_catalog)

        assert program.split == SplitType.UPPER_LOWER
        assert [d.name for d in program.days] == ["Upper 1", "Lower 1", "Upper 2", "Lower 2"]

    def test_name_and_description(self, generator, static_catalog):
        program = generator.build_program(make_answers(), static_catalog)

        assert program.name == "Hypertrophy Upper/Lower"
        assert program.description == "4 days/week · Hypertrophy focus · medium sessions"

    def test_main_block_size_and_order(self, generator, static_catalog):
        program = generator.build_program(make_answers(), static_catalog)

        for day in program.days:
            block = main_block(day)
            assert 0 < len(block) <= 6
            categories = [item.exercise.category for item in block]
            compounds = categories.count(ExerciseCategory.COMPOUND)
            assert categories[:compounds] == [ExerciseCategory.COMPOUND] * compounds

    def test_main_block_respects_pool(self, generator, static_catalog):
        answers = make_answers(experience="beginner", equipment=["Dumbbell"])

        program = generator.build_program(answers, static_catalog)

        for day in program.days:
            for item in main_block(day):
                assert "Dumbbell" in item.exercise.equipment
                assert item.exercise.difficulty == Difficulty.BEGINNER

    def test_no_duplicate_exercises_within_a_day(self, generator, static_catalog):
        program = generator.build_program(make_answers(session_length="long"), static_catalog)

        for day in program.days:
            ids = [item.exercise.id for item in day.exercises]
            assert len(ids) == len(set(ids))

    def test_warmups_first_and_stretches_last(self, generator, static_catalog):
        program = generator.build_program(make_answers(), static_catalog)

        day = program.days[0]
        warmups = [i for i in day.exercises if i.exercise.category == ExerciseCategory.WARMUP]
        stretches = [i for i in day.exercises if i.exercise.category == ExerciseCategory.STRETCH]
        assert day.exercises[: len(warmups)] == warmups
        assert day.exercises[len(day.exercises) - len(stretches):] == stretches
        assert len(warmups) == 3
        assert 0 < len(stretches) <= 5

    def test_stretches_match_day_muscles(self, generator, static_catalog):
        program = generator.build_program(make_answers(), static_catalog)

        lower = program.days[1]
        targets = {"Quads", "Hamstrings", "Glutes", "Calves", "Core"}
        for item in lower.exercises:
            if item.exercise.category == ExerciseCategory.STRETCH:
                assert targets.intersection(item.exercise.muscle_groups)

    def test_stretch_fallback_when_none_match(self, generator):
        catalog = ExerciseCatalog(
            [
                Exercise(
                    id="row",
                    name="Row",
                    category=ExerciseCategory.COMPOUND,
                    muscle_groups=["Back"],
                    equipment=["Barbell"],
                ),
                Exercise(
                    id="calf-stretch",
                    name="Calf Stretch",
                    category=ExerciseCategory.STRETCH,
                    muscle_groups=["Calves"],
                    equipment=["Bodyweight"],
                    is_timed=True,
                    duration=30,
                ),
            ]
        )
        answers = make_answers(equipment=["Barbell"], split="bro-split", days_per_week=2)

        program = generator.build_program(answers, catalog)

        back_day = program.days[1]
        assert [i.exercise.id for i in back_day.exercises] == ["row", "calf-stretch"]

    def test_prescriptions_follow_goal(self, generator, static_catalog):
        program = generator.build_program(make_answers(goal="strength"), static_catalog)

        for item in main_block(program.days[0]):
            if item.exercise.category == ExerciseCategory.COMPOUND:
                assert (item.sets, item.reps_min, item.reps_max, item.rest_seconds) == (5, 3, 5, 180)
            else:
                assert (item.sets, item.reps_min, item.reps_max, item.rest_seconds) == (3, 6, 8, 120)

    def test_mobility_items_are_timed_single_sets(self, generator, static_catalog):
        program = generator.build_program(make_answers(), static_catalog)

        for item in program.days[0].exercises:
            if item.exercise.category in MOBILITY:
                assert (item.sets, item.reps_min, item.reps_max, item.rest_seconds) == (1, 1, 1, 0)
                assert item.is_timed
                assert item.duration
                assert item.auto_progression_enabled is False
                assert item.progression_scheme is None

    def test_auto_progression_defaults(self, generator, static_catalog):
        program = generator.build_program(make_answers(), static_catalog)

        for item in main_block(program.days[0]):
            assert item.auto_progression_enabled is True
            if item.exercise.category == ExerciseCategory.ISOLATION:
                assert item.progression_scheme == ProgressionScheme.DOUBLE_PROGRESSION
            else:
                assert item.progression_scheme == ProgressionScheme.LINEAR

    def test_full_body_compound_slots(self, generator, static_catalog):
        answers = make_answers(days_per_week=2, session_length="short")

        program = generator.build_program(answers, static_catalog)

        assert program.split == SplitType.FULL_BODY
        for day in program.days:
            block = main_block(day)
            assert len(block) == 4
            assert all(i.exercise.category == ExerciseCategory.COMPOUND for i in block)

    def test_focus_muscles_are_prioritised(self, generator, static_catalog):
        answers = make_answers(focus_muscles=["biceps"])

        program = generator.build_program(answers, static_catalog)

        upper = program.days[0]
        isolations = [
            i.exercise for i in main_block(upper)
            if i.exercise.category == ExerciseCategory.ISOLATION
        ]
        assert "Biceps" in isolations[0].muscle_groups

    def test_generation_is_deterministic(self, generator, static_catalog):
        answers = make_answers(focus_muscles=["Chest"], days_per_week=5)

        first = generator.build_program(answers, static_catalog)
        second = generator.build_program(answers, static_catalog)

        assert first == second


# ---------------------------------------------------------------------------
# Async Generation
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestGenerate:
    """Tests for the async generate entry point."""

    @pytest.mark.asyncio
    async def test_generate_with_static_library(self, generator):
        program = await generator.generate(make_answers(days_per_week=3, experience="beginner"))

        assert program.split == SplitType.FULL_BODY
        assert len(program.days) == 3

    @pytest.mark.asyncio
    async def test_generate_survives_catalog_failure(self):
        generator = ProgramGenerator(CatalogProvider(source=FailingCatalogSource()))

        program = await generator.generate(make_answers())

        assert len(program.days) == 4

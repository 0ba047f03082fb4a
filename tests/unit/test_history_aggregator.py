"""
Unit tests for exercise history aggregation.

Tests:
- Completed-set filtering and session skipping
- Best set and volume calculation
- Per-exercise session cap in multi-exercise batches
- Repository-backed loading
"""

import pytest

from models.workout import WorkoutSet
from services.history_aggregator import (
    average_reps,
    average_rir,
    build_exercise_history,
    build_multi_exercise_history,
    calculate_volume,
    find_best_set,
    load_exercise_history,
    load_multi_exercise_history,
)
from tests.fakes import FakeWorkoutLogRepository, day, make_session, make_sets


# ---------------------------------------------------------------------------
# Set Calculations
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestSetCalculations:
    """Tests for volume, averages and best set."""

    def test_calculate_volume_sums_weight_times_reps(self):
        sets = make_sets([10, 8], weight=50)
        assert calculate_volume(sets) == 900

    def test_calculate_volume_empty(self):
        assert calculate_volume([]) == 0

    def test_average_reps(self):
        assert average_reps(make_sets([10, 8, 6])) == 8

    def test_average_rir_defaults_missing_values_to_one(self):
        sets = [
            WorkoutSet(set_number=1, weight=50, reps=10, rir=3, completed=True),
            WorkoutSet(set_number=2, weight=50, reps=10, rir=None, completed=True),
        ]
        assert average_rir(sets) == 2

    def test_find_best_set_by_weight_times_reps(self):
        sets = [
            WorkoutSet(set_number=1, weight=100, reps=5, completed=True),
            WorkoutSet(set_number=2, weight=80, reps=8, completed=True),
            WorkoutSet(set_number=3, weight=90, reps=6, completed=True),
        ]
        best = find_best_set(sets)
        assert (best.weight, best.reps) == (80, 8)

    def test_find_best_set_first_wins_ties(self):
        sets = [
            WorkoutSet(set_number=1, weight=100, reps=6, completed=True),
            WorkoutSet(set_number=2, weight=60, reps=10, completed=True),
        ]
        best = find_best_set(sets)
        assert (best.weight, best.reps) == (100, 6)


# ---------------------------------------------------------------------------
# History Building
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestBuildExerciseHistory:
    """Tests for single and multi-exercise history."""

    def test_keeps_only_completed_sets(self):
        sets = make_sets([10, 10]) + [
            WorkoutSet(set_number=3, weight=100, reps=3, completed=False)
        ]
        sessions = [make_session("w1", day(0), {"bench-press": sets})]

        history = build_exercise_history(sessions, "bench-press")

        assert history is not None
        assert len(history.sessions) == 1
        assert len(history.sessions[0].sets) == 2
        assert history.sessions[0].total_volume == 2000

    def test_skips_sessions_without_completed_sets(self):
        sessions = [
            make_session("w2", day(2), {"bench-press": make_sets([10], completed=False)}),
            make_session("w1", day(0), {"bench-press": make_sets([8])}),
        ]

        history = build_exercise_history(sessions, "bench-press")

        assert [s.workout_id for s in history.sessions] == ["w1"]

    def test_absent_when_no_completed_sets(self):
        sessions = [
            make_session("w1", day(0), {"bench-press": make_sets([10], completed=False)})
        ]

        assert build_exercise_history(sessions, "bench-press") is None
        assert build_multi_exercise_history(sessions, ["bench-press"]) == {}

    def test_preserves_newest_first_order(self):
        sessions = [
            make_session(f"w{i}", day(10 - i), {"bench-press": make_sets([10])})
            for i in range(3)
        ]

        history = build_exercise_history(sessions, "bench-press")

        assert [s.workout_id for s in history.sessions] == ["w0", "w1", "w2"]

    def test_uses_logged_name_or_falls_back_to_id(self):
        sessions = [
            make_session(
                "w1",
                day(0),
                {"bench-press": make_sets([10]), "squat": make_sets([5])},
                names={"bench-press": "Bench Press"},
            )
        ]

        histories = build_multi_exercise_history(sessions, ["bench-press", "squat"])

        assert histories["bench-press"].exercise_name == "Bench Press"
        assert histories["squat"].exercise_name == "squat"

    def test_caps_each_exercise_independently(self):
        sessions = []
        for i in range(15):
            exercises = {"bench-press": make_sets([10])}
            if i >= 8:
                exercises["squat"] = make_sets([5])
            sessions.append(make_session(f"w{i}", day(30 - i), exercises))

        histories = build_multi_exercise_history(sessions, ["bench-press", "squat"])

        assert len(histories["bench-press"].sessions) == 10
        assert histories["bench-press"].sessions[-1].workout_id == "w9"
        assert len(histories["squat"].sessions) == 7

    def test_custom_session_limit(self):
        sessions = [
            make_session(f"w{i}", day(10 - i), {"bench-press": make_sets([10])})
            for i in range(5)
        ]

        history = build_exercise_history(sessions, "bench-press", session_limit=2)

        assert len(history.sessions) == 2

    def test_ignores_unrequested_exercises(self):
        sessions = [
            make_session("w1", day(0), {"bench-press": make_sets([10]), "squat": make_sets([5])})
        ]

        histories = build_multi_exercise_history(sessions, ["bench-press"])

        assert list(histories) == ["bench-press"]


# ---------------------------------------------------------------------------
# Repository Loading
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestLoadHistory:
    """Tests for repository-backed history loading."""

    def test_load_exercise_history_requests_fifty_workouts(self):
        repo = FakeWorkoutLogRepository()
        repo.seed("user-1", [make_session("w1", day(0), {"bench-press": make_sets([10])})])

        history = load_exercise_history(repo, "user-1", "bench-press")

        assert history.exercise_id == "bench-press"
        assert repo.calls == [("user-1", 50)]

    def test_load_multi_exercise_history_unknown_user(self):
        repo = FakeWorkoutLogRepository()

        assert load_multi_exercise_history(repo, "nobody", ["bench-press"]) == {}

"""
Fake workout log repository and session builders for testing.

The fake stores sessions in memory and returns them newest first, the
same contract as the real workout log collaborator.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional, Sequence

from models.workout import LoggedExercise, WorkoutSession, WorkoutSet

TRAINING_START = datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)


class FakeWorkoutLogRepository:
    """
    In-memory fake implementation of WorkoutLogRepository.

    Records every call so tests can verify the requested limit.
    """

    def __init__(self):
        """Initialize with empty storage."""
        self._sessions: Dict[str, List[WorkoutSession]] = {}
        self.calls: List[tuple] = []

    # -------------------------------------------------------------------------
    # Test Helpers
    # -------------------------------------------------------------------------

    def seed(self, user_id: str, sessions: List[WorkoutSession]) -> None:
        """
        Seed sessions for a user.

        Args:
            user_id: Owner of the sessions
            sessions: Sessions in any order; they are stored newest first
        """
        stored = self._sessions.setdefault(user_id, [])
        stored.extend(sessions)
        stored.sort(key=lambda s: s.date, reverse=True)

    def reset(self) -> None:
        """Clear all stored data."""
        self._sessions.clear()
        self.calls.clear()

    # -------------------------------------------------------------------------
    # Repository Interface
    # -------------------------------------------------------------------------

    def get_recent_sessions(self, user_id: str, limit: int) -> List[WorkoutSession]:
        self.calls.append((user_id, limit))
        return list(self._sessions.get(user_id, []))[:limit]


# ---------------------------------------------------------------------------
# Session Builders
# ---------------------------------------------------------------------------


def make_sets(
    reps: Sequence[int],
    weight: float = 100.0,
    rir: Optional[float] = 2,
    completed: bool = True,
) -> List[WorkoutSet]:
    """Build one set per entry in reps, all with the same weight and RIR."""
    return [
        WorkoutSet(set_number=i + 1, weight=weight, reps=r, rir=rir, completed=completed)
        for i, r in enumerate(reps)
    ]


def make_session(
    session_id: str,
    date: str,
    exercises: Dict[str, List[WorkoutSet]],
    names: Optional[Dict[str, str]] = None,
) -> WorkoutSession:
    """Build a workout session from a mapping of exercise id to sets."""
    names = names or {}
    return WorkoutSession(
        id=session_id,
        date=date,
        exercises=[
            LoggedExercise(exercise_id=eid, exercise_name=names.get(eid), sets=sets)
            for eid, sets in exercises.items()
        ],
    )


def day(offset: int) -> str:
    """ISO datetime offset days after the start of training."""
    return (TRAINING_START + timedelta(days=offset)).isoformat()


def make_training_block(
    count: int,
    volumes: Optional[Sequence[float]] = None,
    completed_sets: int = 4,
    days_apart: float = 1,
    exercise_id: str = "bench-press",
) -> List[WorkoutSession]:
    """
    Build count sessions of four sets each, newest first.

    Args:
        count: Number of sessions
        volumes: Total completed volume per session, newest first (default 1000)
        completed_sets: Sets completed out of four in every session
        days_apart: Days between consecutive sessions
        exercise_id: Exercise logged in every session

    Returns:
        Sessions ordered newest first; the oldest is on the start date
    """
    sessions = []
    for i in range(count):
        volume = volumes[i] if volumes is not None else 1000.0
        weight = volume / (10 * max(completed_sets, 1))
        sets = [
            WorkoutSet(
                set_number=n + 1,
                weight=weight,
                reps=10,
                rir=2,
                completed=n < completed_sets,
            )
            for n in range(4)
        ]
        date = (TRAINING_START + timedelta(days=(count - 1 - i) * days_apart)).isoformat()
        sessions.append(make_session(f"w{i + 1}", date, {exercise_id: sets}))
    return sessions

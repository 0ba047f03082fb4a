"""
Exercise history aggregation.

Reduces logged workout sessions (newest first) into per-exercise histories:
- Only completed sets are kept
- Sessions without completed sets for an exercise are skipped
- Each history holds at most HISTORY_SESSION_LIMIT sessions
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from application.ports.workout_log_repository import WorkoutLogRepository
from core.calculations import mean
from core.constants import DEFAULT_RIR, HISTORY_SESSION_LIMIT, HISTORY_WORKOUT_LIMIT
from models.workout import (
    ExerciseHistory,
    ExerciseSession,
    LoggedExercise,
    SetSummary,
    WorkoutSession,
    WorkoutSet,
)

logger = logging.getLogger(__name__)


def calculate_volume(sets: Iterable[WorkoutSet]) -> float:
    """Total volume (sum of weight x reps) of the given sets."""
    return sum(s.weight * s.reps for s in sets)


def average_reps(sets: Iterable[WorkoutSet]) -> float:
    return mean(s.reps for s in sets)


def average_rir(sets: Iterable[WorkoutSet]) -> float:
    """Average RIR of the given sets; sets without RIR count as DEFAULT_RIR."""
    return mean(DEFAULT_RIR if s.rir is None else s.rir for s in sets)


def find_best_set(sets: Sequence[WorkoutSet]) -> SetSummary:
    """
    Find the set with the highest weight x reps.

    The first maximal set wins ties.

    Args:
        sets: Non-empty list of sets

    Returns:
        Weight and reps of the best set
    """
    best = sets[0]
    for s in sets[1:]:
        if s.weight * s.reps > best.weight * best.reps:
            best = s
    return SetSummary(weight=best.weight, reps=best.reps)


def _to_exercise_session(
    workout: WorkoutSession,
    logged: LoggedExercise,
) -> Optional[ExerciseSession]:
    completed = [s for s in logged.sets if s.completed]
    if not completed:
        return None

    return ExerciseSession(
        date=workout.date,
        workout_id=workout.id,
        sets=completed,
        best_set=find_best_set(completed),
        total_volume=calculate_volume(completed),
    )


def build_multi_exercise_history(
    sessions: Iterable[WorkoutSession],
    exercise_ids: Iterable[str],
    session_limit: int = HISTORY_SESSION_LIMIT,
) -> Dict[str, ExerciseHistory]:
    """
    Build histories for several exercises in a single pass.

    Args:
        sessions: Workout sessions ordered newest first
        exercise_ids: Exercises to collect
        session_limit: Maximum sessions kept per exercise

    Returns:
        Mapping of exercise id to history. Exercises without any
        qualifying session are absent.
    """
    wanted = list(dict.fromkeys(exercise_ids))
    collected: Dict[str, List[ExerciseSession]] = {eid: [] for eid in wanted}
    names: Dict[str, str] = {}

    for workout in sessions:
        for logged in workout.exercises:
            bucket = collected.get(logged.exercise_id)
            if bucket is None or len(bucket) >= session_limit:
                continue

            exercise_session = _to_exercise_session(workout, logged)
            if exercise_session is None:
                continue

            bucket.append(exercise_session)
            if logged.exercise_id not in names and logged.exercise_name:
                names[logged.exercise_id] = logged.exercise_name

        if all(len(collected[eid]) >= session_limit for eid in wanted):
            break

    return {
        eid: ExerciseHistory(
            exercise_id=eid,
            exercise_name=names.get(eid, eid),
            sessions=collected[eid],
        )
        for eid in wanted
        if collected[eid]
    }


def build_exercise_history(
    sessions: Iterable[WorkoutSession],
    exercise_id: str,
    session_limit: int = HISTORY_SESSION_LIMIT,
) -> Optional[ExerciseHistory]:
    """
    Build the history of a single exercise.

    Args:
        sessions: Workout sessions ordered newest first
        exercise_id: Exercise to collect
        session_limit: Maximum sessions kept

    Returns:
        ExerciseHistory, or None if the exercise has no completed sets
    """
    histories = build_multi_exercise_history(sessions, [exercise_id], session_limit)
    return histories.get(exercise_id)


def load_exercise_history(
    repo: WorkoutLogRepository,
    user_id: str,
    exercise_id: str,
    workout_limit: int = HISTORY_WORKOUT_LIMIT,
) -> Optional[ExerciseHistory]:
    """Fetch recent workouts for a user and build one exercise's history."""
    sessions = repo.get_recent_sessions(user_id, workout_limit)
    logger.debug(f"Loaded {len(sessions)} sessions for user {user_id}")
    return build_exercise_history(sessions, exercise_id)


def load_multi_exercise_history(
    repo: WorkoutLogRepository,
    user_id: str,
    exercise_ids: Iterable[str],
    workout_limit: int = HISTORY_WORKOUT_LIMIT,
) -> Dict[str, ExerciseHistory]:
    """Fetch recent workouts for a user and build several histories."""
    sessions = repo.get_recent_sessions(user_id, workout_limit)
    logger.debug(f"Loaded {len(sessions)} sessions for user {user_id}")
    return build_multi_exercise_history(sessions, exercise_ids)

"""
Progression tracking engine.

This service turns exercise history into training advice:
- Next-session weight/rep suggestions with a trend classification
- Deload week detection from recent training load
- Post-workout feedback against program targets

All calculations are pure; the only I/O is the optional repository
lookup in check_deload_for_user.
"""

import logging
from datetime import datetime
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence

from application.ports.workout_log_repository import WorkoutLogRepository
from core.calculations import mean, parse_session_date, round_half_up, round_weight
from core.constants import (
    DELOAD_FAILURE_STREAK,
    DELOAD_MIN_COMPLETION,
    DELOAD_MIN_SESSIONS,
    DELOAD_PROACTIVE_SESSIONS,
    DELOAD_SESSION_LIMIT,
    DELOAD_STREAK_DAYS,
    DELOAD_STREAK_SESSIONS,
    DELOAD_VOLUME_DROP_RATIO,
    DELOAD_WEIGHT_RATIO,
    DELOAD_WINDOW_SIZE,
    FAILURE_REPS_RATIO,
    PROGRESSION_MIN_RIR,
    PROGRESSION_WEIGHT_DECREASE,
    PROGRESSION_WEIGHT_INCREASE,
)
from models.progression import (
    DeloadRecommendation,
    ProgramTarget,
    ProgramTargetUpdate,
    ProgressionSuggestion,
    Trend,
)
from models.workout import (
    ExerciseHistory,
    ExerciseSession,
    LoggedExercise,
    WorkoutSession,
    WorkoutSet,
)
from services.history_aggregator import average_reps, average_rir, calculate_volume

logger = logging.getLogger(__name__)


class ProgressionResult(NamedTuple):
    """Outcome of a single progression step."""

    new_weight: float
    new_reps: int
    recommendation: str


def _session_volume(workout: WorkoutSession) -> float:
    return sum(
        calculate_volume(s for s in logged.sets if s.completed)
        for logged in workout.exercises
    )


def _session_completion(workout: WorkoutSession) -> float:
    total = sum(len(logged.sets) for logged in workout.exercises)
    if total == 0:
        return 1.0
    done = sum(
        1 for logged in workout.exercises for s in logged.sets if s.completed
    )
    return done / total


class ProgressionEngine:
    """
    Engine for progression and deload analysis.

    Provides data-driven insights for progressive overload
    and recovery planning.
    """

    def __init__(self, deload_session_limit: int = DELOAD_SESSION_LIMIT):
        """
        Initialize the engine.

        Args:
            deload_session_limit: Number of recent workouts considered for
                deload detection
        """
        self.deload_session_limit = deload_session_limit

    # =========================================================================
    # Progression suggestions
    # =========================================================================

    @staticmethod
    def calculate_progression(
        current_weight: float,
        target_reps: int,
        actual_reps: int,
        rir: float,
    ) -> ProgressionResult:
        """
        Apply the progression rule to one exercise.

        Args:
            current_weight: Weight used last session
            target_reps: Reps the user is aiming for
            actual_reps: Reps actually performed
            rir: Reps in reserve reported for the session

        Returns:
            New weight, reps and a short recommendation
        """
        if actual_reps >= target_reps and rir >= PROGRESSION_MIN_RIR:
            return ProgressionResult(
                new_weight=round_weight(current_weight * PROGRESSION_WEIGHT_INCREASE),
                new_reps=target_reps,
                recommendation="Increase weight by 2.5%",
            )

        if actual_reps >= target_reps:
            return ProgressionResult(
                new_weight=current_weight,
                new_reps=target_reps,
                recommendation="Maintain current weight",
            )

        return ProgressionResult(
            new_weight=round_weight(current_weight * PROGRESSION_WEIGHT_DECREASE),
            new_reps=target_reps,
            recommendation="Reduce weight by 5% or target fewer reps",
        )

    @staticmethod
    def calculate_volume(sets: Iterable[WorkoutSet]) -> float:
        """Training volume (sum of weight x reps)."""
        return calculate_volume(sets)

    @staticmethod
    def count_consecutive_failures(
        sessions: Sequence[ExerciseSession],
        target_reps: int,
    ) -> int:
        """
        Count sessions, newest first, whose average reps missed the target.

        Counting stops at the first session that hit at least 90% of target.
        """
        failures = 0
        for session in sessions:
            if average_reps(session.sets) < target_reps * FAILURE_REPS_RATIO:
                failures += 1
            else:
                break
        return failures

    def get_suggestion(
        self,
        history: Optional[ExerciseHistory],
        target_reps: Optional[int] = None,
    ) -> ProgressionSuggestion:
        """
        Suggest weight and reps for the next session of an exercise.

        Args:
            history: Exercise history (newest first), or None
            target_reps: Desired reps; defaults to last session's best reps

        Returns:
            ProgressionSuggestion
        """
        if history is None or not history.sessions:
            return ProgressionSuggestion(
                weight=0,
                reps=target_reps or 0,
                recommendation="First time: start light and find your working weight",
                trend=Trend.MAINTAIN,
                previous_best=None,
                consecutive_failures=0,
            )

        last_session = history.sessions[0]
        last_best = last_session.best_set
        target = target_reps or last_best.reps

        failures = self.count_consecutive_failures(history.sessions, target)

        if failures >= DELOAD_FAILURE_STREAK:
            deload_weight = last_best.weight * DELOAD_WEIGHT_RATIO
            logger.info(
                f"Deload suggested for {history.exercise_id} after {failures} missed sessions"
            )
            return ProgressionSuggestion(
                weight=round_weight(deload_weight),
                reps=target,
                recommendation=(
                    f"Deload: reduce to {round_half_up(deload_weight)} for {target} reps. "
                    f"You've missed targets {failures} sessions in a row."
                ),
                trend=Trend.DELOAD,
                previous_best=last_best,
                consecutive_failures=failures,
            )

        avg_rir = average_rir(last_session.sets)
        avg_reps = average_reps(last_session.sets)

        progression = self.calculate_progression(
            last_best.weight,
            target,
            round_half_up(avg_reps),
            round_half_up(avg_rir),
        )

        if progression.new_weight > last_best.weight:
            trend = Trend.UP
        elif progression.new_weight < last_best.weight:
            trend = Trend.DOWN
        else:
            trend = Trend.MAINTAIN

        return ProgressionSuggestion(
            weight=progression.new_weight,
            reps=progression.new_reps,
            recommendation=progression.recommendation,
            trend=trend,
            previous_best=last_best,
            consecutive_failures=failures,
        )

    # =========================================================================
    # Deload detection
    # =========================================================================

    def check_deload_needed(
        self,
        recent_sessions: Sequence[WorkoutSession],
    ) -> DeloadRecommendation:
        """
        Decide whether a deload week is warranted.

        Args:
            recent_sessions: Logged workouts, newest first. Only the first
                deload_session_limit are considered.

        Returns:
            DeloadRecommendation
        """
        workouts = list(recent_sessions)[: self.deload_session_limit]
        session_count = len(workouts)

        if session_count < DELOAD_MIN_SESSIONS:
            return DeloadRecommendation(
                needed=False,
                reason="Not enough training data yet",
            )

        dates: List[datetime] = [
            parsed
            for parsed in (parse_session_date(w.date) for w in workouts)
            if parsed is not None
        ]
        if len(dates) < 2:
            return DeloadRecommendation(needed=False, reason="Insufficient data")

        span_seconds = (max(dates) - min(dates)).total_seconds()
        training_span_days = round_half_up(span_seconds / 86400)

        window = DELOAD_WINDOW_SIZE
        avg_recent = mean(_session_volume(w) for w in workouts[:window])
        avg_older = mean(_session_volume(w) for w in workouts[window: window * 2])
        avg_completion = mean(_session_completion(w) for w in workouts[:window])

        volume_declining = avg_older > 0 and avg_recent < avg_older * DELOAD_VOLUME_DROP_RATIO
        long_streak = (
            training_span_days >= DELOAD_STREAK_DAYS
            and session_count >= DELOAD_STREAK_SESSIONS
        )
        low_completion = avg_completion < DELOAD_MIN_COMPLETION

        if volume_declining and long_streak:
            drop_pct = round_half_up((1 - avg_recent / avg_older) * 100)
            logger.info(f"Deload needed: volume dropped {drop_pct}%")
            return DeloadRecommendation(
                needed=True,
                reason=(
                    f"Volume has dropped {drop_pct}% over recent sessions after "
                    f"{training_span_days} days of training. Time for a deload week."
                ),
                suggested_weight_multiplier=0.85,
                suggested_volume_multiplier=0.6,
            )

        if low_completion and long_streak:
            completion_pct = round_half_up(avg_completion * 100)
            logger.info(f"Deload needed: completion rate {completion_pct}%")
            return DeloadRecommendation(
                needed=True,
                reason=(
                    f"Set completion rate has dropped to {completion_pct}%. "
                    "A deload will help you recover and push through the plateau."
                ),
                suggested_weight_multiplier=0.85,
                suggested_volume_multiplier=0.6,
            )

        if long_streak and session_count >= DELOAD_PROACTIVE_SESSIONS:
            logger.info(f"Proactive deload after {training_span_days} days")
            return DeloadRecommendation(
                needed=True,
                reason=(
                    f"You've been training for {training_span_days} days "
                    f"({session_count} sessions) without a light week. "
                    "A proactive deload is recommended."
                ),
                suggested_weight_multiplier=0.9,
                suggested_volume_multiplier=0.7,
            )

        return DeloadRecommendation(
            needed=False,
            reason="Training load looks sustainable. Keep pushing!",
        )

    def check_deload_for_user(
        self,
        repo: WorkoutLogRepository,
        user_id: str,
    ) -> DeloadRecommendation:
        """Load a user's recent workouts and check whether to deload."""
        sessions = repo.get_recent_sessions(user_id, self.deload_session_limit)
        return self.check_deload_needed(sessions)

    # =========================================================================
    # Program feedback
    # =========================================================================

    def generate_program_updates(
        self,
        completed_exercises: Sequence[LoggedExercise],
        program_targets: Sequence[ProgramTarget],
    ) -> Dict[str, ProgramTargetUpdate]:
        """
        Compare a finished workout against program targets.

        Args:
            completed_exercises: Exercises logged in the workout
            program_targets: Current program prescriptions

        Returns:
            Mapping of exercise id to feedback. Targets without a logged
            exercise or without completed sets are omitted.
        """
        logged_by_id: Dict[str, LoggedExercise] = {}
        for logged in completed_exercises:
            logged_by_id.setdefault(logged.exercise_id, logged)

        updates: Dict[str, ProgramTargetUpdate] = {}
        for target in program_targets:
            logged = logged_by_id.get(target.exercise_id)
            if logged is None:
                continue

            done = [s for s in logged.sets if s.completed]
            if not done:
                continue

            avg_reps = average_reps(done)
            avg_rir = average_rir(done)

            if avg_reps >= target.reps_max and avg_rir >= PROGRESSION_MIN_RIR:
                recommendation = (
                    f"Increase weight next session. Hit {round_half_up(avg_reps)} reps "
                    f"with {round_half_up(avg_rir)} RIR."
                )
            elif avg_reps < target.reps_min:
                recommendation = (
                    f"Consider lowering weight. Only managed {round_half_up(avg_reps)} reps "
                    f"(target: {target.reps_min}-{target.reps_max})."
                )
            else:
                recommendation = (
                    f"Good work! {round_half_up(avg_reps)} reps is within target range."
                )

            updates[target.exercise_id] = ProgramTargetUpdate(
                sets=target.sets,
                reps_min=target.reps_min,
                reps_max=target.reps_max,
                recommendation=recommendation,
            )

        return updates

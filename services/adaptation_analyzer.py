"""
Exercise adaptation analysis.

Compares a recent window of sessions (0-4) against an older window (5-9)
to decide whether an exercise should get more volume, more intensity, a
deload, a swap, or be left alone. Bodyweight exercises are delegated to
the variation-based policy in services.bodyweight_adaptation.
"""

import logging
from typing import Optional

from core.calculations import mean
from core.constants import (
    ADAPTATION_MIN_SESSIONS,
    ADAPTATION_SWAP_MIN_SESSIONS,
    DECLINE_RATIO,
    DELOAD_REST_SECONDS,
    MIN_REST_SECONDS,
    PLATEAU_THRESHOLD,
    REST_STEP_SECONDS,
)
from models.exercise import Exercise
from models.progression import AdaptationRecommendation, AdaptationType, RepsRange
from models.workout import ExerciseHistory
from services.bodyweight_adaptation import (
    analyze_bodyweight_adaptation,
    is_bodyweight_exercise,
    window_average_reps,
    window_average_rir,
)
from services.exercise_catalog import ExerciseCatalog
from services.program_updater import get_default_rest_time

logger = logging.getLogger(__name__)

HIGH_RIR = 3
LOW_RIR = 1
READY_RIR = 2
REPS_RANGE_STEP = 2


class AdaptationAnalyzer:
    """
    Analyzer for per-exercise adaptation advice.

    Uses the exercise catalog to resolve variations and alternatives.
    """

    def __init__(self, catalog: Optional[ExerciseCatalog] = None):
        """
        Initialize the analyzer.

        Args:
            catalog: Exercise catalog used for progression edges
        """
        self.catalog = catalog

    def analyze_exercise_adaptation(
        self,
        exercise: Exercise,
        history: ExerciseHistory,
        current_sets: int,
        current_reps_range: RepsRange,
        current_rest_seconds: Optional[int] = None,
    ) -> AdaptationRecommendation:
        """
        Decide how an exercise should be adapted.

        Args:
            exercise: The exercise being analyzed
            history: Its recent history, newest first
            current_sets: Sets currently prescribed
            current_reps_range: Rep range currently prescribed
            current_rest_seconds: Current rest; defaults by category

        Returns:
            AdaptationRecommendation
        """
        if is_bodyweight_exercise(exercise):
            return analyze_bodyweight_adaptation(
                exercise,
                history,
                current_sets,
                current_reps_range,
                self.catalog,
            )

        if current_rest_seconds is None:
            current_rest_seconds = get_default_rest_time(
                exercise.category, current_reps_range.max
            )

        def recommend(adaptation_type: AdaptationType, reason: str, **extra) -> AdaptationRecommendation:
            return AdaptationRecommendation(
                exercise_id=exercise.id,
                exercise_name=exercise.name,
                adaptation_type=adaptation_type,
                reason=reason,
                **extra,
            )

        sessions = history.sessions
        session_count = len(sessions)
        if session_count < ADAPTATION_MIN_SESSIONS:
            return recommend(
                AdaptationType.MAINTAIN,
                "Not enough data yet - keep training to unlock adaptation advice",
            )

        recent = sessions[:5]
        older = sessions[5:10]

        recent_avg_volume = mean(s.total_volume for s in recent)
        older_avg_volume = mean(s.total_volume for s in older)
        avg_rir = window_average_rir(recent)
        avg_reps = window_average_reps(recent)

        volume_stagnant = (
            older_avg_volume > 0
            and abs(recent_avg_volume - older_avg_volume) / older_avg_volume
            < PLATEAU_THRESHOLD
        )
        performance_decline = (
            older_avg_volume > 0 and recent_avg_volume < older_avg_volume * DECLINE_RATIO
        )

        if performance_decline:
            drop_pct = (1 - recent_avg_volume / older_avg_volume) * 100
            logger.info(f"Performance decline on {exercise.id}: {drop_pct:.0f}%")
            return recommend(
                AdaptationType.DELOAD,
                f"Volume is down {drop_pct:.0f}% versus earlier sessions. "
                "Reduce sets and rest longer to recover.",
                suggested_sets=max(1, current_sets - 1),
                suggested_rest_seconds=DELOAD_REST_SECONDS,
            )

        if volume_stagnant and avg_rir >= HIGH_RIR:
            return recommend(
                AdaptationType.INCREASE_INTENSITY,
                f"Volume has plateaued with {avg_rir:.1f} RIR left. "
                "Shorten rest to raise the intensity.",
                suggested_rest_seconds=max(
                    MIN_REST_SECONDS, current_rest_seconds - REST_STEP_SECONDS
                ),
            )

        if volume_stagnant and avg_rir < LOW_RIR:
            if session_count >= ADAPTATION_SWAP_MIN_SESSIONS:
                edges = self.catalog.get_progression(exercise.id) if self.catalog is not None else None
                if edges is None:
                    edges = exercise.progression
                alternatives = edges.alternative_ids if edges else []
                return recommend(
                    AdaptationType.SWAP_EXERCISE,
                    f"Plateaued for {session_count} sessions while training close to "
                    "failure. Swap to a similar exercise for a new stimulus.",
                    alternative_exercises=alternatives or None,
                )

            return recommend(
                AdaptationType.INCREASE_VOLUME,
                "Volume has plateaued near failure. Add a set and widen the rep range.",
                suggested_sets=current_sets + 1,
                suggested_reps_range=RepsRange(
                    min=current_reps_range.min + REPS_RANGE_STEP,
                    max=current_reps_range.max + REPS_RANGE_STEP,
                ),
            )

        if avg_reps >= current_reps_range.max and avg_rir >= READY_RIR:
            return recommend(
                AdaptationType.INCREASE_INTENSITY,
                f"Hitting {avg_reps:.0f} reps with {avg_rir:.1f} RIR. "
                "Ready for more weight.",
            )

        return recommend(
            AdaptationType.MAINTAIN,
            "Progress is on track. Keep the current prescription.",
        )

"""
Bodyweight exercise adaptation.

Bodyweight movements cannot be progressed by adding load, so progress is
made by moving along a variation graph (e.g. knee push-ups -> push-ups ->
diamond push-ups). This module decides when to move up, down or sideways.
"""

from typing import List, Optional

from core.calculations import mean, round_half_up
from core.constants import ADAPTATION_MIN_SESSIONS, DEFAULT_RIR, PLATEAU_THRESHOLD
from infrastructure.static_catalog import BODYWEIGHT_PROGRESSIONS
from models.exercise import Exercise, ProgressionEdges
from models.progression import (
    AdaptationRecommendation,
    AdaptationType,
    ProgressionPath,
    ProgressionVariation,
    RepsRange,
    VariationDifficulty,
)
from models.workout import ExerciseHistory, ExerciseSession
from services.exercise_catalog import ExerciseCatalog
from services.history_aggregator import average_reps, average_rir

# Multipliers applied to the current rep range
EXCEEDS_MAX_RATIO = 1.2
FAILING_MIN_RATIO = 0.7
HIGH_RIR = 3
LOW_RIR = 1
PLATEAU_MAX_RIR = 2

BODYWEIGHT = "bodyweight"


def is_bodyweight_exercise(exercise: Exercise) -> bool:
    """
    Check whether an exercise is performed primarily with bodyweight.

    The first listed equipment is the main modality, so ["Bodyweight",
    "Stability Ball"] counts while ["Dumbbell", "Bodyweight"] does not.
    """
    if not exercise.equipment:
        return False
    return exercise.equipment[0].strip().casefold() == BODYWEIGHT


def _progression_edges(
    exercise: Exercise,
    catalog: Optional[ExerciseCatalog],
) -> Optional[ProgressionEdges]:
    if catalog is not None:
        edges = catalog.get_progression(exercise.id)
        if edges is not None:
            return edges
    if exercise.progression is not None:
        return exercise.progression
    return BODYWEIGHT_PROGRESSIONS.get(exercise.id)


def window_average_reps(sessions: List[ExerciseSession]) -> float:
    """Mean of per-session average reps."""
    return mean(average_reps(s.sets) for s in sessions)


def window_average_rir(sessions: List[ExerciseSession]) -> float:
    """Mean of per-session average RIR (missing RIR counts as the default)."""
    return mean((average_rir(s.sets) for s in sessions), default=DEFAULT_RIR)


def analyze_bodyweight_adaptation(
    exercise: Exercise,
    history: ExerciseHistory,
    current_sets: int,
    current_reps_range: RepsRange,
    catalog: Optional[ExerciseCatalog] = None,
) -> AdaptationRecommendation:
    """
    Decide how to adapt a bodyweight exercise.

    Args:
        exercise: The exercise being analyzed
        history: Its recent history, newest first
        current_sets: Sets currently prescribed
        current_reps_range: Rep range currently prescribed
        catalog: Catalog used to resolve variation edges

    Returns:
        AdaptationRecommendation
    """

    def recommend(adaptation_type: AdaptationType, reason: str, **extra) -> AdaptationRecommendation:
        return AdaptationRecommendation(
            exercise_id=exercise.id,
            exercise_name=exercise.name,
            adaptation_type=adaptation_type,
            reason=reason,
            **extra,
        )

    if not is_bodyweight_exercise(exercise):
        return recommend(AdaptationType.MAINTAIN, "Not a bodyweight exercise")

    sessions = history.sessions
    if len(sessions) < ADAPTATION_MIN_SESSIONS:
        return recommend(
            AdaptationType.MAINTAIN,
            "Building baseline - keep current variation",
        )

    recent = sessions[:5]
    older = sessions[5:10]

    recent_avg_reps = window_average_reps(recent)
    older_avg_reps = window_average_reps(older) if older else recent_avg_reps
    avg_rir = window_average_rir(recent)

    edges = _progression_edges(exercise, catalog)

    reps_stagnant = (
        older_avg_reps > 0
        and abs(recent_avg_reps - older_avg_reps) / older_avg_reps < PLATEAU_THRESHOLD
    )
    exceeds_max_reps = recent_avg_reps >= current_reps_range.max * EXCEEDS_MAX_RATIO
    high_reps_low_rir = recent_avg_reps >= current_reps_range.max and avg_rir >= HIGH_RIR
    failing_min_reps = recent_avg_reps < current_reps_range.min * FAILING_MIN_RATIO
    low_reps_no_rir = recent_avg_reps < current_reps_range.min and avg_rir < LOW_RIR

    if (failing_min_reps or low_reps_no_rir) and edges and edges.easier:
        return recommend(
            AdaptationType.REGRESS_VARIATION,
            f"Struggling with current variation (avg {round_half_up(recent_avg_reps)} reps). "
            "Try an easier variation to build strength.",
            progression_variation=ProgressionVariation(
                id=edges.easier.id,
                name=edges.easier.name,
                difficulty=VariationDifficulty.EASIER,
            ),
        )

    if (exceeds_max_reps or high_reps_low_rir) and edges and edges.harder:
        return recommend(
            AdaptationType.PROGRESS_VARIATION,
            f"Exceeding {round_half_up(recent_avg_reps)} reps with "
            f"{round_half_up(avg_rir)} RIR. Ready for a harder variation!",
            progression_variation=ProgressionVariation(
                id=edges.harder.id,
                name=edges.harder.name,
                difficulty=VariationDifficulty.HARDER,
            ),
        )

    if reps_stagnant and avg_rir < PLATEAU_MAX_RIR:
        if edges and edges.alternatives:
            alternative = edges.alternatives[0]
            return recommend(
                AdaptationType.SWAP_EXERCISE,
                f"Plateaued at {round_half_up(recent_avg_reps)} reps for {len(sessions)} "
                "sessions. Try a variation for different stimulus.",
                progression_variation=ProgressionVariation(
                    id=alternative.id,
                    name=alternative.name,
                    difficulty=VariationDifficulty.SIMILAR,
                ),
                alternative_exercises=edges.alternative_ids,
            )

        return recommend(
            AdaptationType.INCREASE_VOLUME,
            f"Plateaued at {round_half_up(recent_avg_reps)} reps. "
            "Add a set or increase time under tension.",
            suggested_sets=current_sets + 1,
        )

    if older_avg_reps < recent_avg_reps < current_reps_range.max:
        return recommend(
            AdaptationType.MAINTAIN,
            f"Progressing well! Keep pushing toward {current_reps_range.max} reps "
            "before moving to harder variation.",
        )

    return recommend(
        AdaptationType.MAINTAIN,
        "Continue current training. Focus on form and controlled tempo.",
    )


def get_bodyweight_progression_path(
    exercise_id: str,
    catalog: Optional[ExerciseCatalog] = None,
) -> Optional[ProgressionPath]:
    """
    Names of the easier, harder and alternative variations of an exercise.

    Args:
        exercise_id: Exercise to look up
        catalog: Catalog to resolve edges from (default: built-in graph)

    Returns:
        ProgressionPath, or None if the exercise has no known variations
    """
    if catalog is not None:
        edges = catalog.get_progression(exercise_id)
    else:
        edges = BODYWEIGHT_PROGRESSIONS.get(exercise_id)
    if edges is None:
        return None

    return ProgressionPath(
        easier=edges.easier.name if edges.easier else None,
        harder=edges.harder.name if edges.harder else None,
        alternatives=[ref.name for ref in edges.alternatives],
    )

"""
Progression tracking router.

This router exposes the progression engine over HTTP. It is stateless:
callers post the workout snapshot (newest first) with each request.
- Build exercise history
- Next-session suggestion
- Deload check
- Adaptation analysis
- Post-workout program feedback
- Bodyweight progression path
"""

import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from api.deps import get_adaptation_analyzer, get_catalog, get_progression_engine
from models.progression import (
    AdaptationRecommendation,
    DeloadRecommendation,
    ProgramTarget,
    ProgramTargetUpdate,
    ProgressionPath,
    ProgressionSuggestion,
    RepsRange,
)
from models.workout import ExerciseHistory, LoggedExercise, WorkoutSession
from services.adaptation_analyzer import AdaptationAnalyzer
from services.bodyweight_adaptation import get_bodyweight_progression_path
from services.exercise_catalog import ExerciseCatalog
from services.history_aggregator import (
    build_exercise_history,
    build_multi_exercise_history,
)
from services.progression_engine import ProgressionEngine

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/progression",
    tags=["Progression"],
)


# =============================================================================
# Request Models
# =============================================================================


class HistoryRequest(BaseModel):
    """Request to build histories for several exercises."""

    sessions: List[WorkoutSession] = Field(description="Logged workouts, newest first")
    exercise_ids: List[str] = Field(min_length=1)


class SuggestionRequest(BaseModel):
    """Request for a next-session suggestion."""

    sessions: List[WorkoutSession] = Field(description="Logged workouts, newest first")
    exercise_id: str
    target_reps: Optional[int] = Field(None, ge=1)


class DeloadRequest(BaseModel):
    """Request to check whether a deload is needed."""

    sessions: List[WorkoutSession] = Field(description="Logged workouts, newest first")


class AdaptationRequest(BaseModel):
    """Request for adaptation advice on one exercise."""

    sessions: List[WorkoutSession] = Field(description="Logged workouts, newest first")
    exercise_id: str
    current_sets: int = Field(ge=1)
    current_reps_range: RepsRange
    current_rest_seconds: Optional[int] = Field(None, ge=0)


class ProgramUpdatesRequest(BaseModel):
    """Finished workout compared against program targets."""

    completed_exercises: List[LoggedExercise]
    program_targets: List[ProgramTarget]


# =============================================================================
# Endpoints
# =============================================================================


@router.post("/history", response_model=Dict[str, ExerciseHistory])
def get_exercise_histories(request: HistoryRequest):
    """
    Build per-exercise histories from a workout snapshot.

    Exercises without completed sets are absent from the response.
    """
    return build_multi_exercise_history(request.sessions, request.exercise_ids)


@router.post("/suggestion", response_model=ProgressionSuggestion)
def get_suggestion(
    request: SuggestionRequest,
    engine: ProgressionEngine = Depends(get_progression_engine),
):
    """
    Suggest weight and reps for the next session of an exercise.

    Args:
        request: Workout snapshot, exercise and optional target reps

    Returns:
        Progression suggestion (first-time advice when there is no history)
    """
    history = build_exercise_history(request.sessions, request.exercise_id)
    return engine.get_suggestion(history, request.target_reps)


@router.post("/deload", response_model=DeloadRecommendation)
def check_deload(
    request: DeloadRequest,
    engine: ProgressionEngine = Depends(get_progression_engine),
):
    """Check whether recent training warrants a deload week."""
    return engine.check_deload_needed(request.sessions)


@router.post("/adaptation", response_model=AdaptationRecommendation)
def analyze_adaptation(
    request: AdaptationRequest,
    catalog: ExerciseCatalog = Depends(get_catalog),
    analyzer: AdaptationAnalyzer = Depends(get_adaptation_analyzer),
):
    """
    Analyze how an exercise should be adapted.

    Raises:
        HTTPException 404: If the exercise is not in the catalog
    """
    exercise = catalog.get(request.exercise_id)
    if exercise is None:
        raise HTTPException(
            status_code=404,
            detail=f"Exercise not found: {request.exercise_id}",
        )

    history = build_exercise_history(request.sessions, request.exercise_id)
    if history is None:
        history = ExerciseHistory(
            exercise_id=exercise.id,
            exercise_name=exercise.name,
            sessions=[],
        )

    return analyzer.analyze_exercise_adaptation(
        exercise,
        history,
        request.current_sets,
        request.current_reps_range,
        request.current_rest_seconds,
    )


@router.post("/program-updates", response_model=Dict[str, ProgramTargetUpdate])
def get_program_updates(
    request: ProgramUpdatesRequest,
    engine: ProgressionEngine = Depends(get_progression_engine),
):
    """Compare a finished workout against program targets."""
    return engine.generate_program_updates(
        request.completed_exercises,
        request.program_targets,
    )


@router.get("/path/{exercise_id}", response_model=ProgressionPath)
def get_progression_path(
    exercise_id: str,
    catalog: ExerciseCatalog = Depends(get_catalog),
):
    """
    Get the easier, harder and alternative variations of an exercise.

    Raises:
        HTTPException 404: If the exercise has no known variations
    """
    path = get_bodyweight_progression_path(exercise_id, catalog)
    if path is None:
        raise HTTPException(
            status_code=404,
            detail=f"No progression path for exercise: {exercise_id}",
        )
    return path

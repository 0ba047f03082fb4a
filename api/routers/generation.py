"""
Program generation router.

This router provides endpoints for rule-based program generation:
- Generate a program from wizard answers
- Suggest a split for a schedule
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from api.deps import get_program_generator
from models.exercise import Difficulty
from models.generation import GeneratedProgram, ProgramWizardAnswers, SplitType
from services.program_generator import (
    ProgramGenerationError,
    ProgramGenerator,
    suggest_split,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/programs",
    tags=["Generation"],
)


class SplitSuggestion(BaseModel):
    """Split suggested for a schedule."""

    days_per_week: int
    experience: Difficulty
    split: SplitType


@router.post("/generate", response_model=GeneratedProgram)
async def generate_program(
    answers: ProgramWizardAnswers,
    generator: ProgramGenerator = Depends(get_program_generator),
):
    """
    Generate a training program from wizard answers.

    The program has one entry per training day, each with warmups, a main
    block of compound and isolation exercises, and cooldown stretches.

    Args:
        answers: Validated wizard answers

    Returns:
        Generated program

    Raises:
        HTTPException 422: If no exercise matches the equipment/experience
    """
    logger.info(
        f"Generate program request: goal={answers.goal.value}, "
        f"days={answers.days_per_week}, split={answers.split.value}"
    )

    try:
        return await generator.generate(answers)
    except ProgramGenerationError as e:
        logger.warning(f"Program generation failed: {e}")
        raise HTTPException(status_code=422, detail=str(e))


@router.get("/suggest-split", response_model=SplitSuggestion)
def get_split_suggestion(
    days_per_week: int = Query(..., ge=2, le=6),
    experience: Difficulty = Query(...),
):
    """Suggest a split for the wizard's split step."""
    return SplitSuggestion(
        days_per_week=days_per_week,
        experience=experience,
        split=suggest_split(days_per_week, experience),
    )

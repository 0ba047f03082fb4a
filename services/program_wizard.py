"""
Program wizard state machine.

Drives the questionnaire that feeds the program generator. Steps are
linear: goal -> experience -> days -> session -> equipment -> focus ->
split -> review. Reaching review allows generating a preview program,
which can be regenerated with the same answers.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from models.exercise import Difficulty
from models.generation import (
    GeneratedProgram,
    ProgramWizardAnswers,
    SessionLength,
    SplitType,
    TrainingGoal,
)
from services.program_generator import ProgramGenerator, suggest_split

logger = logging.getLogger(__name__)


class WizardStep(str, Enum):
    """Wizard steps, in order."""

    GOAL = "goal"
    EXPERIENCE = "experience"
    DAYS = "days"
    SESSION = "session"
    EQUIPMENT = "equipment"
    FOCUS = "focus"
    SPLIT = "split"
    REVIEW = "review"


STEPS: List[WizardStep] = list(WizardStep)

# Answer field set by each step
STEP_FIELDS: Dict[WizardStep, str] = {
    WizardStep.GOAL: "goal",
    WizardStep.EXPERIENCE: "experience",
    WizardStep.DAYS: "days_per_week",
    WizardStep.SESSION: "session_length",
    WizardStep.EQUIPMENT: "equipment",
    WizardStep.FOCUS: "focus_muscles",
    WizardStep.SPLIT: "split",
}

DEFAULT_ANSWERS = ProgramWizardAnswers(
    goal=TrainingGoal.HYPERTROPHY,
    experience=Difficulty.INTERMEDIATE,
    days_per_week=4,
    session_length=SessionLength.MEDIUM,
    equipment=["Barbell", "Dumbbell", "Bodyweight"],
    focus_muscles=[],
    split=SplitType.AUTO,
)


class WizardError(Exception):
    """Invalid wizard transition or answer."""

    pass


class ProgramWizard:
    """
    Linear questionnaire producing ProgramWizardAnswers.

    Each call to answer() records the value for the current step and moves
    to the next one. Answers are validated with the ProgramWizardAnswers
    model, so an invalid value leaves the wizard on the same step.
    """

    def __init__(
        self,
        generator: ProgramGenerator,
        answers: Optional[ProgramWizardAnswers] = None,
    ):
        self._generator = generator
        self._answers = answers or DEFAULT_ANSWERS
        self._index = 0
        self._preview: Optional[GeneratedProgram] = None

    @property
    def step(self) -> WizardStep:
        return STEPS[self._index]

    @property
    def answers(self) -> ProgramWizardAnswers:
        return self._answers

    @property
    def preview(self) -> Optional[GeneratedProgram]:
        return self._preview

    @property
    def progress(self) -> float:
        """Fraction of steps reached, from 1/8 at goal to 1.0 at review."""
        return (self._index + 1) / len(STEPS)

    @property
    def suggested_split(self) -> SplitType:
        return suggest_split(self._answers.days_per_week, self._answers.experience)

    def answer(self, value: Any = None) -> WizardStep:
        """
        Record the answer for the current step and advance.

        Args:
            value: Answer for the current step; None keeps the current value

        Returns:
            The new current step

        Raises:
            WizardError: If the wizard is already at review or the value is
                invalid for this step
        """
        if self.step == WizardStep.REVIEW:
            raise WizardError("The wizard is complete; use back() to change answers")

        answers = self._answers
        if value is not None:
            data = answers.model_dump()
            data[STEP_FIELDS[self.step]] = value
            try:
                answers = ProgramWizardAnswers.model_validate(data)
            except ValidationError as e:
                raise WizardError(f"Invalid answer for {self.step.value}: {e}") from e

        if self.step == WizardStep.EQUIPMENT and not answers.equipment:
            raise WizardError("Select at least one piece of equipment")

        self._answers = answers
        self._index += 1
        self._preview = None
        return self.step

    def back(self) -> WizardStep:
        """
        Return to the previous step.

        Raises:
            WizardError: If already at the first step
        """
        if self._index == 0:
            raise WizardError("Already at the first step")
        self._index -= 1
        self._preview = None
        return self.step

    async def generate(self) -> GeneratedProgram:
        """
        Generate the preview program from the collected answers.

        Raises:
            WizardError: If the wizard has not reached review
            ProgramGenerationError: If no exercises match the answers
        """
        if self.step != WizardStep.REVIEW:
            raise WizardError(
                f"Cannot generate before review (current step: {self.step.value})"
            )
        self._preview = await self._generator.generate(self._answers)
        logger.info(f"Wizard generated program: {self._preview.name}")
        return self._preview

    async def regenerate(self) -> GeneratedProgram:
        """Generate again with identical answers."""
        if self._preview is None:
            raise WizardError("Nothing to regenerate; call generate() first")
        return await self.generate()

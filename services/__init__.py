"""
Services package for the progression engine.

Contains business logic services for:
- Exercise history aggregation
- Progression suggestions and deload detection
- Adaptation analysis (generic and bodyweight)
- Program generation, defaults and the wizard state machine
- Exercise catalog access with remote fallback
"""

from services.adaptation_analyzer import AdaptationAnalyzer
from services.bodyweight_adaptation import (
    analyze_bodyweight_adaptation,
    get_bodyweight_progression_path,
    is_bodyweight_exercise,
)
from services.catalog_provider import CatalogProvider
from services.exercise_catalog import EQUIPMENT_PRESETS, ExerciseCatalog, expand_equipment
from services.history_aggregator import (
    build_exercise_history,
    build_multi_exercise_history,
    load_exercise_history,
    load_multi_exercise_history,
)
from services.program_generator import (
    ProgramGenerationError,
    ProgramGenerator,
    resolve_split,
    suggest_split,
)
from services.program_wizard import ProgramWizard, WizardError, WizardStep
from services.progression_engine import ProgressionEngine

__all__ = [
    # Adaptation
    "AdaptationAnalyzer",
    "analyze_bodyweight_adaptation",
    "get_bodyweight_progression_path",
    "is_bodyweight_exercise",
    # Catalog
    "CatalogProvider",
    "EQUIPMENT_PRESETS",
    "ExerciseCatalog",
    "expand_equipment",
    # History
    "build_exercise_history",
    "build_multi_exercise_history",
    "load_exercise_history",
    "load_multi_exercise_history",
    # Program Generation
    "ProgramGenerationError",
    "ProgramGenerator",
    "resolve_split",
    "suggest_split",
    # Wizard
    "ProgramWizard",
    "WizardError",
    "WizardStep",
    # Progression
    "ProgressionEngine",
]

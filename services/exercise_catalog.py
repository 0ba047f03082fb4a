"""
Exercise catalog service.

Wraps a snapshot of exercises (static library or ExerciseDB) with the
lookups and filters used by program generation and adaptation analysis:
- Equipment, difficulty, muscle and category filters
- Equipment preset expansion
- Progression graph lookups (easier/harder/alternative variations)
"""

from typing import Dict, Iterable, Iterator, List, Optional, Set

from infrastructure.static_catalog import BODYWEIGHT_PROGRESSIONS
from models.exercise import Difficulty, Exercise, ExerciseCategory, ProgressionEdges


# Equipment presets offered by the wizard
EQUIPMENT_PRESETS: Dict[str, List[str]] = {
    "bodyweight": ["Bodyweight"],
    "home_basic": ["Bodyweight", "Dumbbell", "Resistance Band", "Kettlebell"],
    "home_complete": [
        "Bodyweight",
        "Barbell",
        "Dumbbell",
        "Kettlebell",
        "Resistance Band",
        "EZ Bar",
    ],
    "commercial_gym": [
        "Bodyweight",
        "Barbell",
        "Dumbbell",
        "Cable",
        "Machine",
        "Kettlebell",
        "EZ Bar",
        "Smith Machine",
        "Resistance Band",
        "Trap Bar",
        "Medicine Ball",
        "Ab Wheel",
        "Stability Ball",
        "Suspension",
        "Sled",
    ],
}

# Difficulty tiers unlocked by each experience level
ALLOWED_DIFFICULTIES: Dict[Difficulty, Set[Difficulty]] = {
    Difficulty.BEGINNER: {Difficulty.BEGINNER},
    Difficulty.INTERMEDIATE: {Difficulty.BEGINNER, Difficulty.INTERMEDIATE},
    Difficulty.ADVANCED: {
        Difficulty.BEGINNER,
        Difficulty.INTERMEDIATE,
        Difficulty.ADVANCED,
    },
}

TRAINING_CATEGORIES = (
    ExerciseCategory.COMPOUND,
    ExerciseCategory.ISOLATION,
    ExerciseCategory.CARDIO,
)


def expand_equipment(equipment: Iterable[str]) -> List[str]:
    """
    Expand preset names into their equipment lists.

    Unknown names are kept as-is. Order is preserved and duplicates dropped.

    Args:
        equipment: Raw equipment names (may include preset keys)

    Returns:
        Flat list of equipment names
    """
    expanded: List[str] = []
    for item in equipment:
        key = item.strip().lower().replace(" ", "_")
        names = EQUIPMENT_PRESETS.get(key, [item])
        for name in names:
            if name not in expanded:
                expanded.append(name)
    return expanded


def _folded(values: Iterable[str]) -> Set[str]:
    return {value.casefold() for value in values}


class ExerciseCatalog:
    """
    Immutable, indexed view over a list of exercises.

    Catalog order is preserved by every filter so that selection built on
    top of it stays deterministic.
    """

    def __init__(
        self,
        exercises: Iterable[Exercise],
        progressions: Optional[Dict[str, ProgressionEdges]] = None,
    ):
        """
        Initialize the catalog.

        Args:
            exercises: Exercises in catalog order (first occurrence of an id wins)
            progressions: Progression graph used for exercises without their
                own edges (default: built-in bodyweight graph)
        """
        self._exercises: List[Exercise] = []
        self._by_id: Dict[str, Exercise] = {}
        for exercise in exercises:
            if exercise.id in self._by_id:
                continue
            self._by_id[exercise.id] = exercise
            self._exercises.append(exercise)

        self._progressions = (
            progressions if progressions is not None else BODYWEIGHT_PROGRESSIONS
        )

    def __len__(self) -> int:
        return len(self._exercises)

    def __iter__(self) -> Iterator[Exercise]:
        return iter(self._exercises)

    def __contains__(self, exercise_id: object) -> bool:
        return exercise_id in self._by_id

    @property
    def exercises(self) -> List[Exercise]:
        return list(self._exercises)

    def get(self, exercise_id: str) -> Optional[Exercise]:
        return self._by_id.get(exercise_id)

    def get_progression(self, exercise_id: str) -> Optional[ProgressionEdges]:
        """Progression edges of an exercise, from the exercise or the graph."""
        exercise = self._by_id.get(exercise_id)
        if exercise is not None and exercise.progression is not None:
            return exercise.progression
        return self._progressions.get(exercise_id)

    # -------------------------------------------------------------------------
    # Filters
    # -------------------------------------------------------------------------

    def filter_by_equipment(self, equipment: Iterable[str]) -> List[Exercise]:
        """Exercises using at least one of the given equipment (presets expanded)."""
        available = _folded(expand_equipment(equipment))
        if not available:
            return []
        return [
            ex for ex in self._exercises
            if _folded(ex.equipment) & available
        ]

    def filter_by_difficulty(
        self,
        level: Difficulty,
        exercises: Optional[Iterable[Exercise]] = None,
    ) -> List[Exercise]:
        """Exercises whose difficulty is unlocked by the given experience level."""
        allowed = ALLOWED_DIFFICULTIES[Difficulty(level)]
        source = self._exercises if exercises is None else exercises
        return [ex for ex in source if ex.difficulty in allowed]

    def filter_by_category(self, *categories: ExerciseCategory) -> List[Exercise]:
        wanted = set(categories)
        return [ex for ex in self._exercises if ex.category in wanted]

    def training_pool(
        self,
        equipment: Iterable[str],
        level: Difficulty,
    ) -> List[Exercise]:
        """
        Exercises eligible for the main block of a session.

        Args:
            equipment: Available equipment (presets allowed)
            level: User's experience level

        Returns:
            Compound, isolation and cardio exercises matching both filters
        """
        by_equipment = self.filter_by_equipment(equipment)
        by_level = self.filter_by_difficulty(level, by_equipment)
        return [ex for ex in by_level if ex.category in TRAINING_CATEGORIES]

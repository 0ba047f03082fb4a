"""
HTTP client for the ExerciseDB API (RapidAPI).

Fetches the remote exercise catalog and converts API records into the
engine's Exercise model. API terms allow real-time access only with at
most one hour of in-memory caching; caching is done by the catalog
provider, not here.
"""

import logging
from typing import Dict, List, Optional

import httpx
from pydantic import BaseModel, Field

from models.exercise import Difficulty, Exercise, ExerciseCategory

logger = logging.getLogger(__name__)

DEFAULT_HOST = "edb-with-videos-and-images-by-ascendapi.p.rapidapi.com"
PAGE_SIZE = 100
MAX_PAGES = 50


# =============================================================================
# API -> app mappings
# =============================================================================

BODY_PART_TO_MUSCLE: Dict[str, str] = {
    "CHEST": "Chest",
    "BACK": "Back",
    "SHOULDERS": "Shoulders",
    "BICEPS": "Biceps",
    "TRICEPS": "Triceps",
    "UPPER ARMS": "Biceps",
    "FOREARMS": "Forearms",
    "THIGHS": "Quads",
    "QUADRICEPS": "Quads",
    "HAMSTRINGS": "Hamstrings",
    "HIPS": "Glutes",
    "CALVES": "Calves",
    "WAIST": "Core",
    "NECK": "Shoulders",
    "FULL BODY": "Full Body",
    "HANDS": "Forearms",
    "FEET": "Calves",
    "FACE": "Core",
}

TARGET_MUSCLE_TO_GROUP: Dict[str, str] = {
    "PECTORALIS MAJOR STERNAL HEAD": "Chest",
    "PECTORALIS MAJOR CLAVICULAR HEAD": "Chest",
    "ANTERIOR DELTOID": "Shoulders",
    "LATERAL DELTOID": "Shoulders",
    "POSTERIOR DELTOID": "Shoulders",
    "LATISSIMUS DORSI": "Back",
    "TRAPEZIUS LOWER FIBERS": "Back",
    "TRAPEZIUS MIDDLE FIBERS": "Back",
    "TRAPEZIUS UPPER FIBERS": "Back",
    "ERECTOR SPINAE": "Back",
    "TERES MAJOR": "Back",
    "TERES MINOR": "Back",
    "INFRASPINATUS": "Back",
    "SUBSCAPULARIS": "Back",
    "LEVATOR SCAPULAE": "Back",
    "SPLENIUS": "Back",
    "BICEPS BRACHII": "Biceps",
    "BRACHIALIS": "Biceps",
    "BRACHIORADIALIS": "Forearms",
    "WRIST FLEXORS": "Forearms",
    "WRIST EXTENSORS": "Forearms",
    "TRICEPS BRACHII": "Triceps",
    "QUADRICEPS": "Quads",
    "SARTORIUS": "Quads",
    "HAMSTRINGS": "Hamstrings",
    "POPLITEUS": "Hamstrings",
    "GLUTEUS MAXIMUS": "Glutes",
    "GLUTEUS MEDIUS": "Glutes",
    "GLUTEUS MINIMUS": "Glutes",
    "ADDUCTOR LONGUS": "Glutes",
    "ADDUCTOR BREVIS": "Glutes",
    "ADDUCTOR MAGNUS": "Glutes",
    "TENSOR FASCIAE LATAE": "Glutes",
    "PECTINEUS": "Glutes",
    "GRACILIS": "Glutes",
    "DEEP HIP EXTERNAL ROTATORS": "Glutes",
    "GASTROCNEMIUS": "Calves",
    "SOLEUS": "Calves",
    "TIBIALIS ANTERIOR": "Calves",
    "RECTUS ABDOMINIS": "Core",
    "OBLIQUES": "Core",
    "TRANSVERSUS ABDOMINIS": "Core",
    "ILIOPSOAS": "Core",
    "SERRATUS ANTERIOR": "Core",
    "SERRATUS ANTE": "Core",
    "STERNOCLEIDOMASTOID": "Core",
}

EQUIPMENT_MAP: Dict[str, str] = {
    "ASSISTED": "Assisted",
    "BAND": "Resistance Band",
    "BARBELL": "Barbell",
    "BATTLING ROPE": "Battle Rope",
    "BODY WEIGHT": "Bodyweight",
    "BOSU BALL": "Bosu Ball",
    "CABLE": "Cable",
    "DUMBBELL": "Dumbbell",
    "EZ BARBELL": "EZ Bar",
    "HAMMER": "Hammer",
    "KETTLEBELL": "Kettlebell",
    "LEVERAGE MACHINE": "Machine",
    "MEDICINE BALL": "Medicine Ball",
    "OLYMPIC BARBELL": "Barbell",
    "POWER SLED": "Sled",
    "RESISTANCE BAND": "Resistance Band",
    "ROLL": "Foam Roller",
    "ROLLBALL": "Roll Ball",
    "ROPE": "Rope",
    "SLED MACHINE": "Sled",
    "SMITH MACHINE": "Smith Machine",
    "STABILITY BALL": "Stability Ball",
    "STICK": "Stick",
    "SUSPENSION": "Suspension",
    "TRAP BAR": "Trap Bar",
    "VIBRATE PLATE": "Vibrate Plate",
    "WEIGHTED": "Weighted",
    "WHEEL ROLLER": "Ab Wheel",
}


class ApiExercise(BaseModel):
    """Exercise record as returned by ExerciseDB."""

    exercise_id: str = Field(alias="exerciseId")
    name: str
    image_url: Optional[str] = Field(None, alias="imageUrl")
    body_parts: List[str] = Field(default_factory=list, alias="bodyParts")
    equipments: List[str] = Field(default_factory=list)
    exercise_type: str = Field("STRENGTH", alias="exerciseType")
    target_muscles: List[str] = Field(default_factory=list, alias="targetMuscles")
    secondary_muscles: List[str] = Field(default_factory=list, alias="secondaryMuscles")
    keywords: List[str] = Field(default_factory=list)


# =============================================================================
# Conversion
# =============================================================================


def title_case(value: str) -> str:
    """Title-case each space-separated word ("BARBELL BENCH" -> "Barbell Bench")."""
    return " ".join(word[:1].upper() + word[1:] for word in value.lower().split(" "))


def _mapped_groups(api_ex: ApiExercise) -> List[str]:
    groups: List[str] = []
    for body_part in api_ex.body_parts:
        group = BODY_PART_TO_MUSCLE.get(body_part.upper())
        if group and group not in groups:
            groups.append(group)
    for muscle in api_ex.target_muscles:
        group = TARGET_MUSCLE_TO_GROUP.get(muscle.upper())
        if group and group not in groups:
            groups.append(group)
    return groups


def infer_category(api_ex: ApiExercise) -> ExerciseCategory:
    """Cardio types map to cardio; two or more muscle groups make a compound."""
    exercise_type = api_ex.exercise_type.upper()
    if exercise_type in ("CARDIO", "AEROBIC"):
        return ExerciseCategory.CARDIO
    if len(_mapped_groups(api_ex)) >= 2:
        return ExerciseCategory.COMPOUND
    return ExerciseCategory.ISOLATION


def infer_difficulty(api_ex: ApiExercise) -> Difficulty:
    exercise_type = api_ex.exercise_type.upper()
    if exercise_type in ("STRETCHING", "YOGA"):
        return Difficulty.BEGINNER
    if exercise_type in ("PLYOMETRICS", "WEIGHTLIFTING"):
        return Difficulty.ADVANCED

    has_barbell = any("BARBELL" in e.upper() for e in api_ex.equipments)
    if has_barbell and infer_category(api_ex) == ExerciseCategory.COMPOUND:
        return Difficulty.INTERMEDIATE
    return Difficulty.BEGINNER


def get_muscle_groups(api_ex: ApiExercise) -> List[str]:
    return _mapped_groups(api_ex) or ["Full Body"]


def get_equipment(api_ex: ApiExercise) -> List[str]:
    equipment: List[str] = []
    for name in api_ex.equipments:
        mapped = EQUIPMENT_MAP.get(name.upper(), name)
        if mapped not in equipment:
            equipment.append(mapped)
    return equipment


def api_to_exercise(api_ex: ApiExercise) -> Exercise:
    """
    Convert an ExerciseDB record into an Exercise.

    Args:
        api_ex: Parsed API record

    Returns:
        Exercise with inferred category, difficulty and muscle groups
    """
    return Exercise(
        id=api_ex.exercise_id,
        name=title_case(api_ex.name),
        category=infer_category(api_ex),
        muscle_groups=get_muscle_groups(api_ex),
        equipment=get_equipment(api_ex),
        difficulty=infer_difficulty(api_ex),
        image_url=api_ex.image_url or None,
        secondary_muscles=[
            TARGET_MUSCLE_TO_GROUP.get(m.upper(), title_case(m))
            for m in api_ex.secondary_muscles
        ],
    )


# =============================================================================
# Client
# =============================================================================


class ExerciseDBError(Exception):
    """Base exception for ExerciseDB client errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ExerciseDBUnavailable(ExerciseDBError):
    """Raised when ExerciseDB cannot be reached."""

    pass


class ExerciseDBClient:
    """
    HTTP client for ExerciseDB.

    Implements the ExerciseCatalogSource port.
    """

    def __init__(
        self,
        api_key: str,
        host: str = DEFAULT_HOST,
        timeout: float = 30.0,
        page_size: int = PAGE_SIZE,
    ):
        """
        Initialize the ExerciseDB client.

        Args:
            api_key: RapidAPI key
            host: RapidAPI host of the ExerciseDB API
            timeout: Request timeout in seconds
            page_size: Exercises requested per page
        """
        self._api_key = api_key
        self._host = host
        self._base_url = f"https://{host}/api/v1"
        self._timeout = timeout
        self._page_size = page_size

    @property
    def _headers(self) -> Dict[str, str]:
        return {
            "X-RapidAPI-Key": self._api_key,
            "X-RapidAPI-Host": self._host,
        }

    async def fetch_all_exercises(self) -> List[Exercise]:
        """
        Fetch every exercise, following pagination.

        Returns:
            List of converted exercises

        Raises:
            ExerciseDBUnavailable: If the API is not reachable or times out
            ExerciseDBError: If the API returns an error response
        """
        url = f"{self._base_url}/exercises"
        records: List[ApiExercise] = []
        offset = 0

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                for _ in range(MAX_PAGES):
                    response = await client.get(
                        url,
                        params={"limit": self._page_size, "offset": offset},
                        headers=self._headers,
                    )

                    if response.status_code != 200:
                        logger.error(
                            f"ExerciseDB error: {response.status_code} - {response.text}"
                        )
                        raise ExerciseDBError(
                            f"Failed to fetch exercises: {response.status_code}",
                            response.status_code,
                        )

                    body = response.json()
                    if not body.get("success"):
                        break

                    records.extend(ApiExercise.model_validate(item) for item in body.get("data", []))

                    meta = body.get("meta") or {}
                    if not meta.get("hasNextPage"):
                        break
                    offset += self._page_size

        except httpx.ConnectError as e:
            logger.error(f"ExerciseDB unavailable: {e}")
            raise ExerciseDBUnavailable(f"ExerciseDB is not available at {self._host}") from e
        except httpx.TimeoutException as e:
            logger.error(f"ExerciseDB timeout: {e}")
            raise ExerciseDBUnavailable("ExerciseDB request timed out") from e

        logger.info(f"Fetched {len(records)} exercises from ExerciseDB")
        return [api_to_exercise(record) for record in records]


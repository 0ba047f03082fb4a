"""
Built-in exercise library.

Used when the ExerciseDB API is not configured, unavailable, or returns too
few exercises. Also carries the bodyweight progression graph, which the
remote catalog does not provide.
"""

from typing import Dict, List, Tuple

from models.exercise import (
    Difficulty,
    Exercise,
    ExerciseCategory,
    ProgressionEdges,
    ProgressionRef,
)

# (id, name, category, muscle groups, equipment, difficulty)
_ExerciseRow = Tuple[str, str, str, List[str], List[str], str]

_TRAINING_ROWS: List[_ExerciseRow] = [
    # Chest
    ("bench-press", "Bench Press", "compound", ["Chest", "Triceps", "Shoulders"], ["Barbell"], "intermediate"),
    ("incline-bench", "Incline Bench Press", "compound", ["Chest", "Shoulders"], ["Barbell"], "intermediate"),
    ("db-bench", "Dumbbell Bench Press", "compound", ["Chest", "Triceps"], ["Dumbbell"], "beginner"),
    ("db-fly", "Dumbbell Fly", "isolation", ["Chest"], ["Dumbbell"], "beginner"),
    ("cable-crossover", "Cable Crossover", "isolation", ["Chest"], ["Cable"], "beginner"),
    ("push-ups", "Push-ups", "compound", ["Chest", "Triceps", "Shoulders"], ["Bodyweight"], "beginner"),
    ("dips", "Dips", "compound", ["Chest", "Triceps"], ["Bodyweight"], "intermediate"),
    ("chest-press-machine", "Chest Press Machine", "compound", ["Chest", "Triceps"], ["Machine"], "beginner"),
    ("pec-deck", "Pec Deck", "isolation", ["Chest"], ["Machine"], "beginner"),
    # Back
    ("deadlift", "Deadlift", "compound", ["Back", "Hamstrings", "Glutes"], ["Barbell"], "intermediate"),
    ("barbell-row", "Barbell Row", "compound", ["Back", "Biceps"], ["Barbell"], "intermediate"),
    ("db-row", "Dumbbell Row", "compound", ["Back", "Biceps"], ["Dumbbell"], "beginner"),
    ("pull-ups", "Pull-ups", "compound", ["Back", "Biceps"], ["Bodyweight"], "intermediate"),
    ("inverted-rows", "Inverted Rows", "compound", ["Back", "Biceps"], ["Bodyweight"], "beginner"),
    ("lat-pulldown", "Lat Pulldown", "compound", ["Back", "Biceps"], ["Cable"], "beginner"),
    ("cable-row", "Cable Row", "compound", ["Back", "Biceps"], ["Cable"], "beginner"),
    ("t-bar-row", "T-Bar Row", "compound", ["Back"], ["Barbell"], "intermediate"),
    ("face-pull", "Face Pull", "isolation", ["Shoulders", "Back"], ["Cable"], "beginner"),
    # Shoulders
    ("overhead-press", "Overhead Press", "compound", ["Shoulders", "Triceps"], ["Barbell"], "intermediate"),
    ("db-shoulder-press", "Dumbbell Shoulder Press", "compound", ["Shoulders", "Triceps"], ["Dumbbell"], "beginner"),
    ("pike-push-ups", "Pike Push-ups", "compound", ["Shoulders", "Triceps"], ["Bodyweight"], "intermediate"),
    ("lateral-raise", "Lateral Raise", "isolation", ["Shoulders"], ["Dumbbell"], "beginner"),
    ("front-raise", "Front Raise", "isolation", ["Shoulders"], ["Dumbbell"], "beginner"),
    ("rear-delt-fly", "Rear Delt Fly", "isolation", ["Shoulders"], ["Dumbbell"], "beginner"),
    ("arnold-press", "Arnold Press", "compound", ["Shoulders"], ["Dumbbell"], "intermediate"),
    # Legs
    ("barbell-squat", "Barbell Squat", "compound", ["Quads", "Glutes", "Hamstrings"], ["Barbell"], "intermediate"),
    ("front-squat", "Front Squat", "compound", ["Quads", "Glutes"], ["Barbell"], "advanced"),
    ("leg-press", "Leg Press", "compound", ["Quads", "Glutes"], ["Machine"], "beginner"),
    ("lunges", "Lunges", "compound", ["Quads", "Glutes", "Hamstrings"], ["Dumbbell", "Bodyweight"], "beginner"),
    ("bulgarian-split", "Bulgarian Split Squat", "compound", ["Quads", "Glutes"], ["Dumbbell"], "intermediate"),
    ("leg-extension", "Leg Extension", "isolation", ["Quads"], ["Machine"], "beginner"),
    ("leg-curl", "Leg Curl", "isolation", ["Hamstrings"], ["Machine"], "beginner"),
    ("rdl", "Romanian Deadlift", "compound", ["Hamstrings", "Glutes"], ["Barbell", "Dumbbell"], "intermediate"),
    ("hip-thrust", "Hip Thrust", "compound", ["Glutes", "Hamstrings"], ["Barbell"], "intermediate"),
    ("calf-raise", "Calf Raise", "isolation", ["Calves"], ["Machine", "Bodyweight"], "beginner"),
    ("goblet-squat", "Goblet Squat", "compound", ["Quads", "Glutes"], ["Dumbbell", "Kettlebell"], "beginner"),
    ("bodyweight-squat", "Bodyweight Squat", "compound", ["Quads", "Glutes", "Hamstrings"], ["Bodyweight"], "beginner"),
    ("pistol-squats", "Pistol Squats", "compound", ["Quads", "Glutes"], ["Bodyweight"], "advanced"),
    # Arms
    ("bicep-curl", "Bicep Curl", "isolation", ["Biceps"], ["Dumbbell"], "beginner"),
    ("barbell-curl", "Barbell Curl", "isolation", ["Biceps"], ["Barbell"], "beginner"),
    ("hammer-curl", "Hammer Curl", "isolation", ["Biceps", "Forearms"], ["Dumbbell"], "beginner"),
    ("cable-curl", "Cable Curl", "isolation", ["Biceps"], ["Cable"], "beginner"),
    ("tricep-extension", "Tricep Extension", "isolation", ["Triceps"], ["Dumbbell"], "beginner"),
    ("tricep-pushdown", "Tricep Pushdown", "isolation", ["Triceps"], ["Cable"], "beginner"),
    ("skullcrusher", "Skull Crushers", "isolation", ["Triceps"], ["Barbell"], "intermediate"),
    ("close-grip-bench", "Close-Grip Bench Press", "compound", ["Triceps", "Chest"], ["Barbell"], "intermediate"),
    # Core
    ("plank", "Plank", "isolation", ["Core"], ["Bodyweight"], "beginner"),
    ("crunches", "Crunches", "isolation", ["Core"], ["Bodyweight"], "beginner"),
    ("hanging-leg-raise", "Hanging Leg Raise", "isolation", ["Core"], ["Bodyweight"], "intermediate"),
    ("cable-woodchop", "Cable Woodchop", "isolation", ["Core"], ["Cable"], "beginner"),
    ("ab-wheel", "Ab Wheel Rollout", "isolation", ["Core"], ["Ab Wheel"], "intermediate"),
    ("russian-twist", "Russian Twist", "isolation", ["Core"], ["Bodyweight"], "beginner"),
    # Conditioning
    ("burpees", "Burpees", "compound", ["Full Body"], ["Bodyweight"], "intermediate"),
    ("mountain-climbers", "Mountain Climbers", "cardio", ["Core", "Full Body"], ["Bodyweight"], "beginner"),
]

# (id, name, category, muscle groups, duration seconds)
_MOBILITY_ROWS: List[Tuple[str, str, str, List[str], int]] = [
    # Warmups
    ("jumping-jacks", "Jumping Jacks", "warmup", ["Full Body"], 60),
    ("arm-circles", "Arm Circles", "warmup", ["Shoulders"], 30),
    ("leg-swings", "Leg Swings", "warmup", ["Hamstrings", "Quads"], 30),
    ("hip-circles", "Hip Circles", "warmup", ["Glutes"], 30),
    ("torso-twists", "Torso Twists", "warmup", ["Core"], 30),
    ("high-knees", "High Knees", "warmup", ["Quads", "Core"], 30),
    ("butt-kicks", "Butt Kicks", "warmup", ["Hamstrings"], 30),
    ("inchworms", "Inchworms", "warmup", ["Full Body"], 60),
    # Stretches
    ("quad-stretch", "Quad Stretch", "stretch", ["Quads"], 30),
    ("hamstring-stretch", "Hamstring Stretch", "stretch", ["Hamstrings"], 30),
    ("calf-stretch", "Calf Stretch", "stretch", ["Calves"], 30),
    ("hip-flexor-stretch", "Hip Flexor Stretch", "stretch", ["Glutes"], 30),
    ("chest-stretch", "Chest Stretch", "stretch", ["Chest"], 30),
    ("shoulder-stretch", "Shoulder Stretch", "stretch", ["Shoulders"], 30),
    ("tricep-stretch", "Tricep Stretch", "stretch", ["Triceps"], 30),
    ("cat-cow-stretch", "Cat-Cow Stretch", "stretch", ["Back", "Core"], 60),
    ("childs-pose", "Child's Pose", "stretch", ["Back", "Shoulders"], 60),
    ("pigeon-pose", "Pigeon Pose", "stretch", ["Glutes", "Hamstrings"], 60),
    ("cobra-stretch", "Cobra Stretch", "stretch", ["Back", "Core"], 30),
    ("seated-spinal-twist", "Seated Spinal Twist", "stretch", ["Back", "Core"], 30),
]

# Isometric holds measured in seconds rather than reps
_TIMED_DURATIONS: Dict[str, int] = {
    "plank": 45,
}


def _ref(exercise_id: str, name: str) -> ProgressionRef:
    return ProgressionRef(id=exercise_id, name=name)


# Bodyweight progression graph, keyed by exercise id
BODYWEIGHT_PROGRESSIONS: Dict[str, ProgressionEdges] = {
    # Push-ups
    "push-ups": ProgressionEdges(
        easier=_ref("incline-push-ups", "Incline Push-ups"),
        harder=_ref("diamond-push-ups", "Diamond Push-ups"),
        alternatives=[
            _ref("wide-push-ups", "Wide Push-ups"),
            _ref("decline-push-ups", "Decline Push-ups"),
        ],
    ),
    "incline-push-ups": ProgressionEdges(
        harder=_ref("push-ups", "Push-ups"),
        alternatives=[
            _ref("wall-push-ups", "Wall Push-ups"),
            _ref("knee-push-ups", "Knee Push-ups"),
        ],
    ),
    "diamond-push-ups": ProgressionEdges(
        easier=_ref("push-ups", "Push-ups"),
        harder=_ref("one-arm-push-ups", "One-Arm Push-ups"),
    ),
    "one-arm-push-ups": ProgressionEdges(
        easier=_ref("diamond-push-ups", "Diamond Push-ups"),
        alternatives=[
            _ref("archer-push-ups", "Archer Push-ups"),
            _ref("pseudo-planche-push-ups", "Pseudo Planche Push-ups"),
        ],
    ),
    # Pull-ups
    "pull-ups": ProgressionEdges(
        easier=_ref("assisted-pull-ups", "Assisted Pull-ups"),
        harder=_ref("weighted-pull-ups", "Weighted Pull-ups"),
        alternatives=[
            _ref("chin-ups", "Chin-ups"),
            _ref("neutral-grip-pull-ups", "Neutral Grip Pull-ups"),
        ],
    ),
    "assisted-pull-ups": ProgressionEdges(
        easier=_ref("negative-pull-ups", "Negative Pull-ups"),
        harder=_ref("pull-ups", "Pull-ups"),
    ),
    "negative-pull-ups": ProgressionEdges(
        easier=_ref("inverted-rows", "Inverted Rows"),
        harder=_ref("assisted-pull-ups", "Assisted Pull-ups"),
    ),
    # Dips
    "dips": ProgressionEdges(
        easier=_ref("bench-dips", "Bench Dips"),
        harder=_ref("weighted-dips", "Weighted Dips"),
        alternatives=[
            _ref("ring-dips", "Ring Dips"),
            _ref("korean-dips", "Korean Dips"),
        ],
    ),
    "bench-dips": ProgressionEdges(
        easier=_ref("assisted-dips", "Assisted Dips"),
        harder=_ref("dips", "Dips"),
    ),
    # Squats
    "bodyweight-squat": ProgressionEdges(
        harder=_ref("jump-squats", "Jump Squats"),
        alternatives=[
            _ref("goblet-squat", "Goblet Squat"),
            _ref("sumo-squat", "Sumo Squat"),
        ],
    ),
    "jump-squats": ProgressionEdges(
        easier=_ref("bodyweight-squat", "Bodyweight Squat"),
        harder=_ref("pistol-squats", "Pistol Squats"),
    ),
    "pistol-squats": ProgressionEdges(
        easier=_ref("assisted-pistol-squats", "Assisted Pistol Squats"),
        alternatives=[
            _ref("shrimp-squats", "Shrimp Squats"),
            _ref("sissy-squats", "Sissy Squats"),
        ],
    ),
    "assisted-pistol-squats": ProgressionEdges(
        easier=_ref("bulgarian-split", "Bulgarian Split Squat"),
        harder=_ref("pistol-squats", "Pistol Squats"),
    ),
    # Lunges
    "lunges": ProgressionEdges(
        harder=_ref("jumping-lunges", "Jumping Lunges"),
        alternatives=[
            _ref("reverse-lunges", "Reverse Lunges"),
            _ref("walking-lunges", "Walking Lunges"),
        ],
    ),
    "bulgarian-split": ProgressionEdges(
        easier=_ref("lunges", "Lunges"),
        harder=_ref("assisted-pistol-squats", "Assisted Pistol Squats"),
    ),
    # Core
    "plank": ProgressionEdges(
        easier=_ref("knee-plank", "Knee Plank"),
        harder=_ref("weighted-plank", "Weighted Plank"),
        alternatives=[
            _ref("side-plank", "Side Plank"),
            _ref("plank-to-push-up", "Plank to Push-up"),
        ],
    ),
    "hollow-hold": ProgressionEdges(
        easier=_ref("dead-bug", "Dead Bug"),
        harder=_ref("dragon-flag", "Dragon Flag"),
    ),
    "hanging-leg-raise": ProgressionEdges(
        easier=_ref("knee-raises", "Knee Raises"),
        harder=_ref("toes-to-bar", "Toes to Bar"),
    ),
    # Rows
    "inverted-rows": ProgressionEdges(
        easier=_ref("elevated-rows", "Elevated Rows"),
        harder=_ref("archer-rows", "Archer Rows"),
    ),
    "archer-rows": ProgressionEdges(
        easier=_ref("inverted-rows", "Inverted Rows"),
        harder=_ref("one-arm-rows", "One-Arm Rows"),
    ),
}


def _build_training_exercise(row: _ExerciseRow) -> Exercise:
    exercise_id, name, category, muscles, equipment, difficulty = row
    duration = _TIMED_DURATIONS.get(exercise_id)
    return Exercise(
        id=exercise_id,
        name=name,
        category=ExerciseCategory(category),
        muscle_groups=muscles,
        equipment=equipment,
        difficulty=Difficulty(difficulty),
        is_timed=duration is not None,
        duration=duration,
        progression=BODYWEIGHT_PROGRESSIONS.get(exercise_id),
    )


def _build_mobility_exercise(row: Tuple[str, str, str, List[str], int]) -> Exercise:
    exercise_id, name, category, muscles, duration = row
    return Exercise(
        id=exercise_id,
        name=name,
        category=ExerciseCategory(category),
        muscle_groups=muscles,
        equipment=["Bodyweight"],
        difficulty=Difficulty.BEGINNER,
        is_timed=True,
        duration=duration,
    )


STATIC_EXERCISES: List[Exercise] = [
    *(_build_training_exercise(row) for row in _TRAINING_ROWS),
    *(_build_mobility_exercise(row) for row in _MOBILITY_ROWS),
]

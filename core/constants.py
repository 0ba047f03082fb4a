"""
Shared constants for the progression engine.

This module has no dependencies on models or services to avoid circular imports.
"""

# -----------------------------------------------------------------------------
# History aggregation
# -----------------------------------------------------------------------------

# Workouts scanned when building exercise history
HISTORY_WORKOUT_LIMIT = 50

# Sessions kept per exercise
HISTORY_SESSION_LIMIT = 10

# RIR assumed for sets logged without one
DEFAULT_RIR = 1

# -----------------------------------------------------------------------------
# Progression suggestions
# -----------------------------------------------------------------------------

FAILURE_REPS_RATIO = 0.9
DELOAD_FAILURE_STREAK = 3
DELOAD_WEIGHT_RATIO = 0.85
PROGRESSION_WEIGHT_INCREASE = 1.025
PROGRESSION_WEIGHT_DECREASE = 0.95
PROGRESSION_MIN_RIR = 2

# -----------------------------------------------------------------------------
# Deload detection
# -----------------------------------------------------------------------------

DELOAD_SESSION_LIMIT = 20
DELOAD_MIN_SESSIONS = 6
DELOAD_WINDOW_SIZE = 5
DELOAD_VOLUME_DROP_RATIO = 0.85
DELOAD_MIN_COMPLETION = 0.75
DELOAD_STREAK_DAYS = 28
DELOAD_STREAK_SESSIONS = 12
DELOAD_PROACTIVE_SESSIONS = 16

# -----------------------------------------------------------------------------
# Adaptation analysis
# -----------------------------------------------------------------------------

ADAPTATION_MIN_SESSIONS = 3
ADAPTATION_SWAP_MIN_SESSIONS = 8
PLATEAU_THRESHOLD = 0.05
DECLINE_RATIO = 0.85
REST_STEP_SECONDS = 15
MIN_REST_SECONDS = 30
DELOAD_REST_SECONDS = 120

# -----------------------------------------------------------------------------
# Program generation
# -----------------------------------------------------------------------------

MAX_FOCUS_MUSCLES = 3
MAX_LABEL_LENGTH = 50
MAX_WARMUPS_PER_DAY = 3
MAX_STRETCHES_PER_DAY = 5
FULL_BODY_MAX_EXERCISES = 7
PRIORITY_COMPOUND_SHARE = 0.6
PRIORITY_ISOLATION_SHARE = 0.7

# -----------------------------------------------------------------------------
# Exercise catalog
# -----------------------------------------------------------------------------

# Remote catalogs smaller than this are discarded in favour of the static library
MIN_REMOTE_CATALOG_SIZE = 20

# Kept under the provider's one hour caching limit
CATALOG_CACHE_TTL_SECONDS = 55 * 60
CATALOG_CACHE_MAX_SIZE = 50

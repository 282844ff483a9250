"""
SM-2 Constants and Parameters

All tunable numbers for the scheduling algorithm in one place, keyed by age
group where the behaviour differs for younger learners.
"""

from review_engine.schemas import AgeGroup


# ---- Interval Bounds (days) ----

MINIMUM_INTERVAL = 1
MAXIMUM_INTERVAL = 180   # ~6 months


# ---- Ease Factor ----

DEFAULT_EASE_FACTOR = 2.5
MIN_EASE_FACTOR = 1.3
MAX_EASE_FACTOR = 4.0


# ---- Quality Scale ----

MIN_QUALITY = 0
MAX_QUALITY = 5
PASSING_QUALITY = 3      # quality >= 3 counts as successful recall

FAST_RESPONSE_MS = 3000  # perfect recall threshold
STEADY_RESPONSE_MS = 8000


# ---- Early Review Steps ----
# Fixed intervals (before age scaling) for the second and third exposure

SECOND_REVIEW_INTERVAL = 1
THIRD_REVIEW_INTERVAL = 6
FAILURE_INTERVAL_FACTOR = 0.5


# ---- Retention Strength ----

DEFAULT_RETENTION_STRENGTH = 0.5
STREAK_BONUS_PER_REVIEW = 0.05
MAX_STREAK_BONUS = 0.3
RECENCY_PENALTY_PER_DAY = 0.01
MAX_RECENCY_PENALTY = 0.3


# ---- Age-Specific Tables ----

# Younger children get shorter intervals
AGE_MULTIPLIERS = {
    AgeGroup.PRESCHOOL: 0.7,
    AgeGroup.EARLY: 0.85,
    AgeGroup.OLDER: 1.0,
}

# Session pacing (cards per minute)
CARDS_PER_MINUTE = {
    AgeGroup.PRESCHOOL: 2,
    AgeGroup.EARLY: 3,
    AgeGroup.OLDER: 4,
}

TARGET_RETENTION = {
    AgeGroup.PRESCHOOL: 0.75,
    AgeGroup.EARLY: 0.80,
    AgeGroup.OLDER: 0.85,
}

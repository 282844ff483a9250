"""
SM-2 - Spaced repetition scheduling for young learners

SM-2 derivative with objective quality scoring and age-scaled intervals:
- Quality derived from correctness, response time and hints used
- Ease factor and interval updates bounded to safe ranges
- Retention strength estimate for sorting and reporting

Quick start:
    from review_engine import sm2

    card = sm2.schedule_new_card("add-1", "quiz", "mathematics", 1.0, "6-8")
    result = sm2.ReviewResult(correct=True, response_time=2500, hints_used=0)
    card = sm2.calculate_next_review(card, result, "6-8")
"""

# Core scheduler API
from review_engine.sm2.scheduler import (
    age_multiplier,
    calculate_next_review,
    process_review,
    schedule_new_card,
)

# Building blocks
from review_engine.sm2.interval_updates import calculate_new_interval, update_ease_factor
from review_engine.sm2.quality import ReviewResult, classify_quality
from review_engine.sm2.memory_state import (
    SpacedRepetitionCard,
    calculate_retention_strength,
    round_half_up,
)

# Constants and parameters
from review_engine.sm2.constants import (
    AGE_MULTIPLIERS,
    CARDS_PER_MINUTE,
    DEFAULT_EASE_FACTOR,
    MAX_EASE_FACTOR,
    MAXIMUM_INTERVAL,
    MIN_EASE_FACTOR,
    MINIMUM_INTERVAL,
    TARGET_RETENTION,
)


__all__ = [
    # Core algorithm
    "schedule_new_card",
    "process_review",
    "calculate_next_review",
    "age_multiplier",

    # Building blocks
    "classify_quality",
    "update_ease_factor",
    "calculate_new_interval",
    "calculate_retention_strength",
    "round_half_up",

    # Types
    "SpacedRepetitionCard",
    "ReviewResult",

    # Parameters
    "AGE_MULTIPLIERS",
    "CARDS_PER_MINUTE",
    "TARGET_RETENTION",
    "DEFAULT_EASE_FACTOR",
    "MIN_EASE_FACTOR",
    "MAX_EASE_FACTOR",
    "MINIMUM_INTERVAL",
    "MAXIMUM_INTERVAL",
]

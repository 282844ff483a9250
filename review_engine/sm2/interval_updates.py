"""
Interval Updates

Implements the ease factor and interval updates applied on every review.

Key principles:
- Successful recall grows the interval by the ease factor
- Failure halves the interval instead of resetting it, so repeated failures
  decay gracefully
- Younger learners get proportionally shorter intervals
"""

from __future__ import annotations

from review_engine.exceptions import InvalidArgument
from review_engine.sm2.constants import (
    FAILURE_INTERVAL_FACTOR,
    MAX_EASE_FACTOR,
    MAX_QUALITY,
    MAXIMUM_INTERVAL,
    MIN_EASE_FACTOR,
    MIN_QUALITY,
    MINIMUM_INTERVAL,
    PASSING_QUALITY,
    SECOND_REVIEW_INTERVAL,
    THIRD_REVIEW_INTERVAL,
)
from review_engine.sm2.memory_state import clamp, round_half_up


def _check_quality(quality: int) -> None:
    if not MIN_QUALITY <= quality <= MAX_QUALITY:
        raise InvalidArgument(f"quality must be between {MIN_QUALITY} and {MAX_QUALITY}, got {quality}")


def update_ease_factor(ease_factor: float, quality: int) -> float:
    """
    Update the ease factor after a review.

    Formula (SM-2):
        EF' = EF + (0.1 - (5 - q) * (0.08 + (5 - q) * 0.02))

    Quality 5 adds 0.1, quality 4 leaves EF unchanged, anything lower
    shrinks it. The result is clipped to [1.3, 4.0].

    Args:
        ease_factor: Current ease factor
        quality: Review quality (0-5)

    Returns:
        New ease factor
    """
    _check_quality(quality)

    miss = MAX_QUALITY - quality
    new_ease = ease_factor + (0.1 - miss * (0.08 + miss * 0.02))

    return clamp(new_ease, MIN_EASE_FACTOR, MAX_EASE_FACTOR)


def calculate_new_interval(
    current_interval: int,
    review_count: int,
    quality: int,
    ease_factor: float,
    age_multiplier: float
) -> int:
    """
    Compute the next review interval in days.

    Policy:
    - quality < 3:      max(1, round(I * 0.5 * m))
    - review_count == 1: round(1 * m)
    - review_count == 2: round(6 * m)
    - otherwise:         round(I * EF * m)

    Then clipped to [MINIMUM_INTERVAL, MAXIMUM_INTERVAL].

    Args:
        current_interval: Current interval (I)
        review_count: Reviews completed before this one
        quality: Review quality (0-5)
        ease_factor: Ease factor after this review's update (EF)
        age_multiplier: Age-group interval multiplier (m)

    Returns:
        New interval in days
    """
    _check_quality(quality)

    if quality < PASSING_QUALITY:
        new_interval = max(1, round_half_up(current_interval * FAILURE_INTERVAL_FACTOR * age_multiplier))
    elif review_count == 1:
        new_interval = round_half_up(SECOND_REVIEW_INTERVAL * age_multiplier)
    elif review_count == 2:
        new_interval = round_half_up(THIRD_REVIEW_INTERVAL * age_multiplier)
    else:
        new_interval = round_half_up(current_interval * ease_factor * age_multiplier)

    return int(clamp(new_interval, MINIMUM_INTERVAL, MAXIMUM_INTERVAL))

"""
Memory State - Card State and Retention Strength

Defines the per-learner card record and the derived retention estimate.

Key concepts:
- Interval: days between reviews, grown by the ease factor on success
- Ease factor: how quickly intervals grow for this card
- Retention strength: 0-1 estimate combining success rate, streak and recency
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
import math
import uuid

from review_engine.exceptions import InvalidArgument
from review_engine.schemas import ContentType, Subject
from review_engine.sm2.constants import (
    DEFAULT_EASE_FACTOR,
    DEFAULT_RETENTION_STRENGTH,
    MAX_RECENCY_PENALTY,
    MAX_STREAK_BONUS,
    RECENCY_PENALTY_PER_DAY,
    STREAK_BONUS_PER_REVIEW,
)


SECONDS_PER_DAY = 86400.0


@dataclass(frozen=True)
class SpacedRepetitionCard:
    """
    Scheduling record for one piece of content and one learner.

    Cards are immutable: every review produces a new card and the caller
    stores it as the canonical state.
    """
    id: str
    content_id: str
    content_type: ContentType
    subject: Subject
    difficulty: float

    # Scheduling parameters
    interval: int  # days, MINIMUM_INTERVAL..MAXIMUM_INTERVAL
    ease_factor: float
    review_count: int
    next_review: datetime
    last_reviewed: datetime
    created_at: datetime

    # Performance tracking
    success_streak: int = 0
    total_attempts: int = 0
    total_correct: int = 0
    retention_strength: Optional[float] = DEFAULT_RETENTION_STRENGTH

    def __post_init__(self):
        for name in ("next_review", "last_reviewed", "created_at"):
            value = getattr(self, name)
            if not isinstance(value, datetime):
                raise InvalidArgument(f"{name} must be a datetime, got {value!r}")
            # Stores that drop the timezone hand back naive UTC values
            if value.tzinfo is None:
                object.__setattr__(self, name, value.replace(tzinfo=timezone.utc))
        for name in ("review_count", "success_streak", "total_attempts", "total_correct"):
            if getattr(self, name) < 0:
                raise InvalidArgument(f"{name} must be non-negative, got {getattr(self, name)}")
        if self.total_correct > self.total_attempts:
            raise InvalidArgument(
                f"total_correct ({self.total_correct}) exceeds "
                f"total_attempts ({self.total_attempts})"
            )


def utc_now(now: Optional[datetime] = None) -> datetime:
    """
    Resolve the clock for an engine call.

    Naive datetimes are taken to be UTC.
    """
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def days_between(earlier: datetime, later: datetime) -> float:
    """
    Fractional days from earlier to later (0 if later is before earlier).
    """
    delta = (later - earlier).total_seconds() / SECONDS_PER_DAY
    return max(0.0, delta)


def calculate_retention_strength(
    total_correct: int,
    total_attempts: int,
    success_streak: int,
    days_since_last_review: float
) -> float:
    """
    Estimate how well a card is retained.

    Formula:
        strength = clamp01(success_rate + streak_bonus - recency_penalty)

    Where:
    - success_rate = total_correct / total_attempts (0.5 with no attempts)
    - streak_bonus = min(0.3, streak * 0.05)
    - recency_penalty = min(0.3, days * 0.01), a linear forgetting curve

    The result is descriptive only (sorting and reporting). It never feeds
    back into interval or ease factor updates.

    Args:
        total_correct: Lifetime correct reviews
        total_attempts: Lifetime reviews
        success_streak: Consecutive successful reviews
        days_since_last_review: Staleness at the moment of the review

    Returns:
        Retention strength between 0 and 1
    """
    if total_attempts > 0:
        success_rate = total_correct / total_attempts
    else:
        success_rate = DEFAULT_RETENTION_STRENGTH

    streak_bonus = min(MAX_STREAK_BONUS, success_streak * STREAK_BONUS_PER_REVIEW)
    recency_penalty = min(MAX_RECENCY_PENALTY, days_since_last_review * RECENCY_PENALTY_PER_DAY)

    return clamp(success_rate + streak_bonus - recency_penalty, 0.0, 1.0)


def initialize_new_card(
    content_id: str,
    content_type: ContentType,
    subject: Subject,
    difficulty: float,
    interval: int,
    now: datetime
) -> SpacedRepetitionCard:
    """
    Initialize state for content the learner has just been introduced to.

    Args:
        content_id: Identifier of the content being tracked
        content_type: Kind of content
        subject: Subject area
        difficulty: Content difficulty (carried through, not interpreted)
        interval: First interval in days (already age-scaled)
        now: Scheduling time

    Returns:
        New card with default ease factor and empty history
    """
    return SpacedRepetitionCard(
        id=f"{content_id}_sr_{uuid.uuid4().hex[:12]}",
        content_id=content_id,
        content_type=content_type,
        subject=subject,
        difficulty=difficulty,
        interval=interval,
        ease_factor=DEFAULT_EASE_FACTOR,
        review_count=0,
        next_review=now + timedelta(days=interval),
        last_reviewed=now,
        created_at=now,
        success_streak=0,
        total_attempts=0,
        total_correct=0,
        retention_strength=DEFAULT_RETENTION_STRENGTH,
    )

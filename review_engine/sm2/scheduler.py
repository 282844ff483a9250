"""
Scheduler - SM-2 Algorithm Logic

Pure scheduling and state updates (no storage calls).

Main workflow:
1. Load card state (caller's responsibility)
2. Classify the review outcome into a quality score
3. Update ease factor, then interval
4. Recompute retention strength
5. Return updated card + event data dict

The caller must serialize reviews of the same card: the update reads the
given state and returns a new one, with no compare-and-swap.
"""

from __future__ import annotations
from dataclasses import replace
from datetime import datetime, timedelta
import logging
from typing import Optional, Tuple, Union

from review_engine.schemas import AgeGroup, ContentType, Subject
from review_engine.sm2 import interval_updates, memory_state
from review_engine.sm2.constants import AGE_MULTIPLIERS, PASSING_QUALITY
from review_engine.sm2.memory_state import SpacedRepetitionCard, round_half_up
from review_engine.sm2.quality import ReviewResult, classify_quality


logger = logging.getLogger(__name__)


def age_multiplier(age_group: Union[AgeGroup, str]) -> float:
    """Interval multiplier for an age group."""
    return AGE_MULTIPLIERS[AgeGroup.parse(age_group)]


def schedule_new_card(
    content_id: str,
    content_type: Union[ContentType, str],
    subject: Union[Subject, str],
    difficulty: float,
    age_group: Union[AgeGroup, str],
    now: Optional[datetime] = None
) -> SpacedRepetitionCard:
    """
    Start tracking newly introduced content.

    This is the only entry point that creates a card from nothing.

    Args:
        content_id: Identifier of the content
        content_type: Kind of content (enum member or its value)
        subject: Subject area (enum member or its value)
        difficulty: Content difficulty, carried through unchanged
        age_group: Learner age group
        now: Scheduling time (defaults to now, UTC)

    Returns:
        New card due after the first, age-scaled interval
    """
    now = memory_state.utc_now(now)
    interval = max(1, round_half_up(1 * age_multiplier(age_group)))

    card = memory_state.initialize_new_card(
        content_id=content_id,
        content_type=ContentType.parse(content_type),
        subject=Subject.parse(subject),
        difficulty=difficulty,
        interval=interval,
        now=now,
    )
    logger.debug("Scheduled new card %s (interval=%d)", card.id, interval)
    return card


def process_review(
    card: SpacedRepetitionCard,
    result: ReviewResult,
    age_group: Union[AgeGroup, str],
    now: Optional[datetime] = None
) -> Tuple[SpacedRepetitionCard, dict]:
    """
    Process a review and return the updated card + event data.

    This is the core algorithm. The given card is never modified.
    Caller is responsible for:
    1. Loading the card
    2. Saving the returned card
    3. Persisting the event, if it keeps a review log

    Args:
        card: Current card state
        result: Review outcome
        age_group: Learner age group
        now: Review completion time (defaults to now, UTC)

    Returns:
        Tuple of (updated_card, event_data_dict)
    """
    multiplier = age_multiplier(age_group)
    now = memory_state.utc_now(now)

    quality = classify_quality(result)
    new_ease = interval_updates.update_ease_factor(card.ease_factor, quality)
    new_interval = interval_updates.calculate_new_interval(
        current_interval=card.interval,
        review_count=card.review_count,
        quality=quality,
        ease_factor=new_ease,
        age_multiplier=multiplier,
    )

    passed = quality >= PASSING_QUALITY
    success_streak = card.success_streak + 1 if passed else 0
    total_correct = card.total_correct + 1 if passed else card.total_correct
    total_attempts = card.total_attempts + 1

    # Staleness is measured against the previous review, before it is overwritten
    days_since = memory_state.days_between(card.last_reviewed, now)
    retention_strength = memory_state.calculate_retention_strength(
        total_correct=total_correct,
        total_attempts=total_attempts,
        success_streak=success_streak,
        days_since_last_review=days_since,
    )

    updated = replace(
        card,
        interval=new_interval,
        ease_factor=new_ease,
        review_count=card.review_count + 1,
        last_reviewed=now,
        next_review=now + timedelta(days=new_interval),
        success_streak=success_streak,
        total_attempts=total_attempts,
        total_correct=total_correct,
        retention_strength=retention_strength,
    )

    event_data = {
        'card_id': card.id,
        'content_id': card.content_id,
        'timestamp': now,
        'quality': quality,
        'correct': result.correct,
        'response_time': result.response_time,
        'hints_used': result.hints_used,
        'days_since_last_review': days_since,
        'interval_before': card.interval,
        'interval_after': new_interval,
        'ease_factor_before': card.ease_factor,
        'ease_factor_after': new_ease,
        'retention_before': card.retention_strength,
        'retention_after': retention_strength,
    }

    logger.debug(
        "Reviewed card %s: quality=%d interval %d -> %d, ease %.2f -> %.2f",
        card.id, quality, card.interval, new_interval, card.ease_factor, new_ease,
    )
    return updated, event_data


def calculate_next_review(
    card: SpacedRepetitionCard,
    result: ReviewResult,
    age_group: Union[AgeGroup, str],
    now: Optional[datetime] = None
) -> SpacedRepetitionCard:
    """
    Apply a review to a card and return the new card state.

    Same as process_review, without the event data.
    """
    updated, _ = process_review(card, result, age_group, now=now)
    return updated

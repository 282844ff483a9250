"""
Review Session Builder

Creates review sessions from the learner's due cards:
1. Size the session from the time budget and the age group's pace
2. Pick the most urgent due cards
3. Balance easy / medium / hard cards to an age-appropriate mix
4. Shuffle, so the order does not reveal difficulty
"""

from __future__ import annotations
from datetime import datetime
import logging
import math
import numbers
import random
import uuid
from typing import Optional, Sequence, Union

from review_engine.config import get_settings
from review_engine.exceptions import InvalidArgument
from review_engine.schemas import AgeGroup
from review_engine.session_builders.pool_types import POOL_ORDER, DifficultyPools, PoolName
from review_engine.session_builders.pool_utils import (
    backfill,
    fill_to_targets,
    get_cards_for_review,
    make_rng,
    shuffled,
    strength_or_default,
)
from review_engine.session_builders.session_types import ReviewSession
from review_engine.sm2.constants import CARDS_PER_MINUTE, TARGET_RETENTION
from review_engine.sm2.memory_state import SpacedRepetitionCard, round_half_up, utc_now


logger = logging.getLogger(__name__)

# ---- Difficulty Balancing ----
EASY_THRESHOLD = 0.7        # strength above this is "easy"
HARD_THRESHOLD = 0.4        # strength below this is "hard"

DIFFICULTY_DISTRIBUTION: dict[AgeGroup, dict[PoolName, float]] = {
    AgeGroup.PRESCHOOL: {"easy": 0.6, "medium": 0.3, "hard": 0.1},
    AgeGroup.EARLY: {"easy": 0.5, "medium": 0.4, "hard": 0.1},
    AgeGroup.OLDER: {"easy": 0.4, "medium": 0.4, "hard": 0.2},
}


def classify_difficulty(card: SpacedRepetitionCard) -> PoolName:
    """Difficulty pool for a card, by retention strength."""
    strength = strength_or_default(card)
    if strength > EASY_THRESHOLD:
        return "easy"
    if strength < HARD_THRESHOLD:
        return "hard"
    return "medium"


def build_difficulty_pools(cards: Sequence[SpacedRepetitionCard]) -> DifficultyPools:
    """
    Split cards into difficulty pools, preserving their order.
    """
    pools = DifficultyPools()
    for card in cards:
        pools.add(card, classify_difficulty(card))
    return pools


def balance_session_difficulty(
    cards: Sequence[SpacedRepetitionCard],
    age_group: Union[AgeGroup, str]
) -> list[SpacedRepetitionCard]:
    """
    Select cards matching the age group's difficulty mix.

    Each pool contributes round(total * fraction) cards in due order; any
    shortfall is backfilled from the remaining cards, also in due order.

    Args:
        cards: Due cards, most urgent first
        age_group: Learner age group

    Returns:
        Selected cards (unshuffled)
    """
    distribution = DIFFICULTY_DISTRIBUTION[AgeGroup.parse(age_group)]
    total_cards = len(cards)

    pools = build_difficulty_pools(cards)
    targets = {
        name: round_half_up(total_cards * fraction)
        for name, fraction in distribution.items()
    }

    selected = fill_to_targets(pools.as_dict(), targets, POOL_ORDER)
    balanced = backfill(selected, cards, total_cards)

    logger.debug(
        "Balanced %d cards: pools=%s targets=%s backfilled=%d",
        total_cards, pools.sizes(), targets, len(balanced) - len(selected),
    )
    return balanced


def generate_review_session(
    available_cards: Sequence[SpacedRepetitionCard],
    target_duration_minutes: Optional[int],
    age_group: Union[AgeGroup, str],
    *,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None
) -> ReviewSession:
    """
    Create a review session within a time budget.

    Args:
        available_cards: Learner's cards (due and not due)
        target_duration_minutes: Time budget in minutes (None for the configured length)
        age_group: Learner age group
        rng: Random generator for the shuffle (seed it for replayable sessions)
        now: Reference time (defaults to now, UTC)

    Returns:
        ReviewSession with shuffled cards
    """
    age_group = AgeGroup.parse(age_group)
    if target_duration_minutes is None:
        target_duration_minutes = get_settings().default_session_minutes
    if isinstance(target_duration_minutes, bool) or not isinstance(target_duration_minutes, numbers.Real):
        raise InvalidArgument(
            f"target_duration_minutes must be a number, got {target_duration_minutes!r}"
        )
    if target_duration_minutes <= 0:
        raise InvalidArgument(
            f"target_duration_minutes must be positive, got {target_duration_minutes}"
        )

    now = utc_now(now)
    pace = CARDS_PER_MINUTE[age_group]
    max_cards = min(int(target_duration_minutes * pace), len(available_cards))

    due_cards = get_cards_for_review(available_cards, max_cards, now=now)
    balanced = balance_session_difficulty(due_cards, age_group)

    if rng is None:
        rng = make_rng()
    session_cards = shuffled(balanced, rng)

    logger.debug(
        "Session for age %s: %d available, %d due, %d selected",
        age_group.value, len(available_cards), len(due_cards), len(session_cards),
    )

    return ReviewSession(
        id=f"session_{uuid.uuid4().hex[:12]}",
        cards=tuple(session_cards),
        estimated_duration=math.ceil(len(session_cards) / pace),
        created_at=now,
        age_group=age_group,
        target_retention=TARGET_RETENTION[age_group],
    )

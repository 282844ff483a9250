"""
Pool utilities for session builders.

These helpers provide shared, minimal primitives for selecting due cards and
filling sessions without enforcing a single composition policy.
"""

from __future__ import annotations
from datetime import datetime
import numbers
import random
from typing import Iterable, Optional, Sequence, TypeVar

from review_engine.config import get_settings
from review_engine.exceptions import InvalidArgument
from review_engine.sm2.constants import DEFAULT_RETENTION_STRENGTH
from review_engine.sm2.memory_state import SpacedRepetitionCard, utc_now


T = TypeVar("T")


def strength_or_default(card: SpacedRepetitionCard) -> float:
    """Retention strength, with untracked cards treated as average."""
    if card.retention_strength is None:
        return DEFAULT_RETENTION_STRENGTH
    return card.retention_strength


def _due(cards: Iterable[SpacedRepetitionCard], now: datetime) -> list[SpacedRepetitionCard]:
    return [card for card in cards if card.next_review <= now]


def get_cards_for_review(
    cards: Sequence[SpacedRepetitionCard],
    max_cards: Optional[int] = None,
    now: Optional[datetime] = None
) -> list[SpacedRepetitionCard]:
    """
    Select the cards due for review, most urgent first.

    Ordering:
    1. Most overdue first (earliest next_review)
    2. On ties, weakest retention first

    Args:
        cards: Snapshot of the learner's cards
        max_cards: Maximum cards to return (defaults to configured limit)
        now: Reference time (defaults to now, UTC)

    Returns:
        Due cards, truncated to max_cards
    """
    if max_cards is None:
        max_cards = get_settings().default_max_cards
    if isinstance(max_cards, bool) or not isinstance(max_cards, numbers.Integral):
        raise InvalidArgument(f"max_cards must be an integer, got {max_cards!r}")
    if max_cards < 0:
        raise InvalidArgument(f"max_cards must be non-negative, got {max_cards}")

    now = utc_now(now)
    due_cards = _due(cards, now)
    due_cards.sort(key=lambda c: (c.next_review, strength_or_default(c)))
    return due_cards[:max_cards]


def count_due_reviews(
    cards: Iterable[SpacedRepetitionCard],
    now: Optional[datetime] = None
) -> int:
    """
    Count cards whose review is due.
    """
    return len(_due(cards, utc_now(now)))


def fill_to_targets(
    pools: dict[str, list[T]],
    targets: dict[str, int],
    order: Sequence[str]
) -> list[T]:
    """
    Take up to targets[name] items from each pool, walking pools in order.
    """
    selected: list[T] = []
    for name in order:
        selected.extend(pools.get(name, [])[:max(0, targets.get(name, 0))])
    return selected


def backfill(selected: list[T], candidates: Sequence[T], target_size: int) -> list[T]:
    """
    Top up a selection with unused candidates, in candidate order.

    Items are compared by identity, so equal-valued items are still
    treated as distinct.
    """
    session = list(selected)
    used = {id(item) for item in session}
    for item in candidates:
        if len(session) >= target_size:
            break
        if id(item) not in used:
            session.append(item)
            used.add(id(item))
    return session


def make_rng(seed: Optional[int] = None) -> random.Random:
    """
    Build a random generator for shuffling.

    Falls back to the configured shuffle seed; unseeded if neither is set.
    """
    if seed is None:
        seed = get_settings().shuffle_seed
    return random.Random(seed)


def shuffled(items: Sequence[T], rng: random.Random) -> list[T]:
    """
    Return a uniformly shuffled copy of items.
    """
    result = list(items)
    rng.shuffle(result)
    return result

"""
Session plan types returned by the session composer.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from review_engine.schemas import AgeGroup
from review_engine.sm2.memory_state import SpacedRepetitionCard


@dataclass(frozen=True)
class ReviewSession:
    """
    A recommended batch of cards to review, in presentation order.

    The plan is a suggestion: the caller may submit results for any subset
    of its cards, in any order.
    """
    id: str
    cards: tuple[SpacedRepetitionCard, ...]
    estimated_duration: int  # minutes
    created_at: datetime
    age_group: AgeGroup
    target_retention: float

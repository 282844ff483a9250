"""
Types for performance reports.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from review_engine.sm2.memory_state import SpacedRepetitionCard


@dataclass(frozen=True)
class PerformanceReport:
    """
    Summary statistics over a learner's card collection.
    """
    retention: float = 0.0
    average_interval: float = 0.0
    mastered_cards: int = 0
    struggling_cards: list[SpacedRepetitionCard] = field(default_factory=list)
    streak_distribution: dict[str, int] = field(default_factory=dict)

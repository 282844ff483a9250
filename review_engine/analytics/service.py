"""
Service layer to assemble performance reports over card collections.
"""

from __future__ import annotations

import logging
from typing import Sequence

from review_engine.analytics.metrics import (
    compute_average_interval,
    compute_mastered_count,
    compute_retention,
    compute_streak_distribution,
    struggling_mask,
)
from review_engine.analytics.queries import load_cards_df
from review_engine.analytics.types import PerformanceReport
from review_engine.sm2.memory_state import SpacedRepetitionCard


logger = logging.getLogger(__name__)


def analyze_performance(cards: Sequence[SpacedRepetitionCard]) -> PerformanceReport:
    """
    Build the performance summary for a collection of cards.

    Struggling cards are returned as the cards themselves, in input order,
    so callers can target them directly.
    """
    cards = list(cards)
    if not cards:
        return PerformanceReport()

    cards_df = load_cards_df(cards)
    struggling_positions = cards_df.index[struggling_mask(cards_df).to_numpy()]

    report = PerformanceReport(
        retention=compute_retention(cards_df),
        average_interval=compute_average_interval(cards_df),
        mastered_cards=compute_mastered_count(cards_df),
        struggling_cards=[cards[pos] for pos in struggling_positions],
        streak_distribution=compute_streak_distribution(cards_df),
    )

    logger.debug(
        "Analyzed %d cards: retention=%.2f mastered=%d struggling=%d",
        len(cards), report.retention, report.mastered_cards, len(report.struggling_cards),
    )
    return report

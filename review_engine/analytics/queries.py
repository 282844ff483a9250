"""
Data-loading helpers for analytics.
"""

from __future__ import annotations

from typing import Sequence

import pandas as pd

from review_engine.analytics.constants import CARD_COLUMNS, MISSING_STRENGTH
from review_engine.sm2.memory_state import SpacedRepetitionCard


def load_cards_df(cards: Sequence[SpacedRepetitionCard]) -> pd.DataFrame:
    """
    Load card snapshots into a dataframe, one row per card in input order.
    """
    if not cards:
        return pd.DataFrame(columns=CARD_COLUMNS)

    df = pd.DataFrame(
        [
            {
                "card_id": card.id,
                "interval": card.interval,
                "review_count": card.review_count,
                "success_streak": card.success_streak,
                "total_attempts": card.total_attempts,
                "total_correct": card.total_correct,
                "retention_strength": card.retention_strength,
            }
            for card in cards
        ],
        columns=CARD_COLUMNS,
    )
    df["retention_strength"] = (
        pd.to_numeric(df["retention_strength"], errors="coerce")
        .fillna(MISSING_STRENGTH)
        .astype("float64")
    )
    return df.reset_index(drop=True)

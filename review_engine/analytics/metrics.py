"""
Metric computations for performance reports.
"""

from __future__ import annotations

import pandas as pd

from review_engine.analytics.constants import (
    MASTERED_MIN_INTERVAL,
    MASTERED_MIN_STREAK,
    MASTERED_MIN_STRENGTH,
    STREAK_BUCKETS,
    STREAK_CAP,
    STRUGGLING_MAX_STREAK,
    STRUGGLING_MAX_STRENGTH,
    STRUGGLING_MIN_REVIEWS,
)


def compute_retention(cards_df: pd.DataFrame) -> float:
    """
    Overall success rate across all attempts (0 with no attempts).
    """
    if cards_df.empty:
        return 0.0
    attempts = int(cards_df["total_attempts"].sum())
    if attempts == 0:
        return 0.0
    return int(cards_df["total_correct"].sum()) / attempts


def compute_average_interval(cards_df: pd.DataFrame) -> float:
    """
    Mean interval in days (0 for an empty collection).
    """
    if cards_df.empty:
        return 0.0
    return float(cards_df["interval"].mean())


def mastered_mask(cards_df: pd.DataFrame) -> pd.Series:
    """
    Cards with a long interval, a solid streak and strong retention.
    """
    return (
        (cards_df["interval"] >= MASTERED_MIN_INTERVAL)
        & (cards_df["success_streak"] >= MASTERED_MIN_STREAK)
        & (cards_df["retention_strength"] >= MASTERED_MIN_STRENGTH)
    )


def struggling_mask(cards_df: pd.DataFrame) -> pd.Series:
    """
    Cards reviewed several times that still fail to stick.
    """
    return (
        (cards_df["success_streak"] < STRUGGLING_MAX_STREAK)
        & (cards_df["review_count"] >= STRUGGLING_MIN_REVIEWS)
        & (cards_df["retention_strength"] < STRUGGLING_MAX_STRENGTH)
    )


def compute_mastered_count(cards_df: pd.DataFrame) -> int:
    if cards_df.empty:
        return 0
    return int(mastered_mask(cards_df).sum())


def streak_bucket(streak: int) -> str:
    """Bucket label for a success streak ("0".."9", "10+")."""
    if streak >= STREAK_CAP:
        return f"{STREAK_CAP}+"
    return str(int(streak))


def compute_streak_distribution(cards_df: pd.DataFrame) -> dict[str, int]:
    """
    Count cards per streak bucket, omitting empty buckets.
    """
    if cards_df.empty:
        return {}

    counts = cards_df["success_streak"].map(streak_bucket).value_counts()
    return {
        bucket: int(counts[bucket])
        for bucket in STREAK_BUCKETS
        if bucket in counts.index
    }

"""
Constants for performance analysis thresholds and streak buckets.
"""

from __future__ import annotations

from typing import Final


# ---- Mastery ----
MASTERED_MIN_INTERVAL: Final[int] = 30
MASTERED_MIN_STREAK: Final[int] = 5
MASTERED_MIN_STRENGTH: Final[float] = 0.8

# ---- Struggling ----
STRUGGLING_MAX_STREAK: Final[int] = 2       # exclusive
STRUGGLING_MIN_REVIEWS: Final[int] = 3
STRUGGLING_MAX_STRENGTH: Final[float] = 0.4  # exclusive

# Cards without a retention estimate count as unretained in reports
MISSING_STRENGTH: Final[float] = 0.0

# ---- Streak Distribution ----
STREAK_CAP: Final[int] = 10
STREAK_BUCKETS: Final[list[str]] = [str(n) for n in range(STREAK_CAP)] + [f"{STREAK_CAP}+"]

CARD_COLUMNS: Final[list[str]] = [
    "card_id",
    "interval",
    "review_count",
    "success_streak",
    "total_attempts",
    "total_correct",
    "retention_strength",
]

"""
Quality Classification

Maps an objective review outcome (correctness, latency, hints) onto the SM-2
0-5 quality scale, in place of the learner's self-assessment.

    5 - correct, fast, no hints
    4 - correct after hesitation, at most one hint
    3 - correct with effort (up to two hints)
    2 - correct but heavily assisted
    1 - incorrect
    0 - incorrect even with several hints
"""

from __future__ import annotations
from dataclasses import dataclass
import numbers
from typing import Any, Mapping

from review_engine.exceptions import InvalidArgument
from review_engine.sm2.constants import (
    FAST_RESPONSE_MS,
    MAX_QUALITY,
    MIN_QUALITY,
    STEADY_RESPONSE_MS,
)


@dataclass(frozen=True)
class ReviewResult:
    """
    Outcome of a single attempt at a card.
    """
    correct: bool
    response_time: float  # milliseconds
    hints_used: int = 0

    def __post_init__(self):
        if not isinstance(self.correct, bool):
            raise InvalidArgument(f"correct must be a bool, got {self.correct!r}")
        if isinstance(self.response_time, bool) or not isinstance(self.response_time, numbers.Real):
            raise InvalidArgument(f"response_time must be a number, got {self.response_time!r}")
        if isinstance(self.hints_used, bool) or not isinstance(self.hints_used, numbers.Integral):
            raise InvalidArgument(f"hints_used must be an integer, got {self.hints_used!r}")
        if self.response_time < 0:
            raise InvalidArgument(f"response_time must be non-negative, got {self.response_time}")
        if self.hints_used < 0:
            raise InvalidArgument(f"hints_used must be non-negative, got {self.hints_used}")

    @classmethod
    def from_performance_record(cls, record: Mapping[str, Any]) -> "ReviewResult":
        """
        Build a result from a performance record as logged by the app.

        Accepts both camelCase (``responseTime``, ``hintsUsed``) and
        snake_case keys. Values are validated as given, never coerced.
        """
        try:
            correct = record["correct"]
        except KeyError:
            raise InvalidArgument("performance record is missing 'correct'") from None

        response_time = record.get("responseTime", record.get("response_time"))
        if response_time is None:
            raise InvalidArgument("performance record is missing 'responseTime'")
        hints_used = record.get("hintsUsed", record.get("hints_used", 0))

        return cls(correct=correct, response_time=response_time, hints_used=hints_used)


def classify_quality(result: ReviewResult) -> int:
    """
    Derive the SM-2 quality score for a review result.

    Rules are checked in order, first match wins.

    Args:
        result: Review outcome

    Returns:
        Quality between 0 and 5
    """
    if not result.correct:
        quality = 0 if result.hints_used > 2 else 1
    elif result.response_time < FAST_RESPONSE_MS and result.hints_used == 0:
        quality = 5
    elif result.response_time < STEADY_RESPONSE_MS and result.hints_used <= 1:
        quality = 4
    elif result.hints_used <= 2:
        quality = 3
    else:
        quality = 2

    return max(MIN_QUALITY, min(MAX_QUALITY, quality))

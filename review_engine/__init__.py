"""
review_engine - spaced repetition scheduling for young learners.

A pure scheduling calculator: callers pass card state and review results in,
and get new card state, due sets, session plans and reports back. Nothing is
stored or mutated by the engine.

Quick start:
    import random
    from review_engine import (
        ReviewResult, analyze_performance, calculate_next_review,
        generate_review_session, schedule_new_card,
    )

    card = schedule_new_card("count-to-10", "game", "mathematics", 1.0, "3-5")
    card = calculate_next_review(card, ReviewResult(True, 2400, 0), "3-5")

    session = generate_review_session([card], 10, "3-5", rng=random.Random(7))
    report = analyze_performance([card])
"""

from review_engine.exceptions import InvalidArgument, ReviewEngineError
from review_engine.schemas import AgeGroup, ContentType, Subject
from review_engine.sm2 import (
    ReviewResult,
    SpacedRepetitionCard,
    calculate_next_review,
    classify_quality,
    process_review,
    schedule_new_card,
)
from review_engine.session_builders import (
    ReviewSession,
    count_due_reviews,
    generate_review_session,
    get_cards_for_review,
)
from review_engine.analytics import PerformanceReport, analyze_performance

__version__ = "0.1.0"

__all__ = [
    # Scheduling
    "schedule_new_card",
    "calculate_next_review",
    "process_review",
    "classify_quality",

    # Sessions
    "get_cards_for_review",
    "count_due_reviews",
    "generate_review_session",

    # Reporting
    "analyze_performance",

    # Types
    "SpacedRepetitionCard",
    "ReviewResult",
    "ReviewSession",
    "PerformanceReport",
    "AgeGroup",
    "ContentType",
    "Subject",

    # Errors
    "ReviewEngineError",
    "InvalidArgument",
]

"""Session builder modules for review sessions."""

from review_engine.session_builders.pool_utils import (
    count_due_reviews,
    get_cards_for_review,
)
from review_engine.session_builders.review_builder import (
    balance_session_difficulty,
    generate_review_session,
)
from review_engine.session_builders.session_types import ReviewSession

__all__ = [
    "get_cards_for_review",
    "count_due_reviews",
    "balance_session_difficulty",
    "generate_review_session",
    "ReviewSession",
]

import os
import random
import sys
from datetime import datetime, timedelta, timezone

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from review_engine.config import ENV_PREFIX, reset_settings
from review_engine.schemas import ContentType, Subject
from review_engine.sm2.memory_state import SpacedRepetitionCard


NOW = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from REVIEW_ENGINE_* variables and cached settings."""
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def rng():
    return random.Random(1234)


def build_card(
    card_id="card",
    interval=1,
    ease_factor=2.5,
    review_count=0,
    overdue_days=0.0,
    last_reviewed_days_ago=None,
    success_streak=0,
    total_attempts=0,
    total_correct=0,
    retention_strength=0.5,
    now=NOW,
):
    """Card whose next review is `overdue_days` before `now` (negative = not yet due)."""
    next_review = now - timedelta(days=overdue_days)
    if last_reviewed_days_ago is None:
        last_reviewed = next_review - timedelta(days=interval)
    else:
        last_reviewed = now - timedelta(days=last_reviewed_days_ago)
    return SpacedRepetitionCard(
        id=card_id,
        content_id=f"content-{card_id}",
        content_type=ContentType.QUIZ,
        subject=Subject.MATHEMATICS,
        difficulty=1.0,
        interval=interval,
        ease_factor=ease_factor,
        review_count=review_count,
        next_review=next_review,
        last_reviewed=last_reviewed,
        created_at=last_reviewed - timedelta(days=30),
        success_streak=success_streak,
        total_attempts=total_attempts,
        total_correct=total_correct,
        retention_strength=retention_strength,
    )


@pytest.fixture
def make_card():
    return build_card

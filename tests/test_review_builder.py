"""
Tests for difficulty balancing and review session generation.
"""

import random

import pytest

from review_engine.exceptions import InvalidArgument
from review_engine.schemas import AgeGroup
from review_engine.session_builders.review_builder import (
    balance_session_difficulty,
    build_difficulty_pools,
    classify_difficulty,
    generate_review_session,
)
from review_engine.sm2.constants import CARDS_PER_MINUTE


STRENGTH = {"e": 0.9, "m": 0.55, "h": 0.1}


def _cards(make_card, labels):
    """Cards named by label (e/m/h + index), overdue in the given order."""
    total = len(labels)
    return [
        make_card(label, overdue_days=total - i, retention_strength=STRENGTH[label[0]])
        for i, label in enumerate(labels)
    ]


class TestDifficultyPools:

    @pytest.mark.parametrize("strength,expected", [
        (0.71, "easy"),
        (0.7, "medium"),
        (0.4, "medium"),
        (0.39, "hard"),
        (None, "medium"),
    ])
    def test_classify(self, make_card, strength, expected):
        assert classify_difficulty(make_card(retention_strength=strength)) == expected

    def test_pools_keep_order(self, make_card):
        cards = _cards(make_card, ["e0", "h0", "e1", "m0", "h1"])

        pools = build_difficulty_pools(cards)

        assert [c.id for c in pools.easy] == ["e0", "e1"]
        assert [c.id for c in pools.medium] == ["m0"]
        assert [c.id for c in pools.hard] == ["h0", "h1"]
        assert pools.sizes() == {"easy": 2, "medium": 1, "hard": 2}


class TestBalanceSessionDifficulty:

    def test_targets_then_backfill_in_due_order(self, make_card):
        labels = ["e0", "e1", "h0", "e2", "m0", "e3", "h1", "e4", "h2", "e5"]
        cards = _cards(make_card, labels)

        balanced = balance_session_difficulty(cards, "9+")

        # 9+ targets for 10 cards: 4 easy, 4 medium, 2 hard; medium falls 3 short
        assert [c.id for c in balanced] == [
            "e0", "e1", "e2", "e3", "m0", "h0", "h1", "e4", "h2", "e5",
        ]

    def test_preschool_mix(self, make_card):
        labels = ["h0", "h1", "h2", "m0", "m1", "m2", "e0", "e1", "e2", "e3"]
        cards = _cards(make_card, labels)

        balanced = balance_session_difficulty(cards, AgeGroup.PRESCHOOL)

        # 3-5 targets: 6 easy, 3 medium, 1 hard; easy is 2 short
        assert [c.id for c in balanced] == [
            "e0", "e1", "e2", "e3", "m0", "m1", "m2", "h0", "h1", "h2",
        ]

    def test_no_duplicates_and_size_preserved(self, make_card):
        cards = _cards(make_card, ["e0", "e1", "e2", "e3", "e4", "m0", "h0"])

        balanced = balance_session_difficulty(cards, "6-8")

        assert len(balanced) == len(cards)
        assert {c.id for c in balanced} == {c.id for c in cards}

    def test_empty(self):
        assert balance_session_difficulty([], "6-8") == []


class TestGenerateReviewSession:

    def test_empty_pool(self, now, rng):
        session = generate_review_session([], 15, "6-8", rng=rng, now=now)

        assert session.cards == ()
        assert session.estimated_duration == 0
        assert session.age_group is AgeGroup.EARLY
        assert session.target_retention == 0.80
        assert session.created_at == now

    def test_nothing_due(self, make_card, now, rng):
        cards = [make_card(f"c{i}", overdue_days=-3) for i in range(5)]

        session = generate_review_session(cards, 15, "9+", rng=rng, now=now)

        assert session.cards == ()
        assert session.estimated_duration == 0

    @pytest.mark.parametrize("age_group,duration,expected_size,expected_minutes", [
        ("3-5", 2, 4, 2),
        ("6-8", 2, 6, 2),
        ("9+", 1, 4, 1),
        ("9+", 3, 12, 3),
    ])
    def test_size_from_pace(self, make_card, now, rng, age_group, duration, expected_size, expected_minutes):
        cards = [make_card(f"c{i}", overdue_days=i + 1, retention_strength=(i % 10) / 10) for i in range(50)]

        session = generate_review_session(cards, duration, age_group, rng=rng, now=now)

        assert len(session.cards) == expected_size
        assert len(session.cards) <= min(duration * CARDS_PER_MINUTE[AgeGroup(age_group)], len(cards))
        assert session.estimated_duration == expected_minutes

    def test_partial_session_duration_rounds_up(self, make_card, now, rng):
        due = [make_card(f"d{i}", overdue_days=i + 1) for i in range(3)]
        later = [make_card(f"l{i}", overdue_days=-2) for i in range(5)]

        session = generate_review_session(due + later, 10, "6-8", rng=rng, now=now)

        assert sorted(c.id for c in session.cards) == ["d0", "d1", "d2"]
        assert session.estimated_duration == 1

    def test_session_contains_most_urgent_cards(self, make_card, now, rng):
        cards = [make_card(f"c{i}", overdue_days=i) for i in range(1, 21)]

        session = generate_review_session(cards, 1, "9+", rng=rng, now=now)

        assert {c.id for c in session.cards} == {"c20", "c19", "c18", "c17"}

    def test_seeded_rng_is_reproducible(self, make_card, now):
        cards = [make_card(f"c{i}", overdue_days=i + 1, retention_strength=(i % 7) / 7) for i in range(20)]

        first = generate_review_session(cards, 5, "9+", rng=random.Random(42), now=now)
        second = generate_review_session(cards, 5, "9+", rng=random.Random(42), now=now)

        assert [c.id for c in first.cards] == [c.id for c in second.cards]
        assert first.id != second.id

    def test_cards_are_shuffled(self, make_card, now, rng):
        cards = [make_card(f"c{i}", overdue_days=100 - i, retention_strength=0.5) for i in range(20)]

        session = generate_review_session(cards, 5, "9+", rng=rng, now=now)

        assert sorted(c.id for c in session.cards) == sorted(c.id for c in cards)
        assert [c.id for c in session.cards] != [c.id for c in cards]

    def test_shuffle_seed_from_config(self, make_card, now, monkeypatch):
        monkeypatch.setenv("REVIEW_ENGINE_SHUFFLE_SEED", "7")
        cards = [make_card(f"c{i}", overdue_days=i + 1) for i in range(12)]

        first = generate_review_session(cards, 3, "9+", now=now)
        second = generate_review_session(cards, 3, "9+", now=now)

        assert [c.id for c in first.cards] == [c.id for c in second.cards]

    def test_default_duration_from_config(self, make_card, now, rng, monkeypatch):
        monkeypatch.setenv("REVIEW_ENGINE_DEFAULT_SESSION_MINUTES", "1")
        cards = [make_card(f"c{i}", overdue_days=i + 1) for i in range(30)]

        session = generate_review_session(cards, None, "3-5", rng=rng, now=now)

        assert len(session.cards) == 2

    @pytest.mark.parametrize("age_group,target", [("3-5", 0.75), ("6-8", 0.80), ("9+", 0.85)])
    def test_target_retention(self, now, rng, age_group, target):
        session = generate_review_session([], 10, age_group, rng=rng, now=now)
        assert session.target_retention == target

    @pytest.mark.parametrize("duration", [0, -5])
    def test_non_positive_duration_rejected(self, make_card, now, rng, duration):
        with pytest.raises(InvalidArgument):
            generate_review_session([make_card(overdue_days=1)], duration, "9+", rng=rng, now=now)

    @pytest.mark.parametrize("duration", ["15", True, [10]])
    def test_non_numeric_duration_rejected(self, make_card, now, rng, duration):
        with pytest.raises(InvalidArgument):
            generate_review_session([make_card(overdue_days=1)], duration, "9+", rng=rng, now=now)

    def test_unknown_age_group_rejected(self, now, rng):
        with pytest.raises(InvalidArgument):
            generate_review_session([], 10, "toddler", rng=rng, now=now)

    def test_cards_not_modified(self, make_card, now, rng):
        cards = [make_card(f"c{i}", overdue_days=i + 1) for i in range(6)]
        snapshot = list(cards)

        generate_review_session(cards, 5, "9+", rng=rng, now=now)

        assert cards == snapshot

"""
Enumerations shared across the review engine.

Values match the strings the calling application stores, so enum members and
plain strings can be used interchangeably at the API boundary.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from review_engine.exceptions import InvalidArgument


class _ParseableEnum(str, Enum):
    """String enum that converts caller input or raises InvalidArgument."""

    @classmethod
    def parse(cls, value: Union[str, "_ParseableEnum"]):
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(member.value for member in cls)
            raise InvalidArgument(
                f"Unknown {cls.__name__} {value!r} (expected one of: {allowed})"
            ) from None


class AgeGroup(_ParseableEnum):
    """Age band of the learner."""
    PRESCHOOL = "3-5"
    EARLY = "6-8"
    OLDER = "9+"


class ContentType(_ParseableEnum):
    """Kind of content a card points at."""
    GAME = "game"
    LESSON = "lesson"
    QUIZ = "quiz"
    CHALLENGE = "challenge"
    STORY = "story"


class Subject(_ParseableEnum):
    """Subject area of the content."""
    MATHEMATICS = "mathematics"
    ENGLISH = "english"
    SCIENCE = "science"

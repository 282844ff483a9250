"""
Runtime configuration for the review engine.

Defaults can be overridden through environment variables (or a .env file):

    REVIEW_ENGINE_DEFAULT_MAX_CARDS        cards returned by the due-set selector
    REVIEW_ENGINE_DEFAULT_SESSION_MINUTES  session length when none is requested
    REVIEW_ENGINE_SHUFFLE_SEED             fixed seed for session shuffling
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from review_engine.exceptions import InvalidArgument


ENV_PREFIX = "REVIEW_ENGINE_"


class EngineSettings(BaseModel):
    """Validated engine settings."""

    default_max_cards: int = Field(default=20, ge=0)
    default_session_minutes: int = Field(default=15, gt=0)
    shuffle_seed: Optional[int] = None


def _read_env() -> dict:
    values = {}
    for field_name in EngineSettings.model_fields:
        raw = os.getenv(ENV_PREFIX + field_name.upper())
        if raw is not None and raw.strip() != "":
            values[field_name] = raw.strip()
    return values


@lru_cache(maxsize=1)
def get_settings() -> EngineSettings:
    """
    Load settings from the environment once per process.

    Raises:
        InvalidArgument: if an environment value fails validation
    """
    load_dotenv()
    try:
        return EngineSettings(**_read_env())
    except ValidationError as exc:
        raise InvalidArgument(f"Invalid review engine configuration: {exc}") from exc


def reset_settings() -> None:
    """Drop cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()

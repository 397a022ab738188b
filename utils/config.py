"""
Configuration loading utilities.

Loads environment variables from `.env` and validates display settings for the
summary table.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv
from streamlit.logger import get_logger

from utils.constants import DEFAULT_LOCALE, DEFAULT_TABLE_LAYOUT, LAYOUT_FULL, TABLE_LAYOUTS

logger = get_logger(__name__)

LOG_LEVELS = ("debug", "info", "warning", "error")
DEFAULT_LOG_LEVEL = "info"


@dataclass(frozen=True)
class Config:
    table_layout: str
    locale: str
    log_level: str

    @property
    def show_grade(self) -> bool:
        return self.table_layout == LAYOUT_FULL


def _choice(name: str, value: str, allowed: tuple, default: str) -> str:
    normalized = value.strip().lower()
    if normalized in allowed:
        return normalized
    logger.warning("Invalid %s=%r, falling back to %r", name, value, default)
    return default


def load_config() -> Config:
    """Load configuration from environment (and `.env` when present)."""
    load_dotenv(find_dotenv(usecwd=True), override=False)

    table_layout = _choice(
        "WORKOUT_TABLE_LAYOUT",
        os.getenv("WORKOUT_TABLE_LAYOUT", DEFAULT_TABLE_LAYOUT),
        TABLE_LAYOUTS,
        DEFAULT_TABLE_LAYOUT,
    )
    log_level = _choice(
        "WORKOUT_LOG_LEVEL",
        os.getenv("WORKOUT_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        LOG_LEVELS,
        DEFAULT_LOG_LEVEL,
    )
    locale = os.getenv("WORKOUT_LOCALE", DEFAULT_LOCALE).strip() or DEFAULT_LOCALE
    logger.debug("WORKOUT_TABLE_LAYOUT: %s, WORKOUT_LOCALE: %s", table_layout, locale)

    return Config(table_layout=table_layout, locale=locale, log_level=log_level)

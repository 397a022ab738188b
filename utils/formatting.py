"""
Display helpers for paces and locale-aware decimals.

These helpers are for table rendering only; MinuteSummary keeps raw numbers.
"""

from __future__ import annotations

import math
from typing import Optional

from babel import numbers

from utils.constants import DEFAULT_LOCALE, PACE_PLACEHOLDER

LOCALE = DEFAULT_LOCALE


def set_locale(locale_str: str = DEFAULT_LOCALE) -> None:
    global LOCALE
    try:
        # Validate by formatting a simple number
        numbers.format_decimal(1.0, locale=locale_str)
        LOCALE = locale_str
    except Exception:
        LOCALE = DEFAULT_LOCALE


def get_locale() -> str:
    return LOCALE


def format_pace(seconds: float) -> str:
    """Render seconds per distance unit as ``M:SS``.

    Non-positive input (no distance covered) renders as ``"-"``. Seconds are
    rounded half-up on the whole value, so a remainder that rounds to 60 carries
    into the minutes (59.5 gives "1:00", not "0:60").
    """
    if seconds <= 0:
        return PACE_PLACEHOLDER
    total = math.floor(seconds + 0.5)
    minutes, sec = divmod(total, 60)
    return f"{minutes}:{sec:02d}"


def fmt_decimal(value: Optional[float], digits: Optional[int] = None) -> str:
    if value is None:
        return ""
    fmt = None
    if digits is not None:
        fmt = "0" if digits == 0 else "0." + ("0" * digits)
    return numbers.format_decimal(value, format=fmt, locale=LOCALE)


def fmt_bpm(bpm: Optional[float]) -> str:
    """Mean heart rate shown as whole beats, floored."""
    if bpm is None:
        return ""
    return fmt_decimal(math.floor(bpm), 0)


def fmt_elevation(meters: Optional[float]) -> str:
    return fmt_decimal(meters, 1)


def fmt_grade(percent: Optional[float]) -> str:
    return fmt_decimal(percent, 1)

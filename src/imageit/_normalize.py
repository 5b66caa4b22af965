"""Normalization helpers.

Centralizes defensive parsing of telemetry values and coordinates.
"""

from __future__ import annotations

import math
from typing import Any

from imageit._constants import PERCENT_MAX, PERCENT_MIN


def safe_float(value: Any) -> float | None:
    """Coerce *value* to a float, ``None`` when unusable.

    Booleans count as numbers (``True`` → ``1.0``); empty strings,
    placeholders and NaN become ``None``.
    """
    if value is None or value == "" or value == "--":
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result):
        return None
    return result


def is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float))


def clamp_percent(value: Any) -> float:
    """Clamp *value* into ``[0, 100]``.

    NaN and unparseable input collapse to ``0``; infinities clamp to the
    nearest bound.
    """
    try:
        number = float(value)
    except (TypeError, ValueError):
        return PERCENT_MIN
    if math.isnan(number):
        return PERCENT_MIN
    if number < PERCENT_MIN:
        return PERCENT_MIN
    if number > PERCENT_MAX:
        return PERCENT_MAX
    return number

"""Unit conversion and dimension bounds.

Panel dimensions are entered as whole millimetres; the 3D scene works in
metres ("scene units").
"""

from __future__ import annotations

import math

__all__ = [
    "MAX_DIMENSION_MM",
    "MAX_THICKNESS_MM",
    "MIN_DIMENSION_MM",
    "MIN_THICKNESS_MM",
    "MM_PER_SCENE_UNIT",
    "clamp_dimension",
    "parse_dimension",
    "round_half_up",
    "to_scene_units",
]

MM_PER_SCENE_UNIT = 1000

MIN_DIMENSION_MM = 12
MAX_DIMENSION_MM = 2000
MIN_THICKNESS_MM = 12
MAX_THICKNESS_MM = 25


def to_scene_units(mm: float) -> float:
    """Convert millimetres to scene units (metres)."""
    return mm / MM_PER_SCENE_UNIT


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding towards +infinity.

    Python's built-in round() uses banker's rounding, which would store
    12.5 as 12; board sizes entered as x.5 round up.
    """
    return int(math.floor(value + 0.5))


def clamp_dimension(value: float, minimum: int, maximum: int) -> int:
    """Round a dimension and clamp it into [minimum, maximum].

    Args:
        value: Raw dimension in millimetres.
        minimum: Lower bound (inclusive).
        maximum: Upper bound (inclusive).

    Returns:
        The rounded, clamped dimension.
    """
    return max(minimum, min(maximum, round_half_up(value)))


def parse_dimension(raw: object) -> float | None:
    """Parse a user-entered dimension.

    Accepts ints, floats and numeric strings (surrounding whitespace allowed).

    Returns:
        The parsed value, or None if it is blank or not a finite number.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(value):
        return None
    return value

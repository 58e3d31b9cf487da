"""Sign extraction and manipulation for floats and integers."""

from __future__ import annotations

import math


def sign_float(value: float) -> int:
    """Return -1, 0 or 1 by the sign of value; NaN and zero give 0."""
    if value > 0.0:
        return 1
    if value < 0.0:
        return -1
    return 0


def sign_int(value: int) -> int:
    """Return -1, 0 or 1 by the sign of an integer."""
    return (value > 0) - (value < 0)


def copysign(magnitude: float, sign: float) -> float:
    """Return magnitude carrying the sign of sign."""
    return math.copysign(magnitude, sign)
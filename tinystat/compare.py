"""Floating-point and integer comparison helpers with tolerance support."""

from __future__ import annotations

from .model import EPSILON


def compare_floats(a: float, b: float, epsilon: float = EPSILON) -> int:
    """Return -1, 0 or 1; values within epsilon of each other compare equal."""
    if abs(a - b) <= epsilon:
        return 0
    return -1 if a < b else 1


def almost_equal(a: float, b: float, rel_epsilon: float, abs_epsilon: float) -> bool:
    """Test equality using both an absolute and a relative tolerance."""
    if a == b:
        return True
    diff = abs(a - b)
    if diff <= abs_epsilon:
        return True
    return diff <= max(abs(a), abs(b)) * rel_epsilon


def is_near_zero(value: float, threshold: float) -> bool:
    """Return True if |value| does not exceed threshold."""
    return abs(value) <= threshold


def compare_ints(a: int, b: int) -> int:
    """Three-way integer comparison returning -1, 0 or 1."""
    return (a > b) - (a < b)
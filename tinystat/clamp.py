"""Clamping of floats and integers to an inclusive range."""

from __future__ import annotations

import math
from collections.abc import Iterable


def clamp_float(value: float, lo: float, hi: float) -> float:
    """Clamp value to [lo, hi]; raise ValueError for NaN or lo > hi."""
    if math.isnan(value):
        raise ValueError("cannot clamp NaN")
    if lo > hi:
        raise ValueError(f"invalid range: {lo} > {hi}")
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def clamp_int(value: int, lo: int, hi: int) -> int:
    """Clamp an integer to [lo, hi]; raise ValueError if lo > hi."""
    if lo > hi:
        raise ValueError(f"invalid range: {lo} > {hi}")
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def _checked(values: Iterable, lo, hi) -> list:
    items = list(values)
    if not items:
        raise ValueError("sequence must not be empty")
    if lo > hi:
        raise ValueError(f"invalid range: {lo} > {hi}")
    return items


def clamp_floats(values: Iterable[float], lo: float, hi: float) -> list[float]:
    """Clamp every value to [lo, hi].

    Raises ValueError for an empty input, lo > hi, or a NaN element.
    """
    return [clamp_float(value, lo, hi) for value in _checked(values, lo, hi)]


def clamp_ints(values: Iterable[int], lo: int, hi: int) -> list[int]:
    """Clamp every integer to [lo, hi]; raise ValueError for empty input or lo > hi."""
    return [clamp_int(value, lo, hi) for value in _checked(values, lo, hi)]
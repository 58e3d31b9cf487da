"""Rounding of floats to integers, decimals and multiples.

Rounding to nearest breaks ties away from zero. The element-wise functions
treat a NaN in the input as an end marker and stop before it.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from itertools import takewhile

from .model import INT32_MAX, INT32_MIN


def _round_half_away(x: float) -> float:
    """Round to the nearest whole number, ties away from zero."""
    if not math.isfinite(x):
        return x
    whole = math.trunc(x)
    if abs(x - whole) >= 0.5:
        whole += 1 if x > 0 else -1
    return math.copysign(float(whole), x)


def _until_nan(values: Iterable[float]) -> Iterator[float]:
    return takewhile(lambda v: not math.isnan(v), values)


def round_to_int(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(_round_half_away(value))


def floor_to_int(value: float) -> int:
    """Return the largest integer not greater than value."""
    return math.floor(value)


def ceil_to_int(value: float) -> int:
    """Return the smallest integer not less than value."""
    return math.ceil(value)


def trunc_to_int(value: float) -> int:
    """Drop the fractional part of value."""
    return math.trunc(value)


def round_to_multiple(value: float, multiple: float) -> float:
    """Round value to the nearest multiple; raise ValueError if multiple is zero."""
    if multiple == 0.0:
        raise ValueError("multiple must not be zero")
    return _round_half_away(value / multiple) * multiple


def round_decimal(value: float, decimals: int) -> float:
    """Round value to the given number of decimal places."""
    factor = 10.0**decimals
    return _round_half_away(value * factor) / factor


def safe_round_to_int(value: float) -> int:
    """Round to the nearest integer; raise OverflowError outside the int32 range."""
    if value < INT32_MIN or value > INT32_MAX:
        raise OverflowError(f"{value} is outside the 32-bit integer range")
    return round_to_int(value)


def round_floats_to_ints(values: Iterable[float]) -> list[int]:
    """Round each value to the nearest integer, stopping at the first NaN."""
    return [round_to_int(v) for v in _until_nan(values)]


def floor_floats_to_ints(values: Iterable[float]) -> list[int]:
    """Floor each value, stopping at the first NaN."""
    return [floor_to_int(v) for v in _until_nan(values)]


def ceil_floats_to_ints(values: Iterable[float]) -> list[int]:
    """Ceil each value, stopping at the first NaN."""
    return [ceil_to_int(v) for v in _until_nan(values)]


def trunc_floats_to_ints(values: Iterable[float]) -> list[int]:
    """Truncate each value, stopping at the first NaN."""
    return [trunc_to_int(v) for v in _until_nan(values)]


def round_floats_decimal(values: Iterable[float], decimals: int) -> list[float]:
    """Round each value to the given decimal places, stopping at the first NaN."""
    return [round_decimal(v, decimals) for v in _until_nan(values)]


def round_floats_to_multiple(values: Iterable[float], multiple: float) -> list[float]:
    """Round each value to the nearest multiple, stopping at the first NaN.

    Raises ValueError if multiple is zero.
    """
    if multiple == 0.0:
        raise ValueError("multiple must not be zero")
    return [round_to_multiple(v, multiple) for v in _until_nan(values)]


def safe_floats_to_ints(values: Iterable[float]) -> tuple[list[int], int]:
    """Round each value to an integer, stopping at the first NaN.

    Values outside the int32 range become 0. Returns the integers and how
    many values were converted successfully.
    """
    result: list[int] = []
    converted = 0
    for value in _until_nan(values):
        if INT32_MIN <= value <= INT32_MAX:
            result.append(round_to_int(value))
            converted += 1
        else:
            result.append(0)
    return result, converted
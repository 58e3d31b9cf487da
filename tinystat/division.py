"""Division that reports divide-by-zero and 32-bit overflow as exceptions.

Integer division truncates towards zero, and the remainder takes the sign
of the numerator.
"""

from __future__ import annotations

from .model import INT32_MIN


def safe_div_float(numerator: float, denominator: float) -> float:
    """Return numerator / denominator; raise ZeroDivisionError if denominator is zero."""
    if denominator == 0.0:
        raise ZeroDivisionError("float division by zero")
    return numerator / denominator


def _check_int_operands(numerator: int, denominator: int) -> None:
    if denominator == 0:
        raise ZeroDivisionError("integer division by zero")
    if numerator == INT32_MIN and denominator == -1:
        raise OverflowError("INT32_MIN / -1 does not fit in 32 bits")


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def safe_div_int(numerator: int, denominator: int) -> int:
    """Return the quotient truncated towards zero.

    Raises ZeroDivisionError for a zero denominator and OverflowError for
    INT32_MIN / -1.
    """
    _check_int_operands(numerator, denominator)
    return _trunc_div(numerator, denominator)


def divmod_int(numerator: int, denominator: int) -> tuple[int, int]:
    """Return (quotient, remainder) with truncating division.

    Raises ZeroDivisionError for a zero denominator and OverflowError for
    INT32_MIN / -1.
    """
    _check_int_operands(numerator, denominator)
    quotient = _trunc_div(numerator, denominator)
    return quotient, numerator - quotient * denominator
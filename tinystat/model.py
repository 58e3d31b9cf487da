"""Core types, numeric constants and tolerance helpers shared by the library."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from enum import IntEnum

# Integer limits used where the library mimics 32-bit signed arithmetic.
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
SIZE_MAX = 2**32 - 1

# Core mathematical constants.
PI = math.pi
TWO_PI = 2.0 * math.pi
E = math.e
SQRT2 = 1.41421356237309504880
SQRT1_2 = 0.70710678118654752440

# Floating-point precision constants.
EPSILON = sys.float_info.epsilon
SQRT_EPSILON = 1.4901161193847656e-8
SAFE_EPSILON = 1e-12

# Comparison thresholds.
ABS_TOL = 1e-12
REL_TOL = 1e-8
SMALL_TOL = 1e-30

# Special values.
POS_INF = math.inf
NEG_INF = -math.inf
NAN = math.nan

# Distribution constants.
GAUSS_COEF = 0.3989422804014327
LOG2PI = 1.8378770664093456

# Conversion factors.
DEG_TO_RAD = PI / 180.0
RAD_TO_DEG = 180.0 / PI


class Quartile(IntEnum):
    """Quartile positions used by the percentile functions."""

    Q1 = 0
    MEDIAN = 1
    Q3 = 2

    @property
    def percent(self) -> float:
        """The percentile this quartile stands for."""
        return (25.0, 50.0, 75.0)[self.value]


@dataclass(frozen=True)
class FiveNumSummary:
    """Five-number summary of a dataset together with Tukey's fences."""

    min: float = 0.0
    q1: float = 0.0
    median: float = 0.0
    q3: float = 0.0
    max: float = 0.0
    iqr: float = 0.0
    lower_fence: float = 0.0
    upper_fence: float = 0.0


def float_eq(a: float, b: float, rel_tol: float = REL_TOL, abs_tol: float = ABS_TOL) -> bool:
    """Return True if a and b agree within abs_tol plus rel_tol times the smaller magnitude."""
    return abs(a - b) <= abs_tol + rel_tol * min(abs(a), abs(b))


def approx_eq(a: float, b: float) -> bool:
    """Compare two floats with the library's default tolerances."""
    return float_eq(a, b, REL_TOL, ABS_TOL)
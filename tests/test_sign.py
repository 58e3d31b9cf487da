import math

import pytest

from tinystat.sign import copysign, sign_float, sign_int


@pytest.mark.parametrize(
    "value,expected",
    [(2.5, 1), (-0.1, -1), (0.0, 0), (-0.0, 0), (math.inf, 1), (-math.inf, -1)],
)
def test_sign_float(value, expected):
    assert sign_float(value) == expected


def test_sign_float_nan_is_zero():
    assert sign_float(math.nan) == 0


@pytest.mark.parametrize("value,expected", [(7, 1), (-7, -1), (0, 0), (-(2**31), -1)])
def test_sign_int(value, expected):
    assert sign_int(value) == expected


def test_copysign_takes_sign_of_second():
    assert copysign(3.0, -1.0) == -3.0
    assert copysign(-3.0, 2.0) == 3.0


def test_copysign_negative_zero_sign():
    assert copysign(1.5, -0.0) == -1.5


def test_copysign_preserves_magnitude():
    for magnitude in (0.25, 10.0, 1e300):
        assert abs(copysign(magnitude, -5.0)) == magnitude
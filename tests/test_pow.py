import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from softfloat.extend import extenddftf2
from softfloat.format import F32, F64, F128, float_to_bits
from softfloat.mul import mul
from softfloat.pow import powi, powidf2, powisf2

doubles = st.floats(allow_nan=False)
nonzero_singles = st.floats(width=32, allow_nan=False, allow_infinity=False).filter(
    lambda x: x != 0.0
)


def _d(x):
    return float_to_bits(F64, x)


def _s(x):
    return float_to_bits(F32, x)


@given(st.floats())
def test_zeroth_power_is_one(x):
    assert powidf2(_d(x), 0) == _d(1.0)


@given(doubles)
def test_first_power_is_identity(x):
    assert powidf2(_d(x), 1) == _d(x)


@given(doubles)
def test_square_is_self_product(x):
    assert powidf2(_d(x), 2) == mul(F64, _d(x), _d(x))


@given(doubles.filter(lambda x: x != 0.0 and not math.isinf(x)))
def test_minus_one_is_reciprocal(x):
    assert powidf2(_d(x), -1) == _d(1.0 / x)


@given(nonzero_singles)
def test_single_reciprocal(x):
    assert powisf2(_s(x), -1) == _s(1.0 / x)


@given(st.integers(-1023, 1023))
def test_powers_of_two_are_exact(n):
    assert powidf2(_d(2.0), n) == _d(2.0**n)


@given(st.integers(-126, 127))
def test_single_powers_of_two(n):
    assert powisf2(_s(2.0), n) == _s(2.0**n)


def test_reciprocal_of_zero_is_signed_infinity():
    assert powidf2(_d(0.0), -1) == _d(math.inf)
    assert powidf2(_d(-0.0), -3) == _d(-math.inf)


def test_reciprocal_of_infinity_is_zero():
    assert powidf2(_d(-math.inf), -1) == _d(-0.0)


def test_quad_negative_power():
    assert powi(F128, extenddftf2(_d(2.0)), -3) == extenddftf2(_d(0.125))


def test_exponent_out_of_range():
    with pytest.raises(ValueError):
        powidf2(_d(2.0), 2**31)
    with pytest.raises(TypeError):
        powidf2(_d(2.0), 1.5)
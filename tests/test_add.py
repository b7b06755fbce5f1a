import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from softfloat.add import add, adddf3, addsf3, addtf3
from softfloat.format import F16, F32, F64, F128, bits_to_float, float_to_bits


def _not_nan(fmt):
    return st.integers(0, fmt.mask).filter(lambda r: not fmt.is_nan(r))


@given(st.floats(), st.floats())
def test_double_matches_hardware(x, y):
    got = adddf3(float_to_bits(F64, x), float_to_bits(F64, y))
    expected = x + y
    if math.isnan(expected):
        assert F64.is_nan(got)
    else:
        assert got == float_to_bits(F64, expected)


@given(_not_nan(F32), _not_nan(F32))
def test_single_matches_rounded_double(a, b):
    got = addsf3(a, b)
    expected = bits_to_float(F32, a) + bits_to_float(F32, b)
    if math.isnan(expected):
        assert F32.is_nan(got)
    else:
        assert got == float_to_bits(F32, expected)


@given(_not_nan(F16), _not_nan(F16))
def test_half_matches_rounded_double(a, b):
    got = add(F16, a, b)
    expected = bits_to_float(F16, a) + bits_to_float(F16, b)
    if math.isnan(expected):
        assert F16.is_nan(got)
    else:
        assert got == float_to_bits(F16, expected)


@given(st.integers(-(2**50), 2**50), st.integers(-(2**50), 2**50))
def test_quad_exact_integer_sums(x, y):
    got = addtf3(float_to_bits(F128, float(x)), float_to_bits(F128, float(y)))
    assert got == float_to_bits(F128, float(x + y))


@given(_not_nan(F32), _not_nan(F32))
def test_commutative(a, b):
    assert addsf3(a, b) == addsf3(b, a)


def test_nan_operand_gives_quiet_nan():
    signalling = F32.exponent_mask | 1
    result = addsf3(signalling, 0x3F800000)
    assert F32.is_nan(result)
    assert result & F32.quiet_bit
    assert F32.is_nan(addsf3(0x3F800000, signalling))


def test_opposite_infinities_give_default_nan():
    assert adddf3(F64.exponent_mask, F64.exponent_mask | F64.sign_mask) == F64.quiet_nan


def test_infinity_absorbs_finite():
    neg_inf = F128.exponent_mask | F128.sign_mask
    assert addtf3(neg_inf, float_to_bits(F128, 1e300)) == neg_inf


def test_signed_zeros():
    assert addsf3(F32.sign_mask, F32.sign_mask) == F32.sign_mask
    assert addsf3(0, F32.sign_mask) == 0


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_value_plus_negation_is_positive_zero(x):
    rep = float_to_bits(F64, x)
    assert adddf3(rep, rep ^ F64.sign_mask) == 0


def test_overflow_rounds_to_infinity():
    largest = F32.from_parts(False, F32.exponent_max - 1, F32.significand_mask)
    assert addsf3(largest, largest) == F32.exponent_mask


def test_out_of_range_operand_rejected():
    with pytest.raises(ValueError):
        addsf3(1 << 32, 0)
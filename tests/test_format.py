import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from softfloat.format import (
    F16,
    F32,
    F64,
    F128,
    FloatFormat,
    bits_to_float,
    float_to_bits,
)


def test_one_in_single_precision():
    assert float_to_bits(F32, 1.0) == 0x3F800000


@pytest.mark.parametrize("fmt", [F16, F32, F64, F128])
def test_derived_masks_partition_the_word(fmt):
    assert fmt.from_parts(True, 0, 0) == fmt.sign_mask
    assert fmt.from_parts(False, fmt.exponent_max, 0) == fmt.exponent_mask
    assert fmt.from_parts(False, 0, fmt.significand_mask) == fmt.significand_mask
    assert fmt.from_parts(True, fmt.exponent_max, fmt.significand_mask) == fmt.mask
    assert fmt.exp(fmt.exponent_mask) == fmt.exponent_max
    assert fmt.frac(fmt.mask) == fmt.significand_mask
    assert fmt.is_sign_negative(fmt.sign_mask)
    assert not fmt.is_sign_negative(fmt.exponent_mask | fmt.significand_mask)
    assert fmt.sign_mask & fmt.exponent_mask == 0
    assert fmt.exponent_mask & fmt.significand_mask == 0
    assert fmt.exponent_bits + fmt.significand_bits + 1 == fmt.bits


def test_bias_matches_encoding_of_one():
    for fmt in (F16, F32, F64, F128):
        one = float_to_bits(fmt, 1.0)
        assert fmt.exp(one) == fmt.exponent_bias
        assert fmt.frac(one) == 0


@given(st.floats(allow_nan=False))
def test_double_round_trip(x):
    rep = float_to_bits(F64, x)
    assert bits_to_float(F64, rep) == x
    assert math.copysign(1.0, bits_to_float(F64, rep)) == math.copysign(1.0, x)


@given(st.floats(allow_nan=False))
def test_quad_round_trip(x):
    rep = float_to_bits(F128, x)
    back = bits_to_float(F128, rep)
    assert back == x
    assert math.copysign(1.0, back) == math.copysign(1.0, x)


@given(st.floats(allow_nan=False, allow_infinity=False).filter(lambda v: abs(v) >= 2.2250738585072014e-308))
def test_quad_keeps_double_exponent(x):
    wide = float_to_bits(F128, x)
    narrow = float_to_bits(F64, x)
    assert F128.exp(wide) - F128.exponent_bias == F64.exp(narrow) - F64.exponent_bias
    assert F128.is_sign_negative(wide) == F64.is_sign_negative(narrow)


def test_quad_nan_and_infinity():
    assert F128.is_nan(float_to_bits(F128, math.nan))
    assert float_to_bits(F128, math.inf) == F128.exponent_mask
    assert bits_to_float(F128, F128.exponent_mask | F128.sign_mask) == -math.inf
    assert math.isnan(bits_to_float(F128, F128.quiet_nan))


def test_half_overflow_becomes_infinity():
    assert float_to_bits(F16, 1e10) == F16.exponent_mask
    assert float_to_bits(F16, -1e10) == F16.exponent_mask | F16.sign_mask


@given(st.integers(min_value=1, max_value=F32.implicit_bit - 1))
def test_normalize_sets_implicit_bit(significand):
    exponent, normalized = F32.normalize(significand)
    assert normalized & F32.implicit_bit
    assert normalized < F32.implicit_bit << 1
    assert normalized == significand << (1 - exponent)


@given(st.booleans(), st.integers(0, F64.exponent_max), st.integers(0, F64.significand_mask))
def test_from_parts_and_accessors_agree(sign, exponent, significand):
    rep = F64.from_parts(sign, exponent, significand)
    assert F64.is_sign_negative(rep) == sign
    assert F64.exp(rep) == exponent
    assert F64.frac(rep) == significand
    assert F64.imp_frac(rep) == significand | F64.implicit_bit
    assert F64.is_subnormal(rep) == (exponent == 0)


def test_signed_repr_of_negative_zero():
    assert F32.signed_repr(F32.sign_mask) == -(2**31)
    assert F32.signed_repr(0x3F800000) == 0x3F800000


def test_eq_repr_treats_nans_alike():
    assert F32.eq_repr(F32.quiet_nan, F32.exponent_mask | 1)
    assert not F32.eq_repr(0, F32.sign_mask)
    assert F32.eq_repr(0x3F800000, 0x3F800000)


def test_is_nan_ignores_sign():
    assert F16.is_nan(F16.quiet_nan | F16.sign_mask)
    assert not F16.is_nan(F16.exponent_mask)


def test_out_of_range_rep_rejected():
    with pytest.raises(ValueError):
        F32.exp(1 << 32)
    with pytest.raises(ValueError):
        bits_to_float(F16, -1)


def test_non_int_rep_rejected():
    with pytest.raises(TypeError):
        F64.frac(1.5)


def test_bad_format_rejected():
    with pytest.raises(ValueError):
        FloatFormat(8, 6)
    with pytest.raises(ValueError):
        FloatFormat(32, 0)
import pytest
from hypothesis import given
from hypothesis import strategies as st

from softfloat.extend import extenddftf2, extendhfsf2
from softfloat.format import F16, F32, F64, bits_to_float, float_to_bits
from softfloat.trunc import (
    trunc,
    truncdfhf2,
    truncdfsf2,
    truncsfhf2,
    trunctfdf2,
    trunctfsf2,
)


@given(st.floats(allow_nan=False))
def test_double_to_single_matches_native(x):
    assert truncdfsf2(float_to_bits(F64, x)) == float_to_bits(F32, x)


@given(st.floats(width=32, allow_nan=False))
def test_single_to_half_matches_native(x):
    assert truncsfhf2(float_to_bits(F32, x)) == float_to_bits(F16, x)


@given(st.floats(allow_nan=False))
def test_double_to_half_matches_native(x):
    assert truncdfhf2(float_to_bits(F64, x)) == float_to_bits(F16, x)


@given(st.floats(allow_nan=False))
def test_quad_to_double_round_trip(x):
    d = float_to_bits(F64, x)
    assert trunctfdf2(extenddftf2(d)) == d


@given(st.floats(allow_nan=False))
def test_quad_to_single_agrees_with_double_path(x):
    d = float_to_bits(F64, x)
    assert trunctfsf2(extenddftf2(d)) == truncdfsf2(d)


def test_every_half_value_round_trips_through_single():
    for h in range(1 << 16):
        if not F16.is_nan(h):
            assert truncsfhf2(extendhfsf2(h)) == h


def test_nan_is_quieted_and_keeps_sign():
    assert truncdfsf2(F64.quiet_nan) == F32.quiet_nan
    assert truncdfsf2(F64.sign_mask | F64.quiet_nan) == F32.sign_mask | F32.quiet_nan
    out = truncdfsf2(F64.exponent_mask | 1)
    assert F32.is_nan(out)
    assert out & F32.quiet_bit


def test_overflow_and_underflow():
    assert truncdfsf2(float_to_bits(F64, 1e300)) == F32.exponent_mask
    assert truncdfsf2(float_to_bits(F64, -1e300)) == F32.sign_mask | F32.exponent_mask
    assert truncdfsf2(float_to_bits(F64, 1e-300)) == 0
    assert truncdfsf2(float_to_bits(F64, -1e-300)) == F32.sign_mask
    assert bits_to_float(F16, truncdfhf2(float_to_bits(F64, 1e10))) == float("inf")


def test_widening_direction_rejected():
    with pytest.raises(ValueError):
        trunc(F32, F64, 0)


def test_out_of_range_rep_rejected():
    with pytest.raises(ValueError):
        truncdfsf2(-1)
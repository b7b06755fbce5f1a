"""Exact widening conversions between IEEE-754 formats."""

from __future__ import annotations

from softfloat.format import F16, F32, F64, F128, FloatFormat


def extend(src: FloatFormat, dst: FloatFormat, rep: int) -> int:
    """Convert ``rep`` from ``src`` to the wider format ``dst``."""
    if (
        dst.bits < src.bits
        or dst.significand_bits < src.significand_bits
        or dst.exponent_bias < src.exponent_bias
    ):
        raise ValueError(f"cannot extend a {src.bits}-bit format to a {dst.bits}-bit one")
    rep = src._check(rep)

    src_min_normal = src.implicit_bit
    src_infinity = src.exponent_mask
    src_sign_mask = src.sign_mask
    src_abs_mask = src_sign_mask - 1
    src_qnan = src.significand_mask
    src_nan_code = src_qnan - 1

    sign_bits_delta = dst.significand_bits - src.significand_bits
    exp_bias_delta = dst.exponent_bias - src.exponent_bias
    a_abs = rep & src_abs_mask
    abs_result = 0

    if src_min_normal <= a_abs < src_infinity:
        # Normal: shift significand and exponent into place, rebias the exponent.
        abs_result = a_abs << sign_bits_delta
        abs_result += exp_bias_delta << dst.significand_bits
    elif a_abs >= src_infinity:
        # NaN or infinity: keep the quiet bit and right-align the payload.
        abs_result = dst.exponent_max << dst.significand_bits
        abs_result |= (a_abs & src_qnan) << sign_bits_delta
        abs_result |= (a_abs & src_nan_code) << sign_bits_delta
    elif a_abs != 0:
        # Subnormal: renormalize and drop the leading bit.
        scale = src_min_normal.bit_length() - a_abs.bit_length()
        abs_result = a_abs << (sign_bits_delta + scale)
        abs_result = (abs_result ^ dst.implicit_bit) | (
            (exp_bias_delta - scale + 1) << dst.significand_bits
        )

    sign_result = (rep & src_sign_mask) << (dst.bits - src.bits)
    return (abs_result | sign_result) & dst.mask


def extendsfdf2(a: int) -> int:
    """Single to double precision."""
    return extend(F32, F64, a)


def extendhfsf2(a: int) -> int:
    """Half to single precision."""
    return extend(F16, F32, a)


def extendsftf2(a: int) -> int:
    """Single to quadruple precision."""
    return extend(F32, F128, a)


def extenddftf2(a: int) -> int:
    """Double to quadruple precision."""
    return extend(F64, F128, a)
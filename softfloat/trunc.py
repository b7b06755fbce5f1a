"""Narrowing conversions between IEEE-754 formats, rounding to nearest even."""

from __future__ import annotations

from softfloat.format import F16, F32, F64, F128, FloatFormat


def trunc(src: FloatFormat, dst: FloatFormat, rep: int) -> int:
    """Convert ``rep`` from ``src`` to the narrower format ``dst``."""
    if (
        dst.bits > src.bits
        or dst.significand_bits >= src.significand_bits
        or dst.exponent_bias > src.exponent_bias
    ):
        raise ValueError(f"cannot truncate a {src.bits}-bit format to a {dst.bits}-bit one")
    rep = src._check(rep)

    src_sb = src.significand_bits
    dst_sb = dst.significand_bits
    sign_bits_delta = src_sb - dst_sb

    src_abs_mask = src.sign_mask - 1
    round_mask = (1 << sign_bits_delta) - 1
    halfway = 1 << (sign_bits_delta - 1)
    src_qnan = 1 << (src_sb - 1)
    src_nan_code = src_qnan - 1

    dst_qnan = 1 << (dst_sb - 1)
    dst_nan_code = dst_qnan - 1
    dst_inf = dst.exponent_max << dst_sb

    underflow = (src.exponent_bias + 1 - dst.exponent_bias) << src_sb
    overflow = (src.exponent_bias + dst.exponent_max - dst.exponent_bias) << src_sb

    a_abs = rep & src_abs_mask
    sign = rep & src.sign_mask

    if (a_abs - underflow) & src.mask < (a_abs - overflow) & src.mask:
        # Within the normal range of dst: shift right with rounding, rebias.
        abs_result = (a_abs >> sign_bits_delta) - (
            (src.exponent_bias - dst.exponent_bias) << dst_sb
        )
        abs_result &= dst.mask
        round_bits = a_abs & round_mask
        if round_bits > halfway:
            abs_result += 1
        elif round_bits == halfway:
            abs_result += abs_result & 1
    elif a_abs > src.exponent_mask:
        # NaN: quiet it and keep the truncated payload.
        abs_result = dst_inf | dst_qnan
        abs_result |= dst_nan_code & ((a_abs & src_nan_code) >> sign_bits_delta)
    elif a_abs >= overflow:
        abs_result = dst_inf
    else:
        # Underflows to a subnormal or zero.
        a_exp = a_abs >> src_sb
        shift = src.exponent_bias - dst.exponent_bias - a_exp + 1
        significand = (rep & src.significand_mask) | src.implicit_bit
        if shift > src_sb:
            abs_result = 0
        else:
            sticky = int((significand << (src.bits - shift)) & src.mask != 0)
            denormalized = (significand >> shift) | sticky
            abs_result = denormalized >> sign_bits_delta
            round_bits = denormalized & round_mask
            if round_bits > halfway:
                abs_result += 1
            elif round_bits == halfway:
                abs_result += abs_result & 1

    return (abs_result | (sign >> (src.bits - dst.bits))) & dst.mask


def truncdfsf2(a: int) -> int:
    """Double to single precision."""
    return trunc(F64, F32, a)


def truncsfhf2(a: int) -> int:
    """Single to half precision."""
    return trunc(F32, F16, a)


def truncdfhf2(a: int) -> int:
    """Double to half precision."""
    return trunc(F64, F16, a)


def trunctfsf2(a: int) -> int:
    """Quadruple to single precision."""
    return trunc(F128, F32, a)


def trunctfdf2(a: int) -> int:
    """Quadruple to double precision."""
    return trunc(F128, F64, a)
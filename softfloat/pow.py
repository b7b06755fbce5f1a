"""Raising a floating-point value to an integer power."""

from __future__ import annotations

from fractions import Fraction

from softfloat.format import F32, F64, FloatFormat
from softfloat.mul import mul

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _round_positive(fmt: FloatFormat, q: Fraction) -> int:
    """Bits of the positive rational ``q`` rounded to ``fmt``, ties to even."""
    sb = fmt.significand_bits
    bias = fmt.exponent_bias
    e = q.numerator.bit_length() - q.denominator.bit_length()
    if q < Fraction(2) ** e:
        e -= 1
    e = max(e, 1 - bias)
    scaled = q * Fraction(2) ** (sb - e)
    s, r = divmod(scaled.numerator, scaled.denominator)
    twice = 2 * r
    if twice > scaled.denominator or (twice == scaled.denominator and s & 1):
        s += 1
    # A normal s carries the implicit bit, which bumps the exponent field by one.
    rep = ((e + bias - 1) << sb) + s
    return min(rep, fmt.exponent_mask)


def _reciprocal(fmt: FloatFormat, rep: int) -> int:
    """Bits of ``1 / rep``, correctly rounded."""
    sign = rep & fmt.sign_mask
    magnitude = rep & ~fmt.sign_mask
    if magnitude > fmt.exponent_mask:
        return rep | fmt.quiet_bit
    if magnitude == fmt.exponent_mask:
        return sign
    if magnitude == 0:
        return sign | fmt.exponent_mask
    sb = fmt.significand_bits
    exponent = magnitude >> sb
    fraction = magnitude & fmt.significand_mask
    if exponent:
        digits = fraction | fmt.implicit_bit
        power = exponent - fmt.exponent_bias - sb
    else:
        digits = fraction
        power = 1 - fmt.exponent_bias - sb
    return sign | _round_positive(fmt, Fraction(2) ** (-power) / digits)


def powi(fmt: FloatFormat, a: int, b: int) -> int:
    """Return the bits of ``a`` raised to the 32-bit signed integer power ``b``.

    Uses binary exponentiation with a rounded multiply at each step; a negative
    power takes the reciprocal of the final product.
    """
    a = fmt._check(a)
    if isinstance(b, bool) or not isinstance(b, int):
        raise TypeError(f"exponent must be an int, not {type(b).__name__}")
    if not _I32_MIN <= b <= _I32_MAX:
        raise ValueError(f"exponent {b} is not a 32-bit signed integer")

    recip = b < 0
    remaining = abs(b)
    result = fmt.exponent_bias << fmt.significand_bits  # 1.0
    while True:
        if remaining & 1:
            result = mul(fmt, result, a)
        remaining >>= 1
        if remaining == 0:
            break
        a = mul(fmt, a, a)

    return _reciprocal(fmt, result) if recip else result


def powisf2(a: int, b: int) -> int:
    """Single-precision integer power on 32-bit representations."""
    return powi(F32, a, b)


def powidf2(a: int, b: int) -> int:
    """Double-precision integer power on 64-bit representations."""
    return powi(F64, a, b)
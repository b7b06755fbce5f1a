"""Single-precision soft-float division using a Newton-Raphson reciprocal."""

from __future__ import annotations

from softfloat.format import F32, FloatFormat

_U32 = 0xFFFF_FFFF

# (3/4 + 1/sqrt(2)) - 1 truncated to 32 fractional bits, as UQ0.32.
_RECIPROCAL_SEED = 0x7504F333
_FULL_ITERATIONS = 3
# Upper bound on the error of the refined reciprocal, in units of 2^-32.
_RECIPROCAL_PRECISION = 10


def div32(fmt: FloatFormat, a: int, b: int) -> int:
    """Return the bits of ``a / b`` rounded to nearest, ties to even.

    ``fmt`` must be a format 32 bits wide.
    """
    if fmt.bits != 32:
        raise ValueError(f"div32 needs a 32-bit format, not a {fmt.bits}-bit one")
    a = fmt._check(a)
    b = fmt._check(b)

    sb = fmt.significand_bits
    max_exponent = fmt.exponent_max
    implicit_bit = fmt.implicit_bit
    significand_mask = fmt.significand_mask
    sign_bit = fmt.sign_mask
    abs_mask = sign_bit - 1
    inf_rep = fmt.exponent_mask
    quiet_bit = fmt.quiet_bit

    a_exponent = (a >> sb) & max_exponent
    b_exponent = (b >> sb) & max_exponent
    quotient_sign = (a ^ b) & sign_bit

    a_significand = a & significand_mask
    b_significand = b & significand_mask
    scale = 0

    # Zero, subnormal, infinity or NaN on either side.
    if a_exponent in (0, max_exponent) or b_exponent in (0, max_exponent):
        a_abs = a & abs_mask
        b_abs = b & abs_mask

        if a_abs > inf_rep:
            return a | quiet_bit
        if b_abs > inf_rep:
            return b | quiet_bit
        if a_abs == inf_rep:
            return fmt.quiet_nan if b_abs == inf_rep else a_abs | quotient_sign
        if b_abs == inf_rep:
            return quotient_sign
        if a_abs == 0:
            return fmt.quiet_nan if b_abs == 0 else quotient_sign
        if b_abs == 0:
            return inf_rep | quotient_sign

        if a_abs < implicit_bit:
            exponent, a_significand = fmt.normalize(a_significand)
            scale += exponent
        if b_abs < implicit_bit:
            exponent, b_significand = fmt.normalize(b_significand)
            scale -= exponent

    a_significand |= implicit_bit
    b_significand |= implicit_bit

    written_exponent = a_exponent - b_exponent + scale + fmt.exponent_bias
    # Divisor significand as a UQ1.31 number in [1, 2).
    b_uq1 = (b_significand << (32 - sb - 1)) & _U32

    # Initial reciprocal estimate x0 = 3/4 + 1/sqrt(2) - b/2, refined by
    # x_{n+1} = x_n * (2 - x_n * b).
    x_uq0 = (_RECIPROCAL_SEED - b_uq1) & _U32
    for _ in range(_FULL_ITERATIONS):
        corr_uq1 = (-((x_uq0 * b_uq1) >> 32)) & _U32
        x_uq0 = ((x_uq0 * corr_uq1) >> 31) & _U32

    # Account for a possible overflow, then bias the estimate below 1/b.
    x_uq0 = (x_uq0 - 2) & _U32
    x_uq0 = (x_uq0 - _RECIPROCAL_PRECISION) & _U32

    quotient = (x_uq0 * ((a_significand << 1) & _U32)) >> 32

    if quotient < implicit_bit << 1:
        residual = ((a_significand << (sb + 1)) - ((quotient * b_significand) & _U32)) & _U32
        a_significand <<= 1
        written_exponent -= 1
    else:
        quotient >>= 1
        residual = ((a_significand << sb) - ((quotient * b_significand) & _U32)) & _U32

    if written_exponent >= max_exponent:
        return inf_rep | quotient_sign

    if written_exponent > 0:
        abs_result = quotient & significand_mask
        abs_result |= (written_exponent << sb) & _U32
        residual = (residual << 1) & _U32
    else:
        if sb + written_exponent < 0:
            return quotient_sign
        abs_result = quotient >> ((-written_exponent + 1) & 31)
        shifted = (a_significand << (sb + written_exponent)) & _U32
        product = (((abs_result * b_significand) & _U32) << 1) & _U32
        residual = (shifted - product) & _U32

    # Round to nearest; adding the low bit turns the test into "<=" for ties to even.
    residual = (residual + (abs_result & 1)) & _U32
    if residual > b_significand:
        abs_result += 1

    return (abs_result | quotient_sign) & fmt.mask


def divsf3(a: int, b: int) -> int:
    """Single-precision division on 32-bit representations."""
    return div32(F32, a, b)
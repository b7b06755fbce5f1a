"""Double-precision soft-float division using a Newton-Raphson reciprocal."""

from __future__ import annotations

from softfloat.format import F64, FloatFormat

_U32 = 0xFFFF_FFFF
_U64 = 0xFFFF_FFFF_FFFF_FFFF

# (3/4 + 1/sqrt(2)) - 1 truncated to 32 fractional bits, as UQ0.32.
_RECIPROCAL_SEED = 0x7504F333
_HALF_ITERATIONS = 3
# Upper bound on the error of the refined reciprocal, in units of 2^-64.
_RECIPROCAL_PRECISION = 220


def _reciprocal(b_significand: int, sb: int) -> int:
    """UQ0.64 estimate of 1/b for a significand with its implicit bit set.

    The estimate lies below the exact reciprocal by less than 2 * 220 ulps.
    """
    hw = 32
    b_uq1 = (b_significand << (64 - sb - 1)) & _U64

    # Half-width iterations on the top bits of the divisor.
    b_uq1_hw = (b_significand >> (sb + 1 - hw)) & _U32
    x_uq0_hw = (_RECIPROCAL_SEED - b_uq1_hw) & _U32
    for _ in range(_HALF_ITERATIONS):
        corr_uq1_hw = (-((x_uq0_hw * b_uq1_hw) >> hw)) & _U32
        x_uq0_hw = ((x_uq0_hw * corr_uq1_hw) >> (hw - 1)) & _U32
    # The estimate may have overflowed by one ulp; the divisor also changes
    # from its truncated top half to the full value here.
    x_uq0_hw = (x_uq0_hw - 1) & _U32

    # One full-width iteration simulated with half-width products.
    blo = b_uq1 & _U32
    corr_uq1 = (
        -((x_uq0_hw * b_uq1_hw + ((x_uq0_hw * blo) >> hw) - 1) & _U64)
    ) & _U64
    lo_corr = corr_uq1 & _U32
    hi_corr = corr_uq1 >> hw
    x_uq0 = (
        (((x_uq0_hw * hi_corr) << 1) & _U64) + ((x_uq0_hw * lo_corr) >> (hw - 1)) - 2
    ) & _U64
    x_uq0 = (x_uq0 - 1) & _U64

    # Account for a possible overflow, then bias the estimate below 1/b.
    x_uq0 = (x_uq0 - 2) & _U64
    return (x_uq0 - _RECIPROCAL_PRECISION) & _U64


def div64(fmt: FloatFormat, a: int, b: int) -> int:
    """Return the bits of ``a / b`` rounded to nearest, ties to even.

    ``fmt`` must be a format 64 bits wide.
    """
    if fmt.bits != 64:
        raise ValueError(f"div64 needs a 64-bit format, not a {fmt.bits}-bit one")
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

    x_uq0 = _reciprocal(b_significand, sb)
    quotient = (x_uq0 * ((a_significand << 1) & _U64)) >> 64

    if quotient < implicit_bit << 1:
        residual = ((a_significand << (sb + 1)) - quotient * b_significand) & _U64
        a_significand <<= 1
        written_exponent -= 1
    else:
        quotient >>= 1
        residual = ((a_significand << sb) - quotient * b_significand) & _U64

    if written_exponent >= max_exponent:
        return inf_rep | quotient_sign

    if written_exponent > 0:
        abs_result = quotient & significand_mask
        abs_result |= (written_exponent << sb) & _U64
        residual = (residual << 1) & _U64
    else:
        if sb + written_exponent < 0:
            return quotient_sign
        abs_result = quotient >> ((1 - written_exponent) & 63)
        shifted = (a_significand << ((sb + written_exponent) & 63)) & _U64
        product = (((abs_result * b_significand) & _U64) << 1) & _U64
        residual = (shifted - product) & _U64

    # Round to nearest; adding the low bit turns the test into "<=" for ties to even.
    residual = (residual + (abs_result & 1)) & _U64
    if residual > b_significand:
        abs_result += 1

    return (abs_result | quotient_sign) & fmt.mask


def divdf3(a: int, b: int) -> int:
    """Double-precision division on 64-bit representations."""
    return div64(F64, a, b)
"""Soft-float multiplication on bit representations."""

from __future__ import annotations

from softfloat.format import F32, F64, F128, FloatFormat


def mul(fmt: FloatFormat, a: int, b: int) -> int:
    """Return the bits of ``a * b`` rounded to nearest, ties to even."""
    a = fmt._check(a)
    b = fmt._check(b)

    bits = fmt.bits
    mask = fmt.mask
    significand_bits = fmt.significand_bits
    max_exponent = fmt.exponent_max
    implicit_bit = fmt.implicit_bit
    significand_mask = fmt.significand_mask
    sign_bit = fmt.sign_mask
    abs_mask = sign_bit - 1
    inf_rep = fmt.exponent_mask
    quiet_bit = fmt.quiet_bit

    a_exponent = (a >> significand_bits) & max_exponent
    b_exponent = (b >> significand_bits) & max_exponent
    product_sign = (a ^ b) & sign_bit

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
            return a_abs | product_sign if b_abs else fmt.quiet_nan
        if b_abs == inf_rep:
            return b_abs | product_sign if a_abs else fmt.quiet_nan
        if a_abs == 0 or b_abs == 0:
            return product_sign

        if a_abs < implicit_bit:
            exponent, a_significand = fmt.normalize(a_significand)
            scale += exponent
        if b_abs < implicit_bit:
            exponent, b_significand = fmt.normalize(b_significand)
            scale += exponent

    a_significand |= implicit_bit
    b_significand |= implicit_bit

    # Left-align one operand so the product has exactly one or two leading digits.
    product = a_significand * (b_significand << fmt.exponent_bits)
    product_low = product & mask
    product_high = (product >> bits) & mask

    product_exponent = a_exponent + b_exponent + scale - fmt.exponent_bias

    if product_high & implicit_bit:
        product_exponent += 1
    else:
        product_high = ((product_high << 1) | (product_low >> (bits - 1))) & mask
        product_low = (product_low << 1) & mask

    if product_exponent >= max_exponent:
        return inf_rep | product_sign

    if product_exponent <= 0:
        shift = 1 - product_exponent
        if shift >= bits:
            return product_sign
        sticky = int((product_low << (bits - shift)) & mask != 0)
        product_low = ((product_high << (bits - shift)) & mask) | (product_low >> shift) | sticky
        product_high >>= shift
    else:
        product_high &= significand_mask
        product_high |= product_exponent << significand_bits

    product_high |= product_sign

    if product_low > sign_bit:
        product_high += 1
    if product_low == sign_bit:
        product_high += product_high & 1

    return product_high & mask


def mulsf3(a: int, b: int) -> int:
    """Single-precision multiplication on 32-bit representations."""
    return mul(F32, a, b)


def muldf3(a: int, b: int) -> int:
    """Double-precision multiplication on 64-bit representations."""
    return mul(F64, a, b)


def multf3(a: int, b: int) -> int:
    """Quadruple-precision multiplication on 128-bit representations."""
    return mul(F128, a, b)
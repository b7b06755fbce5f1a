"""Soft-float addition on bit representations."""

from __future__ import annotations

from softfloat.format import F32, F64, F128, FloatFormat


def add(fmt: FloatFormat, a: int, b: int) -> int:
    """Return the bits of ``a + b`` rounded to nearest, ties to even."""
    a = fmt._check(a)
    b = fmt._check(b)

    bits = fmt.bits
    significand_bits = fmt.significand_bits
    implicit_bit = fmt.implicit_bit
    significand_mask = fmt.significand_mask
    sign_bit = fmt.sign_mask
    abs_mask = sign_bit - 1
    exponent_mask = fmt.exponent_mask
    inf_rep = exponent_mask
    quiet_bit = fmt.quiet_bit

    a_abs = a & abs_mask
    b_abs = b & abs_mask

    # Zero, infinity or NaN on either side.
    if a_abs == 0 or a_abs >= inf_rep or b_abs == 0 or b_abs >= inf_rep:
        if a_abs > inf_rep:
            return a_abs | quiet_bit
        if b_abs > inf_rep:
            return b_abs | quiet_bit
        if a_abs == inf_rep:
            if a ^ b == sign_bit:
                return fmt.quiet_nan
            return a
        if b_abs == inf_rep:
            return b
        if a_abs == 0:
            return a & b if b_abs == 0 else b
        if b_abs == 0:
            return a

    a_rep, b_rep = (b, a) if b_abs > a_abs else (a, b)

    a_exponent = (a_rep & exponent_mask) >> significand_bits
    b_exponent = (b_rep & exponent_mask) >> significand_bits
    a_significand = a_rep & significand_mask
    b_significand = b_rep & significand_mask

    if a_exponent == 0:
        a_exponent, a_significand = fmt.normalize(a_significand)
    if b_exponent == 0:
        b_exponent, b_significand = fmt.normalize(b_significand)

    result_sign = a_rep & sign_bit
    subtraction = bool((a_rep ^ b_rep) & sign_bit)

    # Three extra low bits: round, guard and sticky.
    a_significand = (a_significand | implicit_bit) << 3
    b_significand = (b_significand | implicit_bit) << 3

    align = a_exponent - b_exponent
    if align:
        if align < bits:
            sticky = int(b_significand & ((1 << align) - 1) != 0)
            b_significand = (b_significand >> align) | sticky
        else:
            b_significand = 1

    if subtraction:
        a_significand -= b_significand
        if a_significand == 0:
            return 0
        if a_significand < implicit_bit << 3:
            shift = (implicit_bit << 3).bit_length() - a_significand.bit_length()
            a_significand <<= shift
            a_exponent -= shift
    else:
        a_significand += b_significand
        if a_significand & (implicit_bit << 4):
            sticky = a_significand & 1
            a_significand = (a_significand >> 1) | sticky
            a_exponent += 1

    if a_exponent >= fmt.exponent_max:
        return inf_rep | result_sign

    if a_exponent <= 0:
        shift = 1 - a_exponent
        sticky = int(a_significand & ((1 << shift) - 1) != 0)
        a_significand = (a_significand >> shift) | sticky
        a_exponent = 0

    round_guard_sticky = a_significand & 0x7

    result = (a_significand >> 3) & significand_mask
    result |= a_exponent << significand_bits
    result |= result_sign

    if round_guard_sticky > 0x4:
        result += 1
    if round_guard_sticky == 0x4:
        result += result & 1

    return result & fmt.mask


def addsf3(a: int, b: int) -> int:
    """Single-precision addition on 32-bit representations."""
    return add(F32, a, b)


def adddf3(a: int, b: int) -> int:
    """Double-precision addition on 64-bit representations."""
    return add(F64, a, b)


def addtf3(a: int, b: int) -> int:
    """Quadruple-precision addition on 128-bit representations."""
    return add(F128, a, b)
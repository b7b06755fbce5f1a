"""Conversions between integers and IEEE-754 bit representations."""

from __future__ import annotations

from softfloat.format import F32, F64, FloatFormat

_INT_WIDTHS = (8, 16, 32, 64, 128)


def _check_uint(value: int, width: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, not {type(value).__name__}")
    if not 0 <= value < 1 << width:
        raise ValueError(f"{value} is not a {width}-bit unsigned integer")
    return value


def _check_width(width: int) -> int:
    if width not in _INT_WIDTHS:
        raise ValueError(f"unsupported integer width {width!r}")
    return width


def _round_up(a: int, b: int, width: int) -> int:
    """Add one to ``a`` when the discarded bits ``b`` round up, ties to even."""
    top = width - 1
    return a + ((b - ((b >> top) & ~a & 1)) >> top)


def u32_to_f32_bits(i: int) -> int:
    """Bits of the single-precision value nearest to the unsigned 32-bit ``i``."""
    i = _check_uint(i, 32)
    if i == 0:
        return 0
    n = 32 - i.bit_length()
    y = (i << n) & 0xFFFF_FFFF
    a = y >> 8
    b = (y << 24) & 0xFFFF_FFFF
    m = _round_up(a, b, 32)
    e = 157 - n
    return (e << 23) + m


def u32_to_f64_bits(i: int) -> int:
    """Bits of the double-precision value equal to the unsigned 32-bit ``i``."""
    i = _check_uint(i, 32)
    if i == 0:
        return 0
    n = 32 - i.bit_length()
    m = i << (21 + n)
    e = 1053 - n
    return (e << 52) + m


def u64_to_f32_bits(i: int) -> int:
    """Bits of the single-precision value nearest to the unsigned 64-bit ``i``."""
    i = _check_uint(i, 64)
    n = 64 - i.bit_length()
    y = (i << (n % 64)) & 0xFFFF_FFFF_FFFF_FFFF
    a = y >> 40
    b = ((y >> 8) | (y & 0xFFFF)) & 0xFFFF_FFFF
    m = _round_up(a, b, 32)
    e = 0 if i == 0 else 189 - n
    return (e << 23) + m


def u64_to_f64_bits(i: int) -> int:
    """Bits of the double-precision value nearest to the unsigned 64-bit ``i``."""
    i = _check_uint(i, 64)
    if i == 0:
        return 0
    n = 64 - i.bit_length()
    y = (i << n) & 0xFFFF_FFFF_FFFF_FFFF
    a = y >> 11
    b = (y << 53) & 0xFFFF_FFFF_FFFF_FFFF
    m = _round_up(a, b, 64)
    e = 1085 - n
    return (e << 52) + m


def u128_to_f32_bits(i: int) -> int:
    """Bits of the single-precision value nearest to the unsigned 128-bit ``i``."""
    i = _check_uint(i, 128)
    n = 128 - i.bit_length()
    y = (i << (n % 128)) & ((1 << 128) - 1)
    a = y >> 104
    b = ((y >> 72) & 0xFFFF_FFFF) | int(y & ((1 << 96) - 1) != 0)
    m = _round_up(a, b, 32)
    e = 0 if i == 0 else 253 - n
    return (e << 23) + m


def u128_to_f64_bits(i: int) -> int:
    """Bits of the double-precision value nearest to the unsigned 128-bit ``i``."""
    i = _check_uint(i, 128)
    n = 128 - i.bit_length()
    y = (i << (n % 128)) & ((1 << 128) - 1)
    a = y >> 75
    b = ((y >> 11) | (y & 0xFFFF_FFFF)) & 0xFFFF_FFFF_FFFF_FFFF
    m = _round_up(a, b, 64)
    e = 0 if i == 0 else 1149 - n
    return (e << 52) + m


_FROM_UNSIGNED = {
    (F32, 32): u32_to_f32_bits,
    (F64, 32): u32_to_f64_bits,
    (F32, 64): u64_to_f32_bits,
    (F64, 64): u64_to_f64_bits,
    (F32, 128): u128_to_f32_bits,
    (F64, 128): u128_to_f64_bits,
}


def unsigned_to_float(fmt: FloatFormat, value: int, width: int) -> int:
    """Convert an unsigned ``width``-bit integer to the bits of ``fmt``."""
    try:
        convert = _FROM_UNSIGNED[fmt, width]
    except KeyError:
        raise ValueError(
            f"no conversion from a {width}-bit integer to a {fmt.bits}-bit float"
        ) from None
    return convert(value)


def signed_to_float(fmt: FloatFormat, value: int, width: int) -> int:
    """Convert a signed ``width``-bit integer to the bits of ``fmt``."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, not {type(value).__name__}")
    half = 1 << (width - 1)
    if not -half <= value < half:
        raise ValueError(f"{value} is not a {width}-bit signed integer")
    sign = fmt.sign_mask if value < 0 else 0
    return unsigned_to_float(fmt, abs(value), width) | sign


def _truncate_magnitude(fmt: FloatFormat, fbits: int, width: int, max_log2: int) -> int | None:
    """Truncated integer magnitude of ``fbits``; None when it is too large.

    Values below one and NaNs give zero.
    """
    sb = fmt.significand_bits
    if fbits < fmt.exponent_bias << sb:
        return 0
    int_max_exp = fmt.exponent_bias + max_log2 + 1
    if fbits < int_max_exp << sb:
        mask = (1 << width) - 1
        if width >= fmt.bits:
            m_base = (fbits << (width - sb - 1)) & mask
        else:
            m_base = (fbits >> (sb - width + 1)) & mask
        m = (1 << (width - 1)) | m_base
        shift = fmt.exponent_bias + width - 1 - (fbits >> sb)
        return m >> shift
    if fbits <= fmt.exponent_mask:
        return None
    return 0


def float_to_unsigned(fmt: FloatFormat, rep: int, width: int) -> int:
    """Truncate ``rep`` toward zero to an unsigned ``width``-bit integer, saturating.

    Negative values and NaN give zero; values too large give the maximum.
    """
    width = _check_width(width)
    rep = fmt._check(rep)
    magnitude = _truncate_magnitude(fmt, rep, width, width - 1)
    if magnitude is None:
        return (1 << width) - 1
    return magnitude


def float_to_signed(fmt: FloatFormat, rep: int, width: int) -> int:
    """Truncate ``rep`` toward zero to a signed ``width``-bit integer, saturating.

    NaN gives zero; values out of range give the minimum or maximum.
    """
    width = _check_width(width)
    rep = fmt._check(rep)
    negative = fmt.is_sign_negative(rep)
    magnitude = _truncate_magnitude(fmt, rep & ~fmt.sign_mask, width, width - 2)
    if magnitude is None:
        return -(1 << (width - 1)) if negative else (1 << (width - 1)) - 1
    return -magnitude if negative else magnitude
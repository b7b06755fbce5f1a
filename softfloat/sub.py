"""Soft-float subtraction on bit representations."""

from __future__ import annotations

from softfloat.add import add
from softfloat.format import F32, F64, F128, FloatFormat


def sub(fmt: FloatFormat, a: int, b: int) -> int:
    """Return the bits of ``a - b``: ``a`` plus ``b`` with its sign flipped."""
    b = fmt._check(b)
    return add(fmt, a, b ^ fmt.sign_mask)


def subsf3(a: int, b: int) -> int:
    """Single-precision subtraction on 32-bit representations."""
    return sub(F32, a, b)


def subdf3(a: int, b: int) -> int:
    """Double-precision subtraction on 64-bit representations."""
    return sub(F64, a, b)


def subtf3(a: int, b: int) -> int:
    """Quadruple-precision subtraction on 128-bit representations."""
    return sub(F128, a, b)
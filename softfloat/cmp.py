"""Soft-float comparisons on bit representations."""

from __future__ import annotations

from enum import Enum

from softfloat.format import F32, F64, F128, FloatFormat


class Ordering(Enum):
    """Outcome of comparing two floating-point values."""

    LESS = "less"
    EQUAL = "equal"
    GREATER = "greater"
    UNORDERED = "unordered"

    def to_le_abi(self) -> int:
        """Integer result for the ``le``/``lt``/``eq``/``ne`` family (unordered is 1)."""
        return {
            Ordering.LESS: -1,
            Ordering.EQUAL: 0,
            Ordering.GREATER: 1,
            Ordering.UNORDERED: 1,
        }[self]

    def to_ge_abi(self) -> int:
        """Integer result for the ``ge``/``gt`` family (unordered is -1)."""
        return {
            Ordering.LESS: -1,
            Ordering.EQUAL: 0,
            Ordering.GREATER: 1,
            Ordering.UNORDERED: -1,
        }[self]


def cmp(fmt: FloatFormat, a: int, b: int) -> Ordering:
    """Compare two representations of ``fmt`` as floating-point values."""
    a = fmt._check(a)
    b = fmt._check(b)
    abs_mask = fmt.sign_mask - 1
    inf_rep = fmt.exponent_mask
    a_abs = a & abs_mask
    b_abs = b & abs_mask

    if a_abs > inf_rep or b_abs > inf_rep:
        return Ordering.UNORDERED
    if a_abs | b_abs == 0:
        return Ordering.EQUAL

    a_srep = fmt.signed_repr(a)
    b_srep = fmt.signed_repr(b)

    if a_srep & b_srep >= 0:
        # At least one operand is positive: integer order matches float order.
        if a_srep < b_srep:
            return Ordering.LESS
        if a_srep == b_srep:
            return Ordering.EQUAL
        return Ordering.GREATER
    # Both negative: the integer order is reversed.
    if a_srep > b_srep:
        return Ordering.LESS
    if a_srep == b_srep:
        return Ordering.EQUAL
    return Ordering.GREATER


def unord(fmt: FloatFormat, a: int, b: int) -> bool:
    """True when either operand is a NaN."""
    return fmt.is_nan(a) or fmt.is_nan(b)


def lesf2(a: int, b: int) -> int:
    return cmp(F32, a, b).to_le_abi()


def gesf2(a: int, b: int) -> int:
    return cmp(F32, a, b).to_ge_abi()


def unordsf2(a: int, b: int) -> int:
    return int(unord(F32, a, b))


def ledf2(a: int, b: int) -> int:
    return cmp(F64, a, b).to_le_abi()


def gedf2(a: int, b: int) -> int:
    return cmp(F64, a, b).to_ge_abi()


def unorddf2(a: int, b: int) -> int:
    return int(unord(F64, a, b))


def letf2(a: int, b: int) -> int:
    return cmp(F128, a, b).to_le_abi()


def getf2(a: int, b: int) -> int:
    return cmp(F128, a, b).to_ge_abi()


def unordtf2(a: int, b: int) -> int:
    return int(unord(F128, a, b))
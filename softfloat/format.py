"""Description of IEEE-754 binary interchange formats and bit-level helpers."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from fractions import Fraction

_STRUCT_CODES = {16: "e", 32: "f", 64: "d"}


@dataclass(frozen=True)
class FloatFormat:
    """An IEEE-754 binary format given by its total width and significand width.

    Values of the format are handled as their bit representations: plain
    non-negative integers below ``2 ** bits``.
    """

    bits: int
    significand_bits: int

    def __post_init__(self) -> None:
        if not isinstance(self.bits, int) or not isinstance(self.significand_bits, int):
            raise TypeError("format widths must be integers")
        if self.significand_bits < 1:
            raise ValueError("a format needs at least one significand bit")
        if self.bits - self.significand_bits - 1 < 2:
            raise ValueError("a format needs at least two exponent bits")

    @property
    def exponent_bits(self) -> int:
        return self.bits - self.significand_bits - 1

    @property
    def exponent_max(self) -> int:
        return (1 << self.exponent_bits) - 1

    @property
    def exponent_bias(self) -> int:
        return self.exponent_max >> 1

    @property
    def mask(self) -> int:
        return (1 << self.bits) - 1

    @property
    def sign_mask(self) -> int:
        return 1 << (self.bits - 1)

    @property
    def significand_mask(self) -> int:
        return (1 << self.significand_bits) - 1

    @property
    def implicit_bit(self) -> int:
        return 1 << self.significand_bits

    @property
    def exponent_mask(self) -> int:
        return self.exponent_max << self.significand_bits

    @property
    def quiet_bit(self) -> int:
        return self.implicit_bit >> 1

    @property
    def quiet_nan(self) -> int:
        return self.exponent_mask | self.quiet_bit

    def _check(self, rep: int) -> int:
        if isinstance(rep, bool) or not isinstance(rep, int):
            raise TypeError(f"bit representation must be an int, not {type(rep).__name__}")
        if not 0 <= rep <= self.mask:
            raise ValueError(f"{rep:#x} does not fit in {self.bits} bits")
        return rep

    def normalize(self, significand: int) -> tuple[int, int]:
        """Return (normalized exponent, significand shifted up to the implicit bit)."""
        shift = self.implicit_bit.bit_length() - significand.bit_length()
        return 1 - shift, (significand << shift) & self.mask

    def from_parts(self, sign: bool, exponent: int, significand: int) -> int:
        """Build a representation from raw sign, exponent and significand fields."""
        return (
            (int(bool(sign)) << (self.bits - 1))
            | ((exponent << self.significand_bits) & self.exponent_mask)
            | (significand & self.significand_mask)
        )

    def is_subnormal(self, rep: int) -> bool:
        """True when the exponent field is zero (zeros count as subnormal)."""
        return self._check(rep) & self.exponent_mask == 0

    def is_nan(self, rep: int) -> bool:
        return self._check(rep) & ~self.sign_mask > self.exponent_mask

    def eq_repr(self, a: int, b: int) -> bool:
        """Bitwise equality, except that any two NaNs compare equal."""
        if self.is_nan(a) and self.is_nan(b):
            return True
        return self._check(a) == self._check(b)

    def is_sign_negative(self, rep: int) -> bool:
        return bool(self._check(rep) & self.sign_mask)

    def exp(self, rep: int) -> int:
        """The biased exponent field."""
        return (self._check(rep) & self.exponent_mask) >> self.significand_bits

    def frac(self, rep: int) -> int:
        """The significand field without the implicit bit."""
        return self._check(rep) & self.significand_mask

    def imp_frac(self, rep: int) -> int:
        """The significand field with the implicit bit set."""
        return self.frac(rep) | self.implicit_bit

    def signed_repr(self, rep: int) -> int:
        """The representation read as a two's complement signed integer."""
        rep = self._check(rep)
        return rep - (1 << self.bits) if rep & self.sign_mask else rep


F16 = FloatFormat(16, 10)
F32 = FloatFormat(32, 23)
F64 = FloatFormat(64, 52)
F128 = FloatFormat(128, 112)


def _encode_wide(fmt: FloatFormat, value: float) -> int:
    sign = fmt.sign_mask if math.copysign(1.0, value) < 0 else 0
    if math.isnan(value):
        return sign | fmt.quiet_nan
    if math.isinf(value):
        return sign | fmt.exponent_mask
    if value == 0.0:
        return sign
    if fmt.significand_bits < 52:
        raise ValueError(f"a {fmt.bits}-bit format cannot hold every double exactly")
    mantissa, exponent = math.frexp(abs(value))
    digits = int(mantissa * (1 << 53))
    biased = exponent - 1 + fmt.exponent_bias
    if not 1 <= biased < fmt.exponent_max:
        raise ValueError(f"{value!r} is out of the normal range of a {fmt.bits}-bit format")
    significand = (digits << (fmt.significand_bits - 52)) & fmt.significand_mask
    return sign | (biased << fmt.significand_bits) | significand


def float_to_bits(fmt: FloatFormat, value: float) -> int:
    """Round a Python float to ``fmt`` (nearest, ties to even) and return its bits."""
    value = float(value)
    code = _STRUCT_CODES.get(fmt.bits)
    if code is not None and fmt == FloatFormat(fmt.bits, {16: 10, 32: 23, 64: 52}[fmt.bits]):
        try:
            packed = struct.pack("<" + code, value)
        except OverflowError:
            sign = fmt.sign_mask if value < 0 else 0
            return sign | fmt.exponent_mask
        return int.from_bytes(packed, "little")
    return _encode_wide(fmt, value)


def bits_to_float(fmt: FloatFormat, rep: int) -> float:
    """Return the Python float nearest to the value that ``rep`` encodes."""
    rep = fmt._check(rep)
    code = _STRUCT_CODES.get(fmt.bits)
    if code is not None and fmt == FloatFormat(fmt.bits, {16: 10, 32: 23, 64: 52}[fmt.bits]):
        return struct.unpack("<" + code, rep.to_bytes(fmt.bits // 8, "little"))[0]
    negative = fmt.is_sign_negative(rep)
    exponent = fmt.exp(rep)
    fraction = fmt.frac(rep)
    if exponent == fmt.exponent_max:
        magnitude = math.nan if fraction else math.inf
    else:
        if exponent == 0:
            digits, power = fraction, 1 - fmt.exponent_bias - fmt.significand_bits
        else:
            digits = fraction | fmt.implicit_bit
            power = exponent - fmt.exponent_bias - fmt.significand_bits
        exact = Fraction(digits) * (Fraction(2) ** power)
        try:
            magnitude = float(exact)
        except OverflowError:
            magnitude = math.inf
    return math.copysign(magnitude, -1.0 if negative else 1.0)
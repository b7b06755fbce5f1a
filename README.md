# softfloat

Pure-Python, bit-exact IEEE-754 floating-point arithmetic. Every operation
works on the raw bit pattern of a value, held in a plain non-negative `int`,
and rounds to nearest, ties to even, with the usual handling of signed zeros,
subnormals, infinities and NaNs.

It is useful wherever you need to know exactly which bits an operation
produces: checking another implementation, generating test vectors, or
working with formats the host has no native type for, such as binary16
(half) and binary128 (quad).

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Formats

`softfloat.format.FloatFormat(bits, significand_bits)` describes a binary
interchange format. Its properties give the derived widths and masks
(`exponent_bits`, `exponent_max`, `exponent_bias`, `sign_mask`,
`significand_mask`, `implicit_bit`, `exponent_mask`, `quiet_bit`,
`quiet_nan`, `mask`), and its methods inspect bit patterns: `normalize`,
`from_parts`, `is_subnormal`, `is_nan`, `eq_repr` (bitwise equality, with any
two NaNs equal), `is_sign_negative`, `exp`, `frac`, `imp_frac` and
`signed_repr`.

The module provides the standard formats `F16`, `F32`, `F64` and `F128`, and
two helpers for moving between Python floats and bit patterns:

- `float_to_bits(fmt, value)` rounds a Python float to `fmt`. For binary128 it
  raises `ValueError` when the value lies outside the format's normal range.
- `bits_to_float(fmt, rep)` returns the Python float nearest to `rep`.

Functions that take bit patterns raise `TypeError` for non-integers and
`ValueError` for integers that do not fit in the format's width.

## Operations

| Module              | Operations                                                                 |
|---------------------|----------------------------------------------------------------------------|
| `softfloat.add`     | `add(fmt, a, b)`, `addsf3`, `adddf3`, `addtf3`                             |
| `softfloat.sub`     | `sub(fmt, a, b)`, `subsf3`, `subdf3`, `subtf3`                             |
| `softfloat.mul`     | `mul(fmt, a, b)`, `mulsf3`, `muldf3`, `multf3`                             |
| `softfloat.div32`   | `div32(fmt, a, b)` for 32-bit formats, `divsf3`                            |
| `softfloat.div64`   | `div64(fmt, a, b)` for 64-bit formats, `divdf3`                            |
| `softfloat.pow`     | `powi(fmt, a, b)`, `powisf2`, `powidf2`                                    |
| `softfloat.cmp`     | `Ordering`, `cmp`, `unord`, `lesf2`, `gesf2`, `unordsf2`, `ledf2`, `gedf2`, `unorddf2`, `letf2`, `getf2`, `unordtf2` |
| `softfloat.extend`  | `extend(src, dst, rep)`, `extendhfsf2`, `extendsfdf2`, `extendsftf2`, `extenddftf2` |
| `softfloat.trunc`   | `trunc(src, dst, rep)`, `truncsfhf2`, `truncdfhf2`, `truncdfsf2`, `trunctfsf2`, `trunctfdf2` |
| `softfloat.conv`    | integer to float and float to integer conversions                          |

The suffixes name the formats involved: `hf` is binary16, `sf` binary32,
`df` binary64 and `tf` binary128. `add`, `sub`, `mul`, `powi` and `cmp` work
for any `FloatFormat`. `extend` and `trunc` raise `ValueError` when the
destination is not wider (or narrower) than the source.

`powi` raises a value to a 32-bit signed integer power by repeated rounded
multiplication; for a negative power it returns the correctly rounded
reciprocal of the product.

## Example

```python
from softfloat.add import adddf3
from softfloat.format import F32, F64, bits_to_float, float_to_bits
from softfloat.mul import mulsf3

total = adddf3(float_to_bits(F64, 0.1), float_to_bits(F64, 0.2))
print(hex(total))                  # 0x3fd3333333333334
print(bits_to_float(F64, total))   # 0.30000000000000004

product = mulsf3(float_to_bits(F32, 1.5), float_to_bits(F32, 2.0))
print(hex(product))                # 0x40400000, the bits of 3.0
```

## Comparisons

`cmp(fmt, a, b)` returns an `Ordering` (`LESS`, `EQUAL`, `GREATER` or
`UNORDERED`); `+0` and `-0` compare equal. The format-specific functions
return small integers: negative, zero or positive for less, equal or greater.
When either operand is a NaN the `le` functions report `1` and the `ge`
functions report `-1` (see `Ordering.to_le_abi` and `Ordering.to_ge_abi`), so
that a caller testing `<= 0` or `>= 0` gets "false". The `unord` functions
return `1` when either operand is a NaN.

## Conversions

`softfloat.conv` has `u32_to_f32_bits`, `u32_to_f64_bits`, `u64_to_f32_bits`,
`u64_to_f64_bits`, `u128_to_f32_bits` and `u128_to_f64_bits`, which round an
unsigned integer to nearest, ties to even. `unsigned_to_float(fmt, value,
width)` and `signed_to_float(fmt, value, width)` pick among them; they
accept `F32` or `F64` with widths 32, 64 or 128.

`float_to_unsigned(fmt, rep, width)` and `float_to_signed(fmt, rep, width)`
truncate toward zero to an integer of 8, 16, 32, 64 or 128 bits, for any
format. They saturate: values too large give the maximum (or, for signed
results, the minimum for negative inputs), NaN gives zero, and negative
values give zero for unsigned results.

## Limits

- Division is provided for 32-bit and 64-bit formats only; there is no
  binary16 or binary128 division.
- Integer-to-float conversion targets binary32 and binary64 only.
- Only round to nearest, ties to even is supported, and no floating-point
  exception flags (inexact, overflow and so on) are reported.
- It is a library only; there is no command-line tool.
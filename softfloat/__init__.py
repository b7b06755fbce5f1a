"""Bit-exact software IEEE-754 arithmetic, comparison and conversion on bit patterns."""

__version__ = "0.1.0"

__all__ = [
    "add",
    "cmp",
    "conv",
    "div32",
    "div64",
    "extend",
    "format",
    "mul",
    "pow",
    "sub",
    "trunc",
]
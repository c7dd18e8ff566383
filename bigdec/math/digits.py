"""Conversion between ints and decimal digit strings of any length.

CPython refuses int <-> str conversions above 4300 digits by default
(sys.get_int_max_str_digits). Longer values are split on a power of ten and
converted piecewise, so arbitrarily long decimals still parse and render.
"""

from __future__ import annotations

from bigdec.errors import InvalidArgumentError
from bigdec.math.pow10 import pow10

__all__ = ["int_from_digits", "digits_of"]

# Safely below the interpreter's default conversion limit
_CHUNK_DIGITS = 4000


def int_from_digits(digits: str) -> int:
    """Convert a string of ASCII digits to a non-negative int.

    The caller validates that digits is non-empty and contains only 0-9.
    """
    if len(digits) <= _CHUNK_DIGITS:
        return int(digits)
    split = len(digits) // 2
    high = int_from_digits(digits[:split])
    low = int_from_digits(digits[split:])
    return high * pow10(len(digits) - split) + low


def digits_of(n: int) -> str:
    """Return the decimal digits of a non-negative int, without sign."""
    if n < 0:
        raise InvalidArgumentError("digits_of requires a non-negative int")
    if n < pow10(_CHUNK_DIGITS):
        return str(n)
    # bit_length * log10(2) estimates the digit count; split near the middle
    k = (n.bit_length() * 30103 // 100000) // 2
    high, low = divmod(n, pow10(k))
    return digits_of(high) + digits_of(low).rjust(k, "0")

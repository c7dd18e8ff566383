"""Arbitrary-precision signed decimal numbers.

A BigDecimal is an unscaled int and a base-10 scale:

    value = unscaled * 10^(-scale)

A positive scale counts the digits after the decimal point; a negative scale
means the unscaled value is multiplied by 10^(-scale). Example: 123.45 is
stored as (12345, 2) and 1.23e+5 as (123, -3).

Values are immutable and scales are never normalized, so "1.50" and "1.5"
stay structurally different while comparing equal.
"""

from __future__ import annotations

import math
import numbers
import sys
from decimal import Decimal
from fractions import Fraction

from bigdec.config import DEFAULT_CONFIG, DecimalConfig
from bigdec.constants import (
    INVALID_PLACEHOLDER,
    MAX_EXPONENT,
    MAX_SCALE,
    MIN_EXPONENT,
    MIN_SCALE,
)
from bigdec.errors import (
    DecimalFormatError,
    DivisionByZeroError,
    DomainError,
    InvalidArgumentError,
    OutOfRangeError,
)
from bigdec.math.digits import digits_of, int_from_digits
from bigdec.math.pow10 import pow10
from bigdec.rounding import RoundingMode, div_trunc, round_quotient

__all__ = ["BigDecimal", "parse"]

# Longest exponent digit string that can still fit a signed 64-bit integer
_MAX_EXPONENT_DIGITS = len(str(MAX_EXPONENT))

_LOG10_2 = math.log10(2)


def _check_scale(scale: int) -> int:
    """Validate that a scale is an int in the signed 32-bit range."""
    if not isinstance(scale, int) or isinstance(scale, bool):
        raise TypeError(f"Scale must be int, got {type(scale).__name__}")
    if not MIN_SCALE <= scale <= MAX_SCALE:
        raise OutOfRangeError(f"Scale {scale} outside [{MIN_SCALE}, {MAX_SCALE}]")
    return scale


def _is_digits(s: str) -> bool:
    """True if s is non-empty and made only of ASCII 0-9."""
    return s.isascii() and s.isdigit()


def _parse_exponent(exponent_str: str, original: str) -> int:
    """Parse an optionally signed exponent into the signed 64-bit range."""
    digits = exponent_str[1:] if exponent_str[0] in "+-" else exponent_str
    if not _is_digits(digits):
        raise DecimalFormatError(f"Invalid exponent in scientific notation: {original!r}")

    significant = digits.lstrip("0")
    if len(significant) > _MAX_EXPONENT_DIGITS:
        raise OutOfRangeError(f"Exponent out of int64 range: {original!r}")
    exponent = int(significant or "0")
    if exponent_str[0] == "-":
        exponent = -exponent
    if not MIN_EXPONENT <= exponent <= MAX_EXPONENT:
        raise OutOfRangeError(f"Exponent out of int64 range: {original!r}")
    return exponent


def _int_str(n: int) -> str:
    """Signed decimal digits of n."""
    return "-" + digits_of(-n) if n < 0 else digits_of(n)


def _log10_bounds(unscaled: int, scale: int) -> tuple[float, float]:
    """Bounds on log10 of the magnitude of a non-zero value, from its bit length."""
    bits = abs(unscaled).bit_length()
    return (bits - 1) * _LOG10_2 - scale, bits * _LOG10_2 - scale


class BigDecimal:
    """Immutable decimal stored as (unscaled int, scale).

    BigDecimal() with no arguments is the uninitialized value: it renders as
    "<nil>", is falsy, and any arithmetic on it raises InvalidArgumentError.

    Equality, ordering and hashing are numeric, so BigDecimal(150, 2) equals
    BigDecimal(15, 1) and the int 3 equals BigDecimal(300, 2). Use
    same_repr() to compare the stored fields.

    Attributes:
        unscaled: The int coefficient (None for the uninitialized value)
        scale: Number of fractional digits, negative for large magnitudes
    """

    __slots__ = ("_unscaled", "_scale")
    _unscaled: int | None
    _scale: int

    def __init__(self, unscaled: int | None = None, scale: int = 0) -> None:
        """Create a BigDecimal from an unscaled int and a scale.

        Raises:
            TypeError: If unscaled or scale is not an int
            OutOfRangeError: If scale does not fit 32 bits
            InvalidArgumentError: If unscaled is None but scale is not 0
        """
        if unscaled is None:
            if scale != 0:
                raise InvalidArgumentError("Uninitialized BigDecimal cannot carry a scale")
            self._unscaled = None
            self._scale = 0
            return
        if not isinstance(unscaled, int) or isinstance(unscaled, bool):
            raise TypeError(f"BigDecimal requires int, got {type(unscaled).__name__}")
        self._unscaled = int(unscaled)
        self._scale = _check_scale(scale)

    # --- Properties ---

    @property
    def unscaled(self) -> int | None:
        """The unscaled coefficient."""
        return self._unscaled

    @property
    def scale(self) -> int:
        """Digits after the decimal point (negative: trailing zeros omitted)."""
        return self._scale

    @property
    def is_valid(self) -> bool:
        """False only for the uninitialized BigDecimal()."""
        return self._unscaled is not None

    @property
    def sign(self) -> int:
        """-1, 0 or 1."""
        u = self._value()
        return (u > 0) - (u < 0)

    def is_zero(self) -> bool:
        return self._value() == 0

    def _value(self) -> int:
        if self._unscaled is None:
            raise InvalidArgumentError("Operation on uninitialized BigDecimal")
        return self._unscaled

    # --- Constructors ---

    @classmethod
    def new(cls, unscaled: int, scale: int) -> BigDecimal:
        """Create from an unscaled int and a scale."""
        return cls(unscaled, scale)

    @classmethod
    def zero(cls, scale: int = 0) -> BigDecimal:
        """Create a zero with the given scale."""
        return cls(0, scale)

    @classmethod
    def from_int(cls, value: int) -> BigDecimal:
        """Create from an int at scale 0."""
        return cls(value, 0)

    @classmethod
    def from_string(cls, text: str) -> BigDecimal:
        """Parse decimal or scientific notation.

        Accepts "123", "-123.45", "+0.5", ".5", "123.", "1.23e+5", "-4.5E-2".
        The scale is the number of fractional digits minus the exponent:
        "1.23e+5" gives (123, -3), "-4.5E-2" gives (-45, 3).

        Raises:
            DecimalFormatError: If text is not a valid number
            OutOfRangeError: If the exponent does not fit 64 bits or the
                resulting scale does not fit 32 bits
        """
        if not isinstance(text, str):
            raise TypeError(f"from_string requires str, got {type(text).__name__}")
        if text == "":
            raise DecimalFormatError("Cannot parse empty string to BigDecimal")

        body = text
        negative = False
        if body[0] in "+-":
            negative = body[0] == "-"
            body = body[1:]
        if body == "":
            raise DecimalFormatError(f"Missing digits after sign: {text!r}")

        exponent = 0
        e_index = next((i for i, ch in enumerate(body) if ch in "eE"), -1)
        if e_index != -1:
            mantissa = body[:e_index]
            exponent_str = body[e_index + 1 :]
            if exponent_str == "":
                raise DecimalFormatError(
                    f"Invalid scientific notation: missing exponent after 'e' in {text!r}"
                )
            exponent = _parse_exponent(exponent_str, text)
        else:
            mantissa = body

        parts = mantissa.split(".")
        if len(parts) > 2:
            raise DecimalFormatError(
                f"Invalid decimal string format: {text!r} (multiple decimal points)"
            )
        integer_part = parts[0]
        fractional_part = parts[1] if len(parts) == 2 else ""
        if fractional_part and not _is_digits(fractional_part):
            raise DecimalFormatError(f"Invalid character in fractional part: {text!r}")

        digits = integer_part + fractional_part
        if not _is_digits(digits):
            raise DecimalFormatError(f"Invalid characters in number part: {text!r}")

        unscaled = int_from_digits(digits)
        if negative:
            unscaled = -unscaled

        scale = len(fractional_part) - exponent
        if not MIN_SCALE <= scale <= MAX_SCALE:
            raise OutOfRangeError(f"Scale {scale} of {text!r} does not fit 32 bits")
        return cls(unscaled, scale)

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> BigDecimal:
        """Parse ASCII bytes the same way as from_string."""
        raw = bytes(data)
        if not raw:
            raise DecimalFormatError("Cannot parse empty bytes to BigDecimal")
        try:
            text = raw.decode("ascii")
        except UnicodeDecodeError as err:
            raise DecimalFormatError(f"Non-ASCII bytes in decimal input: {raw!r}") from err
        return cls.from_string(text)

    @classmethod
    def from_rational(
        cls,
        value: numbers.Rational | None,
        precision: int,
        mode: RoundingMode | str,
    ) -> BigDecimal:
        """Convert a rational number to a BigDecimal with precision fractional digits.

        Non-terminating expansions are rounded with mode: 1/3 at precision 2
        and HALF_EVEN gives (33, 2).

        Args:
            value: A Fraction or int
            precision: Scale of the result, non-negative
            mode: Rounding mode (member or name)

        Raises:
            InvalidArgumentError: If value is None, precision is negative or
                mode is unknown
            RoundingRequiredError: If mode is UNNECESSARY and the value has
                more than precision fractional digits
        """
        if value is None:
            raise InvalidArgumentError("Cannot create BigDecimal from None")
        if not isinstance(value, numbers.Rational) or isinstance(value, bool):
            raise TypeError(f"from_rational requires a rational, got {type(value).__name__}")
        if not isinstance(precision, int) or isinstance(precision, bool):
            raise TypeError(f"Precision must be int, got {type(precision).__name__}")
        if precision < 0:
            raise InvalidArgumentError(f"Precision must be non-negative, got {precision}")
        _check_scale(precision)
        rounding = RoundingMode.coerce(mode)

        numerator = int(value.numerator)
        denominator = int(value.denominator)

        if numerator == 0:
            return cls(0, precision)
        if denominator == 1 and precision == 0:
            return cls(numerator, 0)

        return cls(round_quotient(numerator * pow10(precision), denominator, rounding), precision)

    @classmethod
    def from_float(cls, value: float, config: DecimalConfig = DEFAULT_CONFIG) -> BigDecimal:
        """Convert the exact binary value of a float.

        An int is taken exactly at scale 0, the same as from_int.

        The float is expanded to the Fraction it represents (0.1 is
        3602879701896397/36028797018963968) and rounded to
        config.float_precision digits with config.float_rounding.

        Raises:
            DomainError: If value is infinite or NaN
        """
        if not isinstance(value, (float, int)) or isinstance(value, bool):
            raise TypeError(f"from_float requires float, got {type(value).__name__}")
        if isinstance(value, int):
            return cls.from_int(value)
        if math.isinf(value):
            raise DomainError("Cannot convert infinity to BigDecimal")
        if math.isnan(value):
            raise DomainError("Cannot convert NaN to BigDecimal")
        if value == 0:
            return cls(0, 0)
        return cls.from_rational(Fraction(value), config.float_precision, config.float_rounding)

    @classmethod
    def from_decimal(cls, value: Decimal) -> BigDecimal:
        """Convert a standard library Decimal exactly, keeping its exponent.

        Raises:
            DomainError: If value is infinite or NaN
        """
        if not isinstance(value, Decimal):
            raise TypeError(f"from_decimal requires Decimal, got {type(value).__name__}")
        if not value.is_finite():
            raise DomainError(f"Cannot convert {value} to BigDecimal")
        sign, digits, exponent = value.as_tuple()
        unscaled = int_from_digits("".join(map(str, digits)))
        return cls(-unscaled if sign else unscaled, -int(exponent))

    # --- Conversion ---

    def to_string(self) -> str:
        """Canonical text: optional "-", digits, optional "." and scale digits.

        Negative scales are expanded to a plain integer, never exponent form.
        """
        u = self._unscaled
        if u is None:
            return INVALID_PLACEHOLDER
        scale = self._scale
        if scale == 0:
            return _int_str(u)
        if scale < 0:
            return _int_str(u * pow10(-scale))

        # At least one integer digit, then exactly `scale` fractional digits
        digits = digits_of(abs(u)).rjust(scale + 1, "0")
        sign = "-" if u < 0 else ""
        return f"{sign}{digits[:-scale]}.{digits[-scale:]}"

    def to_fraction(self) -> Fraction:
        """Exact value as a Fraction."""
        u = self._value()
        if self._scale <= 0:
            return Fraction(u * pow10(-self._scale))
        return Fraction(u, pow10(self._scale))

    def to_decimal(self) -> Decimal:
        """Exact value as a standard library Decimal with the same exponent."""
        u = self._value()
        digits = tuple(int(ch) for ch in digits_of(abs(u)))
        return Decimal((1 if u < 0 else 0, digits, -self._scale))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        if self._unscaled is None:
            return "BigDecimal()"
        return f"BigDecimal({self._unscaled}, {self._scale})"

    def __int__(self) -> int:
        """Integer part, truncated toward zero."""
        u = self._value()
        if self._scale <= 0:
            return u * pow10(-self._scale)
        return div_trunc(u, pow10(self._scale))

    def __float__(self) -> float:
        return float(self.to_fraction())

    def __bool__(self) -> bool:
        return self._unscaled is not None and self._unscaled != 0

    # --- Rescale ---

    def rescale(self, scale: int, mode: RoundingMode | str | None = None) -> BigDecimal:
        """Return an equal or rounded value at the given scale.

        Raising the scale multiplies by a power of ten and is always exact.
        Lowering it divides and rounds with mode; without a mode an inexact
        result raises RoundingRequiredError.

        Examples:
            BigDecimal(25, 1).rescale(0, RoundingMode.HALF_EVEN) -> BigDecimal(2, 0)
            BigDecimal(5, 1).rescale(3) -> BigDecimal(500, 3)
        """
        u = self._value()
        _check_scale(scale)
        if scale == self._scale:
            return self
        if scale > self._scale:
            return BigDecimal(u * pow10(scale - self._scale), scale)
        rounding = RoundingMode.UNNECESSARY if mode is None else RoundingMode.coerce(mode)
        return BigDecimal(round_quotient(u, pow10(self._scale - scale), rounding), scale)

    def _operand(self, other: object) -> BigDecimal | None:
        """Promote other to a valid BigDecimal, or None if unsupported."""
        if isinstance(other, BigDecimal):
            other._value()
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return BigDecimal(other, 0)
        return None

    def _require_operand(self, other: object, op: str) -> BigDecimal:
        result = self._operand(other)
        if result is None:
            raise TypeError(f"Unsupported operand for {op}: {type(other).__name__}")
        return result

    def _aligned(self, other: BigDecimal) -> tuple[int, int, int]:
        """Unscaled values of self and other at the larger of the two scales."""
        scale = max(self._scale, other._scale)
        a = self.rescale(scale)._value()
        b = other.rescale(scale)._value()
        return a, b, scale

    # --- Arithmetic ---

    def add(self, other: BigDecimal | int) -> BigDecimal:
        """Sum at the larger of the two scales."""
        self._value()
        a, b, scale = self._aligned(self._require_operand(other, "add"))
        return BigDecimal(a + b, scale)

    def sub(self, other: BigDecimal | int) -> BigDecimal:
        """Difference at the larger of the two scales."""
        self._value()
        a, b, scale = self._aligned(self._require_operand(other, "sub"))
        return BigDecimal(a - b, scale)

    def mul(self, other: BigDecimal | int) -> BigDecimal:
        """Exact product; the result scale is the sum of the operand scales."""
        u = self._value()
        rhs = self._require_operand(other, "mul")
        return BigDecimal(u * rhs._value(), _check_scale(self._scale + rhs._scale))

    def div(self, other: BigDecimal | int, scale: int, mode: RoundingMode | str) -> BigDecimal:
        """Quotient at the given scale, rounded with mode.

        Raises:
            DivisionByZeroError: If other is zero
            RoundingRequiredError: If mode is UNNECESSARY and the quotient
                does not fit the scale exactly
        """
        u = self._value()
        rhs = self._require_operand(other, "div")
        rounding = RoundingMode.coerce(mode)
        _check_scale(scale)
        if rhs._value() == 0:
            raise DivisionByZeroError(f"Division by zero: {self} / {rhs}")

        # self / rhs * 10^scale = u * 10^shift / rhs.unscaled
        shift = scale - self._scale + rhs._scale
        if shift >= 0:
            numerator = u * pow10(shift)
            divisor = rhs._value()
        else:
            numerator = u
            divisor = rhs._value() * pow10(-shift)
        return BigDecimal(round_quotient(numerator, divisor, rounding), scale)

    def div_rem(
        self, other: BigDecimal | int, scale: int, mode: RoundingMode | str
    ) -> tuple[BigDecimal, BigDecimal]:
        """Quotient and exact remainder, with self == other * q + r.

        With scale 0 and RoundingMode.DOWN this is truncating integer division.
        """
        rhs = self._require_operand(other, "div_rem")
        quotient = self.div(rhs, scale, mode)
        return quotient, self.sub(rhs.mul(quotient))

    def rem(self, other: BigDecimal | int, scale: int, mode: RoundingMode | str) -> BigDecimal:
        """Remainder left by div(other, scale, mode)."""
        return self.div_rem(other, scale, mode)[1]

    def cmp(self, other: BigDecimal | int) -> int:
        """Compare numerically: -1, 0 or 1.

        Signs and digit-count bounds decide most comparisons, so values with
        far apart scales such as 1e2000000000 and 1 are never expanded.
        """
        a_sign = self.sign
        rhs = self._require_operand(other, "cmp")
        b_sign = rhs.sign
        if a_sign != b_sign:
            return (a_sign > b_sign) - (a_sign < b_sign)
        if a_sign == 0:
            return 0

        a_low, a_high = _log10_bounds(self._value(), self._scale)
        b_low, b_high = _log10_bounds(rhs._value(), rhs._scale)
        if a_high + 1 < b_low:
            return -a_sign
        if b_high + 1 < a_low:
            return a_sign

        a, b, _ = self._aligned(rhs)
        return (a > b) - (a < b)

    def neg(self) -> BigDecimal:
        return BigDecimal(-self._value(), self._scale)

    def abs(self) -> BigDecimal:
        return BigDecimal(abs(self._value()), self._scale)

    def same_repr(self, other: BigDecimal) -> bool:
        """True if both unscaled value and scale are identical."""
        return (
            isinstance(other, BigDecimal)
            and self._unscaled == other._unscaled
            and self._scale == other._scale
        )

    # --- Operators ---

    def __add__(self, other: object) -> BigDecimal:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self.add(rhs)

    def __radd__(self, other: object) -> BigDecimal:
        return self.__add__(other)

    def __sub__(self, other: object) -> BigDecimal:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self.sub(rhs)

    def __rsub__(self, other: object) -> BigDecimal:
        lhs = self._operand(other)
        if lhs is None:
            return NotImplemented
        return lhs.sub(self)

    def __mul__(self, other: object) -> BigDecimal:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self.mul(rhs)

    def __rmul__(self, other: object) -> BigDecimal:
        return self.__mul__(other)

    def __neg__(self) -> BigDecimal:
        return self.neg()

    def __pos__(self) -> BigDecimal:
        return self

    def __abs__(self) -> BigDecimal:
        return self.abs()

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BigDecimal) and (self._unscaled is None or other._unscaled is None):
            return self._unscaled is None and other._unscaled is None
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        if self._unscaled is None:
            return False
        return self.cmp(rhs) == 0

    def __lt__(self, other: object) -> bool:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self.cmp(rhs) < 0

    def __le__(self, other: object) -> bool:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self.cmp(rhs) <= 0

    def __gt__(self, other: object) -> bool:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self.cmp(rhs) > 0

    def __ge__(self, other: object) -> bool:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self.cmp(rhs) >= 0

    def __hash__(self) -> int:
        # Equal to hash(self.to_fraction()), computed modulo the hash prime
        # the way decimal.Decimal does, without building 10^|scale|
        if self._unscaled is None:
            return hash(None)
        modulus = sys.hash_info.modulus
        result = abs(self._unscaled) % modulus * pow(10, -self._scale, modulus) % modulus
        if self._unscaled < 0:
            result = -result
        return -2 if result == -1 else result


def parse(text: str | bytes | bytearray | memoryview) -> BigDecimal:
    """Parse text or ASCII bytes into a BigDecimal."""
    if isinstance(text, (bytes, bytearray, memoryview)):
        return BigDecimal.from_bytes(text)
    return BigDecimal.from_string(text)

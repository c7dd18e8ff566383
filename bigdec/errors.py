"""Error classes for BigDecimal operations.

Every error raised by the package derives from DecimalError. Leaf classes
also derive from the closest builtin so callers catching ValueError or
ZeroDivisionError keep working.
"""


class DecimalError(Exception):
    """Base error for BigDecimal operations."""

    pass


class DecimalFormatError(DecimalError, ValueError):
    """Input text is not a valid decimal or scientific number."""

    pass


class OutOfRangeError(DecimalError, OverflowError):
    """Exponent or scale does not fit its integer range."""

    pass


class InvalidArgumentError(DecimalError, ValueError):
    """Argument violates a contract (None input, negative precision, unknown mode)."""

    pass


class RoundingRequiredError(DecimalError, ArithmeticError):
    """UNNECESSARY rounding was requested but the result is inexact."""

    pass


class DomainError(DecimalError, ValueError):
    """Infinite or NaN input cannot be represented as a decimal."""

    pass


class DivisionByZeroError(DecimalError, ZeroDivisionError):
    """Division or remainder by zero."""

    pass


class ScanError(DecimalError):
    """Database value could not be converted to a BigDecimal."""

    pass


class ScanTypeError(ScanError, TypeError):
    """Database value has a type the scan adapter does not accept."""

    pass


__all__ = [
    "DecimalError",
    "DecimalFormatError",
    "OutOfRangeError",
    "InvalidArgumentError",
    "RoundingRequiredError",
    "DomainError",
    "DivisionByZeroError",
    "ScanError",
    "ScanTypeError",
]

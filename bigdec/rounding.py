"""Rounding policy for inexact integer division.

Every operation that drops digits goes through round_quotient(): a truncating
division followed by a RoundingMode decision on whether to step the quotient
one unit away from zero.
"""

from __future__ import annotations

from enum import Enum

import structlog

from bigdec.errors import DivisionByZeroError, InvalidArgumentError, RoundingRequiredError

__all__ = [
    "RoundingMode",
    "div_trunc",
    "divmod_trunc",
    "round_quotient",
]

logger = structlog.get_logger()


class RoundingMode(str, Enum):
    """How a truncated quotient is adjusted when the division is inexact."""

    DOWN = "down"  # toward zero
    UP = "up"  # away from zero
    CEILING = "ceiling"  # toward +infinity
    FLOOR = "floor"  # toward -infinity
    HALF_UP = "half_up"  # nearest, ties away from zero
    HALF_DOWN = "half_down"  # nearest, ties toward zero
    HALF_EVEN = "half_even"  # nearest, ties to the even neighbor
    UNNECESSARY = "unnecessary"  # inexact results are an error

    def __str__(self) -> str:
        return self.value

    @classmethod
    def coerce(cls, value: RoundingMode | str) -> RoundingMode:
        """Return the member for value, accepting its string name case-insensitively.

        Raises:
            InvalidArgumentError: If value does not name a rounding mode
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise InvalidArgumentError(f"Unsupported rounding mode: {value!r}")

    def should_round_up(
        self,
        remainder: int,
        divisor: int,
        *,
        quotient: int,
        negative: bool = False,
    ) -> bool:
        """Decide whether a truncated quotient moves one unit away from zero.

        Args:
            remainder: Remainder of the truncating division (any sign)
            divisor: The divisor (any sign, non-zero)
            quotient: The truncated quotient; its parity breaks HALF_EVEN ties
            negative: True if the exact value being rounded is negative

        Returns:
            True if the magnitude of the quotient should be incremented

        Raises:
            RoundingRequiredError: For UNNECESSARY with a non-zero remainder
        """
        if remainder == 0:
            return False

        if self is RoundingMode.DOWN:
            return False
        if self is RoundingMode.UP:
            return True
        if self is RoundingMode.CEILING:
            return not negative
        if self is RoundingMode.FLOOR:
            return negative
        if self is RoundingMode.UNNECESSARY:
            raise RoundingRequiredError(
                f"Rounding necessary: remainder {remainder} of division by {divisor}"
            )

        # Compare |r| with |d| / 2 without halving an odd divisor
        twice = 2 * abs(remainder)
        half = abs(divisor)
        if twice != half:
            return twice > half

        # Exact tie
        if self is RoundingMode.HALF_UP:
            return True
        if self is RoundingMode.HALF_DOWN:
            return False
        return quotient % 2 == 1


def div_trunc(a: int, b: int) -> int:
    """Integer division with truncation toward zero.

    Python's // rounds toward negative infinity; decimal arithmetic truncates.

    Examples:
        -7 // 3 = -3, div_trunc(-7, 3) = -2
    """
    if b == 0:
        raise DivisionByZeroError(f"Division by zero: {a} / 0")
    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))


def divmod_trunc(a: int, b: int) -> tuple[int, int]:
    """Truncating divmod: the remainder takes the sign of the dividend.

    Always a == b * q + r with abs(r) < abs(b).
    """
    q = div_trunc(a, b)
    return q, a - b * q


def round_quotient(numerator: int, divisor: int, mode: RoundingMode) -> int:
    """Divide and round the quotient according to mode.

    The increment follows the sign of the exact value numerator / divisor, so
    -0.5 rounded UP gives -1 even though the truncated quotient is 0.

    Raises:
        DivisionByZeroError: If divisor is zero
        RoundingRequiredError: If mode is UNNECESSARY and the division is inexact
    """
    quotient, remainder = divmod_trunc(numerator, divisor)
    if remainder == 0:
        return quotient

    negative = (numerator < 0) != (divisor < 0)
    try:
        round_up = mode.should_round_up(
            remainder, divisor, quotient=quotient, negative=negative
        )
    except RoundingRequiredError:
        logger.debug(
            "decimal_rounding_required",
            numerator=str(numerator),
            divisor=str(divisor),
        )
        raise

    if not round_up:
        return quotient
    return quotient - 1 if negative else quotient + 1

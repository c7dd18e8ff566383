"""Conversion configuration for BigDecimal."""

from __future__ import annotations

import os
from dataclasses import dataclass

from bigdec.constants import FLOAT_PRECISION, PRECOMPUTED_POWERS
from bigdec.errors import InvalidArgumentError
from bigdec.rounding import RoundingMode


@dataclass(frozen=True)
class DecimalConfig:
    """Centralized configuration for conversions that need a precision.

    Attributes:
        float_precision: Fractional digits produced by from_float (default: 64)
        float_rounding: Rounding mode used by from_float (default: HALF_EVEN)
        precomputed_powers: Highest power of ten a new PowerOfTenCache
            computes eagerly (default: 38)
    """

    float_precision: int = FLOAT_PRECISION
    float_rounding: RoundingMode = RoundingMode.HALF_EVEN
    precomputed_powers: int = PRECOMPUTED_POWERS

    def __post_init__(self) -> None:
        if self.float_precision < 0:
            raise InvalidArgumentError(
                f"float_precision must be non-negative, got {self.float_precision}"
            )
        if self.precomputed_powers < -1:
            raise InvalidArgumentError(
                f"precomputed_powers must be >= -1, got {self.precomputed_powers}"
            )
        # Accept string names from the environment or callers
        object.__setattr__(self, "float_rounding", RoundingMode.coerce(self.float_rounding))

    @classmethod
    def from_env(cls) -> DecimalConfig:
        """Build a configuration from environment variables.

        - BIGDEC_FLOAT_PRECISION: fractional digits for from_float (default: 64)
        - BIGDEC_FLOAT_ROUNDING: rounding mode name for from_float (default: half_even)
        - BIGDEC_PRECOMPUTED_POWERS: eager power-of-ten range (default: 38)
        """
        try:
            precision = int(os.environ.get("BIGDEC_FLOAT_PRECISION", str(FLOAT_PRECISION)))
            powers = int(os.environ.get("BIGDEC_PRECOMPUTED_POWERS", str(PRECOMPUTED_POWERS)))
        except ValueError as err:
            raise InvalidArgumentError(f"Invalid integer in BIGDEC_* environment: {err}") from err
        rounding = os.environ.get("BIGDEC_FLOAT_ROUNDING", RoundingMode.HALF_EVEN.value)
        return cls(
            float_precision=precision,
            float_rounding=RoundingMode.coerce(rounding),
            precomputed_powers=powers,
        )


# Default configuration instance
DEFAULT_CONFIG = DecimalConfig()

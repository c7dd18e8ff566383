"""Numeric bounds and conversion defaults for BigDecimal.

Centralizes the limits shared by the parser, the rescale engine and the
converters.
"""

# Scale is a signed 32-bit integer
MIN_SCALE = -(2**31)
MAX_SCALE = 2**31 - 1

# Scientific-notation exponents are parsed as signed 64-bit integers
MIN_EXPONENT = -(2**63)
MAX_EXPONENT = 2**63 - 1

# Fractional digits used by from_float; well beyond the 17 significant
# digits a float64 needs to round-trip through text
FLOAT_PRECISION = 64

# Powers of ten computed at import (10^38 covers uint128)
PRECOMPUTED_POWERS = 38

# Rendered by str() for a BigDecimal that was never initialized
INVALID_PLACEHOLDER = "<nil>"

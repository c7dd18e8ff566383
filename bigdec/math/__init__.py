"""Integer primitives for BigDecimal.

This package provides:
- PowerOfTenCache: thread-safe memoized powers of ten
- int_from_digits / digits_of: digit-string conversion without length limits
"""

from bigdec.math.digits import digits_of, int_from_digits
from bigdec.math.pow10 import DEFAULT_CACHE, PowerOfTenCache, pow10

__all__ = ["DEFAULT_CACHE", "PowerOfTenCache", "pow10", "digits_of", "int_from_digits"]

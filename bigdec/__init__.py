"""bigdec - arbitrary-precision decimal arithmetic."""

from bigdec.config import DEFAULT_CONFIG, DecimalConfig
from bigdec.decimal import BigDecimal, parse
from bigdec.errors import (
    DecimalError,
    DecimalFormatError,
    DivisionByZeroError,
    DomainError,
    InvalidArgumentError,
    OutOfRangeError,
    RoundingRequiredError,
    ScanError,
    ScanTypeError,
)
from bigdec.math.pow10 import pow10
from bigdec.rounding import RoundingMode

__version__ = "0.1.0"
__all__ = [
    "BigDecimal",
    "RoundingMode",
    "DecimalConfig",
    "DEFAULT_CONFIG",
    "parse",
    "pow10",
    "DecimalError",
    "DecimalFormatError",
    "DivisionByZeroError",
    "DomainError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "RoundingRequiredError",
    "ScanError",
    "ScanTypeError",
    "__version__",
]

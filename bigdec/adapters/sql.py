"""Database scan adapter.

Drivers hand NUMERIC/DECIMAL columns back as str, bytes or None depending on
the driver and column settings. scan() turns any of those into a BigDecimal;
adapt() turns a BigDecimal into the text a driver binds as a parameter.
"""

from __future__ import annotations

import structlog

from bigdec.decimal import BigDecimal
from bigdec.errors import DecimalError, InvalidArgumentError, ScanError, ScanTypeError

__all__ = ["scan", "adapt"]

logger = structlog.get_logger()


def scan(value: object) -> BigDecimal:
    """Convert a database column value to a BigDecimal.

    Args:
        value: None (SQL NULL), str, or bytes-like text

    Returns:
        Parsed BigDecimal; NULL maps to zero at scale 0

    Raises:
        ScanError: If the text is not a valid decimal
        ScanTypeError: If value has any other type
    """
    if value is None:
        return BigDecimal.zero()

    try:
        if isinstance(value, str):
            return BigDecimal.from_string(value)
        if isinstance(value, (bytes, bytearray, memoryview)):
            return BigDecimal.from_bytes(value)
    except DecimalError as err:
        logger.warning(
            "decimal_scan_failed",
            value_type=type(value).__name__,
            error=str(err),
        )
        raise ScanError(f"Failed to scan {type(value).__name__} to BigDecimal: {err}") from err

    raise ScanTypeError(f"Unsupported type for BigDecimal scan: {type(value).__name__}")


def adapt(value: BigDecimal | None) -> str | None:
    """Render a BigDecimal as canonical text for use as a query parameter.

    None passes through as SQL NULL.

    Raises:
        ScanTypeError: If value is not a BigDecimal
        InvalidArgumentError: If value is the uninitialized BigDecimal
    """
    if value is None:
        return None
    if not isinstance(value, BigDecimal):
        raise ScanTypeError(f"adapt requires BigDecimal, got {type(value).__name__}")
    if not value.is_valid:
        raise InvalidArgumentError("Cannot adapt an uninitialized BigDecimal")
    return value.to_string()

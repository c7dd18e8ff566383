"""Pytest configuration and fixtures."""

import pytest

from bigdec import BigDecimal
from bigdec.math.pow10 import PowerOfTenCache


@pytest.fixture
def empty_cache() -> PowerOfTenCache:
    """A power-of-ten cache with nothing precomputed."""
    return PowerOfTenCache(precompute=-1)


@pytest.fixture
def sample_values() -> list[BigDecimal]:
    """Values covering signs, zero and positive/negative scales."""
    return [
        BigDecimal(0, 0),
        BigDecimal(0, 3),
        BigDecimal(1, 0),
        BigDecimal(-1, 0),
        BigDecimal(12345, 2),
        BigDecimal(-12345, 2),
        BigDecimal(567, 1),
        BigDecimal(5, 3),
        BigDecimal(-5, 3),
        BigDecimal(123, -3),
        BigDecimal(-45, -2),
        BigDecimal(10**40 + 7, 20),
    ]


@pytest.fixture
def sample_texts() -> list[str]:
    """Canonical strings that render back unchanged."""
    return [
        "0",
        "7",
        "-7",
        "123.45",
        "-123.45",
        "0.5",
        "0.005",
        "-0.045",
        "1000.00",
        "0.000",
        "98765432109876543210.0123456789",
    ]

"""Test helpers module for shared test utilities.

- factories: BigDecimal construction shortcuts and exact reference values
"""

from tests.helpers.factories import as_fraction, dec

__all__ = ["as_fraction", "dec"]

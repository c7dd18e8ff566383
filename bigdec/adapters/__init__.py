"""Adapters between BigDecimal and external representations.

- sql: database scan/bind helpers
- serialization: pydantic field type and JSON helpers
"""

from bigdec.adapters.serialization import DecimalText, from_json, to_json
from bigdec.adapters.sql import adapt, scan

__all__ = ["DecimalText", "from_json", "to_json", "adapt", "scan"]

"""Memoized powers of ten.

Every scale shift in BigDecimal multiplies or divides by 10^n. The table is
shared by all operations in the process, so it is thread-safe:

- Reads of populated entries are a plain dict lookup and never take the lock
  (CPython dict reads are atomic, a reader sees either no entry or a
  complete one).
- A miss takes the exclusive lock, re-checks for an entry inserted by a
  racing thread and computes 10^n at most once.

Entries are never removed or replaced, so the same int object is returned
for a given exponent for the life of the cache.
"""

from __future__ import annotations

import threading

import structlog

from bigdec.config import DEFAULT_CONFIG, DecimalConfig
from bigdec.constants import PRECOMPUTED_POWERS
from bigdec.errors import InvalidArgumentError

__all__ = [
    "PowerOfTenCache",
    "DEFAULT_CACHE",
    "pow10",
]

logger = structlog.get_logger()


class PowerOfTenCache:
    """Append-only table mapping a non-negative exponent to 10^exponent.

    Args:
        precompute: Exponents 0..precompute are computed eagerly. Pass -1 to
            start empty.
    """

    __slots__ = ("_lock", "_powers", "_precompute")

    def __init__(self, precompute: int = PRECOMPUTED_POWERS) -> None:
        self._lock = threading.Lock()
        self._precompute = precompute
        self._powers = self._build()

    @classmethod
    def from_config(cls, config: DecimalConfig) -> PowerOfTenCache:
        """Create a cache with the eager range from config."""
        return cls(precompute=config.precomputed_powers)

    def _build(self) -> dict[int, int]:
        powers: dict[int, int] = {}
        power = 1
        for n in range(self._precompute + 1):
            powers[n] = power
            power *= 10
        return powers

    def get(self, n: int) -> int:
        """Return 10^n.

        Raises:
            InvalidArgumentError: If n is negative or not an int. Callers
                shifting toward smaller scales divide by get(abs(n)).
        """
        if not isinstance(n, int) or isinstance(n, bool):
            raise InvalidArgumentError(f"pow10 exponent must be int, got {type(n).__name__}")
        if n < 0:
            raise InvalidArgumentError(f"pow10 does not support negative exponents: {n}")

        power = self._powers.get(n)
        if power is not None:
            return power

        with self._lock:
            # Another thread may have inserted while we waited
            power = self._powers.get(n)
            if power is not None:
                return power
            power = 10**n
            self._powers[n] = power

        logger.debug("pow10_cache_miss", exponent=n, cached=len(self._powers))
        return power

    __call__ = get

    def __contains__(self, n: object) -> bool:
        return n in self._powers

    def __len__(self) -> int:
        return len(self._powers)

    def reset(self) -> None:
        """Drop every entry and recompute the eager range.

        Only meant for test isolation; values handed out earlier stay valid.
        """
        with self._lock:
            self._powers = self._build()

    def __repr__(self) -> str:
        return f"PowerOfTenCache(entries={len(self._powers)})"


# Process-wide cache used by BigDecimal
DEFAULT_CACHE = PowerOfTenCache.from_config(DEFAULT_CONFIG)


def pow10(n: int) -> int:
    """Return 10^n from the default cache."""
    return DEFAULT_CACHE.get(n)

"""Memoized decimal digit sums.

The cache is keyed by magnitude, so ``n`` and ``-n`` share one entry.
Single-digit magnitudes are answered directly and never cached.
"""

from __future__ import annotations


class DigitSumOracle:
    """Callable returning the sum of the decimal digits of ``|n|``."""

    def __init__(self) -> None:
        self._cache: dict[int, int] = {}

    def __call__(self, n: int) -> int:
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"digit sum needs an integer, got {type(n).__name__}")
        n = abs(n)
        if n < 10:
            return n
        cached = self._cache.get(n)
        if cached is not None:
            return cached
        # Walk down to a known prefix, then fill the cache back up.
        pending: list[int] = []
        while n >= 10 and n not in self._cache:
            pending.append(n)
            n //= 10
        total = n if n < 10 else self._cache[n]
        for prefix in reversed(pending):
            total += prefix % 10
            self._cache[prefix] = total
        return total

    @property
    def cache_size(self) -> int:
        """Number of memoized magnitudes."""
        return len(self._cache)

    def clear(self) -> None:
        self._cache.clear()


_SHARED_ORACLE = DigitSumOracle()


def digit_sum(n: int) -> int:
    """Digit sum of ``|n|`` using the process-wide shared cache."""
    return _SHARED_ORACLE(n)


def shared_oracle() -> DigitSumOracle:
    """Return the oracle behind :func:`digit_sum`."""
    return _SHARED_ORACLE

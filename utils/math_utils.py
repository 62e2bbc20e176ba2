"""
Exact combinatorics for probability calculations.

This module provides the arbitrary-precision "n choose k" used by every
probability calculation in the project. Python integers never overflow, so
counts such as C(60, 30) stay exact until a caller turns a ratio of two
counts into a float.
"""

from __future__ import annotations

import threading

__all__ = ["CombinationCache", "DEFAULT_COMBINATION_CACHE", "combinations"]


class CombinationCache:
    """Memo of binomial coefficients keyed by the symmetry-reduced ``(n, k)`` pair.

    Entries are never invalidated: the same key always maps to the same value.
    The lock only guards inserts, so two threads racing on a missing key may
    both compute it, which is harmless.
    """

    def __init__(self) -> None:
        self._values: dict[tuple[int, int], int] = {}
        self._lock = threading.Lock()

    def get(self, n: int, k: int) -> int:
        """
        Return C(n, k) as an exact integer.

        Args:
            n: Size of the set
            k: Number of items chosen

        Returns:
            0 when k < 0 or k > n, 1 when k is 0 or n, otherwise the exact count

        Example:
            >>> CombinationCache().get(60, 30)
            118264581564861424
        """
        if k < 0 or k > n:
            return 0
        if k == 0 or k == n:
            return 1
        if k > n - k:
            k = n - k

        key = (n, k)
        cached = self._values.get(key)
        if cached is not None:
            return cached

        result = 1
        for i in range(1, k + 1):
            # Multiply first: result * (n - i + 1) is C(n, i) * i, always divisible by i
            result = result * (n - i + 1) // i

        with self._lock:
            self._values.setdefault(key, result)
        return result

    def clear(self) -> None:
        with self._lock:
            self._values.clear()

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values


DEFAULT_COMBINATION_CACHE = CombinationCache()


def combinations(n: int, k: int, cache: CombinationCache | None = None) -> int:
    """
    Calculate the number of ways to choose k items out of n (nCk).

    Uses exact integer arithmetic; results are memoized in ``cache`` (the
    process-wide default when omitted).

    Args:
        n: Size of the set
        k: Number of items chosen
        cache: Memo to read from and populate

    Returns:
        The exact binomial coefficient, or 0 for an out-of-range k

    Example:
        >>> combinations(40, 5)
        658008
    """
    if cache is None:
        cache = DEFAULT_COMBINATION_CACHE
    return cache.get(n, k)

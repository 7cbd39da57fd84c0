"""Sparse table for range-minimum queries on a static array."""

from __future__ import annotations

from collections.abc import Iterable


class SparseTable:
    """Answers ``min(values[l:r])`` in constant time after ``O(n log n)`` setup."""

    def __init__(self, values: Iterable[int]) -> None:
        level = list(values)
        self._n = len(level)
        self._table = [level]
        p = 1
        while (1 << p) <= self._n:
            prev = self._table[-1]
            half = 1 << (p - 1)
            self._table.append(
                [min(prev[l], prev[l + half]) for l in range(self._n - (1 << p) + 1)]
            )
            p += 1

    def query(self, l: int, r: int) -> int:
        """Minimum over the half-open range ``[l, r)``."""
        if l < 0 or r > self._n:
            raise IndexError(f"range [{l}, {r}) out of bounds for length {self._n}")
        if l >= r:
            raise ValueError("empty range")
        p = (r - l).bit_length() - 1
        row = self._table[p]
        return min(row[l], row[r - (1 << p)])
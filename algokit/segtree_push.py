"""Segment tree with lazy range addition and range sums."""

from __future__ import annotations

from collections.abc import Iterable


def _bit_ceil(n: int) -> int:
    return 1 if n <= 1 else 1 << (n - 1).bit_length()


class SegTreePush:
    """Range add / range sum over half-open intervals."""

    def __init__(self, n: int) -> None:
        self._len = _bit_ceil(n)
        size = 2 * self._len - 1
        self._sum = [0] * size
        self._lazy = [0] * size

    @classmethod
    def from_values(cls, values: Iterable[int]) -> SegTreePush:
        """Build a tree holding ``values``."""
        values = list(values)
        tree = cls(len(values))
        tree._build(0, 0, tree._len, values)
        return tree

    def add(self, l: int, r: int, value: int) -> None:
        """Add ``value`` to every position in ``[l, r)``."""
        self._add(l, r, value, 0, 0, self._len)

    def sum(self, l: int, r: int) -> int:
        """Sum of positions in ``[l, r)``."""
        return self._query(l, r, 0, 0, self._len)

    def _build(self, x: int, lx: int, rx: int, values: list[int]) -> None:
        if rx - lx == 1:
            self._sum[x] = values[lx] if lx < len(values) else 0
            return
        m = (lx + rx) // 2
        self._build(2 * x + 1, lx, m, values)
        self._build(2 * x + 2, m, rx, values)
        self._sum[x] = self._sum[2 * x + 1] + self._sum[2 * x + 2]

    def _push(self, x: int, lx: int, rx: int) -> None:
        if rx - lx == 1:
            return
        pending = self._lazy[x]
        half = (rx - lx) // 2
        for child in (2 * x + 1, 2 * x + 2):
            self._lazy[child] += pending
            self._sum[child] += pending * half
        self._lazy[x] = 0

    def _add(self, l: int, r: int, value: int, x: int, lx: int, rx: int) -> None:
        self._push(x, lx, rx)
        if l <= lx and rx <= r:
            self._sum[x] += value * (rx - lx)
            self._lazy[x] += value
            return
        if l >= rx or lx >= r:
            return
        m = (lx + rx) // 2
        self._add(l, r, value, 2 * x + 1, lx, m)
        self._add(l, r, value, 2 * x + 2, m, rx)
        self._sum[x] = self._sum[2 * x + 1] + self._sum[2 * x + 2]

    def _query(self, l: int, r: int, x: int, lx: int, rx: int) -> int:
        self._push(x, lx, rx)
        if l <= lx and rx <= r:
            return self._sum[x]
        if l >= rx or lx >= r:
            return 0
        m = (lx + rx) // 2
        return self._query(l, r, 2 * x + 1, lx, m) + self._query(l, r, 2 * x + 2, m, rx)
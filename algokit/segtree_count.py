"""Segment tree counting occurrences of a value in a range."""

from __future__ import annotations

from collections import Counter


def _bit_ceil(n: int) -> int:
    return 1 if n <= 1 else 1 << (n - 1).bit_length()


class SegTreeCountValue:
    """Point assignment and "how many positions in ``[l, r)`` equal ``value``".

    Every position starts at 0.
    """

    def __init__(self, n: int) -> None:
        self._len = _bit_ceil(n)
        self._values = [0] * self._len
        self._counts: list[Counter[int]] = []
        width = self._len
        while width >= 1:
            self._counts.extend(Counter({0: width}) for _ in range(self._len // width))
            width //= 2

    def set(self, i: int, value: int) -> None:
        """Make position ``i`` hold ``value``."""
        if not 0 <= i < self._len:
            raise IndexError(f"position {i} out of range 0..{self._len - 1}")
        old = self._values[i]
        self._values[i] = value
        x, lx, rx = 0, 0, self._len
        while True:
            counts = self._counts[x]
            counts[old] -= 1
            if not counts[old]:
                del counts[old]
            counts[value] += 1
            if rx - lx == 1:
                return
            m = (lx + rx) // 2
            if i < m:
                x, rx = 2 * x + 1, m
            else:
                x, lx = 2 * x + 2, m

    def count(self, l: int, r: int, value: int) -> int:
        """Number of positions in ``[l, r)`` holding ``value``."""
        return self._count(l, r, value, 0, 0, self._len)

    def _count(self, l: int, r: int, value: int, x: int, lx: int, rx: int) -> int:
        if l <= lx and rx <= r:
            return self._counts[x][value]
        if l >= rx or lx >= r:
            return 0
        m = (lx + rx) // 2
        return self._count(l, r, value, 2 * x + 1, lx, m) + self._count(
            l, r, value, 2 * x + 2, m, rx
        )
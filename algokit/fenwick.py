"""Fenwick (binary indexed) tree over 1-based positions."""

from __future__ import annotations


class FenwickTree:
    """Prefix sums with point updates on positions ``1..n``."""

    def __init__(self, n: int, value: int = 0) -> None:
        self._n = n
        self._tree = [0] + [value * (i & -i) for i in range(1, n + 1)]

    def _check(self, i: int) -> None:
        if not 1 <= i <= self._n:
            raise IndexError(f"position {i} out of range 1..{self._n}")

    def update(self, i: int, delta: int) -> None:
        """Add ``delta`` to position ``i``."""
        self._check(i)
        while i <= self._n:
            self._tree[i] += delta
            i += i & -i

    def prefix_sum(self, r: int) -> int:
        """Sum of positions ``1..r``; ``r == 0`` gives 0."""
        if r > self._n:
            raise IndexError(f"position {r} out of range 1..{self._n}")
        total = 0
        while r > 0:
            total += self._tree[r]
            r -= r & -r
        return total

    def range_sum(self, l: int, r: int) -> int:
        """Sum of positions ``l..r`` inclusive."""
        return self.prefix_sum(r) - self.prefix_sum(l - 1)

    def set(self, i: int, value: int) -> None:
        """Make position ``i`` hold ``value``."""
        self.update(i, value - self.range_sum(i, i))
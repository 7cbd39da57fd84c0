"""Segment tree adding arithmetic progressions to ranges, with range sums."""

from __future__ import annotations


def _bit_ceil(n: int) -> int:
    return 1 if n <= 1 else 1 << (n - 1).bit_length()


def sum_arithmetic(first: int, step: int, i1: int, i2: int) -> int:
    """Sum of ``first + step * i`` for ``i`` in ``[i1, i2)``."""
    return (2 * first + (i1 + i2 - 1) * step) * (i2 - i1) // 2


class SegTreeAP:
    """Add ``first + step * (i - l)`` to each position ``i`` of ``[l, r)``; sum ranges."""

    def __init__(self, n: int) -> None:
        self._len = _bit_ceil(n)
        size = 2 * self._len - 1
        self._sum = [0] * size
        self._first = [0] * size
        self._step = [0] * size

    def add(self, l: int, r: int, first: int, step: int) -> None:
        """Add the progression starting at ``first`` with difference ``step`` over ``[l, r)``."""
        self._add(l, r, first, step, 0, 0, self._len)

    def sum(self, l: int, r: int) -> int:
        """Sum of positions in ``[l, r)``."""
        return self._query(l, r, 0, 0, self._len)

    def _push(self, x: int, lx: int, rx: int) -> None:
        if rx - lx > 1:
            m = (lx + rx) // 2
            first, step = self._first[x], self._step[x]
            left, right = 2 * x + 1, 2 * x + 2
            self._sum[left] += sum_arithmetic(first, step, 0, m - lx)
            self._first[left] += first
            self._step[left] += step
            self._sum[right] += sum_arithmetic(first, step, m - lx, rx - lx)
            self._first[right] += first + step * (m - lx)
            self._step[right] += step
        self._first[x] = 0
        self._step[x] = 0

    def _add(self, l: int, r: int, first: int, step: int, x: int, lx: int, rx: int) -> None:
        self._push(x, lx, rx)
        if l <= lx and rx <= r:
            self._sum[x] += sum_arithmetic(first, step, lx - l, rx - l)
            self._first[x] += first + step * (lx - l)
            self._step[x] += step
            return
        if rx <= l or r <= lx:
            return
        m = (lx + rx) // 2
        self._add(l, r, first, step, 2 * x + 1, lx, m)
        self._add(l, r, first, step, 2 * x + 2, m, rx)
        self._sum[x] = self._sum[2 * x + 1] + self._sum[2 * x + 2]

    def _query(self, l: int, r: int, x: int, lx: int, rx: int) -> int:
        self._push(x, lx, rx)
        if l <= lx and rx <= r:
            return self._sum[x]
        if rx <= l or r <= lx:
            return 0
        m = (lx + rx) // 2
        return self._query(l, r, 2 * x + 1, lx, m) + self._query(l, r, 2 * x + 2, m, rx)
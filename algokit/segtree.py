"""Point-update segment trees with a pluggable operation, plus specialised variants."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from typing import Any

I64_MAX = (1 << 63) - 1
U64_MAX = (1 << 64) - 1


def _bit_ceil(n: int) -> int:
    return 1 if n <= 1 else 1 << (n - 1).bit_length()


class SegTree:
    """Segment tree over ``n`` positions combining values with ``op``.

    ``default`` is the identity of ``op``; it fills unset positions and is the
    result of a query over an empty range. Queries combine left to right, so
    ``op`` need not be commutative.
    """

    def __init__(self, n: int, op: Callable[[Any, Any], Any], default: Any) -> None:
        self._n = n
        self._len = _bit_ceil(n)
        self._op = op
        self._default = default
        self._tree = [default] * (2 * self._len - 1)

    @classmethod
    def from_values(
        cls, values: Iterable[Any], op: Callable[[Any, Any], Any], default: Any
    ) -> SegTree:
        """Build a tree holding ``values``."""
        values = list(values)
        tree = SegTree.__new__(cls)
        SegTree.__init__(tree, len(values), op, default)
        tree._build(values)
        return tree

    def _build(self, values: Iterable[Any]) -> None:
        first_leaf = self._len - 1
        tree = self._tree
        for i, value in enumerate(values):
            tree[first_leaf + i] = value
        for x in reversed(range(first_leaf)):
            tree[x] = self._op(tree[2 * x + 1], tree[2 * x + 2])

    def set(self, i: int, value: Any) -> None:
        """Make position ``i`` hold ``value``."""
        if not 0 <= i < self._n:
            raise IndexError(f"position {i} out of range 0..{self._n - 1}")
        tree = self._tree
        x = self._len - 1 + i
        tree[x] = value
        while x:
            x = (x - 1) // 2
            tree[x] = self._op(tree[2 * x + 1], tree[2 * x + 2])

    def get(self, l: int, r: int) -> Any:
        """Combination of the positions in ``[l, r)``."""
        return self._query(l, r, 0, 0, self._len)

    def _query(self, l: int, r: int, x: int, lx: int, rx: int) -> Any:
        if l <= lx and rx <= r:
            return self._tree[x]
        if l >= rx or lx >= r:
            return self._default
        m = (lx + rx) // 2
        return self._op(
            self._query(l, r, 2 * x + 1, lx, m), self._query(l, r, 2 * x + 2, m, rx)
        )


class SegTreeSum(SegTree):
    """Sum tree; also finds the n-th zero when positions hold 0 or 1."""

    def __init__(self, n: int) -> None:
        super().__init__(n, operator.add, 0)

    def find_nth_zero(self, n: int) -> int:
        """Index of the ``n``-th (1-based) zero, assuming every position is 0 or 1."""
        zeros_total = self._len - self._tree[0]
        if not 1 <= n <= zeros_total:
            raise ValueError(f"there is no zero number {n}")
        tree = self._tree
        x, lx, rx = 0, 0, self._len
        while rx - lx > 1:
            m = (lx + rx) // 2
            zeros = (m - lx) - tree[2 * x + 1]
            if zeros >= n:
                x, rx = 2 * x + 1, m
            else:
                n -= zeros
                x, lx = 2 * x + 2, m
        return lx


class SegTreeMin(SegTree):
    """Range-minimum tree; unset positions hold ``I64_MAX``."""

    def __init__(self, n: int) -> None:
        super().__init__(n, min, I64_MAX)


class SegTreeMax(SegTree):
    """Range-maximum tree; unset positions hold 0."""

    def __init__(self, n: int) -> None:
        super().__init__(n, max, 0)


class SegTreeMex(SegTree):
    """Tracks a set of indices and finds the smallest absent index in a range.

    Every index starts absent. A range with no absent index yields ``U64_MAX``.
    """

    def __init__(self, n: int) -> None:
        super().__init__(n, min, U64_MAX)
        self._build(range(self._len))

    def add(self, i: int) -> None:
        """Mark index ``i`` as present."""
        super().set(i, U64_MAX)

    def remove(self, i: int) -> None:
        """Mark index ``i`` as absent."""
        super().set(i, i)

    def get(self, l: int, r: int) -> int:
        """Smallest absent index in ``[l, r)``, or ``U64_MAX``."""
        return super().get(l, r)


class SegTreeMinRange:
    """Range assignment keeping the largest value given to each position; range minimum.

    Positions never assigned read as ``EMPTY``.
    """

    EMPTY = I64_MAX

    def __init__(self, n: int) -> None:
        self._len = _bit_ceil(n)
        size = 2 * self._len - 1
        self._val = [self.EMPTY] * size
        self._lazy = [False] * size

    def set(self, l: int, r: int, value: int) -> None:
        """Assign ``value`` over ``[l, r)``; assigned positions keep the larger value."""
        self._set(l, r, value, 0, 0, self._len)

    def get(self, l: int, r: int) -> int:
        """Minimum over ``[l, r)``."""
        return self._query(l, r, 0, 0, self._len)

    def _update(self, x: int, value: int) -> None:
        if self._val[x] == self.EMPTY:
            self._val[x] = value
        else:
            self._val[x] = max(self._val[x], value)

    def _push(self, x: int) -> None:
        if 2 * x + 1 >= len(self._val) or not self._lazy[x]:
            return
        self._lazy[x] = False
        for child in (2 * x + 1, 2 * x + 2):
            self._update(child, self._val[x])
            self._lazy[child] = True

    def _set(self, l: int, r: int, value: int, x: int, lx: int, rx: int) -> None:
        if l >= rx or lx >= r:
            return
        if l <= lx and rx <= r:
            self._update(x, value)
            self._lazy[x] = True
            return
        self._push(x)
        m = (lx + rx) // 2
        self._set(l, r, value, 2 * x + 1, lx, m)
        self._set(l, r, value, 2 * x + 2, m, rx)
        self._val[x] = min(self._val[2 * x + 1], self._val[2 * x + 2])

    def _query(self, l: int, r: int, x: int, lx: int, rx: int) -> int:
        if l <= lx and rx <= r:
            return self._val[x]
        if l >= rx or lx >= r:
            return self.EMPTY
        self._push(x)
        m = (lx + rx) // 2
        return min(self._query(l, r, 2 * x + 1, lx, m), self._query(l, r, 2 * x + 2, m, rx))


class DeltaSegTree:
    """Range addition with point reads, stored as a sum tree of differences."""

    def __init__(self, n: int) -> None:
        self._n = n
        self._deltas = SegTreeSum(n)

    def add(self, l: int, r: int, delta: int) -> None:
        """Add ``delta`` to every position in ``[l, r)``."""
        self._deltas.set(l, self._deltas.get(l, l + 1) + delta)
        if r < self._n:
            self._deltas.set(r, self._deltas.get(r, r + 1) - delta)

    def get(self, i: int) -> int:
        """Current value at position ``i``."""
        return self._deltas.get(0, i + 1)
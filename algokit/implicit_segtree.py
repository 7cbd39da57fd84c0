"""Dynamically allocated segment tree with range assignment and range sums."""

from __future__ import annotations

from dataclasses import dataclass


def _bit_ceil(n: int) -> int:
    return 1 if n <= 1 else 1 << (n - 1).bit_length()


@dataclass(slots=True)
class _Node:
    left: int = -1
    right: int = -1
    sum: int = 0
    pending: int = 0
    has_pending: bool = False


class ImplicitSegTree:
    """Range assign / range sum over a huge index space, creating nodes on demand."""

    def __init__(self, n: int) -> None:
        self._len = _bit_ceil(n)
        self._nodes = [_Node()]

    def set(self, l: int, r: int, value: int) -> None:
        """Assign ``value`` to every position in ``[l, r)``."""
        self._set(l, r, value, 0, 0, self._len)

    def get(self, l: int, r: int) -> int:
        """Sum of positions in ``[l, r)``; unassigned positions count as 0."""
        return self._get(l, r, 0, 0, self._len)

    def _ensure_children(self, x: int, lx: int, rx: int) -> None:
        node = self._nodes[x]
        if rx - lx == 1 or node.left != -1:
            return
        node.left = len(self._nodes)
        self._nodes.append(_Node())
        node.right = len(self._nodes)
        self._nodes.append(_Node())

    def _apply(self, x: int, lx: int, rx: int) -> None:
        if not 0 <= x < len(self._nodes):
            return
        node = self._nodes[x]
        if not node.has_pending:
            return
        node.sum = (rx - lx) * node.pending
        if rx - lx > 1:
            for child in (self._nodes[node.left], self._nodes[node.right]):
                child.pending = node.pending
                child.has_pending = True
        node.has_pending = False

    def _set(self, l: int, r: int, value: int, x: int, lx: int, rx: int) -> None:
        self._ensure_children(x, lx, rx)
        self._apply(x, lx, rx)
        node = self._nodes[x]
        if l <= lx and rx <= r:
            node.pending = value
            node.has_pending = True
            return
        if l >= rx or lx >= r:
            return
        m = (lx + rx) // 2
        self._set(l, r, value, node.left, lx, m)
        self._set(l, r, value, node.right, m, rx)
        self._apply(node.left, lx, m)
        self._apply(node.right, m, rx)
        if node.left == -1:
            node.sum = 0
        else:
            node.sum = self._nodes[node.left].sum + self._nodes[node.right].sum

    def _get(self, l: int, r: int, x: int, lx: int, rx: int) -> int:
        if l >= rx or lx >= r:
            return 0
        self._ensure_children(x, lx, rx)
        self._apply(x, lx, rx)
        node = self._nodes[x]
        if l <= lx and rx <= r:
            return node.sum
        m = (lx + rx) // 2
        return self._get(l, r, node.left, lx, m) + self._get(l, r, node.right, m, rx)
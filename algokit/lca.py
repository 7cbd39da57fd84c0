"""Lowest common ancestor via binary lifting."""

from __future__ import annotations

from collections.abc import Sequence


def _log2_ceil(n: int) -> int:
    return max(n - 1, 0).bit_length()


def _lift(up: list[list[int]], depth: list[int], a: int, b: int) -> int:
    if depth[a] < depth[b]:
        a, b = b, a
    while depth[a] > depth[b]:
        a = up[a][(depth[a] - depth[b]).bit_length() - 1]
    if a == b:
        return a
    for p in reversed(range(len(up[a]))):
        if up[a][p] != up[b][p]:
            a, b = up[a][p], up[b][p]
    return up[a][0]


class DynamicLCA:
    """LCA on a tree that grows by attaching new leaves."""

    def __init__(self, n: int) -> None:
        levels = max(_log2_ceil(n), 1)
        self._up = [[v] * levels for v in range(n)]
        self._depth = [0] * n

    def add(self, parent: int, child: int) -> None:
        """Attach ``child`` as a leaf below ``parent``."""
        self._depth[child] = self._depth[parent] + 1
        up = self._up[child]
        up[0] = parent
        for p in range(1, len(up)):
            up[p] = self._up[up[p - 1]][p - 1]

    def get(self, a: int, b: int) -> int:
        """Lowest common ancestor of ``a`` and ``b``."""
        return _lift(self._up, self._depth, a, b)


class TreeLCA:
    """LCA on a fixed tree given as an adjacency list."""

    def __init__(self, adjacency: Sequence[Sequence[int]], root: int = 0) -> None:
        n = len(adjacency)
        levels = max(_log2_ceil(n), 1)
        self._up = [[v] * levels for v in range(n)]
        self._depth = [0] * n
        stack = [(root, root, 0)]
        while stack:
            v, parent, depth = stack.pop()
            up = self._up[v]
            up[0] = parent
            self._depth[v] = depth
            for p in range(1, levels):
                up[p] = self._up[up[p - 1]][p - 1]
            stack.extend((nxt, v, depth + 1) for nxt in adjacency[v] if nxt != parent)

    def lca(self, a: int, b: int) -> int:
        """Lowest common ancestor of ``a`` and ``b``."""
        return _lift(self._up, self._depth, a, b)
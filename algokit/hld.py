"""Heavy-light decomposition answering path additions and path sums on a tree."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from .segtree_push import SegTreePush


class HeavyLightDecomposition:
    """Path add / path sum on a tree given as an adjacency list."""

    def __init__(self, adjacency: Sequence[Sequence[int]], root: int = 0) -> None:
        n = len(adjacency)
        if not 0 <= root < n:
            raise IndexError(f"root {root} out of range for {n} vertices")
        parent = [-1] * n
        children: list[list[int]] = [[] for _ in range(n)]
        seen = [False] * n
        seen[root] = True
        order: list[int] = []
        stack = [root]
        while stack:
            v = stack.pop()
            order.append(v)
            for u in adjacency[v]:
                if u == parent[v] or seen[u]:
                    continue
                seen[u] = True
                parent[u] = v
                children[v].append(u)
                stack.append(u)
        if len(order) != n:
            raise ValueError("adjacency must describe a connected tree")

        size = [1] * n
        for v in reversed(order):
            size[v] += sum(size[c] for c in children[v])

        self._parent = parent
        self._head = [0] * n
        self._tin = [0] * n
        self._tout = [0] * n
        timer = 0
        stack_heads = [(root, root)]
        while stack_heads:
            v, head = stack_heads.pop()
            self._tin[v] = timer
            self._tout[v] = timer + size[v]
            self._head[v] = head
            timer += 1
            if not children[v]:
                continue
            heavy = max(children[v], key=size.__getitem__)
            stack_heads.extend((c, c) for c in reversed(children[v]) if c != heavy)
            stack_heads.append((heavy, head))

        self._tree = SegTreePush(n)

    def is_ancestor(self, a: int, b: int) -> bool:
        """True if ``a`` lies on the path from the root to ``b`` (inclusive)."""
        return self._tin[a] <= self._tin[b] and self._tout[b] <= self._tout[a]

    def _segments(self, a: int, b: int) -> Iterator[tuple[int, int]]:
        for _ in range(2):
            while not self.is_ancestor(self._head[a], b):
                head = self._head[a]
                yield self._tin[head], self._tin[a] + 1
                a = self._parent[head]
            a, b = b, a
        if not self.is_ancestor(a, b):
            a, b = b, a
        yield self._tin[a], self._tin[b] + 1

    def path_add(self, a: int, b: int, value: int) -> None:
        """Add ``value`` to every vertex on the path between ``a`` and ``b``."""
        for l, r in self._segments(a, b):
            self._tree.add(l, r, value)

    def path_sum(self, a: int, b: int) -> int:
        """Sum of the values on the path between ``a`` and ``b``."""
        return sum(self._tree.sum(l, r) for l, r in self._segments(a, b))
"""Counting bridges while edges are added to a graph one at a time."""

from __future__ import annotations

from collections.abc import Iterable


class OnlineBridges:
    """Maintains the number of bridges of a graph under edge insertions."""

    def __init__(self, n: int) -> None:
        self._n = n
        self._component = list(range(n))
        self._size = [1] * n
        self._tree_parent = [-1] * n
        self._mark = [0] * n
        self._stamp = 0
        self._block = list(range(n))
        self.bridges = 0

    def _find_component(self, v: int) -> int:
        root = v
        while self._component[root] != root:
            root = self._component[root]
        while self._component[v] != root:
            self._component[v], v = root, self._component[v]
        return root

    def _find_block(self, v: int) -> int:
        if v == -1:
            return -1
        root = v
        while self._block[root] != root:
            root = self._block[root]
        while self._block[v] != root:
            self._block[v], v = root, self._block[v]
        return root

    def _reroot(self, v: int) -> None:
        v = self._find_block(v)
        root = v
        child = -1
        while v != -1:
            parent = self._find_block(self._tree_parent[v])
            self._tree_parent[v] = child
            self._component[v] = root
            child = v
            v = parent
        self._size[root] = self._size[child]

    def _lca(self, u: int, v: int) -> int:
        self._stamp += 1
        u = self._find_block(u)
        v = self._find_block(v)
        while u != -1:
            self._mark[u] = self._stamp
            u = self._find_block(self._tree_parent[u])
        while self._mark[v] != self._stamp:
            v = self._find_block(self._tree_parent[v])
        return v

    def _merge_path(self, u: int, v: int) -> None:
        top = self._lca(u, v)
        for x in (u, v):
            x = self._find_block(x)
            while x != top:
                parent = self._find_block(self._tree_parent[x])
                self._block[x] = top
                x = parent
                self.bridges -= 1

    def add_edge(self, u: int, v: int) -> int:
        """Add the edge ``u``-``v`` and return the new number of bridges."""
        for x in (u, v):
            if not 0 <= x < self._n:
                raise IndexError(f"vertex {x} out of range 0..{self._n - 1}")
        u = self._find_block(u)
        v = self._find_block(v)
        if u == v:
            return self.bridges
        cu = self._find_component(u)
        cv = self._find_component(v)
        if cu == cv:
            self._merge_path(u, v)
        else:
            self.bridges += 1
            if self._size[cu] > self._size[cv]:
                u, v = v, u
                cu, cv = cv, cu
            self._reroot(u)
            self._component[u] = self._tree_parent[u] = v
            self._size[cv] += self._size[u]
        return self.bridges


def count_bridges_online(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Number of bridges after each edge of ``edges`` is added to an empty graph."""
    graph = OnlineBridges(n)
    return [graph.add_edge(u, v) for u, v in edges]
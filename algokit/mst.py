"""Minimum spanning trees and forests: Kruskal and Prim."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .dsu import DSU


@dataclass(frozen=True)
class WeightedEdge:
    """Undirected edge between ``a`` and ``b``."""

    a: int
    b: int
    weight: int


def kruskal(n: int, edges: Iterable[WeightedEdge | tuple[int, int, int]]) -> list[WeightedEdge]:
    """Edges of a minimum spanning forest, in increasing order of weight."""
    normalized = [e if isinstance(e, WeightedEdge) else WeightedEdge(*e) for e in edges]
    for e in normalized:
        for v in (e.a, e.b):
            if not 0 <= v < n:
                raise IndexError(f"vertex {v} out of range 0..{n - 1}")
    normalized.sort(key=lambda e: e.weight)
    dsu = DSU(n)
    chosen = []
    for e in normalized:
        if dsu.find(e.a) == dsu.find(e.b):
            continue
        dsu.join(e.a, e.b)
        chosen.append(e)
    return chosen


def prim(adjacency: Sequence[Iterable[tuple[int, int]]]) -> list[WeightedEdge]:
    """Minimum spanning forest of a graph given as ``(neighbour, weight)`` lists.

    Returns one edge ``(parent, v, weight)`` for each vertex ``v`` that is not
    the first vertex of its component, in increasing order of ``v``.
    """
    n = len(adjacency)
    best: list[float] = [math.inf] * n
    parent = [-1] * n
    visited = [False] * n
    for start in range(n):
        if visited[start]:
            continue
        heap: list[tuple[float, int]] = [(0, start)]
        while heap:
            _, v = heapq.heappop(heap)
            if visited[v]:
                continue
            visited[v] = True
            for u, w in adjacency[v]:
                if not 0 <= u < n:
                    raise IndexError(f"vertex {u} out of range 0..{n - 1}")
                if not visited[u] and w < best[u]:
                    best[u] = w
                    parent[u] = v
                    heapq.heappush(heap, (w, u))
    return [WeightedEdge(parent[v], v, best[v]) for v in range(n) if parent[v] != -1]
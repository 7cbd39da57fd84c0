"""Breadth-first search, Dijkstra and Floyd-Warshall shortest paths."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Sequence


def _check_start(n: int, start: int) -> None:
    if not 0 <= start < n:
        raise IndexError(f"vertex {start} out of range 0..{n - 1}")


def bfs(adjacency: Sequence[Iterable[int]], start: int) -> tuple[list[int], list[int]]:
    """Unweighted distances and BFS-tree parents from ``start``; -1 where unreachable."""
    n = len(adjacency)
    _check_start(n, start)
    distance = [-1] * n
    parent = [-1] * n
    distance[start] = 0
    queue = deque([start])
    while queue:
        v = queue.popleft()
        for u in adjacency[v]:
            if distance[u] != -1:
                continue
            distance[u] = distance[v] + 1
            parent[u] = v
            queue.append(u)
    return distance, parent


def find_path(adjacency: Sequence[Iterable[int]], start: int, end: int) -> list[int] | None:
    """A shortest path from ``start`` to ``end`` as a vertex list, or None."""
    n = len(adjacency)
    _check_start(n, end)
    if start == end:
        _check_start(n, start)
        return [start]
    distance, parent = bfs(adjacency, start)
    if distance[end] == -1:
        return None
    path = []
    v = end
    while v != -1:
        path.append(v)
        v = parent[v]
    path.reverse()
    return path


def dijkstra(
    adjacency: Sequence[Iterable[tuple[int, int]]], start: int
) -> tuple[list[float], list[int]]:
    """Distances and parents from ``start`` over ``(neighbour, weight)`` lists.

    Unreachable vertices have distance ``math.inf`` and parent -1.
    """
    n = len(adjacency)
    _check_start(n, start)
    distance: list[float] = [math.inf] * n
    parent = [-1] * n
    done = [False] * n
    distance[start] = 0
    heap: list[tuple[float, int]] = [(0, start)]
    while heap:
        d, v = heapq.heappop(heap)
        if done[v]:
            continue
        done[v] = True
        for u, w in adjacency[v]:
            if w < 0:
                raise ValueError("edge weights must be non-negative")
            if distance[u] <= d + w:
                continue
            distance[u] = d + w
            parent[u] = v
            heapq.heappush(heap, (d + w, u))
    return distance, parent


def floyd_warshall(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """All-pairs shortest distances from a square weight matrix (``math.inf`` for no edge)."""
    dist = [list(row) for row in matrix]
    n = len(dist)
    if any(len(row) != n for row in dist):
        raise ValueError("matrix must be square")
    for k in range(n):
        row_k = dist[k]
        for row in dist:
            via = row[k]
            if via == math.inf:
                continue
            for j, through in enumerate(row_k):
                if via + through < row[j]:
                    row[j] = via + through
    return dist
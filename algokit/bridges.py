"""Bridges and articulation points of an undirected graph."""

from __future__ import annotations

from collections.abc import Iterable


def _check(n: int, a: int, b: int) -> None:
    for x in (a, b):
        if not 0 <= x < n:
            raise IndexError(f"vertex {x} out of range 0..{n - 1}")


def find_bridges(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Indices (into ``edges``) of the bridges, in increasing order.

    Parallel edges are never bridges; self-loops are ignored.
    """
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for i, (a, b) in enumerate(edges):
        _check(n, a, b)
        adjacency[a].append((b, i))
        adjacency[b].append((a, i))

    depth = [-1] * n
    low = [0] * n
    bridges: list[int] = []
    for start in range(n):
        if depth[start] != -1:
            continue
        depth[start] = low[start] = 0
        stack = [(start, -1, iter(adjacency[start]))]
        while stack:
            v, parent_edge, it = stack[-1]
            for u, e in it:
                if e == parent_edge:
                    continue
                if depth[u] == -1:
                    depth[u] = low[u] = depth[v] + 1
                    stack.append((u, e, iter(adjacency[u])))
                    break
                low[v] = min(low[v], depth[u])
            else:
                stack.pop()
                if stack:
                    p = stack[-1][0]
                    low[p] = min(low[p], low[v])
                    if low[v] > depth[p]:
                        bridges.append(parent_edge)
    return sorted(bridges)


def find_articulation_points(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Vertices whose removal disconnects their component, in increasing order."""
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for a, b in edges:
        _check(n, a, b)
        adjacency[a].append(b)
        adjacency[b].append(a)

    depth = [-1] * n
    low = [0] * n
    is_point = [False] * n
    for start in range(n):
        if depth[start] != -1:
            continue
        depth[start] = low[start] = 0
        root_children = 0
        stack = [(start, -1, iter(adjacency[start]))]
        while stack:
            v, parent, it = stack[-1]
            for u in it:
                if u == parent:
                    continue
                if depth[u] == -1:
                    depth[u] = low[u] = depth[v] + 1
                    stack.append((u, v, iter(adjacency[u])))
                    break
                low[v] = min(low[v], depth[u])
            else:
                stack.pop()
                if stack:
                    p = stack[-1][0]
                    low[p] = min(low[p], low[v])
                    if p == start:
                        root_children += 1
                    elif depth[p] <= low[v]:
                        is_point[p] = True
        if root_children > 1:
            is_point[start] = True
    return [v for v in range(n) if is_point[v]]
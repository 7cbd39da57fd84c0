"""Strongly connected components by Kosaraju's algorithm."""

from __future__ import annotations

from collections.abc import Iterable


def strongly_connected_components(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Component id of every vertex of a directed graph.

    Ids run from 0 in a topological order of the condensation: every edge goes
    from a component to one with an equal or larger id.
    """
    graph: list[list[int]] = [[] for _ in range(n)]
    transposed: list[list[int]] = [[] for _ in range(n)]
    for a, b in edges:
        for x in (a, b):
            if not 0 <= x < n:
                raise IndexError(f"vertex {x} out of range 0..{n - 1}")
        graph[a].append(b)
        transposed[b].append(a)

    visited = [False] * n
    order: list[int] = []
    for start in range(n):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, iter(graph[start]))]
        while stack:
            v, it = stack[-1]
            for u in it:
                if not visited[u]:
                    visited[u] = True
                    stack.append((u, iter(graph[u])))
                    break
            else:
                stack.pop()
                order.append(v)

    component = [-1] * n
    current = 0
    for v in reversed(order):
        if component[v] != -1:
            continue
        component[v] = current
        pending = [v]
        while pending:
            x = pending.pop()
            for u in transposed[x]:
                if component[u] == -1:
                    component[u] = current
                    pending.append(u)
        current += 1
    return component
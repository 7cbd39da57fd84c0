"""Offline dynamic connectivity: component counts under edge insertions and deletions."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .dsu import DSUWithUndo


def _bit_ceil(n: int) -> int:
    return 1 if n <= 1 else 1 << (n - 1).bit_length()


def offline_connectivity(n: int, queries: Iterable[Sequence]) -> list[int]:
    """Answer a sequence of ``('+', u, v)``, ``('-', u, v)`` and ``('?',)`` queries.

    Returns the number of connected components at every ``'?'`` query, in order.
    Adding an edge that is present, or removing one that is absent, raises
    ``ValueError``.
    """
    queries = [tuple(q) for q in queries]
    total = len(queries)
    if total == 0:
        return []
    size = _bit_ceil(total)
    buckets: list[list[tuple[int, int]]] = [[] for _ in range(2 * size - 1)]

    def place(l: int, r: int, edge: tuple[int, int], x: int, lx: int, rx: int) -> None:
        if r <= lx or rx <= l:
            return
        if l <= lx and rx <= r:
            buckets[x].append(edge)
            return
        m = (lx + rx) // 2
        place(l, r, edge, 2 * x + 1, lx, m)
        place(l, r, edge, 2 * x + 2, m, rx)

    opened: dict[tuple[int, int], int] = {}
    for i, query in enumerate(queries):
        if not query:
            raise ValueError("empty query")
        kind = query[0]
        if kind == "?":
            continue
        if kind not in ("+", "-"):
            raise ValueError(f"unknown query type {kind!r}")
        _, u, v = query
        for x in (u, v):
            if not 0 <= x < n:
                raise IndexError(f"vertex {x} out of range 0..{n - 1}")
        key = (min(u, v), max(u, v))
        if kind == "+":
            if key in opened:
                raise ValueError(f"edge {key} is already present")
            opened[key] = i
        else:
            start = opened.pop(key, None)
            if start is None:
                raise ValueError(f"edge {key} is not present")
            place(start, i + 1, key, 0, 0, size)
    for key, start in opened.items():
        place(start, total, key, 0, 0, size)

    dsu = DSUWithUndo(n)
    answers: list[int] = []

    def solve(x: int, lx: int, rx: int) -> None:
        mark = len(dsu.history)
        for u, v in buckets[x]:
            dsu.join(u, v)
        if rx - lx == 1:
            if lx < total and queries[lx][0] == "?":
                answers.append(dsu.count)
        else:
            m = (lx + rx) // 2
            solve(2 * x + 1, lx, m)
            solve(2 * x + 2, m, rx)
        while len(dsu.history) > mark:
            dsu.undo()

    solve(0, 0, size)
    return answers
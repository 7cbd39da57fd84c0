"""Systems of "equal / different" constraints between boolean variables."""

from __future__ import annotations

from collections.abc import Iterable


def solve_parity_constraints(
    n: int, constraints: Iterable[tuple[int, int, int]]
) -> list[int] | None:
    """Find an assignment of ``n`` boolean variables meeting every constraint.

    A constraint ``(a, b, x)`` says that variables ``a`` and ``b`` are equal
    when ``x`` is truthy and differ otherwise. Returns the sorted indices of
    the variables set to true, or None when the constraints contradict each
    other.
    """
    graph: list[list[int]] = [[] for _ in range(2 * n)]
    for a, b, x in constraints:
        for v in (a, b):
            if not 0 <= v < n:
                raise IndexError(f"variable {v} out of range 0..{n - 1}")
        u = 2 * a ^ (0 if x else 1)
        w = 2 * b
        graph[u].append(w)
        graph[w].append(u)
        graph[u ^ 1].append(w ^ 1)
        graph[w ^ 1].append(u ^ 1)

    component = [-1] * (2 * n)
    label = 0
    for start in range(2 * n):
        if component[start] != -1:
            continue
        component[start] = label
        stack = [start]
        while stack:
            v = stack.pop()
            for u in graph[v]:
                if component[u] == -1:
                    component[u] = label
                    stack.append(u)
        label += 1

    if any(component[2 * i] == component[2 * i + 1] for i in range(n)):
        return None
    return [i for i in range(n) if component[2 * i] > component[2 * i + 1]]
"""Maximum bipartite matching by Kuhn's augmenting paths."""

from __future__ import annotations

from collections.abc import Iterable


def max_bipartite_matching(
    left: int, right: int, edges: Iterable[tuple[int, int]]
) -> list[tuple[int, int]]:
    """Maximum matching between ``left`` and ``right`` vertex sets.

    ``edges`` holds ``(l, r)`` pairs. Returns matched ``(l, r)`` pairs ordered
    by the right vertex.
    """
    adjacency: list[list[int]] = [[] for _ in range(left)]
    for l, r in edges:
        if not 0 <= l < left:
            raise IndexError(f"left vertex {l} out of range 0..{left - 1}")
        if not 0 <= r < right:
            raise IndexError(f"right vertex {r} out of range 0..{right - 1}")
        adjacency[l].append(r)

    owner = [-1] * right

    def augment(start: int, visited: list[bool]) -> bool:
        visited[start] = True
        stack = [[start, iter(adjacency[start]), -1]]
        while stack:
            frame = stack[-1]
            v = frame[0]
            for r in frame[1]:
                holder = owner[r]
                if holder == -1:
                    owner[r] = v
                    for earlier in stack[:-1]:
                        owner[earlier[2]] = earlier[0]
                    return True
                if not visited[holder]:
                    visited[holder] = True
                    frame[2] = r
                    stack.append([holder, iter(adjacency[holder]), -1])
                    break
            else:
                stack.pop()
        return False

    for v in range(left):
        augment(v, [False] * left)

    return [(owner[r], r) for r in range(right) if owner[r] != -1]
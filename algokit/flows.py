"""Maximum flow (Dinic, Ford-Fulkerson) and minimum-cost maximum flow."""

from __future__ import annotations

import heapq
import math
from collections import deque


class FlowNetwork:
    """Directed network with edge capacities; each edge gets a residual twin."""

    def __init__(self, n: int) -> None:
        self._n = n
        self._adjacency: list[list[int]] = [[] for _ in range(n)]
        self._to: list[int] = []
        self._capacity: list[int] = []
        self._flow: list[int] = []

    def _check_vertex(self, v: int) -> None:
        if not 0 <= v < self._n:
            raise IndexError(f"vertex {v} out of range 0..{self._n - 1}")

    def _check_terminals(self, s: int, t: int) -> None:
        self._check_vertex(s)
        self._check_vertex(t)
        if s == t:
            raise ValueError("source and sink must differ")

    def add_edge(self, u: int, v: int, capacity: int) -> int:
        """Add an edge ``u -> v``; returns its index."""
        self._check_vertex(u)
        self._check_vertex(v)
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        index = len(self._to)
        self._to += [v, u]
        self._capacity += [capacity, 0]
        self._flow += [0, 0]
        self._adjacency[u].append(index)
        self._adjacency[v].append(index + 1)
        return index

    def _residual(self, e: int) -> int:
        return self._capacity[e] - self._flow[e]

    def _push(self, path: list[int]) -> int:
        delta = min(self._residual(e) for e in path)
        for e in path:
            self._flow[e] += delta
            self._flow[e ^ 1] -= delta
        return delta

    def _levels(self, s: int) -> list[int]:
        level = [-1] * self._n
        level[s] = 0
        queue = deque([s])
        while queue:
            v = queue.popleft()
            for e in self._adjacency[v]:
                u = self._to[e]
                if level[u] == -1 and self._residual(e) > 0:
                    level[u] = level[v] + 1
                    queue.append(u)
        return level

    def _blocking_step(self, s: int, t: int, level: list[int], ptr: list[int]) -> int:
        path: list[int] = []
        v = s
        while True:
            if v == t:
                return self._push(path)
            edges = self._adjacency[v]
            while ptr[v] < len(edges):
                e = edges[ptr[v]]
                u = self._to[e]
                if self._residual(e) > 0 and level[u] == level[v] + 1:
                    path.append(e)
                    v = u
                    break
                ptr[v] += 1
            else:
                if not path:
                    return 0
                e = path.pop()
                v = self._to[e ^ 1]
                ptr[v] += 1

    def dinic(self, s: int, t: int) -> int:
        """Maximum flow from ``s`` to ``t`` by Dinic's algorithm."""
        self._check_terminals(s, t)
        self._flow = [0] * len(self._to)
        total = 0
        while True:
            level = self._levels(s)
            if level[t] == -1:
                return total
            ptr = [0] * self._n
            while pushed := self._blocking_step(s, t, level, ptr):
                total += pushed

    def _augmenting_path(self, s: int, t: int) -> int:
        visited = [False] * self._n
        visited[s] = True
        vertices = [s]
        iterators = [iter(self._adjacency[s])]
        path: list[int] = []
        while iterators:
            v = vertices[-1]
            if v == t:
                return self._push(path)
            for e in iterators[-1]:
                u = self._to[e]
                if not visited[u] and self._residual(e) > 0:
                    visited[u] = True
                    path.append(e)
                    vertices.append(u)
                    iterators.append(iter(self._adjacency[u]))
                    break
            else:
                vertices.pop()
                iterators.pop()
                if path:
                    path.pop()
        return 0

    def ford_fulkerson(self, s: int, t: int) -> int:
        """Maximum flow from ``s`` to ``t`` by depth-first augmenting paths."""
        self._check_terminals(s, t)
        self._flow = [0] * len(self._to)
        total = 0
        while pushed := self._augmenting_path(s, t):
            total += pushed
        return total


class MinCostFlow:
    """Minimum-cost maximum flow by successive shortest paths with potentials."""

    def __init__(self, n: int) -> None:
        self._n = n
        self._adjacency: list[list[int]] = [[] for _ in range(n)]
        self._from: list[int] = []
        self._to: list[int] = []
        self._capacity: list[int] = []
        self._cost: list[int] = []

    def _check_vertex(self, v: int) -> None:
        if not 0 <= v < self._n:
            raise IndexError(f"vertex {v} out of range 0..{self._n - 1}")

    def add_edge(self, u: int, v: int, capacity: int, cost: int) -> int:
        """Add an edge ``u -> v`` with a per-unit ``cost``; returns its index."""
        self._check_vertex(u)
        self._check_vertex(v)
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        index = len(self._to)
        self._from += [u, v]
        self._to += [v, u]
        self._capacity += [capacity, 0]
        self._cost += [cost, -cost]
        self._adjacency[u].append(index)
        self._adjacency[v].append(index + 1)
        return index

    def _bellman_ford(self, s: int, residual: list[int]) -> list[float]:
        potential: list[float] = [math.inf] * self._n
        potential[s] = 0
        for _ in range(self._n - 1):
            for e, cap in enumerate(residual):
                if cap == 0:
                    continue
                candidate = potential[self._from[e]] + self._cost[e]
                if candidate < potential[self._to[e]]:
                    potential[self._to[e]] = candidate
        return potential

    def solve(self, s: int, t: int) -> tuple[int, int]:
        """Return ``(minimum cost, maximum flow)`` from ``s`` to ``t``.

        Negative costs are allowed as long as there is no negative cycle.
        """
        self._check_vertex(s)
        self._check_vertex(t)
        if s == t:
            raise ValueError("source and sink must differ")
        residual = list(self._capacity)
        if any(c < 0 for c in self._cost):
            potential = self._bellman_ford(s, residual)
        else:
            potential = [0] * self._n

        flow = 0
        total_cost = 0
        while True:
            dist: list[float] = [math.inf] * self._n
            parent = [-1] * self._n
            done = [False] * self._n
            dist[s] = 0
            heap: list[tuple[float, int]] = [(0, s)]
            while heap:
                d, v = heapq.heappop(heap)
                if done[v]:
                    continue
                done[v] = True
                for e in self._adjacency[v]:
                    if residual[e] == 0:
                        continue
                    u = self._to[e]
                    if done[u]:
                        continue
                    candidate = d + potential[v] + self._cost[e] - potential[u]
                    if candidate < dist[u]:
                        dist[u] = candidate
                        parent[u] = e
                        heapq.heappush(heap, (candidate, u))
            if dist[t] == math.inf:
                break
            shift = potential[s]
            for v in range(self._n):
                if dist[v] != math.inf:
                    potential[v] = dist[v] + potential[v] - shift

            path = []
            v = t
            while v != s:
                e = parent[v]
                path.append(e)
                v = self._from[e]
            delta = min(residual[e] for e in path)
            for e in path:
                residual[e] -= delta
                residual[e ^ 1] += delta
                total_cost += self._cost[e] * delta
            flow += delta
        return total_cost, flow
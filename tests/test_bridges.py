import random

import pytest

from algokit.bridges import find_articulation_points, find_bridges


def components(n, edges, removed_vertex=None):
    adjacency = [[] for _ in range(n)]
    for a, b in edges:
        if removed_vertex in (a, b):
            continue
        adjacency[a].append(b)
        adjacency[b].append(a)
    seen = set()
    count = 0
    for s in range(n):
        if s in seen or s == removed_vertex:
            continue
        count += 1
        seen.add(s)
        stack = [s]
        while stack:
            v = stack.pop()
            for u in adjacency[v]:
                if u not in seen:
                    seen.add(u)
                    stack.append(u)
    return count


def random_graph(seed):
    rng = random.Random(seed)
    n = rng.randint(1, 9)
    edges = [(rng.randrange(n), rng.randrange(n)) for _ in range(rng.randint(0, 14))]
    return n, edges


def test_triangle_with_tail():
    edges = [(0, 1), (1, 2), (2, 0), (2, 3)]
    assert find_bridges(4, edges) == [3]
    assert find_articulation_points(4, edges) == [2]


def test_parallel_edges_are_not_bridges():
    assert find_bridges(2, [(0, 1), (0, 1)]) == []


@pytest.mark.parametrize("seed", range(15))
def test_bridges_match_brute_force(seed):
    n, edges = random_graph(seed)
    base = components(n, edges)
    expected = [
        i for i in range(len(edges)) if components(n, edges[:i] + edges[i + 1 :]) > base
    ]
    assert find_bridges(n, edges) == expected


@pytest.mark.parametrize("seed", range(15))
def test_articulation_points_match_brute_force(seed):
    n, edges = random_graph(seed)
    base = components(n, edges)
    expected = [v for v in range(n) if components(n, edges, removed_vertex=v) > base - 1 + 1
                and components(n, edges, removed_vertex=v) > base]
    assert find_articulation_points(n, edges) == expected


def test_tree_edges_are_all_bridges():
    edges = [(0, 1), (0, 2), (2, 3), (2, 4)]
    assert find_bridges(5, edges) == list(range(len(edges)))
    assert find_articulation_points(5, edges) == [0, 2]


def test_out_of_range_vertex():
    with pytest.raises(IndexError):
        find_bridges(2, [(0, 2)])
    with pytest.raises(IndexError):
        find_articulation_points(2, [(-1, 0)])
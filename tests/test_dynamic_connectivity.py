import random

import pytest

from algokit.dsu import DSU
from algokit.dynamic_connectivity import offline_connectivity


def brute_components(n, edges):
    dsu = DSU(n)
    for u, v in edges:
        dsu.join(u, v)
    return len({dsu.find(v) for v in range(n)})


def test_small_sequence():
    queries = [("?",), ("+", 0, 1), ("?",), ("-", 0, 1), ("?",)]
    assert offline_connectivity(3, queries) == [3, 2, 3]


def test_no_queries():
    assert offline_connectivity(5, []) == []


def test_string_query_marker_is_accepted():
    assert offline_connectivity(2, ["?"]) == [2]


@pytest.mark.parametrize("seed", range(10))
def test_matches_brute_force(seed):
    rng = random.Random(seed)
    n = rng.randint(1, 7)
    present = set()
    queries = []
    expected = []
    for _ in range(rng.randint(1, 40)):
        roll = rng.random()
        if roll < 0.3:
            queries.append(("?",))
            expected.append(brute_components(n, present))
        elif roll < 0.7 or not present:
            u, v = rng.randrange(n), rng.randrange(n)
            key = (min(u, v), max(u, v))
            if key in present:
                continue
            present.add(key)
            queries.append(("+", v, u))
        else:
            u, v = rng.choice(sorted(present))
            present.remove((u, v))
            queries.append(("-", u, v))
    assert offline_connectivity(n, queries) == expected


def test_removing_absent_edge_is_an_error():
    with pytest.raises(ValueError):
        offline_connectivity(3, [("-", 0, 1)])


def test_adding_present_edge_is_an_error():
    with pytest.raises(ValueError):
        offline_connectivity(3, [("+", 0, 1), ("+", 1, 0)])


def test_unknown_query_type():
    with pytest.raises(ValueError):
        offline_connectivity(3, [("*", 0, 1)])


def test_vertex_out_of_range():
    with pytest.raises(IndexError):
        offline_connectivity(3, [("+", 0, 3)])
import random

import pytest

from algokit.bridges import find_bridges
from algokit.bridges_online import OnlineBridges, count_bridges_online


def test_path_then_cycle():
    assert count_bridges_online(3, [(0, 1), (1, 2), (0, 2)]) == [1, 2, 0]


def test_self_loop_and_parallel_edge():
    graph = OnlineBridges(2)
    assert graph.add_edge(0, 0) == 0
    assert graph.add_edge(0, 1) == 1
    assert graph.add_edge(1, 0) == 0
    assert graph.bridges == 0


@pytest.mark.parametrize("seed", range(12))
def test_matches_offline_bridge_count(seed):
    rng = random.Random(seed)
    n = rng.randint(2, 9)
    edges = [(rng.randrange(n), rng.randrange(n)) for _ in range(rng.randint(1, 16))]
    counts = count_bridges_online(n, edges)
    expected = [len(find_bridges(n, edges[: k + 1])) for k in range(len(edges))]
    assert counts == expected


def test_joining_two_trees_keeps_their_bridges():
    edges = [(0, 1), (2, 3), (3, 4), (1, 3)]
    counts = count_bridges_online(5, edges)
    assert counts == [len(find_bridges(5, edges[: k + 1])) for k in range(4)]
    assert counts[-1] == len(edges)


def test_out_of_range_vertex():
    graph = OnlineBridges(3)
    with pytest.raises(IndexError):
        graph.add_edge(0, 3)
    with pytest.raises(IndexError):
        graph.add_edge(-1, 0)
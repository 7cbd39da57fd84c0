import random

import pytest

from algokit.matching import max_bipartite_matching


def _brute_force_size(left, edges):
    adjacency = [[] for _ in range(left)]
    for l, r in edges:
        adjacency[l].append(r)

    def best(i, used):
        if i == left:
            return 0
        result = best(i + 1, used)
        for r in adjacency[i]:
            if r not in used:
                result = max(result, 1 + best(i + 1, used | {r}))
        return result

    return best(0, frozenset())


def _assert_valid(pairs, edges):
    edge_set = set(edges)
    assert all(p in edge_set for p in pairs)
    assert len({l for l, _ in pairs}) == len(pairs)
    assert len({r for _, r in pairs}) == len(pairs)
    assert [r for _, r in pairs] == sorted(r for _, r in pairs)


def test_complete_bipartite_graph_is_perfectly_matched():
    edges = [(l, r) for l in range(3) for r in range(3)]
    pairs = max_bipartite_matching(3, 3, edges)
    assert len(pairs) == 3
    _assert_valid(pairs, edges)


def test_more_left_than_right():
    edges = [(l, r) for l in range(3) for r in range(2)]
    pairs = max_bipartite_matching(3, 2, edges)
    assert len(pairs) == 2
    _assert_valid(pairs, edges)


def test_augmenting_path_reassigns():
    edges = [(0, 0), (0, 1), (1, 0)]
    pairs = max_bipartite_matching(2, 2, edges)
    assert sorted(pairs) == [(0, 1), (1, 0)]


@pytest.mark.parametrize("seed", range(15))
def test_matches_brute_force(seed):
    rng = random.Random(seed)
    left, right = rng.randint(1, 6), rng.randint(1, 6)
    edges = list({(rng.randrange(left), rng.randrange(right)) for _ in range(rng.randint(0, 12))})
    pairs = max_bipartite_matching(left, right, edges)
    _assert_valid(pairs, edges)
    assert len(pairs) == _brute_force_size(left, edges)


def test_no_edges():
    assert max_bipartite_matching(3, 4, []) == []


def test_out_of_range_vertex():
    with pytest.raises(IndexError):
        max_bipartite_matching(2, 2, [(0, 2)])
    with pytest.raises(IndexError):
        max_bipartite_matching(2, 2, [(5, 0)])
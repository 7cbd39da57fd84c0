import random

import pytest

from algokit.lca import DynamicLCA, TreeLCA

EDGES = [(0, 1), (0, 2), (1, 3), (1, 4), (2, 5), (4, 6), (4, 7), (7, 8)]
N = 9


def _adjacency(n, edges):
    adj = [[] for _ in range(n)]
    for a, b in edges:
        adj[a].append(b)
        adj[b].append(a)
    return adj


def _parents(n, edges, root=0):
    adj = _adjacency(n, edges)
    parent = {root: None}
    order = [root]
    for v in order:
        for nxt in adj[v]:
            if nxt not in parent:
                parent[nxt] = v
                order.append(nxt)
    return parent, order


def _naive_lca(parent, a, b):
    seen = set()
    while a is not None:
        seen.add(a)
        a = parent[a]
    while b not in seen:
        b = parent[b]
    return b


def test_tree_lca_matches_naive():
    parent, _ = _parents(N, EDGES)
    lca = TreeLCA(_adjacency(N, EDGES), 0)
    for a in range(N):
        for b in range(N):
            assert lca.lca(a, b) == _naive_lca(parent, a, b)


def test_known_pair():
    lca = TreeLCA(_adjacency(N, EDGES), 0)
    assert lca.lca(3, 8) == 1


def test_dynamic_lca_matches_static():
    parent, order = _parents(N, EDGES)
    dynamic = DynamicLCA(N)
    for v in order[1:]:
        dynamic.add(parent[v], v)
    static = TreeLCA(_adjacency(N, EDGES), 0)
    for a in range(N):
        for b in range(N):
            assert dynamic.get(a, b) == static.lca(a, b)


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_random_trees(seed):
    rng = random.Random(seed)
    n = 60
    edges = [(rng.randrange(v), v) for v in range(1, n)]
    parent, _ = _parents(n, edges)
    lca = TreeLCA(_adjacency(n, edges), 0)
    dynamic = DynamicLCA(n)
    for a, b in edges:
        dynamic.add(a, b)
    for _ in range(200):
        a, b = rng.randrange(n), rng.randrange(n)
        expected = _naive_lca(parent, a, b)
        assert lca.lca(a, b) == expected
        assert dynamic.get(a, b) == expected


def test_single_node():
    assert TreeLCA([[]], 0).lca(0, 0) == 0
    assert DynamicLCA(1).get(0, 0) == 0
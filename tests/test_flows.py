import random

import pytest

from algokit.flows import FlowNetwork, MinCostFlow

CLASSIC_EDGES = [
    (0, 1, 16),
    (0, 2, 13),
    (1, 3, 12),
    (2, 1, 4),
    (2, 4, 14),
    (3, 2, 9),
    (3, 5, 20),
    (4, 3, 7),
    (4, 5, 4),
]


def _network(n, edges):
    net = FlowNetwork(n)
    for u, v, c in edges:
        net.add_edge(u, v, c)
    return net


def _random_edges(rng, n, count):
    return [(rng.randrange(n), rng.randrange(n), rng.randint(0, 10)) for _ in range(count)]


def test_classic_network_dinic():
    assert _network(6, CLASSIC_EDGES).dinic(0, 5) == 23


def test_classic_network_ford_fulkerson():
    assert _network(6, CLASSIC_EDGES).ford_fulkerson(0, 5) == 23


@pytest.mark.parametrize("seed", range(20))
def test_algorithms_agree(seed):
    rng = random.Random(seed)
    n = rng.randint(2, 8)
    edges = _random_edges(rng, n, rng.randint(0, 20))
    net = _network(n, edges)
    dinic = net.dinic(0, n - 1)
    assert net.ford_fulkerson(0, n - 1) == dinic
    assert net.dinic(0, n - 1) == dinic
    out_capacity = sum(c for u, v, c in edges if u == 0 and v != 0)
    assert 0 <= dinic <= out_capacity


def test_disconnected_sink_gets_no_flow():
    net = _network(4, [(0, 1, 5), (2, 3, 5)])
    assert net.dinic(0, 3) == 0
    assert net.ford_fulkerson(0, 3) == 0


def test_flow_network_errors():
    net = FlowNetwork(3)
    with pytest.raises(ValueError):
        net.add_edge(0, 1, -1)
    with pytest.raises(IndexError):
        net.add_edge(0, 3, 1)
    with pytest.raises(ValueError):
        net.dinic(1, 1)
    with pytest.raises(ValueError):
        net.ford_fulkerson(2, 2)


def test_min_cost_prefers_cheap_path():
    mcf = MinCostFlow(4)
    mcf.add_edge(0, 1, 2, 1)
    mcf.add_edge(1, 3, 2, 1)
    mcf.add_edge(0, 2, 1, 5)
    mcf.add_edge(2, 3, 1, 5)
    cost, flow = mcf.solve(0, 3)
    net = _network(4, [(0, 1, 2), (1, 3, 2), (0, 2, 1), (2, 3, 1)])
    assert flow == net.dinic(0, 3)
    assert cost == 14
    assert mcf.solve(0, 3) == (cost, flow)


@pytest.mark.parametrize("seed", range(10))
def test_min_cost_flow_reaches_max_flow(seed):
    rng = random.Random(seed)
    n = rng.randint(2, 7)
    edges = _random_edges(rng, n, rng.randint(0, 15))
    mcf = MinCostFlow(n)
    for u, v, c in edges:
        mcf.add_edge(u, v, c, 0)
    cost, flow = mcf.solve(0, n - 1)
    assert cost == 0
    assert flow == _network(n, edges).dinic(0, n - 1)


@pytest.mark.parametrize("seed", range(10))
def test_negative_costs_shift_uniformly(seed):
    rng = random.Random(seed)
    middle = [1, 2, 3]
    sink = 4
    edges = []
    for m in middle:
        edges.append((0, m, rng.randint(1, 5), rng.randint(1, 9)))
        edges.append((m, sink, rng.randint(1, 5), rng.randint(1, 9)))
    plain = MinCostFlow(5)
    shifted = MinCostFlow(5)
    for u, v, c, w in edges:
        plain.add_edge(u, v, c, w)
        shifted.add_edge(u, v, c, w - 10)
    cost, flow = plain.solve(0, sink)
    shifted_cost, shifted_flow = shifted.solve(0, sink)
    assert shifted_flow == flow
    assert shifted_cost == cost - 20 * flow


def test_min_cost_flow_errors():
    mcf = MinCostFlow(2)
    with pytest.raises(ValueError):
        mcf.add_edge(0, 1, -3, 1)
    with pytest.raises(IndexError):
        mcf.add_edge(0, 2, 1, 1)
    with pytest.raises(ValueError):
        mcf.solve(0, 0)
import itertools
import random

import pytest

from contestlib.mincut import min_cut


def _brute_cut(n, edges, source, sink):
    best = None
    others = [u for u in range(n) if u not in (source, sink)]
    for r in range(len(others) + 1):
        for extra in itertools.combinations(others, r):
            side = {source, *extra}
            value = sum(c for u, v, c in edges if (u in side) != (v in side))
            best = value if best is None else min(best, value)
    return best


def _random_graph(rng, n):
    pairs = [p for p in itertools.combinations(range(n), 2) if rng.random() < 0.6]
    return [(u, v, rng.randint(1, 9)) for u, v in pairs]


def test_single_edge():
    assert min_cut(2, [(0, 1, 5)], 0, 1) == (5, [(0, 1)])


def test_parallel_edges_listed_each():
    flow, cut = min_cut(2, [(0, 1, 2), (0, 1, 3)], 0, 1)
    assert flow == 5
    assert cut == [(0, 1), (0, 1)]


def test_disconnected_has_empty_cut():
    flow, cut = min_cut(3, [(0, 2, 4)], 0, 1)
    assert flow == 0
    assert cut == []


@pytest.mark.parametrize("seed", range(20))
def test_flow_matches_brute_force(seed):
    rng = random.Random(seed)
    n = rng.randint(2, 6)
    edges = _random_graph(rng, n)
    flow, _ = min_cut(n, edges, 0, n - 1)
    assert flow == _brute_cut(n, edges, 0, n - 1)


@pytest.mark.parametrize("seed", range(20))
def test_cut_capacity_equals_flow(seed):
    rng = random.Random(50 + seed)
    n = rng.randint(2, 6)
    edges = _random_graph(rng, n)
    capacity = {}
    for u, v, c in edges:
        capacity[(u, v)] = capacity[(v, u)] = c
    flow, cut = min_cut(n, edges, 0, n - 1)
    assert sum(capacity[pair] for pair in cut) == flow
    assert all(v != 0 and u != n - 1 for u, v in cut)


def test_errors():
    with pytest.raises(ValueError):
        min_cut(3, [], 1, 1)
    with pytest.raises(IndexError):
        min_cut(3, [(0, 3, 1)], 0, 1)
    with pytest.raises(IndexError):
        min_cut(3, [], 0, 4)
    with pytest.raises(ValueError):
        min_cut(3, [(0, 1, -2)], 0, 1)
"""Tests for graphshape.algorithms.prim."""
import itertools
import random

import networkx as nx
import pytest

from graphshape import (
    INFINITY,
    GraphConsistencyError,
    GraphStore,
    Visit,
    bfs,
    prim,
    to_networkx,
    tree_edges,
    tree_weight,
)


def _store(n, edges):
    s = GraphStore()
    s.add_nodes(n)
    for a, b, w in edges:
        s.add_edge(a, b, w)
    return s


def _connected_random_store(n, p, seed):
    rng = random.Random(seed)
    edges = [(i, i + 1, rng.randint(1, 20)) for i in range(n - 1)]  # spine keeps it connected
    edges += [
        (u, v, rng.randint(1, 20))
        for u, v in itertools.combinations(range(n), 2)
        if v > u + 1 and rng.random() < p
    ]
    return _store(n, edges)


def test_prim_path():
    s = _store(4, [(0, 1, 1), (1, 2, 2), (2, 3, 1)])
    res = prim(s, 0)
    assert [res.predecessor[i] for i in range(4)] == [None, 0, 1, 2]
    assert [res.distance[i] for i in range(4)] == [0, 1, 2, 1]
    assert tree_weight(s, res) == 4


def test_prim_prefers_light_edges():
    # triangle: the heavy 0-2 edge is left out
    s = _store(3, [(0, 1, 1), (1, 2, 2), (0, 2, 10)])
    res = prim(s, 0)
    assert res.predecessor[2] == 1
    assert sorted(e.key for e in tree_edges(s, res)) == [(0, 1), (1, 2)]


def test_prim_updates_after_better_edge():
    # node 3 is first reached through 0 (weight 8), then improved via 2 (weight 1)
    s = _store(4, [(0, 1, 1), (0, 3, 8), (1, 2, 1), (2, 3, 1)])
    res = prim(s, 0)
    assert res.predecessor[3] == 2
    assert res.distance[3] == 1
    assert tree_weight(s, res) == 3


def test_prim_disconnected():
    s = _store(5, [(0, 1, 3), (1, 2, 1), (3, 4, 2)])
    res = prim(s, 0)
    assert res.distance[3] == INFINITY
    assert res.visit[4] is Visit.UNVISITED
    assert res.predecessor[4] is None
    assert tree_weight(s, res) == 4


def test_prim_consistency_violation():
    s = _store(2, [(0, 1, 1)])
    # corrupt adjacency behind the store's back
    s.find_node(0).adjacency.append(1)
    s._edge_index.clear()
    s._lightest.clear()
    with pytest.raises(GraphConsistencyError):
        prim(s, 0)


@pytest.mark.parametrize("seed", range(10))
def test_prim_weight_matches_kruskal(seed):
    s = _connected_random_store(10, 0.3, seed)
    expected = nx.minimum_spanning_tree(to_networkx(s), algorithm="kruskal").size(weight="weight")
    for src in (0, 4, 9):
        res = prim(s, src)
        edges = tree_edges(s, res)
        assert len(edges) == 9
        assert nx.is_tree(nx.Graph([e.key for e in edges]))
        assert tree_weight(s, res) == expected


def test_prim_repeat_is_identical():
    s = _connected_random_store(12, 0.4, 7)
    assert prim(s, 2) == prim(s, 2)


def test_bfs_and_prim_do_not_share_state():
    s = _store(3, [(0, 1, 1), (1, 2, 1), (0, 2, 5)])
    hops = bfs(s, 0)
    mst = prim(s, 0)
    assert hops.predecessor[2] == 0
    assert mst.predecessor[2] == 1
    assert hops.distance[2] == 1


def test_prim_uses_lightest_parallel_edge():
    s = _store(2, [(0, 1, 9), (1, 0, 4)])
    res = prim(s, 0)
    assert res.distance[1] == 4
    assert [e.weight for e in tree_edges(s, res)] == [4]
    assert tree_weight(s, res) == 4


@pytest.mark.parametrize("seed", range(5))
def test_prim_weight_matches_kruskal_with_parallel_edges(seed):
    rng = random.Random(seed)
    s = _connected_random_store(8, 0.3, seed)
    for u, v in itertools.combinations(range(8), 2):
        if rng.random() < 0.2:
            s.add_edge(v, u, rng.randint(1, 20))
    G = nx.MultiGraph()
    G.add_nodes_from(range(8))
    G.add_weighted_edges_from((e.source, e.destination, e.weight) for e in s.edges)
    expected = nx.minimum_spanning_tree(G, algorithm="kruskal").size(weight="weight")
    assert tree_weight(s, prim(s, 0)) == expected

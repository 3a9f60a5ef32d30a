"""Tests for graphshape.core."""
import pytest

from graphshape.core import Edge, GraphConsistencyError, GraphStore, Node, edge_key


def _store(n, edges):
    s = GraphStore()
    s.add_nodes(n)
    for a, b, w in edges:
        s.add_edge(a, b, w)
    return s


# --- edges ---

def test_edge_key_orientation_free():
    assert edge_key(3, 1) == edge_key(1, 3) == (1, 3)


def test_edge_connects_and_other():
    e = Edge(2, 5, 7)
    assert e.connects(5, 2)
    assert not e.connects(2, 4)
    assert e.other(2) == 5
    assert e.other(5) == 2
    with pytest.raises(ValueError):
        e.other(9)


def test_edge_rejects_self_loop():
    with pytest.raises(ValueError):
        Edge(1, 1, 3)


# --- insertion ---

def test_insert_edge_is_symmetric():
    s = _store(3, [(0, 1, 4), (1, 2, 2)])
    assert s.find_node(0).adjacency == [1]
    assert s.find_node(1).adjacency == [0, 2]
    assert s.find_node(2).adjacency == [1]
    assert s.number_of_edges() == 2


def test_insert_duplicate_node_rejected():
    s = GraphStore()
    s.insert_node(Node(4))
    with pytest.raises(ValueError):
        s.insert_node(Node(4))


def test_insert_edge_unknown_endpoint():
    s = _store(2, [])
    with pytest.raises(KeyError):
        s.add_edge(0, 5, 1)
    # nothing half-inserted
    assert s.find_node(0).adjacency == []
    assert s.number_of_edges() == 0


def test_counts_follow_declared_and_actual():
    s = GraphStore()
    s.declare(2, 5)
    s.add_nodes(3)
    s.add_edge(0, 1, 1)
    assert s.tot_nodes == 3  # raised past the header
    assert s.tot_edges == 5  # header still larger
    assert s.number_of_nodes() == 3
    assert s.number_of_edges() == 1


def test_reset_clears_everything():
    s = _store(3, [(0, 1, 1)])
    s.declare(3, 1)
    s.reset()
    assert len(s) == 0
    assert s.edges == ()
    assert s.tot_nodes == s.tot_edges == 0
    assert s.declared_node_count == s.declared_edge_count == 0
    assert s.find_edge(0, 1) is None


# --- lookup ---

def test_find_node_miss_is_reported(capsys):
    s = _store(2, [])
    assert s.find_node(7) is None
    err = capsys.readouterr().err
    assert "Node (7) not found" in err


def test_find_edge_either_orientation():
    s = _store(3, [(0, 2, 9)])
    assert s.find_edge(0, 2) is s.find_edge(2, 0)
    assert s.find_edge(2, 0).weight == 9
    assert s.find_edge(0, 1) is None


def test_find_edge_parallel_returns_first():
    s = _store(2, [(0, 1, 5), (1, 0, 2)])
    assert s.find_edge(0, 1).weight == 5
    assert s.lightest_edge(1, 0).weight == 2
    assert s.edge_weight(0, 1) == 2
    assert s.find_node(0).adjacency == [1, 1]


def test_edge_weight_without_backing_edge():
    s = _store(3, [(0, 1, 1)])
    with pytest.raises(GraphConsistencyError):
        s.edge_weight(0, 2)


def test_store_iteration_order():
    s = GraphStore()
    for i in (3, 1, 2):
        s.insert_node(Node(i))
    assert [n.id for n in s] == [3, 1, 2]
    assert 1 in s and 0 not in s


def test_reset_clears_lightest_index():
    s = _store(2, [(0, 1, 3)])
    s.reset()
    s.add_nodes(2)
    assert s.lightest_edge(0, 1) is None

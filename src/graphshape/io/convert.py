from __future__ import annotations

import networkx as nx

from graphshape.core.node import Node
from graphshape.core.store import GraphStore


def to_networkx(store: GraphStore) -> nx.Graph:
    """
    Copy the store into a simple NetworkX Graph with a 'weight' attribute.

    Parallel edges collapse onto the lightest one, matching
    GraphStore.edge_weight.
    """
    G = nx.Graph()
    G.add_nodes_from(store.node_ids())
    for e in store.edges:
        if e is store.lightest_edge(e.source, e.destination):
            G.add_edge(e.source, e.destination, weight=e.weight)
    return G


def from_networkx(G: nx.Graph, weight: str = "weight", default: int = 1) -> GraphStore:
    """
    Build a GraphStore from a NetworkX graph with integer node labels.

    Self-loops are dropped; a missing weight attribute becomes `default`.
    """
    if G.is_directed():
        raise ValueError("directed graphs are not supported")
    for v in G.nodes():
        if not isinstance(v, int):
            raise ValueError(f"node labels must be integers, got {v!r}")

    store = GraphStore()
    store.declare(G.number_of_nodes(), G.number_of_edges())
    for v in sorted(G.nodes()):
        store.insert_node(Node(v))
    for u, v, data in G.edges(data=True):
        if u != v:
            store.add_edge(u, v, int(data.get(weight, default)))
    return store

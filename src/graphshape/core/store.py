from __future__ import annotations

import sys
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from .edge import Edge, edge_key
from .node import Node


class GraphConsistencyError(RuntimeError):
    """Adjacency lists and edge storage disagree."""


class GraphStore:
    """
    Owns every Node and Edge of an undirected weighted graph.

    Nodes are addressed by their integer id; adjacency lists store ids, and
    edges are indexed by their orientation-free key so that a pair lookup
    does not rescan the edge list. Parallel edges are all kept: find_edge
    returns the first one inserted, edge_weight the lightest.

    tot_nodes / tot_edges follow the input header: they start at the
    declared counts and are raised to the storage size on every insertion.
    number_of_nodes() / number_of_edges() give what is actually stored.
    """

    def __init__(self) -> None:
        self._nodes: Dict[int, Node] = {}
        self._edges: List[Edge] = []
        self._edge_index: Dict[Tuple[int, int], Edge] = {}
        self._lightest: Dict[Tuple[int, int], Edge] = {}
        self.declared_node_count = 0
        self.declared_edge_count = 0
        self.tot_nodes = 0
        self.tot_edges = 0

    def reset(self) -> None:
        self._nodes.clear()
        self._edges.clear()
        self._edge_index.clear()
        self._lightest.clear()
        self.declared_node_count = self.declared_edge_count = 0
        self.tot_nodes = self.tot_edges = 0

    def declare(self, n_nodes: int, n_edges: int) -> None:
        """Record the counts announced by an input header."""
        self.declared_node_count = n_nodes
        self.declared_edge_count = n_edges
        self.tot_nodes = max(self.tot_nodes, n_nodes)
        self.tot_edges = max(self.tot_edges, n_edges)

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------

    def insert_node(self, node: Node) -> Node:
        if node.id in self._nodes:
            raise ValueError(f"node {node.id} already present")
        self._nodes[node.id] = node
        self.tot_nodes = max(self.tot_nodes, len(self._nodes))
        return node

    def add_nodes(self, n: int) -> None:
        """Insert Node(0) .. Node(n-1)."""
        for i in range(n):
            self.insert_node(Node(i))

    def insert_edge(self, edge: Edge) -> Edge:
        for end in (edge.source, edge.destination):
            if end not in self._nodes:
                raise KeyError(f"edge endpoint {end} is not in the store")
        self._nodes[edge.source].add_adjacent(edge.destination)
        self._nodes[edge.destination].add_adjacent(edge.source)
        self._edges.append(edge)
        self._edge_index.setdefault(edge.key, edge)
        lightest = self._lightest.get(edge.key)
        if lightest is None or edge.weight < lightest.weight:
            self._lightest[edge.key] = edge
        self.tot_edges = max(self.tot_edges, len(self._edges))
        return edge

    def add_edge(self, a: int, b: int, weight: int = 1) -> Edge:
        return self.insert_edge(Edge(a, b, weight))

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def find_node(self, node_id: int) -> Optional[Node]:
        node = self._nodes.get(node_id)
        if node is None:
            print(f"[find_node ERROR] => Node ({node_id}) not found", file=sys.stderr)
        return node

    def find_edge(self, a: int, b: int) -> Optional[Edge]:
        """First edge inserted between a and b, in either orientation."""
        return self._edge_index.get(edge_key(a, b))

    def lightest_edge(self, a: int, b: int) -> Optional[Edge]:
        """Minimum-weight edge between a and b; the first inserted wins ties."""
        return self._lightest.get(edge_key(a, b))

    def edge_weight(self, a: int, b: int) -> int:
        """Weight of the lightest edge between a and b."""
        edge = self._lightest.get(edge_key(a, b))
        if edge is None:
            raise GraphConsistencyError(
                f"nodes {a} and {b} are adjacent but no edge record backs them"
            )
        return edge.weight

    def neighbors(self, node_id: int) -> List[int]:
        return self._nodes[node_id].adjacency

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    @property
    def nodes(self) -> Sequence[Node]:
        return tuple(self._nodes.values())

    @property
    def edges(self) -> Sequence[Edge]:
        return tuple(self._edges)

    def node_ids(self) -> List[int]:
        return list(self._nodes)

    def number_of_nodes(self) -> int:
        return len(self._nodes)

    def number_of_edges(self) -> int:
        return len(self._edges)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes.values())

    def __repr__(self) -> str:
        return f"GraphStore(nodes={len(self._nodes)}, edges={len(self._edges)})"

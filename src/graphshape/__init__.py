"""
graphshape: an undirected weighted graph store with breadth-first search,
Prim's minimum spanning tree and binary / complete-binary tree checks.
"""

from .core.node import INFINITY, Node, Visit
from .core.edge import Edge, edge_key
from .core.store import GraphConsistencyError, GraphStore
from .algorithms.search import SearchResult
from .algorithms.bfs import bfs
from .algorithms.prim import prim, tree_edges, tree_weight
from .algorithms.shape import children, is_binary, is_complete_binary
from .io.edgelist import format_line, parse_header, parse_edge_line, load_graph, load_file
from .io.report import format_graph, format_tree, print_graph, print_tree
from .io.convert import to_networkx, from_networkx

__all__ = [
    # Core
    "INFINITY",
    "Node",
    "Visit",
    "Edge",
    "edge_key",
    "GraphConsistencyError",
    "GraphStore",
    # Algorithms
    "SearchResult",
    "bfs",
    "prim",
    "tree_edges",
    "tree_weight",
    # Shape
    "children",
    "is_binary",
    "is_complete_binary",
    # IO
    "format_line",
    "parse_header",
    "parse_edge_line",
    "load_graph",
    "load_file",
    "format_graph",
    "format_tree",
    "print_graph",
    "print_tree",
    "to_networkx",
    "from_networkx",
]

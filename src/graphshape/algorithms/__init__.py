from .search import SearchResult
from .bfs import bfs
from .prim import prim, tree_edges, tree_weight
from .shape import children, is_binary, is_complete_binary

__all__ = [
    "SearchResult",
    "bfs",
    "prim",
    "tree_edges",
    "tree_weight",
    "children",
    "is_binary",
    "is_complete_binary",
]

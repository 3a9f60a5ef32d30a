from .node import INFINITY, Node, Visit
from .edge import Edge, edge_key
from .store import GraphConsistencyError, GraphStore

__all__ = [
    "INFINITY",
    "Node",
    "Visit",
    "Edge",
    "edge_key",
    "GraphConsistencyError",
    "GraphStore",
]

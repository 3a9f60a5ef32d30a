from .edgelist import format_line, parse_header, parse_edge_line, load_graph, load_file
from .report import format_graph, format_tree, print_graph, print_tree
from .convert import to_networkx, from_networkx

__all__ = [
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

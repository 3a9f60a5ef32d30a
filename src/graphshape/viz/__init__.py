from .draw import draw_search_tree

__all__ = ["draw_search_tree"]

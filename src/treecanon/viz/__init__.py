from .layouts import layered_tree_layout
from .draw import draw_tree_pair

__all__ = [
    "layered_tree_layout",
    "draw_tree_pair",
]

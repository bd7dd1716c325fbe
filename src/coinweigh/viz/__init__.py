from .layouts import tree_layout, tree_to_nx
from .draw import draw_decision_tree

__all__ = [
    "tree_layout",
    "tree_to_nx",
    "draw_decision_tree",
]

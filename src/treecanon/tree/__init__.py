from .model import LTree, leaf, node, pretty, tree_size, tree_depth
from .traverse import check_tree, fold_postorder
from .convert import ltree_to_nx, ltree_from_nx

__all__ = [
    "LTree",
    "leaf",
    "node",
    "pretty",
    "tree_size",
    "tree_depth",
    "check_tree",
    "fold_postorder",
    "ltree_to_nx",
    "ltree_from_nx",
]

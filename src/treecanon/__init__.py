"""
treecanon: symmetry-aware canonical keys and automorphism counts for
finite, rooted, labeled trees.
"""

from .errors import StructuralError, StructuralLimitExceeded
from .config.settings import TraversalLimits

from .tree.model import LTree, leaf, node, pretty, tree_size, tree_depth
from .tree.traverse import check_tree, fold_postorder
from .tree.convert import ltree_to_nx, ltree_from_nx

from .encode.labels import label_token
from .encode.planar import encode_planar, encode_forest_planar

from .canon.labeled import CanonicalResult, canonicalize_labeled, canonicalize_forest
from .canon.automorphisms import (
    reordering_count,
    planar_embedding_count,
    planar_variants,
    aut_size_bruteforce,
)

from .keys.symmetry import SymmetryMode, SymmetryKey, symmetry_key
from .keys.aggregate import WeightTable

__all__ = [
    # Errors / config
    "StructuralError",
    "StructuralLimitExceeded",
    "TraversalLimits",
    # Tree model
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
    # Encoders
    "label_token",
    "encode_planar",
    "encode_forest_planar",
    "CanonicalResult",
    "canonicalize_labeled",
    "canonicalize_forest",
    # Automorphisms
    "reordering_count",
    "planar_embedding_count",
    "planar_variants",
    "aut_size_bruteforce",
    # Keys
    "SymmetryMode",
    "SymmetryKey",
    "symmetry_key",
    "WeightTable",
]

from .labeled import CanonicalResult, canonicalize_labeled, canonicalize_forest
from .automorphisms import (
    reordering_count,
    planar_embedding_count,
    planar_variants,
    aut_size_bruteforce,
)

__all__ = [
    "CanonicalResult",
    "canonicalize_labeled",
    "canonicalize_forest",
    "reordering_count",
    "planar_embedding_count",
    "planar_variants",
    "aut_size_bruteforce",
]

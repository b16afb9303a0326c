from __future__ import annotations

from itertools import permutations, product
from math import factorial
from typing import Any, Callable, Iterator

from treecanon.config.settings import TraversalLimits
from treecanon.canon.labeled import canonicalize_labeled
from treecanon.encode.planar import encode_planar
from treecanon.tree.model import LTree
from treecanon.tree.traverse import fold_postorder

BRUTEFORCE_MAX_REORDERINGS = 40320


def reordering_count(tree: Any, *, limits: TraversalLimits | None = None) -> int:
    """Number of ways to reorder children at every node: prod over nodes of k!."""

    def combine(t, kids: list[int]) -> int:
        out = factorial(len(kids))
        for c in kids:
            out *= c
        return out

    return fold_postorder(tree, combine, limits=limits)


def planar_embedding_count(
    tree: Any,
    *,
    show: Callable[[Any], str] | None = None,
    limits: TraversalLimits | None = None,
) -> int:
    """Number of distinct plane trees obtained by reordering children.

    Equals reordering_count(t) / |Aut(t)| (orbit-stabilizer: the
    reorderings act transitively on the plane embeddings and the
    automorphisms are exactly the stabilizer).
    """
    aut = canonicalize_labeled(tree, show=show, limits=limits).aut
    return reordering_count(tree, limits=limits) // aut


def _check_bruteforce_size(tree: Any, limits: TraversalLimits | None) -> None:
    total = reordering_count(tree, limits=limits)
    if total > BRUTEFORCE_MAX_REORDERINGS:
        raise ValueError(
            f"Brute-force enumeration is impractical for {total} reorderings "
            f"(cap {BRUTEFORCE_MAX_REORDERINGS}). Use canonicalize_labeled() instead."
        )


def planar_variants(
    tree: Any,
    *,
    limits: TraversalLimits | None = None,
) -> Iterator[LTree]:
    """Yield every reordering of *tree* as an LTree, duplicates included.

    Only practical for small trees; raises ValueError past
    BRUTEFORCE_MAX_REORDERINGS.
    """
    _check_bruteforce_size(tree, limits)

    def combine(t, kids: list[list[LTree]]) -> list[LTree]:
        out: list[LTree] = []
        for perm in permutations(range(len(kids))):
            for combo in product(*(kids[i] for i in perm)):
                out.append(LTree(t.label, combo))
        return out

    yield from fold_postorder(tree, combine, limits=limits)


def aut_size_bruteforce(
    tree: Any,
    *,
    show: Callable[[Any], str] | None = None,
    limits: TraversalLimits | None = None,
) -> int:
    """Count automorphisms by brute force over all reorderings.

    A reordering is an automorphism iff it reproduces the planar encoding.
    """
    target = encode_planar(tree, show=show, limits=limits)
    return sum(
        1
        for v in planar_variants(tree, limits=limits)
        if encode_planar(v, show=show, limits=limits) == target
    )

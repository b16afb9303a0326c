"""Order-independent canonical codes with automorphism counts.

Three passes, all iterative:

1. Post-order: every subtree is interned as a shape id keyed by
   ``(token(label), sorted child shape ids)``.  Equal keys mean equal
   shapes, so the table is a DAG of the distinct shapes of the tree.  Each
   shape's aut is fixed when it is first interned:

     aut = prod a^m * m!

   over groups of equal child shapes, m the group size, a the shared aut
   of its members.

2. Ranking: shapes are ordered by height, then token, then their children
   listed in this same order (AHU-style, one height at a time).  Ranks are
   dense within one tree, but the relative order of any two shapes does not
   depend on which tree they came from.

3. Emission: the code is written front to back into a list:

     leaf:      token(label)
     internal:  "(" token(label) "|" child codes in rank order ")"

Why the code is canonical.  Tokens and codes are self-delimiting, so the
code decodes to a single ordered tree, which is the input with its
children reordered; non-isomorphic inputs therefore never share a code.
The ordering at every node is a function of the child shapes only, so
isomorphic inputs are written identically.

Why equal shapes have equal aut.  aut is computed from the interning key
alone: equal keys mean equal labels and equal multisets of child shapes,
hence equal groups, equal member auts and equal products.  That is what
makes "a" well defined for a whole group.

Why the count is right.  A root-fixing automorphism permutes the children
among isomorphic ones (m! choices per group) and then applies an
automorphism inside each child (a choices each, independently).

Cost: interning hashes each child id once and sorts each node's k child
ids once; ranking sorts each height level once; emission touches every
output character once.  A chain of N nodes is O(N); in general
O(n log n).
"""
from __future__ import annotations

from collections import defaultdict
from itertools import groupby
from math import factorial
from typing import Any, Callable, Dict, Iterable, List, NamedTuple, Tuple

from treecanon.config.settings import TraversalLimits
from treecanon.encode.labels import label_token
from treecanon.tree.traverse import fold_postorder


class CanonicalResult(NamedTuple):
    code: str
    aut: int


def _group_aut(sorted_ids: Iterable[int], auts: List[int]) -> int:
    """prod a^m * m! over runs of equal ids in *sorted_ids*."""
    aut = 1
    for sid, run in groupby(sorted_ids):
        m = sum(1 for _ in run)
        aut *= auts[sid] ** m * factorial(m)
    return aut


class _ShapeTable:
    """Distinct subtree shapes seen during one call."""

    def __init__(self, show: Callable[[Any], str] | None) -> None:
        self.show = show
        self.ids: Dict[Tuple[str, Tuple[int, ...]], int] = {}
        self.token: List[str] = []
        self.kids: List[Tuple[int, ...]] = []
        self.height: List[int] = []
        self.aut: List[int] = []

    def intern(self, t: Any, child_ids: List[int]) -> int:
        token = label_token(t.label, self.show)
        kids = tuple(sorted(child_ids))
        key = (token, kids)
        sid = self.ids.get(key)
        if sid is None:
            sid = len(self.token)
            self.ids[key] = sid
            self.token.append(token)
            self.kids.append(kids)
            self.height.append(1 + max((self.height[c] for c in kids), default=-1))
            self.aut.append(_group_aut(kids, self.aut))
        return sid

    def ranks(self) -> List[int]:
        levels: Dict[int, List[int]] = defaultdict(list)
        for sid, h in enumerate(self.height):
            levels[h].append(sid)

        rank = [0] * len(self.token)
        next_rank = 0
        for h in sorted(levels):
            level = levels[h]
            keys = {
                sid: (self.token[sid], tuple(sorted(rank[c] for c in self.kids[sid])))
                for sid in level
            }
            level.sort(key=keys.__getitem__)
            for sid in level:
                rank[sid] = next_rank
                next_rank += 1
        return rank

    def emit(self, roots: Iterable[int], rank: List[int], parts: List[str]) -> None:
        # Stack items are either literal text or a shape id still to be written.
        stack: list = list(reversed(list(roots)))
        while stack:
            item = stack.pop()
            if type(item) is str:
                parts.append(item)
                continue
            kids = self.kids[item]
            if not kids:
                parts.append(self.token[item])
                continue
            parts.append("(" + self.token[item] + "|")
            stack.append(")")
            stack.extend(sorted(kids, key=rank.__getitem__, reverse=True))


def canonicalize_labeled(
    tree: Any,
    *,
    show: Callable[[Any], str] | None = None,
    limits: TraversalLimits | None = None,
) -> CanonicalResult:
    """
    Canonical code and |Aut| of a labeled rooted tree, ignoring child order.

    Two trees get the same code iff one is obtained from the other by
    permuting children at any nodes.  aut is the number of such
    permutations that map the tree onto itself (root fixed, labels kept),
    as an exact Python int.
    """
    table = _ShapeTable(show)
    root = fold_postorder(tree, table.intern, limits=limits)
    parts: List[str] = []
    table.emit([root], table.ranks(), parts)
    return CanonicalResult("".join(parts), table.aut[root])


def canonicalize_forest(
    forest: Iterable[Any],
    *,
    show: Callable[[Any], str] | None = None,
    limits: TraversalLimits | None = None,
) -> CanonicalResult:
    """
    Canonical code of an unordered multiset of trees: ``[c1c2...]`` with the
    member codes in rank order.  aut counts permutations of identical
    members combined with each member's own automorphisms.
    """
    table = _ShapeTable(show)
    roots = [fold_postorder(t, table.intern, limits=limits) for t in forest]
    rank = table.ranks()
    roots.sort(key=rank.__getitem__)
    parts = ["["]
    table.emit(roots, rank, parts)
    parts.append("]")
    return CanonicalResult("".join(parts), _group_aut(sorted(roots), table.aut))

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Optional, Tuple, TypeVar

from treecanon.config.settings import TraversalLimits
from treecanon.tree.traverse import fold_postorder

L = TypeVar("L")

ABSENT_LABEL_TEXT = "_"


@dataclass(frozen=True)
class LTree(Generic[L]):
    """
    Finite rooted tree with an optional label per node and ordered children.

    label:    any value; None means "absent label".
    children: ordered tuple of subtrees (lists are converted on construction).

    Equality, hashing and repr are the dataclass defaults and therefore
    recursive; the encoders in this package never rely on them, so very
    deep trees are safe to canonicalize but not to compare with ==.
    """

    label: Optional[L] = None
    children: Tuple["LTree[L]", ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    @property
    def is_leaf(self) -> bool:
        return not self.children


def leaf(label: Optional[L] = None) -> LTree[L]:
    return LTree(label, ())


def node(label: Optional[L], children: Iterable[LTree[L]] = ()) -> LTree[L]:
    return LTree(label, tuple(children))


def pretty(
    tree: LTree[L],
    show: Callable[[L], str] = str,
    *,
    limits: TraversalLimits | None = None,
) -> str:
    """Human-readable rendering ``label(child, child, ...)``.

    Not injective (labels are not escaped); never use it as a key.
    """

    def combine(t, kids: list[str]) -> str:
        text = ABSENT_LABEL_TEXT if t.label is None else show(t.label)
        if not kids:
            return text
        return f"{text}({', '.join(kids)})"

    return fold_postorder(tree, combine, limits=limits)


def tree_size(tree: LTree[L], *, limits: TraversalLimits | None = None) -> int:
    """Number of nodes, counting physically shared subtrees once per occurrence."""
    return fold_postorder(tree, lambda _t, kids: 1 + sum(kids), limits=limits)


def tree_depth(tree: LTree[L], *, limits: TraversalLimits | None = None) -> int:
    """Number of nodes on the longest root-to-leaf path (a leaf has depth 1)."""
    return fold_postorder(tree, lambda _t, kids: 1 + max(kids, default=0), limits=limits)

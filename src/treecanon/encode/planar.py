from __future__ import annotations

from typing import Any, Callable, Iterable

from treecanon.config.settings import TraversalLimits
from treecanon.encode.labels import label_token
from treecanon.tree.traverse import check_tree


def _emit_planar(tree: Any, parts: list[str], show: Callable[[Any], str] | None) -> None:
    # Stack items are either literal text or a node still to be written.
    stack: list = [tree]
    while stack:
        item = stack.pop()
        if type(item) is str:
            parts.append(item)
            continue
        parts.append("(" + label_token(item.label, show) + "|")
        stack.append(")")
        stack.extend(reversed(tuple(item.children)))


def encode_planar(
    tree: Any,
    *,
    show: Callable[[Any], str] | None = None,
    limits: TraversalLimits | None = None,
) -> str:
    """Order-preserving key: ``(token|E(c1)E(c2)...E(ck))``.

    Equal strings iff the trees are equal as ordered labeled trees.  Child
    order is never normalized.  The key is written once, front to back, so
    the cost is linear in its length.
    """
    check_tree(tree, limits=limits)
    parts: list[str] = []
    _emit_planar(tree, parts, show)
    return "".join(parts)


def encode_forest_planar(
    forest: Iterable[Any],
    *,
    show: Callable[[Any], str] | None = None,
    limits: TraversalLimits | None = None,
) -> str:
    """Order-preserving key for a sequence of trees: ``[E(t1)E(t2)...]``."""
    parts = ["["]
    for t in forest:
        check_tree(t, limits=limits)
        _emit_planar(t, parts, show)
    parts.append("]")
    return "".join(parts)

"""Iterative traversals over rooted trees.

Every encoder in treecanon goes through ``fold_postorder`` (directly or via
``check_tree``) so that stack usage, cycle detection and resource ceilings
live in one place.
"""
from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Callable, Dict, List, TypeVar

from treecanon.config.settings import TraversalLimits, default_limits
from treecanon.errors import StructuralError, StructuralLimitExceeded

logger = logging.getLogger(__name__)

R = TypeVar("R")


def _children_of(t: Any) -> tuple:
    try:
        return tuple(t.children)
    except AttributeError:
        raise StructuralError(
            f"Expected a tree node with .label and .children, got {type(t).__name__}."
        ) from None


def fold_postorder(
    tree: Any,
    combine: Callable[[Any, List[R]], R],
    *,
    limits: TraversalLimits | None = None,
) -> R:
    """Fold *tree* bottom-up: ``combine(node, [result(child) for child in children])``.

    Uses an explicit stack, so depth is bounded only by *limits*.

    Results are memoized by object identity while a parent still needs
    them, so a subtree shared by reference is usually folded once instead
    of once per occurrence.  *combine* must depend only on the node's value
    for this to be invisible to callers.

    Raises:
      StructuralError         if a node is reached again while on its own
                              root path (cyclic input).
      StructuralLimitExceeded if the path depth or the number of distinct
                              node objects goes past *limits*.
    """
    if limits is None:
        limits = default_limits()
    max_depth = limits.max_depth
    max_nodes = limits.max_nodes

    memo: Dict[int, R] = {}
    pending: Dict[int, int] = defaultdict(int)
    on_path: set[int] = set()
    seen: set[int] = set()

    # Frames are (node, children) once expanded, (node, None) before.
    stack: list[tuple[Any, tuple | None]] = [(tree, None)]
    while stack:
        t, kids = stack.pop()
        tid = id(t)

        if kids is None:
            if tid in memo:
                continue
            if tid in on_path:
                logger.debug("cycle detected at node id=%d depth=%d", tid, len(on_path))
                raise StructuralError(
                    "Input is not a finite tree: a node is its own ancestor."
                )
            kids = _children_of(t)
            on_path.add(tid)
            seen.add(tid)
            if max_depth is not None and len(on_path) > max_depth:
                logger.debug("depth ceiling %d exceeded", max_depth)
                raise StructuralLimitExceeded("max_depth", max_depth, len(on_path))
            if max_nodes is not None and len(seen) > max_nodes:
                logger.debug("node ceiling %d exceeded", max_nodes)
                raise StructuralLimitExceeded("max_nodes", max_nodes, len(seen))

            stack.append((t, kids))
            for c in reversed(kids):
                pending[id(c)] += 1
                stack.append((c, None))
            continue

        results = [memo[id(c)] for c in kids]
        for c in kids:
            cid = id(c)
            pending[cid] -= 1
            if pending[cid] == 0:
                del pending[cid]
                del memo[cid]
        memo[tid] = combine(t, results)
        on_path.discard(tid)

    return memo[id(tree)]


def check_tree(tree: Any, *, limits: TraversalLimits | None = None) -> None:
    """Raise StructuralError / StructuralLimitExceeded unless *tree* is a
    finite tree within *limits*.  Callers may then walk it unguarded."""
    fold_postorder(tree, lambda _t, _kids: None, limits=limits)

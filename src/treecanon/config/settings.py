from __future__ import annotations

import os
from dataclasses import dataclass


def _env_limit(name: str, default: int) -> int | None:
    """Read an integer ceiling from the environment; 'none' or '0' disables it."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    raw = raw.strip().lower()
    if raw in ("", "none", "0"):
        return None
    value = int(raw)
    if value < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {raw!r}.")
    return value


TREECANON_MAX_DEPTH = _env_limit("TREECANON_MAX_DEPTH", 1_000_000)
TREECANON_MAX_NODES = _env_limit("TREECANON_MAX_NODES", 10_000_000)


@dataclass(frozen=True)
class TraversalLimits:
    """
    Resource ceilings for a single traversal.

    max_depth: longest root-to-node path allowed (root has depth 1).
    max_nodes: number of distinct node objects allowed.
    None disables the corresponding ceiling.
    """

    max_depth: int | None = TREECANON_MAX_DEPTH
    max_nodes: int | None = TREECANON_MAX_NODES


def default_limits() -> TraversalLimits:
    return TraversalLimits()

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from treecanon.canon.labeled import canonicalize_labeled
from treecanon.config.settings import TraversalLimits
from treecanon.encode.planar import encode_planar


class SymmetryMode(Enum):
    """
    How child order is treated when keying a tree.

    PLANAR:          order matters; key is the planar encoding, aut is 1.
    SYMMETRIC_AGG:   order ignored; trees merge by shape, aut is informative.
    SYMMETRIC_ORBIT: order ignored; callers must divide accumulated weight
                     by aut to get per-orbit counts (see WeightTable).
    """

    PLANAR = "planar"
    SYMMETRIC_AGG = "symmetric-agg"
    SYMMETRIC_ORBIT = "symmetric-orbit"


@dataclass(frozen=True)
class SymmetryKey:
    key: str
    aut: int
    mode: SymmetryMode


def symmetry_key(
    tree: Any,
    mode: SymmetryMode | str,
    *,
    show: Callable[[Any], str] | None = None,
    limits: TraversalLimits | None = None,
) -> SymmetryKey:
    """Key a tree under *mode*; *mode* may also be given by its string value."""
    mode = SymmetryMode(mode)
    if mode is SymmetryMode.PLANAR:
        return SymmetryKey(encode_planar(tree, show=show, limits=limits), 1, mode)
    if mode is SymmetryMode.SYMMETRIC_AGG or mode is SymmetryMode.SYMMETRIC_ORBIT:
        code, aut = canonicalize_labeled(tree, show=show, limits=limits)
        return SymmetryKey(code, aut, mode)
    raise ValueError(f"Unhandled symmetry mode: {mode!r}")

from __future__ import annotations

import logging
from fractions import Fraction
from numbers import Rational
from typing import Any, Callable, Dict, Iterator, Tuple

from treecanon.config.settings import TraversalLimits
from treecanon.keys.symmetry import SymmetryKey, SymmetryMode, symmetry_key

logger = logging.getLogger(__name__)


class WeightTable:
    """
    Accumulates weights per symmetry key.

    In SYMMETRIC_ORBIT mode every added weight is divided by the key's aut
    (exactly, as a Fraction) before it is summed, so the table always holds
    per-orbit counts.  In PLANAR and SYMMETRIC_AGG modes weights are summed
    unchanged.
    """

    def __init__(
        self,
        mode: SymmetryMode | str,
        *,
        show: Callable[[Any], str] | None = None,
        limits: TraversalLimits | None = None,
    ) -> None:
        self.mode = SymmetryMode(mode)
        self._show = show
        self._limits = limits
        self._weights: Dict[str, Rational] = {}

    def add(self, tree: Any, weight: Rational = 1) -> SymmetryKey:
        """Key *tree* in this table's mode and accumulate *weight* under it."""
        sk = symmetry_key(tree, self.mode, show=self._show, limits=self._limits)
        self.add_key(sk, weight)
        return sk

    def add_key(self, sk: SymmetryKey, weight: Rational = 1) -> None:
        """Accumulate *weight* under a key computed elsewhere.

        Raises ValueError if *sk* was computed in a different mode.
        """
        if sk.mode is not self.mode:
            logger.debug("rejected %s key in %s table", sk.mode.value, self.mode.value)
            raise ValueError(
                f"Key computed in mode {sk.mode.value!r} cannot be added to a "
                f"{self.mode.value!r} table."
            )
        if self.mode is SymmetryMode.SYMMETRIC_ORBIT:
            weight = Fraction(weight) / sk.aut
        self._weights[sk.key] = self._weights.get(sk.key, 0) + weight

    def __getitem__(self, key: str) -> Rational:
        return self._weights[key]

    def __contains__(self, key: object) -> bool:
        return key in self._weights

    def __len__(self) -> int:
        return len(self._weights)

    def __iter__(self) -> Iterator[str]:
        return iter(self._weights)

    def items(self) -> Iterator[Tuple[str, Rational]]:
        return iter(self._weights.items())

    def total(self) -> Rational:
        return sum(self._weights.values(), 0)

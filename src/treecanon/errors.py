from __future__ import annotations


class StructuralError(ValueError):
    """Input is not a finite rooted tree (e.g. a node is its own ancestor)."""


class StructuralLimitExceeded(StructuralError):
    """A depth or node-count ceiling was exceeded during traversal."""

    def __init__(self, limit_name: str, limit: int, observed: int) -> None:
        self.limit_name = limit_name
        self.limit = limit
        self.observed = observed
        super().__init__(
            f"{limit_name} ceiling exceeded: observed {observed} > limit {limit}. "
            f"Raise it via TraversalLimits or the TREECANON_{limit_name.upper()} "
            "environment variable."
        )

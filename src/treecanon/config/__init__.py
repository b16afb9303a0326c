from .settings import (
    TREECANON_MAX_DEPTH,
    TREECANON_MAX_NODES,
    TraversalLimits,
    default_limits,
)
from .logging import configure_logging

__all__ = [
    "TREECANON_MAX_DEPTH",
    "TREECANON_MAX_NODES",
    "TraversalLimits",
    "default_limits",
    "configure_logging",
]

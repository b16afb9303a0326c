from .symmetry import SymmetryMode, SymmetryKey, symmetry_key
from .aggregate import WeightTable

__all__ = [
    "SymmetryMode",
    "SymmetryKey",
    "symmetry_key",
    "WeightTable",
]

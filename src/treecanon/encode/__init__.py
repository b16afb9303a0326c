from .labels import ABSENT_TOKEN, label_token, typed_text
from .planar import encode_planar, encode_forest_planar

__all__ = [
    "ABSENT_TOKEN",
    "label_token",
    "typed_text",
    "encode_planar",
    "encode_forest_planar",
]

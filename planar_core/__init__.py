from .config.enums import Ordering
from .entities.data.vector import Vector2D, arg_key, v2

__all__ = [
    "Vector2D",
    "v2",
    "arg_key",
    "Ordering",
]

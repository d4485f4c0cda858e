from functools import cmp_to_key
from typing import Callable, Generic, Iterator, Optional, Type, TypeVar

import numpy as np

from planar_core.config import settings
from planar_core.config.enums import Ordering
from planar_core.global_utils.numeric import N, check_arg_cmp_type

T = TypeVar("T")


def _zero_of(value):
    return type(value)()


class Vector2D(Generic[T]):
    """
    An immutable 2-dimensional vector over any element type T.

    Equality and hashing are structural over (x, y). Nothing is converted on construction,
    so Vector2D(1, 2) holds ints and Vector2D(Fraction(1, 3), 0) keeps its exact values.
    """

    __slots__ = ("_x", "_y")

    def __init__(self, x: T, y: T):
        object.__setattr__(self, "_x", x)
        object.__setattr__(self, "_y", y)

    @classmethod
    def zero(cls, dtype: Optional[Type[T]] = None) -> "Vector2D[T]":
        """Return the vector whose components are both dtype(), the default value of dtype."""
        if dtype is None:
            dtype = settings.DEFAULT_DTYPE
        return cls(dtype(), dtype())

    @classmethod
    def from_array(cls, arr) -> "Vector2D":
        if len(arr) < 2:
            raise TypeError(f"Vector2D requires 2 coordinates, got {len(arr)}")
        return cls(arr[0], arr[1])

    @property
    def x(self) -> T:
        return self._x

    @property
    def y(self) -> T:
        return self._y

    def is_zero(self) -> bool:
        return self._x == _zero_of(self._x) and self._y == _zero_of(self._y)

    def arg_cmp(self: "Vector2D[N]", other: "Vector2D[N]") -> Ordering:
        """
        Compare self and other by their argument (polar angle).

        The argument is measured counter-clockwise from the positive x-axis over [0, 2π), so the
        positive x-axis has argument 0. No angle is ever computed: vectors are first split into
        the half-planes [0, π) and [π, 2π), then ordered inside a half by the sign of their cross
        product. This is exact for integer and rational elements.

        The zero vector has no argument. With settings.DEBUG_CHECKS enabled passing it on either
        side raises AssertionError, otherwise the result is unspecified.
        """
        if settings.DEBUG_CHECKS:
            assert not self.is_zero(), "self must not be zero"
            assert not other.is_zero(), "other must not be zero"
            check_arg_cmp_type(type(self._x))
            check_arg_cmp_type(type(other._x))

        # (y, x) < (0, 0): the negative x-axis falls in the lower half, the positive one does not
        self_lower = (self._y, self._x) < (_zero_of(self._y), _zero_of(self._x))
        other_lower = (other._y, other._x) < (_zero_of(other._y), _zero_of(other._x))
        return Ordering.of(self_lower, other_lower).then(
            lambda: Ordering.of(other._x * self._y, self._x * other._y)
        )

    def to_array(self) -> np.ndarray:
        return np.array([self._x, self._y])

    def __array__(self, dtype=None, copy=True):
        return np.array([self._x, self._y], dtype=dtype)

    def __iter__(self) -> Iterator[T]:
        yield self._x
        yield self._y

    def __getitem__(self, index: int) -> T:
        if index == 0:
            return self._x
        elif index == 1:
            return self._y
        raise IndexError("Vector2D index out of range")

    def __setattr__(self, name, value):
        raise AttributeError(f"Vector2D is immutable, cannot set {name}")

    def __delattr__(self, name):
        raise AttributeError(f"Vector2D is immutable, cannot delete {name}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    def __hash__(self) -> int:
        return hash((self._x, self._y))

    def __copy__(self) -> "Vector2D[T]":
        return self

    def __deepcopy__(self, memo) -> "Vector2D[T]":
        return self

    def __repr__(self):
        return f"Vector2D(x={self.x}, y={self.y})"


def v2(x, y, dtype: Optional[Callable[..., T]] = None) -> Vector2D[T]:
    """Shorthand for Vector2D, converting both components with dtype first when one is given.

    v2(1, 2, Fraction) == Vector2D(Fraction(1), Fraction(2))
    """
    if dtype is not None:
        x, y = dtype(x), dtype(y)
    return Vector2D(x, y)


# sorted(vectors, key=arg_key) orders non-zero vectors by argument
arg_key = cmp_to_key(Vector2D.arg_cmp)

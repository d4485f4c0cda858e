from enum import IntEnum
from typing import Callable, Union


class Ordering(IntEnum):
    """
    Result of a three-way comparison. The integer values follow the old `cmp` convention.
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, a, b) -> "Ordering":
        """Compare a and b using only `<`."""
        if a < b:
            return cls.LESS
        if b < a:
            return cls.GREATER
        return cls.EQUAL

    def then(self, other: Union["Ordering", Callable[[], "Ordering"]]) -> "Ordering":
        """Chain a tie-break, which is only evaluated when self is EQUAL."""
        if self is not Ordering.EQUAL:
            return self
        return other() if callable(other) else other

    def reverse(self) -> "Ordering":
        return Ordering(-self.value)

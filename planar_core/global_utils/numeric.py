import logging
from functools import lru_cache
from typing import Any, Protocol, TypeVar

logger = logging.getLogger(__name__)


class SupportsArgCmp(Protocol):
    """Element type usable by Vector2D.arg_cmp: totally ordered, closed under multiplication,
    with a zero given by calling the type with no arguments."""

    def __lt__(self, other: Any) -> bool: ...

    def __mul__(self, other: Any) -> Any: ...


N = TypeVar("N", bound=SupportsArgCmp)


def supports_zero(tp: type) -> bool:
    try:
        tp()
    except TypeError:
        return False
    return True


@lru_cache(maxsize=None)
def supports_arg_cmp(tp: type) -> bool:
    """Probe tp on its own zero: it must be constructible without arguments, ordered with `<`
    and its product must be ordered against the zero again."""
    try:
        zero = tp()
        zero < zero
        (zero * zero) < zero
    except (TypeError, ValueError):
        logger.warning("Element type %s cannot be compared by argument", tp.__name__)
        return False
    logger.debug("Element type %s supports argument comparison", tp.__name__)
    return True


def check_arg_cmp_type(tp: type) -> None:
    if not supports_arg_cmp(tp):
        raise TypeError(
            f"Vector2D elements of type {tp.__name__} need a zero value, ordering and multiplication"
        )

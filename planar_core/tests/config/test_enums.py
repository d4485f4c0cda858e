import pytest

from planar_core.config.enums import Ordering


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (1, 2, Ordering.LESS),
        (2, 1, Ordering.GREATER),
        (3, 3, Ordering.EQUAL),
        (False, True, Ordering.LESS),
        ((0, -1), (0, 0), Ordering.LESS),
    ],
)
def test_ordering_of(a, b, expected):
    assert Ordering.of(a, b) is expected


def test_ordering_then():
    assert Ordering.LESS.then(Ordering.GREATER) is Ordering.LESS
    assert Ordering.GREATER.then(Ordering.LESS) is Ordering.GREATER
    assert Ordering.EQUAL.then(Ordering.GREATER) is Ordering.GREATER
    assert Ordering.EQUAL.then(lambda: Ordering.LESS) is Ordering.LESS


def test_ordering_then_is_lazy():
    calls = []

    def tie_break():
        calls.append(1)
        return Ordering.EQUAL

    Ordering.LESS.then(tie_break)
    assert calls == []
    Ordering.EQUAL.then(tie_break)
    assert calls == [1]


def test_ordering_reverse():
    assert Ordering.LESS.reverse() is Ordering.GREATER
    assert Ordering.GREATER.reverse() is Ordering.LESS
    assert Ordering.EQUAL.reverse() is Ordering.EQUAL


def test_ordering_as_cmp_result():
    assert Ordering.LESS < 0 < Ordering.GREATER
    assert Ordering.EQUAL == 0

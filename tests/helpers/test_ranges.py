import pytest

from numkit.helpers.ranges import (
    IterationControl,
    range_each,
    range_each_reverse,
    range_each_reverse_from,
    range_each_to,
)


def test_range_each_visits_inclusive_bounds_in_order():
    seen = []
    range_each(-2, 3, seen.append)
    assert seen == [-2, -1, 0, 1, 2, 3]


@pytest.mark.parametrize("start,end", [(0, 0), (3, 10), (-5, -1)])
def test_range_each_call_count(start, end):
    seen = []
    range_each(start, end, seen.append)
    assert len(seen) == end - start + 1


def test_range_each_to_starts_at_zero():
    seen = []
    range_each_to(5, seen.append)
    assert seen == [0, 1, 2, 3, 4, 5]


def test_range_each_empty_when_from_exceeds_to():
    seen = []
    range_each(5, 4, seen.append)
    range_each_to(-1, seen.append)
    assert seen == []


def test_range_each_stops_on_false():
    seen = []

    def visit(index):
        seen.append(index)
        return index != 3

    range_each(0, 10, visit)
    assert seen == [0, 1, 2, 3]


def test_range_each_stops_on_stop_signal():
    seen = []

    def visit(index):
        seen.append(index)
        return IterationControl.STOP if index == 1 else IterationControl.CONTINUE

    range_each(0, 10, visit)
    assert seen == [0, 1]


@pytest.mark.parametrize("result", [None, 0, "", [], IterationControl.CONTINUE])
def test_range_each_only_stops_on_explicit_signal(result):
    seen = []

    def visit(index):
        seen.append(index)
        return result

    range_each(0, 4, visit)
    assert seen == [0, 1, 2, 3, 4]


def test_range_each_rejects_non_integer_bounds():
    with pytest.raises(TypeError):
        range_each(0, 2.5, lambda i: None)
    with pytest.raises(TypeError):
        range_each("0", 2, lambda i: None)


def test_range_each_reverse_descends():
    seen = []
    range_each_reverse(3, -1, seen.append)
    assert seen == [3, 2, 1, 0, -1]


def test_range_each_reverse_from_ends_at_zero():
    seen = []
    range_each_reverse_from(4, seen.append)
    assert seen == [4, 3, 2, 1, 0]


def test_range_each_reverse_empty_when_from_below_to():
    seen = []
    range_each_reverse(1, 2, seen.append)
    range_each_reverse_from(-1, seen.append)
    assert seen == []


def test_range_each_reverse_stops_early():
    seen = []

    def visit(index):
        seen.append(index)
        if index == 8:
            return False

    range_each_reverse(10, 0, visit)
    assert seen == [10, 9, 8]


def test_callback_exceptions_propagate():
    def boom(index):
        raise RuntimeError(index)

    with pytest.raises(RuntimeError):
        range_each_to(3, boom)

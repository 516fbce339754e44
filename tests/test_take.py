import pytest

from funcurry.seq.generate import generate, index
from funcurry.seq.take import (
    accumulate,
    filter_seq,
    last,
    map15,
    map2,
    map_seq,
    tail,
    take,
    until,
)


def test_take_empty():
    assert list(take(5, [])) == []


def test_take_not_empty():
    values = [15, 24, 33, 42, 51, 60, 79]
    assert list(take(5, values)) == values[0:5]


def test_take_over_request():
    values = [15, 24, 33]
    assert list(take(5, values)) == values[0:3]


def test_take_from_infinite_sequence():
    assert list(take(3, generate(index(7)))) == [7, 8, 9]


def test_take_negative_raises():
    with pytest.raises(ValueError):
        take(-1, [1, 2])


def test_tail_empty():
    value, ok, rest = tail([])
    assert value is None
    assert ok is False
    assert list(rest) == []


def test_tail_not_empty():
    values = [15, 24, 33, 42, 51, 60, 79]
    value, ok, rest = tail(values)
    assert value == values[0]
    assert ok is True
    assert list(rest) == values[1:]


def test_tail_one():
    value, ok, rest = tail([15])
    assert value == 15
    assert ok is True
    assert list(rest) == []


def test_filter():
    def odd(i):
        return i & 1 == 1

    assert list(filter_seq([1, 2, 3, 4, 5], odd)) == [1, 3, 5]
    assert list(filter_seq([], odd)) == []


def test_map():
    def mul(i):
        return i * 2

    assert list(map_seq([1, 2, 3, 4, 5], mul)) == [2, 4, 6, 8, 10]
    assert list(map_seq([], mul)) == []


def test_map15():
    assert list(map15({2: 5}.items(), lambda a, b: a * b)) == [10]
    assert list(map15({}.items(), lambda a, b: 0)) == []


def test_map2():
    pairs = [(1, "a"), (2, "b")]
    assert list(map2(pairs, lambda k, v: (v, k * 10))) == [("a", 10), ("b", 20)]


def test_until():
    assert list(until([1, 2, 3, 4, 5], lambda i: i > 3)) == [1, 2, 3]


def test_accumulate():
    def length(_, total):
        return (total or 0) + 1

    assert accumulate([2, 4, 7, 9], length) == 4
    assert accumulate([], length) is None

    def append_digits(value, acc):
        return (acc or b"") + str(value).encode()

    assert accumulate([2, 4, 7, 9], append_digits) == b"2479"


def test_last():
    assert last(take(5, generate(index(0)))) == 4
    assert last([]) is None
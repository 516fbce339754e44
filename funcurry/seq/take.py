"""Slicing, filtering, mapping and folding sequences."""

from __future__ import annotations

import collections
import functools
import itertools
from collections.abc import Callable, Iterable, Iterator
from typing import Any, TypeVar

T = TypeVar("T")
U = TypeVar("U")


def take(n: int, iterable: Iterable[T]) -> Iterator[T]:
    """Yield at most the first ``n`` values of ``iterable``."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    return itertools.islice(iterable, n)


def tail(iterable: Iterable[T]) -> tuple[T | None, bool, Iterator[T]]:
    """Split off the first value.

    Returns the first value, whether there was one, and an iterator over the
    rest. An empty sequence gives ``(None, False, <empty iterator>)``.
    """
    rest = iter(iterable)
    try:
        first = next(rest)
    except StopIteration:
        return None, False, iter(())
    return first, True, rest


def filter_seq(iterable: Iterable[T], f: Callable[[T], bool]) -> Iterator[T]:
    """Yield the values for which ``f`` is true."""
    return (value for value in iterable if f(value))


def map_seq(iterable: Iterable[T], f: Callable[[T], U]) -> Iterator[U]:
    """Yield ``f`` of each value."""
    return (f(value) for value in iterable)


def map15(pairs: Iterable[tuple[Any, Any]], f: Callable[[Any, Any], U]) -> Iterator[U]:
    """Yield ``f(key, value)`` for each pair."""
    return (f(key, value) for key, value in pairs)


def map2(
    pairs: Iterable[tuple[Any, Any]], f: Callable[[Any, Any], tuple[Any, Any]]
) -> Iterator[tuple[Any, Any]]:
    """Yield the pair ``f(key, value)`` for each pair."""
    for key, value in pairs:
        new_key, new_value = f(key, value)
        yield new_key, new_value


def until(iterable: Iterable[T], f: Callable[[T], bool]) -> Iterator[T]:
    """Yield values until ``f`` is true for one; that one is not yielded."""
    return itertools.takewhile(lambda value: not f(value), iterable)


def last(iterable: Iterable[T]) -> T | None:
    """Consume the sequence and return its last value, or ``None``."""
    remaining = collections.deque(iterable, maxlen=1)
    return remaining[0] if remaining else None


def accumulate(iterable: Iterable[T], acc: Callable[[T, Any], Any]) -> Any:
    """Fold the sequence with ``acc(value, accumulated)``, starting from ``None``."""
    return functools.reduce(lambda total, value: acc(value, total), iterable, None)
"""Producing and combining sequences."""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Iterator
from typing import Any, TypeVar

T = TypeVar("T")
C = TypeVar("C")


def generate(generator: Callable[[], T]) -> Iterator[T]:
    """Yield the results of calling ``generator`` over and over."""
    while True:
        yield generator()


def seq_range(begin: int, end: int, step: int) -> Iterator[int]:
    """Yield ``begin``, ``begin + step``, ... while the value is below ``end``."""
    value = begin
    while value < end:
        yield value
        value += step


def generator(context: C, f: Callable[[C], T]) -> Callable[[], T]:
    """Make a generator function that calls ``f`` with ``context``."""

    def produce() -> T:
        return f(context)

    return produce


def index(start: int) -> Callable[[], int]:
    """Make a function returning ``start``, ``start + 1``, ... on each call."""
    counter = itertools.count(start)

    def next_index() -> int:
        return next(counter)

    return next_index


def zip_fill(a: Iterable[Any], b: Iterable[Any]) -> Iterator[tuple[Any, Any]]:
    """Pair up the values of two sequences until both are exhausted.

    The shorter sequence is padded with ``None``.
    """
    return itertools.zip_longest(a, b)


def zip_short(a: Iterable[Any], b: Iterable[Any]) -> Iterator[tuple[Any, Any]]:
    """Pair up the values of two sequences until either is exhausted."""
    return zip(a, b)
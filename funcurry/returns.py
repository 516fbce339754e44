"""Identity functions and thunks."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from funcurry.bind import bind

T = TypeVar("T")
U = TypeVar("U")


def identity2(first: T, second: U) -> tuple[T, U]:
    """Return both arguments."""
    return first, second


def identity(value: T) -> T:
    """Return the only argument."""
    first, _ = identity2(value, None)
    return first


def identity_s(*args: Any) -> list[Any]:
    """Return the arguments as a list."""
    return list(args)


def thunk(value: T) -> Callable[[], T]:
    """Make a callable that returns ``value``."""
    return bind(identity, value)


def thunk2(first: T, second: U) -> Callable[[], tuple[T, U]]:
    """Make a callable that returns both values."""
    return bind(identity2, first, second)


def thunk_s(*args: Any) -> Callable[[], list[Any]]:
    """Make a callable that returns the arguments as a list."""
    return bind(identity_s, *args)
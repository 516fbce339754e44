"""Dropping the first or last value of a group of values."""

from __future__ import annotations

from typing import Any


def _collapse(values: tuple[Any, ...]) -> Any:
    if not values:
        return None
    if len(values) == 1:
        return values[0]
    return values


def drop_first(*args: Any) -> Any:
    """Drop the first of the given values.

    One remaining value is returned as is, several as a tuple, none as
    ``None``.
    """
    if not args:
        raise TypeError("drop_first() needs at least one value")
    return _collapse(args[1:])


def drop_last(*args: Any) -> Any:
    """Drop the last of the given values.

    One remaining value is returned as is, several as a tuple, none as
    ``None``.
    """
    if not args:
        raise TypeError("drop_last() needs at least one value")
    return _collapse(args[:-1])
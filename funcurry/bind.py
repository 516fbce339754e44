"""Binding arguments of a callable ahead of the call."""

from __future__ import annotations

from typing import Any, Callable

from funcurry.curry import head


def bind(fn: Callable[..., Any], *args: Any) -> Callable[[], Any]:
    """Bind every argument of ``fn``, giving a callable that takes none.

    ``bind(fn, a, b)()`` is ``fn(a, b)``.
    """

    def bound() -> Any:
        return fn(*args)

    return bound


def bind_first(fn: Callable[..., Any], arg: Any) -> Callable[..., Any]:
    """Bind the first argument of ``fn``.

    ``bind_first(fn, a)(b, c)`` is ``fn(a, b, c)``.
    """
    return head(fn)(arg)


def bind_last(fn: Callable[..., Any], *args: Any) -> Callable[..., Any]:
    """Bind the trailing arguments of ``fn``.

    ``bind_last(fn, c)(a, b)`` is ``fn(a, b, c)``; several bound values
    fill ``fn``'s trailing ``*args`` in order.
    """

    def bound(*leading: Any) -> Any:
        return fn(*leading, *args)

    return bound
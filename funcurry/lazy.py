"""Turning the parameters of a callable into thunks."""

from __future__ import annotations

from typing import Any, Callable


def lazy(fn: Callable[..., Any], variadic: bool = False) -> Callable[..., Any]:
    """Make ``fn`` take thunks in place of its arguments.

    ``lazy(fn)(ta, tb)`` is ``fn(ta(), tb())``. No thunk is called before
    the returned function is, and they are called in order. With
    ``variadic`` the last thunk yields a sequence that is spread into
    ``fn``'s trailing ``*args``.
    """

    def deferred(*thunks: Callable[[], Any]) -> Any:
        if variadic and not thunks:
            raise TypeError("a variadic lazy call needs at least one thunk")
        values = [produce() for produce in thunks]
        if variadic:
            *fixed, rest = values
            return fn(*fixed, *rest)
        return fn(*values)

    return deferred
"""Reversing the parameter order of a callable."""

from __future__ import annotations

from typing import Any, Callable


def reverse(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Return ``fn`` with its parameters taken in reverse order.

    ``reverse(fn)(c, b, a)`` is ``fn(a, b, c)``.
    """

    def flipped(*args: Any) -> Any:
        return fn(*reversed(args))

    return flipped
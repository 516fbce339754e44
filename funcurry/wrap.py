"""Chaining a start function with processing functions."""

from __future__ import annotations

from typing import Any, Callable


def wrap(start: Callable[[Any], Any], *args: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Build a function that runs ``start`` and then the processors.

    Each processor receives the result of ``start``; the result of the last
    processor is returned, or ``None`` when there are no processors.
    """

    def wrapped(value: Any) -> Any:
        started = start(value)
        result = None
        for process in args:
            result = process(started)
        return result

    return wrapped
"""Small predicates for composing with the other helpers."""

from __future__ import annotations

from typing import Any


def eq(a: Any, b: Any) -> bool:
    """Tell whether ``a`` equals ``b``."""
    return a == b


def not_(b: bool) -> bool:
    """Negate ``b``."""
    return not b
"""Adapting callables to a wider call shape."""

from __future__ import annotations

from typing import Any, Callable, Sequence

from funcurry.signature import Signature, signature


def _accepts(annotation: Any, value: Any) -> bool:
    if annotation is Any or isinstance(annotation, str):
        return True
    try:
        return isinstance(value, annotation)
    except TypeError:
        return True


def _select(annotations: Sequence[Any], args: tuple[Any, ...]) -> list[Any]:
    """Pick, in order, the arguments that fit the given parameter types."""
    chosen = []
    pending = iter(args)
    for annotation in annotations:
        for value in pending:
            if _accepts(annotation, value):
                chosen.append(value)
                break
        else:
            raise TypeError(f"no remaining argument fits a parameter of type {annotation!r}")
    return chosen


def adapt(fn: Callable[..., Any], arity: int) -> Callable[..., Any]:
    """Make ``fn`` callable with exactly ``arity`` arguments.

    A callable with fewer parameters receives, in order, the arguments that
    fit its annotated parameter types; unannotated parameters take the next
    argument. The rest are ignored.
    """
    if arity < 0:
        raise ValueError(f"arity must not be negative, got {arity}")
    try:
        shape: Signature | None = signature(fn)
    except TypeError:
        shape = None
    if shape is not None:
        fixed = shape.arity - (1 if shape.variadic else 0)
        if fixed > arity:
            raise TypeError(f"{fn!r} takes {fixed} arguments, more than {arity}")

    def adapted(*args: Any) -> Any:
        if len(args) != arity:
            raise TypeError(f"expected {arity} arguments, got {len(args)}")
        if shape is None or shape.variadic or shape.arity == arity:
            return fn(*args)
        return fn(*_select(shape.params, args))

    return adapted


def adapt_like(target: Callable[..., Any], fn: Callable[..., Any]) -> Callable[..., Any]:
    """Adapt ``fn`` to the call shape of ``target``.

    When ``target`` declares a single result type, a ``None`` result becomes
    that type's empty value and a result of another type raises
    ``TypeError``. When ``target`` declares no result, the result is dropped.
    """
    shape = signature(target)
    inner = adapt(fn, shape.arity - (1 if shape.variadic else 0))
    returns = shape.returns
    zeros = shape.zero_results

    def adapted(*args: Any) -> Any:
        result = inner(*args)
        if not returns:
            return None
        if len(returns) == 1:
            expected = returns[0]
            if result is None:
                return zeros[0]
            if (
                isinstance(expected, type)
                and expected is not object
                and not isinstance(result, expected)
            ):
                raise TypeError(
                    f"expected a result of type {expected.__name__}, "
                    f"got {type(result).__name__}"
                )
        return result

    return adapted
"""Currying and uncurrying of plain Python callables."""

from __future__ import annotations

import types
from typing import Any, Callable

_CO_VARARGS = 0x04


def _code_target(fn: Callable[..., Any]) -> tuple[Any, int]:
    """Find the plain function behind ``fn`` and how many leading slots it binds."""
    target: Any = fn
    while hasattr(target, "__wrapped__"):
        target = target.__wrapped__
    if isinstance(target, types.MethodType):
        return target.__func__, 1
    if isinstance(target, types.FunctionType):
        return target, 0
    if isinstance(target, type):
        init = target.__init__
        if isinstance(init, types.FunctionType):
            return init, 1
        raise TypeError(f"cannot infer the arity of {fn!r}; pass arity explicitly")
    call = getattr(type(target), "__call__", None)
    if isinstance(call, types.FunctionType):
        return call, 1
    raise TypeError(f"cannot infer the arity of {fn!r}; pass arity explicitly")


def _positional_shape(fn: Callable[..., Any]) -> tuple[int, bool]:
    """Count the positional parameters of ``fn`` and report ``*args``."""
    target, skip = _code_target(fn)
    code = getattr(target, "__code__", None)
    if code is None:
        raise TypeError(f"cannot infer the arity of {fn!r}; pass arity explicitly")
    positional = max(code.co_argcount - skip, 0)
    has_var = bool(code.co_flags & _CO_VARARGS)
    return positional, has_var


def _shape(
    fn: Callable[..., Any], arity: int | None, variadic: bool | None
) -> tuple[int, bool]:
    """Work out how many stages a curried form of ``fn`` has."""
    if arity is None:
        positional, has_var = _positional_shape(fn)
        if variadic is None:
            variadic = has_var
        arity = positional + (1 if variadic and has_var else 0)
    if variadic is None:
        variadic = False
    if arity < 1:
        raise ValueError(f"arity must be a positive integer, got {arity}")
    return arity, variadic


def head(fn: Callable[..., Any]) -> Callable[[Any], Callable[..., Any]]:
    """Split off the first parameter of ``fn``.

    ``head(fn)(a)(b, c)`` is ``fn(a, b, c)``.
    """

    def bind_head(arg0: Any) -> Callable[..., Any]:
        def rest(*args: Any) -> Any:
            return fn(arg0, *args)

        return rest

    return bind_head


def curry(
    fn: Callable[..., Any],
    arity: int | None = None,
    variadic: bool | None = None,
) -> Callable[[Any], Any]:
    """Turn ``fn`` into a chain of single-argument functions.

    ``arity`` is the number of stages; it is read from the signature of
    ``fn`` when omitted. With ``variadic`` the last stage accepts any number
    of arguments, which are passed on as ``fn``'s trailing ``*args``.
    """
    arity, variadic = _shape(fn, arity, variadic)

    def stage(collected: tuple[Any, ...], remaining: int) -> Callable[..., Any]:
        if remaining == 1:
            if variadic:

                def last_variadic(*rest: Any) -> Any:
                    return fn(*collected, *rest)

                return last_variadic

            def last(arg: Any) -> Any:
                return fn(*collected, arg)

            return last

        def step(arg: Any) -> Callable[..., Any]:
            return stage(collected + (arg,), remaining - 1)

        return step

    return stage((), arity)


def uncurry(
    fn: Callable[[Any], Any],
    arity: int = 2,
    variadic: bool = False,
) -> Callable[..., Any]:
    """Collapse ``arity`` stages of a curried function into one call.

    ``uncurry(f, 3)(a, b, c)`` is ``f(a)(b)(c)``. With ``variadic`` the
    trailing arguments after the first ``arity - 1`` go to the last stage
    in a single call. Stages beyond ``arity`` are left curried.
    """
    if arity < 1:
        raise ValueError(f"arity must be a positive integer, got {arity}")

    def uncurried(*args: Any) -> Any:
        if variadic:
            if len(args) < arity - 1:
                raise TypeError(
                    f"expected at least {arity - 1} arguments, got {len(args)}"
                )
            fixed, rest = args[: arity - 1], args[arity - 1 :]
        else:
            if len(args) != arity:
                raise TypeError(f"expected {arity} arguments, got {len(args)}")
            fixed, rest = args, ()
        result: Any = fn
        for arg in fixed:
            result = result(arg)
        if variadic:
            result = result(*rest)
        return result

    return uncurried
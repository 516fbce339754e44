"""Describing the parameter and result types of a callable."""

from __future__ import annotations

import functools
import inspect
import operator
import types
from dataclasses import dataclass
from typing import Any, Callable, get_args, get_origin

_CO_VARARGS = 0x04
_MISSING = object()

_BASIC_TYPES: dict[str, Any] = {
    t.__name__: t
    for t in (
        int,
        float,
        complex,
        bool,
        str,
        bytes,
        bytearray,
        list,
        dict,
        tuple,
        set,
        frozenset,
        object,
        type,
    )
}
_BASIC_TYPES["Any"] = Any


def _zero(annotation: Any) -> Any:
    """Return the empty value of a type, or ``None`` when it has none."""
    if annotation is None or annotation is Any or annotation is object:
        return None
    target = annotation if isinstance(annotation, type) else get_origin(annotation)
    if not isinstance(target, type) or target is object:
        return None
    try:
        return target()
    except Exception:
        return None


def _results(annotation: Any) -> tuple[Any, ...]:
    if annotation is _MISSING:
        return (Any,)
    if annotation is None or annotation is type(None):
        return ()
    if get_origin(annotation) is tuple:
        args = get_args(annotation)
        if args == ((),):
            return ()
        if Ellipsis not in args:
            return tuple(args)
    return (annotation,)


def _split_top(text: str, sep: str) -> list[str]:
    """Split ``text`` at ``sep`` where it is not inside brackets."""
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for char in text:
        if char in "[(":
            depth += 1
        elif char in "])":
            depth -= 1
        if char == sep and depth == 0:
            parts.append("".join(current).strip())
            current = []
        else:
            current.append(char)
    parts.append("".join(current).strip())
    return parts


def _resolve(annotation: Any) -> Any:
    """Turn a string annotation naming basic types into those types, where possible."""
    if not isinstance(annotation, str):
        return annotation
    text = annotation.strip()
    members = _split_top(text, "|")
    if len(members) > 1:
        resolved = [_resolve(member) for member in members]
        if any(isinstance(member, str) for member in resolved):
            return annotation
        try:
            return functools.reduce(operator.or_, resolved)
        except TypeError:
            return annotation
    if text == "None":
        return None
    if text == "()":
        return ()
    if text == "...":
        return Ellipsis
    if text.endswith("]") and "[" in text:
        base, inner = text[:-1].split("[", 1)
        origin = _resolve(base)
        if isinstance(origin, str):
            return annotation
        args = tuple(_resolve(part) for part in _split_top(inner, ","))
        if any(isinstance(arg, str) for arg in args):
            return annotation
        try:
            return origin[args[0] if len(args) == 1 else args]
        except TypeError:
            return annotation
    return _BASIC_TYPES.get(text, annotation)


def _annotations(target: Callable[..., Any]) -> dict[str, Any]:
    """Read the annotations of ``target``, resolving string ones where possible."""
    raw = getattr(target, "__annotations__", None) or {}
    return {name: _resolve(value) for name, value in dict(raw).items()}


def _code_target(fn: Callable[..., Any]) -> tuple[Any, int]:
    """Find the plain function behind ``fn`` and how many leading slots it binds."""
    target: Any = inspect.unwrap(fn)
    if isinstance(target, types.MethodType):
        return target.__func__, 1
    if isinstance(target, types.FunctionType):
        return target, 0
    if isinstance(target, type):
        init = target.__init__
        if isinstance(init, types.FunctionType):
            return init, 1
    else:
        call = type(target).__call__ if callable(target) else None
        if isinstance(call, types.FunctionType):
            return call, 1
    raise TypeError(f"cannot read the signature of {fn!r}")


@dataclass(frozen=True)
class Signature:
    """Parameter and result types of a callable.

    ``params`` holds the positional parameter types, followed by the element
    type of ``*args`` when ``variadic`` is set. Unannotated slots are
    ``Any``. ``returns`` holds one type per returned value; a tuple return
    annotation counts as several values and ``None`` as none.
    """

    params: tuple[Any, ...]
    returns: tuple[Any, ...]
    variadic: bool = False

    @property
    def arity(self) -> int:
        """Number of parameter slots, the variadic one included."""
        return len(self.params)

    @property
    def zero_args(self) -> tuple[Any, ...]:
        """Empty values of the parameter types; the variadic slot is ``()``."""
        zeros = [_zero(t) for t in self.params]
        if self.variadic:
            zeros[-1] = ()
        return tuple(zeros)

    @property
    def zero_results(self) -> tuple[Any, ...]:
        """Empty values of the result types."""
        return tuple(_zero(t) for t in self.returns)


def signature(fn: Callable[..., Any]) -> Signature:
    """Describe the positional parameters and results of ``fn``."""
    target, skip = _code_target(fn)
    code = target.__code__
    annotations = _annotations(target)

    def annotation_of(name: str) -> Any:
        return annotations.get(name, Any)

    names = list(code.co_varnames[: code.co_argcount])[skip:]
    params = [annotation_of(name) for name in names]
    variadic = bool(code.co_flags & _CO_VARARGS)
    if variadic:
        var_name = code.co_varnames[code.co_argcount + code.co_kwonlyargcount]
        params.append(annotation_of(var_name))
    returns = _results(annotations.get("return", _MISSING))
    return Signature(params=tuple(params), returns=returns, variadic=variadic)
"""Currying, binding, adapting and lazy-argument helpers for callables."""

__version__ = "0.1.0"
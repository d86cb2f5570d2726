"""Internal helpers for cursor algorithms.

Small functions shared by several combinator modules.
Not part of the public API, but usable when writing custom reducers."""

from __future__ import annotations

import typing


def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


def always_true(_: typing.Any) -> bool:
    """Predicate that accepts everything. Default filter of select/find_first."""
    return True


def ensure_callable(value: object, *, name: str) -> None:
    """Reject non-callables eagerly, at configuration time."""
    if not callable(value):
        raise TypeError(f"{name} must be callable, got {type(value).__name__}")


__all__ = (
    "identity",
    "always_true",
    "ensure_callable",
)

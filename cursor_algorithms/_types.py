"""
Core type definitions for cursor algorithms.

Aliases shared by the traversal layer and every combinator.
"""

from __future__ import annotations

import typing
from collections.abc import AsyncIterable, Callable, Iterable

from kungfu import LazyCoroResult

# ============================================================================
# Type aliases
# ============================================================================

# Cursor = ordered, one-shot sequence handle owned by the traversal provider.
# None is the absence sentinel and is never passed to a provider.
type Cursor[T] = AsyncIterable[T] | Iterable[T]

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Projection = function that maps an element into its emitted form
type Projection[T, U] = Callable[[T], U]

# Combine = left-fold step (running value, element) -> running value
type Combine[A, T] = Callable[[A, T], A]

# Visit = per-element callback; for conditional traversal a falsy return stops it
type Visit[T] = Callable[[T], object]

# NoError = terminal results never carry a domain error.
# NOTE: faults from caller functions surface as exceptions on await.
type NoError = typing.Never

# ============================================================================
# Concrete type shortcuts
# ============================================================================

# LCR = LazyCoroResult shortcut
type LCR[T, E] = LazyCoroResult[T, E]

__all__ = (
    "Cursor",
    "Predicate",
    "Projection",
    "Combine",
    "Visit",
    "NoError",
    "LCR",
)

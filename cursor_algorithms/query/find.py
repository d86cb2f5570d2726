"""Find combinators

First element matching a predicate, or None."""

from __future__ import annotations

from kungfu import LazyCoroResult

from .._helpers import always_true, identity
from .._types import Cursor, NoError, Predicate
from ..traversal import DEFAULT_PROVIDER, Reducer, TraversalEvent, TraversalProvider, reduce, reduce_w
from ..writer import LazyCoroResultWriter


def finding[T](predicate: Predicate[T]) -> Reducer[T, T | None, T | None]:
    """Record the first matching element and stop."""

    def step(found: T | None, element: T) -> tuple[T | None, bool]:
        if predicate(element):
            return element, False
        return found, True

    return Reducer(
        name="find",
        kind="while",
        initial=lambda: None,
        step=step,
        finish=identity,
        default=lambda: None,
    )


def find[T](
    cursor: Cursor[T] | None,
    predicate: Predicate[T],
    *,
    provider: TraversalProvider = DEFAULT_PROVIDER,
) -> LazyCoroResult[T | None, NoError]:
    """
    First element where predicate is truthy.

    None when nothing matched, the cursor was empty, or the cursor was absent.
    A cursor that yields None as its match is indistinguishable from a miss.
    """
    return reduce(cursor, finding(predicate), provider=provider)


def find_first[T](
    cursor: Cursor[T] | None,
    *,
    provider: TraversalProvider = DEFAULT_PROVIDER,
) -> LazyCoroResult[T | None, NoError]:
    """First element of the cursor, or None."""
    return find(cursor, always_true, provider=provider)


def find_w[T](
    cursor: Cursor[T] | None,
    predicate: Predicate[T],
    *,
    provider: TraversalProvider = DEFAULT_PROVIDER,
) -> LazyCoroResultWriter[T | None, NoError, TraversalEvent]:
    return reduce_w(cursor, finding(predicate), provider=provider)


def find_first_w[T](
    cursor: Cursor[T] | None,
    *,
    provider: TraversalProvider = DEFAULT_PROVIDER,
) -> LazyCoroResultWriter[T | None, NoError, TraversalEvent]:
    return find_w(cursor, always_true, provider=provider)


__all__ = ("find", "find_first", "find_w", "find_first_w", "finding")

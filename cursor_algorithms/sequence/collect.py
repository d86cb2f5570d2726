"""Collect combinators

Keep the elements a predicate accepts, in traversal order."""

from __future__ import annotations

from kungfu import LazyCoroResult

from .._helpers import identity
from .._types import Cursor, NoError, Predicate
from ..traversal import DEFAULT_PROVIDER, Reducer, TraversalEvent, TraversalProvider, reduce, reduce_w
from ..writer import LazyCoroResultWriter


def collecting[T](predicate: Predicate[T]) -> Reducer[T, list[T], list[T]]:
    def step(kept: list[T], element: T) -> tuple[list[T], bool]:
        if predicate(element):
            kept.append(element)
        return kept, True

    return Reducer(
        name="collect",
        kind="each",
        initial=list,
        step=step,
        finish=identity,
        default=list,
    )


def collect[T](
    cursor: Cursor[T] | None,
    predicate: Predicate[T],
    *,
    provider: TraversalProvider = DEFAULT_PROVIDER,
) -> LazyCoroResult[list[T], NoError]:
    """Filter the whole cursor. Absent cursor gives []."""
    return reduce(cursor, collecting(predicate), provider=provider)


def collect_w[T](
    cursor: Cursor[T] | None,
    predicate: Predicate[T],
    *,
    provider: TraversalProvider = DEFAULT_PROVIDER,
) -> LazyCoroResultWriter[list[T], NoError, TraversalEvent]:
    return reduce_w(cursor, collecting(predicate), provider=provider)


__all__ = ("collect", "collect_w", "collecting")

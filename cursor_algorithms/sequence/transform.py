"""Transform combinators

Map every element, keeping traversal order."""

from __future__ import annotations

from kungfu import LazyCoroResult

from .._helpers import identity
from .._types import Cursor, NoError, Projection
from ..traversal import DEFAULT_PROVIDER, Reducer, TraversalEvent, TraversalProvider, reduce, reduce_w
from ..writer import LazyCoroResultWriter


def transforming[T, U](mapper: Projection[T, U]) -> Reducer[T, list[U], list[U]]:
    """Reducer appending mapper(element) for every element. No memoization."""

    def step(results: list[U], element: T) -> tuple[list[U], bool]:
        results.append(mapper(element))
        return results, True

    return Reducer(
        name="transform",
        kind="each",
        initial=list,
        step=step,
        finish=identity,
        default=list,
    )


def transform[T, U](
    cursor: Cursor[T] | None,
    mapper: Projection[T, U],
    *,
    provider: TraversalProvider = DEFAULT_PROVIDER,
) -> LazyCoroResult[list[U], NoError]:
    """[mapper(x) for x in cursor]. Absent cursor gives []."""
    return reduce(cursor, transforming(mapper), provider=provider)


def transform_w[T, U](
    cursor: Cursor[T] | None,
    mapper: Projection[T, U],
    *,
    provider: TraversalProvider = DEFAULT_PROVIDER,
) -> LazyCoroResultWriter[list[U], NoError, TraversalEvent]:
    """Traced transform."""
    return reduce_w(cursor, transforming(mapper), provider=provider)


__all__ = ("transform", "transform_w", "transforming")

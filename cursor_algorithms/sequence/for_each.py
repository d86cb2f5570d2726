"""For-each combinators

Visit every element for side effects only. There is no early exit;
use any_of/find/select to stop scanning."""

from __future__ import annotations

from collections.abc import Callable

from kungfu import LazyCoroResult

from .._helpers import identity
from .._types import Cursor, NoError
from ..traversal import DEFAULT_PROVIDER, Reducer, TraversalEvent, TraversalProvider, reduce, reduce_w
from ..writer import LazyCoroResultWriter


def visiting[T](callback: Callable[[T], object]) -> Reducer[T, None, None]:
    """Reducer calling callback once per element, in order."""

    def step(state: None, element: T) -> tuple[None, bool]:
        callback(element)
        return state, True

    return Reducer(
        name="for_each",
        kind="each",
        initial=lambda: None,
        step=step,
        finish=identity,
        default=lambda: None,
    )


def for_each[T](
    cursor: Cursor[T] | None,
    callback: Callable[[T], object],
    *,
    provider: TraversalProvider = DEFAULT_PROVIDER,
) -> LazyCoroResult[None, NoError]:
    """Run callback on every element. Resolves Ok(None)."""
    return reduce(cursor, visiting(callback), provider=provider)


def for_each_w[T](
    cursor: Cursor[T] | None,
    callback: Callable[[T], object],
    *,
    provider: TraversalProvider = DEFAULT_PROVIDER,
) -> LazyCoroResultWriter[None, NoError, TraversalEvent]:
    return reduce_w(cursor, visiting(callback), provider=provider)


__all__ = ("for_each", "for_each_w", "visiting")

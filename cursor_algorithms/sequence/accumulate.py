"""
Accumulate combinators
======================

Left fold over the unconditional traversal.
"""

from __future__ import annotations

from kungfu import LazyCoroResult

from .._helpers import identity
from .._types import Combine, Cursor, NoError
from ..traversal import DEFAULT_PROVIDER, Reducer, TraversalEvent, TraversalProvider, reduce, reduce_w
from ..writer import LazyCoroResultWriter


def accumulating[A, T](combine: Combine[A, T], *, initial: A) -> Reducer[T, A, A]:
    """
    Reducer folding elements into a running value.

    The running value starts at initial and becomes combine(running, element)
    for each element in cursor order. initial is never copied: a mutable seed
    is shared by every run of the same reducer.
    """

    def step(running: A, element: T) -> tuple[A, bool]:
        return combine(running, element), True

    return Reducer(
        name="accumulate",
        kind="each",
        initial=lambda: initial,
        step=step,
        finish=identity,
        default=lambda: initial,
    )


def accumulate[A, T](
    cursor: Cursor[T] | None,
    combine: Combine[A, T],
    *,
    initial: A,
    provider: TraversalProvider = DEFAULT_PROVIDER,
) -> LazyCoroResult[A, NoError]:
    """Fold cursor with combine. Absent cursor gives initial unchanged."""
    return reduce(cursor, accumulating(combine, initial=initial), provider=provider)


def accumulate_w[A, T](
    cursor: Cursor[T] | None,
    combine: Combine[A, T],
    *,
    initial: A,
    provider: TraversalProvider = DEFAULT_PROVIDER,
) -> LazyCoroResultWriter[A, NoError, TraversalEvent]:
    """Traced accumulate."""
    return reduce_w(cursor, accumulating(combine, initial=initial), provider=provider)


__all__ = ("accumulate", "accumulate_w", "accumulating")

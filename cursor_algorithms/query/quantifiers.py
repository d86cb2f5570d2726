"""
Quantifier combinators
======================

any_of / all_of / none_of over the conditional traversal.

Each step records bool(predicate(element)) and scanning stops as soon as the
answer is known. Results for "nothing to scan" are kept as they always were:
- all_of is False for absent AND for empty cursors (not vacuously True)
- none_of is False for an absent cursor but True for an empty one
"""

from __future__ import annotations

from kungfu import LazyCoroResult

from .._helpers import identity
from .._types import Cursor, NoError, Predicate
from ..traversal import DEFAULT_PROVIDER, Reducer, TraversalEvent, TraversalProvider, reduce, reduce_w
from ..writer import LazyCoroResultWriter


def _never() -> bool:
    return False


# ============================================================================
# Reducers
# ============================================================================


def any_matching[T](predicate: Predicate[T]) -> Reducer[T, bool, bool]:
    """Stop on the first match; result is the last recorded predicate value."""

    def step(_: bool, element: T) -> tuple[bool, bool]:
        matched = bool(predicate(element))
        return matched, not matched

    return Reducer(
        name="any_of",
        kind="while",
        initial=_never,
        step=step,
        finish=identity,
        default=_never,
    )


def all_matching[T](predicate: Predicate[T]) -> Reducer[T, bool, bool]:
    """Stop on the first miss; result is the last recorded predicate value."""

    def step(_: bool, element: T) -> tuple[bool, bool]:
        matched = bool(predicate(element))
        return matched, matched

    return Reducer(
        name="all_of",
        kind="while",
        initial=_never,
        step=step,
        finish=identity,
        default=_never,
    )


def none_matching[T](predicate: Predicate[T]) -> Reducer[T, bool, bool]:
    """Stop on the first match; result negates the last recorded value.

    The absent-cursor default is NOT negated.
    """

    def step(_: bool, element: T) -> tuple[bool, bool]:
        matched = bool(predicate(element))
        return matched, not matched

    def finish(matched: bool) -> bool:
        return not matched

    return Reducer(
        name="none_of",
        kind="while",
        initial=_never,
        step=step,
        finish=finish,
        default=_never,
    )


# ============================================================================
# Sugar for LazyCoroResult
# ============================================================================


def any_of[T](
    cursor: Cursor[T] | None,
    predicate: Predicate[T],
    *,
    provider: TraversalProvider = DEFAULT_PROVIDER,
) -> LazyCoroResult[bool, NoError]:
    """True if some element matches. Absent cursor gives False."""
    return reduce(cursor, any_matching(predicate), provider=provider)


def all_of[T](
    cursor: Cursor[T] | None,
    predicate: Predicate[T],
    *,
    provider: TraversalProvider = DEFAULT_PROVIDER,
) -> LazyCoroResult[bool, NoError]:
    """True if every element matches and there was at least one. Absent cursor gives False."""
    return reduce(cursor, all_matching(predicate), provider=provider)


def none_of[T](
    cursor: Cursor[T] | None,
    predicate: Predicate[T],
    *,
    provider: TraversalProvider = DEFAULT_PROVIDER,
) -> LazyCoroResult[bool, NoError]:
    """True if no element matches. Absent cursor gives False."""
    return reduce(cursor, none_matching(predicate), provider=provider)


# ============================================================================
# Sugar for LazyCoroResultWriter
# ============================================================================


def any_of_w[T](
    cursor: Cursor[T] | None,
    predicate: Predicate[T],
    *,
    provider: TraversalProvider = DEFAULT_PROVIDER,
) -> LazyCoroResultWriter[bool, NoError, TraversalEvent]:
    return reduce_w(cursor, any_matching(predicate), provider=provider)


def all_of_w[T](
    cursor: Cursor[T] | None,
    predicate: Predicate[T],
    *,
    provider: TraversalProvider = DEFAULT_PROVIDER,
) -> LazyCoroResultWriter[bool, NoError, TraversalEvent]:
    return reduce_w(cursor, all_matching(predicate), provider=provider)


def none_of_w[T](
    cursor: Cursor[T] | None,
    predicate: Predicate[T],
    *,
    provider: TraversalProvider = DEFAULT_PROVIDER,
) -> LazyCoroResultWriter[bool, NoError, TraversalEvent]:
    return reduce_w(cursor, none_matching(predicate), provider=provider)


__all__ = (
    "any_of",
    "all_of",
    "none_of",
    "any_of_w",
    "all_of_w",
    "none_of_w",
    "any_matching",
    "all_matching",
    "none_matching",
)

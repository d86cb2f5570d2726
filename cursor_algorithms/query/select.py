"""Select combinators

Bounded, filtered, projected scan: up to `count` results, stopping as soon
as the bound is met."""

from __future__ import annotations

from dataclasses import dataclass

from kungfu import LazyCoroResult

from .._helpers import always_true, ensure_callable, identity
from .._types import Cursor, NoError, Predicate, Projection
from ..traversal import DEFAULT_PROVIDER, Reducer, TraversalEvent, TraversalProvider, reduce, reduce_w
from ..writer import LazyCoroResultWriter


@dataclass(frozen=True, slots=True)
class SelectOptions:
    """
    Filter and projection order for select.

    pre_project=False (default): predicate sees the raw element,
        the emitted value is projection(element).
    pre_project=True: predicate sees projection(element),
        and that projected value is emitted as is.
    """

    predicate: Predicate[object] = always_true
    pre_project: bool = False

    def __post_init__(self) -> None:
        ensure_callable(self.predicate, name="SelectOptions.predicate")
        if not isinstance(self.pre_project, bool):
            raise TypeError("SelectOptions.pre_project must be a bool")


DEFAULT_SELECT_OPTIONS = SelectOptions()


def validate_count(count: object) -> None:
    # bool is an int subclass; select(cursor, True) is almost surely a mistake
    if isinstance(count, bool) or not isinstance(count, int):
        raise TypeError(f"select count must be an int, got {type(count).__name__}")


def selecting[T, U](
    projection: Projection[T, U],
    *,
    count: int,
    options: SelectOptions = DEFAULT_SELECT_OPTIONS,
) -> Reducer[T, list[U], list[U]]:
    """
    Reducer collecting up to count filtered, projected values.

    The bound is checked before anything is evaluated, so with count <= 0 the
    first visit stops the traversal without calling predicate or projection.
    That first element is still pulled from the cursor and discarded, so do not
    pass a cursor you mean to keep reading with count <= 0.
    """
    validate_count(count)
    ensure_callable(projection, name="select projection")

    if options.pre_project:
        before, after = projection, identity
    else:
        before, after = identity, projection

    def step(results: list[U], element: T) -> tuple[list[U], bool]:
        if len(results) >= count:
            return results, False
        candidate = before(element)
        if options.predicate(candidate):
            results.append(after(candidate))
        return results, len(results) < count

    return Reducer(
        name="select",
        kind="while",
        initial=list,
        step=step,
        finish=identity,
        default=list,
    )


def select[T, U](
    cursor: Cursor[T] | None,
    projection: Projection[T, U],
    *,
    count: int,
    options: SelectOptions = DEFAULT_SELECT_OPTIONS,
    provider: TraversalProvider = DEFAULT_PROVIDER,
) -> LazyCoroResult[list[U], NoError]:
    """Up to count projected matches, in cursor order. Absent cursor gives []."""
    return reduce(cursor, selecting(projection, count=count, options=options), provider=provider)


def select_w[T, U](
    cursor: Cursor[T] | None,
    projection: Projection[T, U],
    *,
    count: int,
    options: SelectOptions = DEFAULT_SELECT_OPTIONS,
    provider: TraversalProvider = DEFAULT_PROVIDER,
) -> LazyCoroResultWriter[list[U], NoError, TraversalEvent]:
    """Traced select."""
    return reduce_w(cursor, selecting(projection, count=count, options=options), provider=provider)


__all__ = (
    "SelectOptions",
    "DEFAULT_SELECT_OPTIONS",
    "select",
    "select_w",
    "selecting",
    "validate_count",
)

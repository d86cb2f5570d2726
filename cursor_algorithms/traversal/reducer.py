"""Reducers

Every combinator is a Reducer run by one generic function.
Generic runner with extract + wrap pattern, sugar for LazyCoroResult
and LazyCoroResultWriter."""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from typing import Literal

from kungfu import LazyCoroResult, Ok

from .._types import Cursor, NoError
from ..writer import LazyCoroResultWriter, Log, WriterResult
from .events import TraversalEvent
from .provider import DEFAULT_PROVIDER, TraversalProvider, TraversalStats, for_each_async, while_async


@dataclass(frozen=True, slots=True)
class Reducer[T, S, R]:
    """
    Per-combinator description of a traversal.

    - kind: "each" uses for_each_async, "while" uses while_async
    - initial: fresh state for one run
    - step: (state, element) -> (state, keep_going); keep_going is ignored for "each"
    - finish: state after traversal -> resolved value
    - default: resolved value when the cursor is absent

    default never calls caller-supplied functions.
    """

    name: str
    kind: Literal["each", "while"]
    initial: Callable[[], S]
    step: Callable[[S, T], tuple[S, bool]]
    finish: Callable[[S], R]
    default: Callable[[], R]

    def __post_init__(self) -> None:
        if self.kind not in ("each", "while"):
            raise ValueError(f"Reducer.kind must be 'each' or 'while', got {self.kind!r}")


# ============================================================================
# Generic runner (extract + wrap pattern)
# ============================================================================


def reduceM[M, T, S, R, Raw](
    cursor: Cursor[T] | None,
    reducer: Reducer[T, S, R],
    *,
    provider: TraversalProvider,
    on_done: Callable[[R, TraversalStats], Raw],
    on_absent: Callable[[R], Raw],
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, Raw]]], M],
) -> M:
    """Generic reduce. Exactly one of on_absent / on_done runs per execution."""

    async def run() -> Raw:
        if cursor is None:
            return on_absent(reducer.default())

        state = reducer.initial()

        def visit(element: T) -> bool:
            nonlocal state
            state, keep_going = reducer.step(state, element)
            return keep_going

        match reducer.kind:
            case "each":
                stats = await for_each_async(provider, cursor, visit)
            case "while":
                stats = await while_async(provider, cursor, visit)

        return on_done(reducer.finish(state), stats)

    return wrap(run)


# ============================================================================
# Sugar for LazyCoroResult
# ============================================================================


def reduce[T, S, R](
    cursor: Cursor[T] | None,
    reducer: Reducer[T, S, R],
    *,
    provider: TraversalProvider = DEFAULT_PROVIDER,
) -> LazyCoroResult[R, NoError]:
    """Run reducer over cursor. Faults in caller functions raise on await."""
    return reduceM(
        cursor,
        reducer,
        provider=provider,
        on_done=lambda value, _: Ok(value),
        on_absent=Ok,
        wrap=LazyCoroResult,
    )


# ============================================================================
# Sugar for LazyCoroResultWriter
# ============================================================================


def reduce_w[T, S, R](
    cursor: Cursor[T] | None,
    reducer: Reducer[T, S, R],
    *,
    provider: TraversalProvider = DEFAULT_PROVIDER,
) -> LazyCoroResultWriter[R, NoError, TraversalEvent]:
    """Run reducer over cursor, logging one TraversalEvent."""

    def on_done(value: R, stats: TraversalStats) -> WriterResult[R, NoError, Log[TraversalEvent]]:
        return WriterResult(Ok(value), Log.of(TraversalEvent.completed(reducer.name, stats)))

    def on_absent(value: R) -> WriterResult[R, NoError, Log[TraversalEvent]]:
        return WriterResult(Ok(value), Log.of(TraversalEvent.skipped(reducer.name)))

    return reduceM(
        cursor,
        reducer,
        provider=provider,
        on_done=on_done,
        on_absent=on_absent,
        wrap=LazyCoroResultWriter,
    )


__all__ = ("Reducer", "reduce", "reduce_w", "reduceM")

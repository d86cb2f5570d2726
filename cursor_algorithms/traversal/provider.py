"""Traversal provider and primitives

The provider turns a cursor into an async stream of elements. The two
primitives below are the only way combinators touch a cursor:
- for_each_async: visit every element
- while_async: visit until the visit step says stop"""

from __future__ import annotations

import typing
from collections.abc import AsyncGenerator, AsyncIterable
from contextlib import aclosing
from dataclasses import dataclass

from .._types import Cursor, Visit


class TraversalProvider(typing.Protocol):
    """
    Collaborator owning cursors.

    elements() must yield in cursor order. Consumers stop early by leaving
    the iteration; the provider is never asked for the next element after that.
    The stream is always aclose()d when a traversal ends, early stop and fault
    included, so cleanup in the provider runs before the result resolves.
    Opening and closing the underlying cursor stays with the provider.
    """

    def elements[T](self, cursor: Cursor[T], /) -> AsyncGenerator[T, None]: ...


class AsyncIterableProvider:
    """Default provider: any async iterable, or a plain iterable, is a cursor."""

    __slots__ = ()

    async def elements[T](self, cursor: Cursor[T], /) -> AsyncGenerator[T, None]:
        if isinstance(cursor, AsyncIterable):
            async for element in cursor:
                yield element
        else:
            for element in cursor:
                yield element

    def __repr__(self) -> str:
        return "AsyncIterableProvider()"


DEFAULT_PROVIDER: TraversalProvider = AsyncIterableProvider()


@dataclass(frozen=True, slots=True)
class TraversalStats:
    """What a primitive did: how many visit steps ran and whether one said stop."""

    visited: int
    stopped_early: bool = False


async def for_each_async[T](
    provider: TraversalProvider,
    cursor: Cursor[T],
    visit: Visit[T],
) -> TraversalStats:
    """Unconditional traversal. The visit return value is ignored."""
    visited = 0
    async with aclosing(provider.elements(cursor)) as elements:
        async for element in elements:
            visit(element)
            visited += 1
    return TraversalStats(visited=visited)


async def while_async[T](
    provider: TraversalProvider,
    cursor: Cursor[T],
    visit: Visit[T],
) -> TraversalStats:
    """Conditional traversal. Stops right after the first falsy visit result."""
    visited = 0
    async with aclosing(provider.elements(cursor)) as elements:
        async for element in elements:
            visited += 1
            if not visit(element):
                return TraversalStats(visited=visited, stopped_early=True)
    return TraversalStats(visited=visited)


__all__ = (
    "TraversalProvider",
    "AsyncIterableProvider",
    "DEFAULT_PROVIDER",
    "TraversalStats",
    "for_each_async",
    "while_async",
)

"""
Algorithms factory.

Binds one traversal provider and hands out one combinator object per call:

    algo = Algorithms(provider)

    await algo.transform(cursor).callback(lambda doc: doc.id)
    await algo.any_of(cursor).where(lambda doc: doc.is_draft)
    await algo.select(cursor, 10).where(is_open).project(lambda doc: doc.number)

Combinator objects are frozen. Configuration (Select.where / Select.pre_project)
returns a new object; the terminal method builds the lazy result. Awaiting a
terminal result consumes the cursor.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from dataclasses import dataclass

from kungfu import LazyCoroResult

from ._types import Combine, Cursor, NoError, Predicate, Projection
from .query.find import find, find_first
from .query.quantifiers import all_of, any_of, none_of
from .query.select import DEFAULT_SELECT_OPTIONS, SelectOptions, select, validate_count
from .sequence.accumulate import accumulate
from .sequence.collect import collect
from .sequence.for_each import for_each
from .sequence.transform import transform
from .traversal import DEFAULT_PROVIDER, TraversalProvider


# ============================================================================
# Combinator objects
# ============================================================================


@dataclass(frozen=True, slots=True)
class ForEach[T]:
    cursor: Cursor[T] | None
    provider: TraversalProvider

    def callback(self, fn: Callable[[T], object]) -> LazyCoroResult[None, NoError]:
        return for_each(self.cursor, fn, provider=self.provider)


@dataclass(frozen=True, slots=True)
class Transform[T]:
    cursor: Cursor[T] | None
    provider: TraversalProvider

    def callback[U](self, fn: Projection[T, U]) -> LazyCoroResult[list[U], NoError]:
        return transform(self.cursor, fn, provider=self.provider)


@dataclass(frozen=True, slots=True)
class Accumulate[T]:
    cursor: Cursor[T] | None
    provider: TraversalProvider

    def callback[A](self, initial: A, fn: Combine[A, T]) -> LazyCoroResult[A, NoError]:
        return accumulate(self.cursor, fn, initial=initial, provider=self.provider)


@dataclass(frozen=True, slots=True)
class Collect[T]:
    cursor: Cursor[T] | None
    provider: TraversalProvider

    def where(self, predicate: Predicate[T]) -> LazyCoroResult[list[T], NoError]:
        return collect(self.cursor, predicate, provider=self.provider)


@dataclass(frozen=True, slots=True)
class AnyOf[T]:
    cursor: Cursor[T] | None
    provider: TraversalProvider

    def where(self, predicate: Predicate[T]) -> LazyCoroResult[bool, NoError]:
        return any_of(self.cursor, predicate, provider=self.provider)


@dataclass(frozen=True, slots=True)
class AllOf[T]:
    cursor: Cursor[T] | None
    provider: TraversalProvider

    def where(self, predicate: Predicate[T]) -> LazyCoroResult[bool, NoError]:
        return all_of(self.cursor, predicate, provider=self.provider)


@dataclass(frozen=True, slots=True)
class NoneOf[T]:
    cursor: Cursor[T] | None
    provider: TraversalProvider

    def where(self, predicate: Predicate[T]) -> LazyCoroResult[bool, NoError]:
        return none_of(self.cursor, predicate, provider=self.provider)


@dataclass(frozen=True, slots=True)
class Find[T]:
    cursor: Cursor[T] | None
    provider: TraversalProvider

    def where(self, predicate: Predicate[T]) -> LazyCoroResult[T | None, NoError]:
        return find(self.cursor, predicate, provider=self.provider)


@dataclass(frozen=True, slots=True)
class Select[T]:
    """
    Bounded select. Configure, then call project().

    where() and pre_project() return a new Select; the original is unchanged,
    so a configured Select can be shared as a template across cursors via
    with_cursor().
    """

    cursor: Cursor[T] | None
    provider: TraversalProvider
    count: int
    options: SelectOptions = DEFAULT_SELECT_OPTIONS

    def __post_init__(self) -> None:
        validate_count(self.count)

    def where(self, predicate: Predicate[object]) -> Select[T]:
        return dataclasses.replace(self, options=dataclasses.replace(self.options, predicate=predicate))

    def pre_project(self, flag: bool = True) -> Select[T]:
        return dataclasses.replace(self, options=dataclasses.replace(self.options, pre_project=flag))

    def with_cursor(self, cursor: Cursor[T] | None) -> Select[T]:
        return dataclasses.replace(self, cursor=cursor)

    def project[U](
        self,
        projection: Projection[T, U],
        options: SelectOptions | None = None,
    ) -> LazyCoroResult[list[U], NoError]:
        """Terminal call. Explicit options replace the configured ones."""
        return select(
            self.cursor,
            projection,
            count=self.count,
            options=self.options if options is None else options,
            provider=self.provider,
        )


# ============================================================================
# Factory
# ============================================================================


@dataclass(frozen=True, slots=True)
class Algorithms:
    """Factory binding a traversal provider to every combinator."""

    provider: TraversalProvider = DEFAULT_PROVIDER

    def __post_init__(self) -> None:
        if not callable(getattr(self.provider, "elements", None)):
            raise TypeError("Algorithms.provider must implement elements(cursor)")

    def for_each[T](self, cursor: Cursor[T] | None) -> ForEach[T]:
        return ForEach(cursor, self.provider)

    def transform[T](self, cursor: Cursor[T] | None) -> Transform[T]:
        return Transform(cursor, self.provider)

    def accumulate[T](self, cursor: Cursor[T] | None) -> Accumulate[T]:
        return Accumulate(cursor, self.provider)

    def collect[T](self, cursor: Cursor[T] | None) -> Collect[T]:
        return Collect(cursor, self.provider)

    def any_of[T](self, cursor: Cursor[T] | None) -> AnyOf[T]:
        return AnyOf(cursor, self.provider)

    def all_of[T](self, cursor: Cursor[T] | None) -> AllOf[T]:
        return AllOf(cursor, self.provider)

    def none_of[T](self, cursor: Cursor[T] | None) -> NoneOf[T]:
        return NoneOf(cursor, self.provider)

    def find[T](self, cursor: Cursor[T] | None) -> Find[T]:
        return Find(cursor, self.provider)

    def find_first[T](self, cursor: Cursor[T] | None) -> LazyCoroResult[T | None, NoError]:
        """Already terminal: find with an always-true predicate."""
        return find_first(cursor, provider=self.provider)

    def select[T](self, cursor: Cursor[T] | None, count: int) -> Select[T]:
        return Select(cursor, self.provider, count)


__all__ = (
    "Algorithms",
    "ForEach",
    "Transform",
    "Accumulate",
    "Collect",
    "AnyOf",
    "AllOf",
    "NoneOf",
    "Find",
    "Select",
)

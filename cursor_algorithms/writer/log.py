"""
Log - monoidal accumulator for traced traversals
================================================
"""

from __future__ import annotations


class Log[A](list[A]):
    """
    Ordered log of entries produced by traced combinators.

    A list with monoid operations:
    - empty: Log()
    - combine: concatenation, left entries first

    Laws:
    - Log().combine(x) == x
    - x.combine(Log()) == x
    - (x.combine(y)).combine(z) == x.combine(y.combine(z))
    """

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        """Create log with items."""
        return Log[T](items)

    def combine(self, other: Log[A], /) -> Log[A]:
        """
        Concatenate two logs without touching either.

        Example:
            first.log.combine(second.log)  # events of both runs, in run order
        """
        result: Log[A] = Log(self)
        result.extend(other)
        return result


__all__ = ("Log",)

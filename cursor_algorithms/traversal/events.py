"""
Traversal events
================

Log entries written by traced combinators, one per terminal run.
"""

from __future__ import annotations

from dataclasses import dataclass

from .provider import TraversalStats


@dataclass(frozen=True, slots=True)
class TraversalEvent:
    """
    Summary of one combinator run.

    absent=True means the cursor was None and no traversal happened;
    visited and stopped_early are then always 0 and False.
    """

    combinator: str
    absent: bool
    visited: int = 0
    stopped_early: bool = False

    @staticmethod
    def skipped(combinator: str) -> TraversalEvent:
        return TraversalEvent(combinator=combinator, absent=True)

    @staticmethod
    def completed(combinator: str, stats: TraversalStats) -> TraversalEvent:
        return TraversalEvent(
            combinator=combinator,
            absent=False,
            visited=stats.visited,
            stopped_early=stats.stopped_early,
        )


__all__ = ("TraversalEvent",)

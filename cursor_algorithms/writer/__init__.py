"""
Writer
======

LazyCoroResultWriter - a lazy coroutine Result that also carries a Log.
Used by the traced (*_w) combinators to record traversal events.
"""

from .log import Log
from .result import WriterResult
from .monad import LazyCoroResultWriter

__all__ = (
    "Log",
    "WriterResult",
    "LazyCoroResultWriter",
)

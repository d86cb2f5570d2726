from .events import TraversalEvent
from .provider import (
    DEFAULT_PROVIDER,
    AsyncIterableProvider,
    TraversalProvider,
    TraversalStats,
    for_each_async,
    while_async,
)
from .reducer import Reducer, reduce, reduce_w, reduceM

__all__ = (
    # Provider
    "TraversalProvider",
    "AsyncIterableProvider",
    "DEFAULT_PROVIDER",
    # Primitives
    "TraversalStats",
    "for_each_async",
    "while_async",
    # Events
    "TraversalEvent",
    # Reducers
    "Reducer",
    "reduce",
    "reduce_w",
    "reduceM",
)

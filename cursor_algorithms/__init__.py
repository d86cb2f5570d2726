"""
Cursor algorithms: sequence combinators over asynchronous cursor traversal.

Every combinator is built from two traversal primitives supplied by a
provider: visit every element (for_each_async) and visit while the step
says continue (while_async).

Architecture:
- Reducer + reduceM: one generic runner (extract + wrap pattern)
- Sugar functions returning LazyCoroResult (no suffix)
- Traced sugar returning LazyCoroResultWriter with a TraversalEvent log (*_w suffix)
- Algorithms: factory binding a provider, with per-combinator objects
"""

# Core types
from ._types import LCR, Combine, Cursor, NoError, Predicate, Projection, Visit

# Internal helpers (for custom reducers)
from . import _helpers

# Writer
from . import writer
from .writer import LazyCoroResultWriter, Log, WriterResult

# Traversal
from .traversal import (
    DEFAULT_PROVIDER,
    AsyncIterableProvider,
    Reducer,
    TraversalEvent,
    TraversalProvider,
    TraversalStats,
    for_each_async,
    reduce,
    reduce_w,
    reduceM,
    while_async,
)

# Sequence combinators
from .sequence import (
    # LazyCoroResult
    accumulate,
    collect,
    for_each,
    transform,
    # LazyCoroResultWriter
    accumulate_w,
    collect_w,
    for_each_w,
    transform_w,
    # Reducers
    accumulating,
    collecting,
    transforming,
    visiting,
)

# Queries
from .query import (
    DEFAULT_SELECT_OPTIONS,
    SelectOptions,
    # LazyCoroResult
    all_of,
    any_of,
    find,
    find_first,
    none_of,
    select,
    # LazyCoroResultWriter
    all_of_w,
    any_of_w,
    find_first_w,
    find_w,
    none_of_w,
    select_w,
    # Reducers
    all_matching,
    any_matching,
    finding,
    none_matching,
    selecting,
)

# Factory
from .algorithms import (
    Accumulate,
    Algorithms,
    AllOf,
    AnyOf,
    Collect,
    Find,
    ForEach,
    NoneOf,
    Select,
    Transform,
)

__all__ = (
    # Types
    "LCR",
    "Combine",
    "Cursor",
    "NoError",
    "Predicate",
    "Projection",
    "Visit",
    # Internal helpers (for custom reducers)
    "_helpers",
    # Writer
    "writer",
    "LazyCoroResultWriter",
    "Log",
    "WriterResult",
    # Traversal
    "DEFAULT_PROVIDER",
    "AsyncIterableProvider",
    "TraversalProvider",
    "TraversalStats",
    "TraversalEvent",
    "for_each_async",
    "while_async",
    "Reducer",
    "reduce",
    "reduce_w",
    "reduceM",
    # Sequence - LazyCoroResult
    "for_each",
    "transform",
    "accumulate",
    "collect",
    # Sequence - LazyCoroResultWriter
    "for_each_w",
    "transform_w",
    "accumulate_w",
    "collect_w",
    # Sequence - Reducers
    "visiting",
    "transforming",
    "accumulating",
    "collecting",
    # Query - Options
    "SelectOptions",
    "DEFAULT_SELECT_OPTIONS",
    # Query - LazyCoroResult
    "any_of",
    "all_of",
    "none_of",
    "find",
    "find_first",
    "select",
    # Query - LazyCoroResultWriter
    "any_of_w",
    "all_of_w",
    "none_of_w",
    "find_w",
    "find_first_w",
    "select_w",
    # Query - Reducers
    "any_matching",
    "all_matching",
    "none_matching",
    "finding",
    "selecting",
    # Factory
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

from .find import find, find_first, find_first_w, find_w, finding
from .quantifiers import (
    all_matching,
    all_of,
    all_of_w,
    any_matching,
    any_of,
    any_of_w,
    none_matching,
    none_of,
    none_of_w,
)
from .select import DEFAULT_SELECT_OPTIONS, SelectOptions, select, select_w, selecting

__all__ = (
    # Options
    "SelectOptions",
    "DEFAULT_SELECT_OPTIONS",
    # LazyCoroResult
    "any_of",
    "all_of",
    "none_of",
    "find",
    "find_first",
    "select",
    # LazyCoroResultWriter
    "any_of_w",
    "all_of_w",
    "none_of_w",
    "find_w",
    "find_first_w",
    "select_w",
    # Reducers
    "any_matching",
    "all_matching",
    "none_matching",
    "finding",
    "selecting",
)

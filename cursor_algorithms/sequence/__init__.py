from .accumulate import accumulate, accumulate_w, accumulating
from .collect import collect, collect_w, collecting
from .for_each import for_each, for_each_w, visiting
from .transform import transform, transform_w, transforming

__all__ = (
    # LazyCoroResult
    "for_each",
    "transform",
    "accumulate",
    "collect",
    # LazyCoroResultWriter
    "for_each_w",
    "transform_w",
    "accumulate_w",
    "collect_w",
    # Reducers
    "visiting",
    "transforming",
    "accumulating",
    "collecting",
)

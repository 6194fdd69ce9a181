"""
Search Sampler

Elementary search algorithms side by side: linear search, binary search and
a two-worker parallel linear search kept as a thought experiment.
"""

__version__ = "0.1.0"

from .core.config import Config, SearchConfig
from .search.linear import (
    NOT_FOUND,
    Match,
    linear_search_bool,
    linear_search_index,
    linear_search_val_and_index,
)
from .search.binary import binary_search_index
from .search.parallel import (
    SearchOutcome,
    parallel_search,
    parallel_search_detailed,
    parallel_search_with_timing,
    run_parallel_search,
)

__all__ = [
    "Config",
    "SearchConfig",
    "NOT_FOUND",
    "Match",
    "linear_search_bool",
    "linear_search_index",
    "linear_search_val_and_index",
    "binary_search_index",
    "SearchOutcome",
    "parallel_search",
    "parallel_search_detailed",
    "parallel_search_with_timing",
    "run_parallel_search",
]

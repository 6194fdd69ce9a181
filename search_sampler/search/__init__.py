"""
Search algorithms
"""
from .linear import (
    NOT_FOUND,
    Match,
    linear_search_bool,
    linear_search_index,
    linear_search_val_and_index,
    linear_search_counted,
)
from .binary import binary_search_index, binary_search_counted
from .parallel import (
    ScanRange,
    SearchOutcome,
    split_ranges,
    scan_range,
    parallel_search,
    parallel_search_detailed,
    parallel_search_with_timing,
    run_parallel_search,
)

__all__ = [
    "NOT_FOUND",
    "Match",
    "linear_search_bool",
    "linear_search_index",
    "linear_search_val_and_index",
    "linear_search_counted",
    "binary_search_index",
    "binary_search_counted",
    "ScanRange",
    "SearchOutcome",
    "split_ranges",
    "scan_range",
    "parallel_search",
    "parallel_search_detailed",
    "parallel_search_with_timing",
    "run_parallel_search",
]

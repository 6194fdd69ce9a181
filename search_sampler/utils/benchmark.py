"""
Timing helpers comparing the search strategies
"""
import asyncio
import time
from typing import Any, Callable, Dict, List, Optional, Tuple

import psutil

from search_sampler.core.config import SearchConfig
from search_sampler.core.observer import SearchObserver
from search_sampler.search.binary import binary_search_counted
from search_sampler.search.linear import linear_search_counted
from search_sampler.search.parallel import parallel_search


DEFAULT_SIZES = [10_000, 100_000, 1_000_000]


def time_call(func: Callable, *args, **kwargs) -> Tuple[Any, float]:
    """
    Call func and measure it

    Returns:
        (return value, elapsed milliseconds)
    """
    start = time.perf_counter()
    result = func(*args, **kwargs)
    return result, (time.perf_counter() - start) * 1000.0


def benchmark_size(n: int, config: Optional[SearchConfig] = None) -> Dict[str, Any]:
    """
    Benchmark linear, parallel and binary search for one input size

    The target is the last element, the worst case for a forward scan.
    Workers are always spawned, whatever the configured threshold.
    """
    config = (config or SearchConfig()).model_copy(update={"parallel_threshold": 0})
    data = list(range(n))
    target = n - 1

    (linear_index, linear_comps), linear_ms = time_call(linear_search_counted, data, target)
    parallel_index, parallel_ms = time_call(
        asyncio.run, parallel_search(data, target, config, SearchObserver())
    )
    (binary_index, binary_comps), binary_ms = time_call(binary_search_counted, data, target)

    return {
        "n": n,
        "linear_ms": linear_ms,
        "parallel_ms": parallel_ms,
        "binary_ms": binary_ms,
        "linear_comparisons": linear_comps,
        "binary_comparisons": binary_comps,
        "speedup": linear_ms / parallel_ms if parallel_ms else 0.0,
        "agree": linear_index == parallel_index == binary_index,
    }


def benchmark_sizes(sizes: List[int] = None, config: Optional[SearchConfig] = None) -> List[Dict[str, Any]]:
    """Run benchmark_size for every size; sizes below 1 are skipped"""
    sizes = sizes or DEFAULT_SIZES
    return [benchmark_size(n, config) for n in sizes if n > 0]


def get_system_info() -> Dict[str, Any]:
    """
    Get host information relevant to the benchmark

    Returns:
        Dictionary with CPU and memory information
    """
    memory = psutil.virtual_memory()
    return {
        "cpu_count": psutil.cpu_count(),
        "physical_cores": psutil.cpu_count(logical=False),
        "memory": {
            "total": memory.total,
            "available": memory.available,
            "percent": memory.percent
        }
    }


def format_bytes(size_bytes: int) -> str:
    """
    Format a byte count in human readable form

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted size string
    """
    if size_bytes == 0:
        return "0 B"

    size_names = ["B", "KB", "MB", "GB", "TB"]
    i = 0

    while size_bytes >= 1024 and i < len(size_names) - 1:
        size_bytes /= 1024.0
        i += 1

    return f"{size_bytes:.1f} {size_names[i]}"

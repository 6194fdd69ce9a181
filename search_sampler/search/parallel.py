"""
Parallel linear search (thought experiment)

Splits the sequence in two ranges, scans each range in its own worker and
resolves as soon as a worker reports a match, or once both report none.

This is not a faster search. Spawning workers and copying their ranges
costs far more than scanning small inputs, which is why inputs below
``parallel_threshold`` take a plain linear scan. On sorted data binary
search needs about 20 comparisons for a million elements; the two workers
here still share roughly a million between them. For repeated lookups an
index built once (a dict or set) beats both.
"""
import asyncio
import functools
import logging
import threading
import time
from concurrent.futures import Executor
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from search_sampler.core.config import SearchConfig
from search_sampler.core.exceptions import SearchTimeoutError
from search_sampler.core.observer import LoggingObserver, SearchObserver
from search_sampler.core.race import race_first
from .linear import NOT_FOUND, ensure_sequence, linear_search_index


logger = logging.getLogger("ParallelSearch")

SHORT_CIRCUIT_WORKER = "scan"


@dataclass(frozen=True)
class ScanRange:
    """
    Contiguous range of absolute indices scanned by one worker

    ``start`` is the first index visited and ``end`` the exclusive bound in
    the direction of ``step`` (1 forward, -1 backward), as for ``range``.
    """
    start: int
    end: int
    step: int = 1

    def __post_init__(self):
        if self.step not in (1, -1):
            raise ValueError(f"step must be 1 or -1, got {self.step}")

    def indices(self) -> range:
        return range(self.start, self.end, self.step)

    def bounds(self) -> Tuple[int, int]:
        """Lowest index covered and one past the highest, as a slice"""
        indices = self.indices()
        if not indices:
            return 0, 0
        return min(indices[0], indices[-1]), max(indices[0], indices[-1]) + 1

    def __len__(self) -> int:
        return len(self.indices())


@dataclass
class SearchOutcome:
    """Structured result of a parallel search"""
    index: int
    found_by: Optional[str]
    duration_ms: float
    timed_out: bool = False
    worker_errors: List[str] = field(default_factory=list)
    short_circuited: bool = False
    unconfirmed_index: Optional[int] = None

    @property
    def found(self) -> bool:
        return self.index != NOT_FOUND

    def to_dict(self) -> dict:
        return {
            'index': self.index,
            'found': self.found,
            'found_by': self.found_by,
            'duration_ms': self.duration_ms,
            'timed_out': self.timed_out,
            'worker_errors': self.worker_errors,
            'short_circuited': self.short_circuited,
            'unconfirmed_index': self.unconfirmed_index
        }

    def __str__(self) -> str:
        return (
            f"result={self.index} foundBy={self.found_by or 'none'} "
            f"durationMs={self.duration_ms:.3f}"
        )


def split_ranges(length: int, strategy: str = "split") -> Dict[str, ScanRange]:
    """
    Partition ``range(length)`` between two workers

    Args:
        length: Length of the sequence
        strategy: ``split`` scans both halves forward from the midpoint
            ``length // 2``; ``outward`` scans the lower half forward from 0
            and the upper half backward from the last element

    Returns:
        Mapping of worker id to its ScanRange, lower range first
    """
    if strategy == "split":
        mid = length // 2
        return {
            "w1": ScanRange(0, mid, 1),
            "w2": ScanRange(mid, length, 1),
        }
    if strategy == "outward":
        mid = (length - 1) // 2
        return {
            "w1": ScanRange(0, mid + 1, 1),
            "w2": ScanRange(length - 1, mid, -1),
        }
    raise ValueError(f"Unknown split strategy: {strategy}")


def scan_range(
    chunk,
    target,
    scan: ScanRange,
    offset: int,
    cancel_event: Optional[threading.Event] = None,
    check_interval: int = 1024,
) -> int:
    """
    Worker body: scan a private copy of one range

    Args:
        chunk: Copy of ``sequence[offset:offset + len(chunk)]``
        target: Value to look for
        scan: Absolute indices to visit, in order
        offset: Absolute index of ``chunk[0]``
        cancel_event: Stops the scan early once set
        check_interval: Elements scanned between cancellation checks

    Returns:
        Absolute index of the first match in scan order, or -1
    """
    for count, index in enumerate(scan.indices()):
        if cancel_event is not None and count % check_interval == 0 and cancel_event.is_set():
            return NOT_FOUND
        if chunk[index - offset] == target:
            return index
    return NOT_FOUND


async def parallel_search_detailed(
    sequence,
    target,
    config: Optional[SearchConfig] = None,
    observer: Optional[SearchObserver] = None,
    executor: Optional[Executor] = None,
    worker: Callable[..., int] = scan_range,
) -> SearchOutcome:
    """
    Search with two racing workers and report how the result was reached

    Args:
        sequence: Sequence to search
        target: Value to look for
        config: Threshold, deadline, strategy and resolution policy
        observer: Receives progress events (logging by default)
        executor: Thread executor for the workers; when None each worker
            runs in a daemon thread, so one that ignores its cancellation
            token cannot keep the process alive after the deadline
        worker: Worker body, called as
            ``worker(chunk, target, scan, offset, cancel_event, check_interval=...)``

    Returns:
        SearchOutcome; ``index`` is -1 when absent, when both workers failed,
        or when the deadline passed. A match that was still waiting on the
        lower-range worker at the deadline is reported as ``unconfirmed_index``

    Raises:
        SearchTimeoutError: the deadline passed and ``raise_on_timeout`` is set
    """
    config = config or SearchConfig()
    observer = observer or LoggingObserver()
    ensure_sequence(sequence)

    start = time.perf_counter()
    length = len(sequence)

    # Workers cost more than the scan itself below the threshold
    if length == 0 or length < config.parallel_threshold:
        index = linear_search_index(sequence, target)
        outcome = SearchOutcome(
            index=index,
            found_by=SHORT_CIRCUIT_WORKER if index != NOT_FOUND else None,
            duration_ms=(time.perf_counter() - start) * 1000.0,
            short_circuited=True
        )
        observer.on_resolve(outcome)
        return outcome

    ranges = split_ranges(length, config.strategy)
    calls = {}
    for worker_id, scan in ranges.items():
        low, high = scan.bounds()
        chunk = list(sequence[low:high])
        calls[worker_id] = functools.partial(
            worker, chunk, target, scan, low,
            check_interval=config.cancel_check_interval
        )

    observer.on_start(ranges)

    result = await race_first(
        calls,
        accept=lambda index: index != NOT_FOUND,
        timeout=config.timeout_seconds,
        policy=config.resolution,
        executor=executor,
        observer=observer
    )

    outcome = SearchOutcome(
        index=result.value if result.winner is not None else NOT_FOUND,
        found_by=result.winner,
        duration_ms=(time.perf_counter() - start) * 1000.0,
        timed_out=result.timed_out,
        worker_errors=result.errors,
        unconfirmed_index=result.unconfirmed_value
    )
    observer.on_resolve(outcome)

    if outcome.worker_errors and not outcome.found:
        logger.warning(
            f"Workers {outcome.worker_errors} failed; reporting not found"
        )

    if outcome.timed_out and config.raise_on_timeout:
        raise SearchTimeoutError(config.timeout_seconds)

    return outcome


async def parallel_search(
    sequence,
    target,
    config: Optional[SearchConfig] = None,
    observer: Optional[SearchObserver] = None,
    **kwargs,
) -> int:
    """
    Parallel linear search

    Returns:
        Index of target, or -1 if absent. Worker failures and an expired
        deadline also yield -1; use parallel_search_detailed to tell them apart.
    """
    outcome = await parallel_search_detailed(sequence, target, config, observer, **kwargs)
    return outcome.index


async def parallel_search_with_timing(
    sequence,
    target,
    config: Optional[SearchConfig] = None,
    observer: Optional[SearchObserver] = None,
    **kwargs,
) -> Tuple[int, float]:
    """Return (index, duration in milliseconds) of a parallel search"""
    start = time.perf_counter()
    index = await parallel_search(sequence, target, config, observer, **kwargs)
    duration_ms = (time.perf_counter() - start) * 1000.0
    logger.info(f"index={index} durationMs={duration_ms:.3f}ms")
    return index, duration_ms


def run_parallel_search(
    sequence,
    target,
    config: Optional[SearchConfig] = None,
    observer: Optional[SearchObserver] = None,
    **kwargs,
) -> int:
    """Blocking wrapper around parallel_search for synchronous callers"""
    return asyncio.run(parallel_search(sequence, target, config, observer, **kwargs))

"""
Run callables concurrently and take the first accepted result
"""
import asyncio
import itertools
import logging
import threading
from concurrent.futures import Executor, Future
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from .observer import SearchObserver
from .tracker import CompletionTracker, ResolutionPolicy


logger = logging.getLogger("race")


class DaemonThreadExecutor(Executor):
    """
    Executor running every call in its own daemon thread

    A call that ignores its cancellation token keeps running after the race
    is resolved, but never blocks interpreter exit the way a
    ThreadPoolExecutor worker does.
    """

    def __init__(self, thread_name_prefix: str = "search-worker"):
        self.thread_name_prefix = thread_name_prefix
        self._counter = itertools.count(1)
        self._threads: List[threading.Thread] = []
        self._shutdown = False
        self._lock = threading.Lock()

    def submit(self, fn, *args, **kwargs) -> Future:
        future = Future()

        def run():
            if not future.set_running_or_notify_cancel():
                return
            try:
                result = fn(*args, **kwargs)
            except BaseException as e:
                future.set_exception(e)
            else:
                future.set_result(result)

        with self._lock:
            if self._shutdown:
                raise RuntimeError("cannot schedule new futures after shutdown")
            thread = threading.Thread(
                target=run,
                name=f"{self.thread_name_prefix}-{next(self._counter)}",
                daemon=True
            )
            self._threads.append(thread)
        thread.start()
        return future

    def shutdown(self, wait: bool = True, **kwargs) -> None:
        with self._lock:
            self._shutdown = True
            threads = list(self._threads)
        if wait:
            for thread in threads:
                thread.join()


@dataclass
class RaceResult:
    """Outcome of a race between workers"""
    value: Any
    winner: Optional[str]
    timed_out: bool
    errors: List[str] = field(default_factory=list)
    reports_received: int = 0
    unconfirmed_winner: Optional[str] = None
    unconfirmed_value: Any = None

    def to_dict(self) -> dict:
        return {
            'value': self.value,
            'winner': self.winner,
            'timed_out': self.timed_out,
            'errors': self.errors,
            'reports_received': self.reports_received,
            'unconfirmed_winner': self.unconfirmed_winner,
            'unconfirmed_value': self.unconfirmed_value
        }


async def race_first(
    calls: Dict[str, Callable[[threading.Event], Any]],
    accept: Callable[[Any], bool],
    timeout: Optional[float] = None,
    policy=ResolutionPolicy.FIRST_REPORTED,
    executor: Optional[Executor] = None,
    observer: Optional[SearchObserver] = None,
) -> RaceResult:
    """
    Run every call in an executor and resolve on the first accepted result

    Each call receives its own cancellation token (a ``threading.Event``)
    and should return promptly once it is set. Calls that ignore it are
    abandoned: without an explicit executor they run in daemon threads, so
    a stuck call neither delays the result nor blocks interpreter exit.

    The race resolves when the tracker does: on an accepted result, when
    every call has returned an unaccepted result or failed, or when the
    deadline passes. All tokens are set and all tasks cancelled on
    resolution.

    Args:
        calls: Worker id to callable, in priority order
        accept: Predicate deciding whether a returned value is a success
        timeout: Deadline in seconds, None waits indefinitely
        policy: Resolution policy for the completion tracker
        executor: Executor to run the calls in (a DaemonThreadExecutor if None)
        observer: Receives report and error events

    Returns:
        RaceResult with the winning value, or value None when nothing won
    """
    observer = observer or SearchObserver()
    own_executor = executor is None
    if own_executor:
        executor = DaemonThreadExecutor()
    loop = asyncio.get_running_loop()
    tracker = CompletionTracker(list(calls), policy=policy)
    tokens = {worker_id: threading.Event() for worker_id in calls}
    resolved = asyncio.Event()

    async def run(worker_id: str, fn: Callable[[threading.Event], Any]):
        try:
            value = await loop.run_in_executor(executor, fn, tokens[worker_id])
        except asyncio.CancelledError:
            raise
        except Exception as e:
            if tracker.resolved:
                logger.debug(f"{worker_id} failed after resolution: {e!r}")
                return
            observer.on_worker_error(worker_id, e)
            tracker.report_error(worker_id, e)
        else:
            if tracker.resolved:
                logger.debug(f"{worker_id} reported after resolution: {value!r}")
                return
            found = accept(value)
            observer.on_report(worker_id, found, value)
            tracker.report(worker_id, found, value)

        if tracker.resolved:
            resolved.set()

    tasks = [
        asyncio.ensure_future(run(worker_id, fn))
        for worker_id, fn in calls.items()
    ]

    try:
        await asyncio.wait_for(resolved.wait(), timeout=timeout)
    except asyncio.TimeoutError:
        logger.warning(f"Race timed out after {timeout} seconds")
        tracker.expire()
    finally:
        for token in tokens.values():
            token.set()
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        if own_executor:
            executor.shutdown(wait=False)

    return RaceResult(
        value=tracker.value,
        winner=tracker.winner,
        timed_out=tracker.timed_out,
        errors=tracker.errors,
        reports_received=tracker.reports_received,
        unconfirmed_winner=tracker.unconfirmed.worker_id if tracker.unconfirmed else None,
        unconfirmed_value=tracker.unconfirmed.value if tracker.unconfirmed else None
    )

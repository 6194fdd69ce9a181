"""
Observers for parallel search progress
"""
import logging
from typing import Any, Dict


class SearchObserver:
    """
    Receives progress events from the coordinator

    The base class ignores every event; subclass it to collect or print
    diagnostics without touching the search code.
    """

    def on_start(self, worker_ranges: Dict[str, Any]) -> None:
        pass

    def on_report(self, worker_id: str, found: bool, value: Any) -> None:
        pass

    def on_worker_error(self, worker_id: str, error: BaseException) -> None:
        pass

    def on_resolve(self, outcome: Any) -> None:
        pass


class LoggingObserver(SearchObserver):
    """Writes search progress to the standard logging system"""

    def __init__(self, logger: logging.Logger = None):
        self.logger = logger or logging.getLogger("ParallelSearch")

    def on_start(self, worker_ranges: Dict[str, Any]) -> None:
        for worker_id, scan_range in worker_ranges.items():
            self.logger.debug(f"{worker_id} assigned {scan_range}")

    def on_report(self, worker_id: str, found: bool, value: Any) -> None:
        self.logger.info(f"{worker_id} found={found} index={value}")

    def on_worker_error(self, worker_id: str, error: BaseException) -> None:
        self.logger.error(f"{worker_id} error: {error!r}")

    def on_resolve(self, outcome: Any) -> None:
        self.logger.info(f"finish {outcome}")


class RecordingObserver(SearchObserver):
    """Keeps every event in memory, in arrival order"""

    def __init__(self):
        self.events = []

    def on_start(self, worker_ranges: Dict[str, Any]) -> None:
        self.events.append(("start", dict(worker_ranges)))

    def on_report(self, worker_id: str, found: bool, value: Any) -> None:
        self.events.append(("report", worker_id, found, value))

    def on_worker_error(self, worker_id: str, error: BaseException) -> None:
        self.events.append(("error", worker_id, error))

    def on_resolve(self, outcome: Any) -> None:
        self.events.append(("resolve", outcome))

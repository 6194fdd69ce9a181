"""
Completion tracker for racing worker reports

Keeps the race-resolution rules separate from any scheduling, so they can be
driven by hand in tests: feed reports in any order and inspect the outcome.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence


class TrackerState(Enum):
    """Lifecycle of a single search invocation"""
    PENDING = "pending"
    RESOLVED = "resolved"


class ResolutionPolicy(Enum):
    """How a positive report is turned into the final result"""
    FIRST_REPORTED = "first_reported"   # first positive observed wins
    LOWEST_INDEX = "lowest_index"       # earlier workers take priority over later ones


@dataclass
class Report:
    """One-shot report sent by a worker"""
    worker_id: str
    found: bool
    value: Any = None
    error: Optional[BaseException] = None


class CompletionTracker:
    """
    Two-state completion tracker for a fixed set of workers

    Workers are listed in priority order. Under ``LOWEST_INDEX`` a positive
    report only resolves once every higher-priority worker has reported
    negative (or failed); under ``FIRST_REPORTED`` the first positive wins.
    When every worker has reported negative the tracker resolves with no
    winner. Once resolved, further reports are ignored.
    """

    def __init__(self, worker_ids: Sequence[str], policy=ResolutionPolicy.FIRST_REPORTED):
        if not worker_ids:
            raise ValueError("At least one worker is required")
        if len(set(worker_ids)) != len(worker_ids):
            raise ValueError("Worker ids must be unique")

        self.worker_ids: List[str] = list(worker_ids)
        self.policy = ResolutionPolicy(policy)
        self.logger = logging.getLogger("CompletionTracker")

        self.state = TrackerState.PENDING
        self.reports: Dict[str, Report] = {}
        self.winner: Optional[str] = None
        self.value: Any = None
        self.timed_out = False
        self.unconfirmed: Optional[Report] = None

    @property
    def resolved(self) -> bool:
        return self.state is TrackerState.RESOLVED

    @property
    def reports_received(self) -> int:
        return len(self.reports)

    @property
    def errors(self) -> List[str]:
        """Ids of the workers that failed, in report order"""
        return [wid for wid, report in self.reports.items() if report.error is not None]

    def report(self, worker_id: str, found: bool, value: Any = None) -> bool:
        """
        Record a worker's report

        Args:
            worker_id: Id of the reporting worker
            found: Whether the worker found a match
            value: The worker's result

        Returns:
            True if this report resolved the tracker, False otherwise
        """
        return self._record(Report(worker_id=worker_id, found=found, value=value))

    def report_error(self, worker_id: str, error: BaseException) -> bool:
        """Record a worker failure; it counts as a negative report"""
        return self._record(Report(worker_id=worker_id, found=False, error=error))

    def expire(self) -> bool:
        """
        Resolve as not found because the deadline passed

        Any positive report still waiting on a higher-priority worker is
        discarded as the result; it stays visible as ``unconfirmed``.

        Returns:
            True if the tracker was still pending, False otherwise
        """
        if self.resolved:
            return False
        self.timed_out = True
        self.unconfirmed = next(
            (self.reports[wid] for wid in self.worker_ids
             if wid in self.reports and self.reports[wid].found),
            None
        )
        self._resolve(None)
        return True

    def _record(self, report: Report) -> bool:
        if report.worker_id not in self.worker_ids:
            raise KeyError(f"Unknown worker: {report.worker_id}")

        if self.resolved:
            self.logger.debug(f"Ignoring report from {report.worker_id}: already resolved")
            return False

        if report.worker_id in self.reports:
            raise ValueError(f"Worker {report.worker_id} already reported")

        self.reports[report.worker_id] = report

        if self.policy is ResolutionPolicy.FIRST_REPORTED:
            if report.found:
                self._resolve(report)
                return True
        else:
            for worker_id in self.worker_ids:
                pending = self.reports.get(worker_id)
                if pending is None:
                    # a higher-priority worker may still find an earlier match
                    return False
                if pending.found:
                    self._resolve(pending)
                    return True

        if len(self.reports) == len(self.worker_ids):
            self._resolve(None)
            return True

        return False

    def _resolve(self, report: Optional[Report]) -> None:
        self.state = TrackerState.RESOLVED
        if report is not None:
            self.winner = report.worker_id
            self.value = report.value

"""
Configuration, errors and worker coordination
"""
from .config import Config, SearchConfig, LoggingConfig
from .exceptions import (
    SearchError,
    InvalidSequenceError,
    UnsortedSequenceError,
    SearchTimeoutError,
)
from .observer import SearchObserver, LoggingObserver, RecordingObserver
from .race import DaemonThreadExecutor, RaceResult, race_first
from .tracker import CompletionTracker, ResolutionPolicy, TrackerState

__all__ = [
    "Config",
    "SearchConfig",
    "LoggingConfig",
    "SearchError",
    "InvalidSequenceError",
    "UnsortedSequenceError",
    "SearchTimeoutError",
    "SearchObserver",
    "LoggingObserver",
    "RecordingObserver",
    "DaemonThreadExecutor",
    "RaceResult",
    "race_first",
    "CompletionTracker",
    "ResolutionPolicy",
    "TrackerState",
]

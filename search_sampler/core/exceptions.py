"""
Exceptions raised by the search algorithms
"""


class SearchError(Exception):
    """Base class for search errors"""


class InvalidSequenceError(SearchError, TypeError):
    """The value passed as sequence is not an indexable sequence"""


class UnsortedSequenceError(SearchError, ValueError):
    """Binary search was asked to verify ordering and the sequence is unsorted"""

    def __init__(self, position: int):
        self.position = position
        super().__init__(
            f"Sequence is not sorted in ascending order (first violation at index {position})"
        )


class SearchTimeoutError(SearchError, TimeoutError):
    """The parallel search did not resolve before its deadline"""

    def __init__(self, timeout: float):
        self.timeout = timeout
        super().__init__(f"Parallel search timed out after {timeout} seconds")

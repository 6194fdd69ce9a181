"""
Linear search in three result shapes

Every variant scans from the first element to the last, compares with
``==`` and stops at the first match, so duplicates resolve to the lowest
index.
"""
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from search_sampler.core.exceptions import InvalidSequenceError


NOT_FOUND = -1


@dataclass(frozen=True)
class Match:
    """Position and value of a found element"""
    index: int
    value: Any

    def to_dict(self) -> dict:
        return {'index': self.index, 'value': self.value}


def ensure_sequence(sequence) -> None:
    """Raise InvalidSequenceError unless sequence is an indexable sequence"""
    if not isinstance(sequence, Sequence):
        raise InvalidSequenceError(
            f"Expected an indexable sequence, got {type(sequence).__name__}"
        )


def linear_search_bool(sequence, target) -> bool:
    """Return True if target occurs in sequence"""
    return linear_search_index(sequence, target) != NOT_FOUND


def linear_search_index(sequence, target) -> int:
    """
    Find the first position of target

    Args:
        sequence: Sequence to scan
        target: Value to look for

    Returns:
        Lowest index holding target, or -1 if absent
    """
    ensure_sequence(sequence)
    for index, value in enumerate(sequence):
        if value == target:
            return index
    return NOT_FOUND


def linear_search_val_and_index(sequence, target) -> Optional[Match]:
    """Return the first match as a Match record, or None if absent"""
    index = linear_search_index(sequence, target)
    if index == NOT_FOUND:
        return None
    return Match(index=index, value=sequence[index])


def linear_search_counted(sequence, target) -> Tuple[int, int]:
    """
    Linear search that also counts comparisons

    Returns:
        (index or -1, comparisons)
    """
    ensure_sequence(sequence)
    comparisons = 0
    for index, value in enumerate(sequence):
        comparisons += 1
        if value == target:
            return index, comparisons
    return NOT_FOUND, comparisons

"""
Binary search over an ascending sorted sequence
"""
from typing import Tuple

from search_sampler.core.exceptions import InvalidSequenceError, UnsortedSequenceError
from .linear import NOT_FOUND, ensure_sequence


def find_unsorted_position(sequence) -> int:
    """Return the first index that breaks ascending order, or -1"""
    try:
        for index in range(1, len(sequence)):
            if sequence[index] < sequence[index - 1]:
                return index
    except TypeError as e:
        raise InvalidSequenceError(f"Elements are not mutually comparable: {e}") from e
    return NOT_FOUND


def binary_search_counted(sequence, target) -> Tuple[int, int]:
    """
    Binary search that also counts comparisons

    Returns:
        (index or -1, comparisons)

    Raises:
        InvalidSequenceError: target cannot be ordered against an element
    """
    ensure_sequence(sequence)
    low, high = 0, len(sequence) - 1
    comparisons = 0
    while low <= high:
        comparisons += 1
        mid = (low + high) // 2
        value = sequence[mid]
        if value == target:
            return mid, comparisons
        try:
            below = target < value
        except TypeError as e:
            raise InvalidSequenceError(
                f"Cannot compare {target!r} with element {value!r} at index {mid}"
            ) from e
        if below:
            high = mid - 1
        else:
            low = mid + 1
    return NOT_FOUND, comparisons


def binary_search_index(sequence, target, check_sorted: bool = False) -> int:
    """
    Find target in an ascending sorted sequence

    The sequence is assumed sorted; on unsorted input the result is
    meaningless unless ``check_sorted`` is set, which costs a full scan.

    Args:
        sequence: Ascending sorted sequence
        target: Value to look for
        check_sorted: Verify ordering first and raise if it is broken

    Returns:
        An index holding target, or -1 if absent

    Raises:
        UnsortedSequenceError: check_sorted is set and the sequence is unsorted
    """
    ensure_sequence(sequence)
    if check_sorted:
        position = find_unsorted_position(sequence)
        if position != NOT_FOUND:
            raise UnsortedSequenceError(position)

    index, _ = binary_search_counted(sequence, target)
    return index

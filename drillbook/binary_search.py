"""Binary search over sorted sequences: exact match, last occurrence and bounds."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence
from typing import Any


def binary_search(values: Sequence[Any], target: Any) -> int:
    """Return an index of `target` in the ascending `values`, or -1 if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return mid
        if target > values[mid]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def binary_search_recursive(values: Sequence[Any], target: Any) -> int:
    """Recursive form of binary_search; returns -1 if `target` is absent."""

    def search(low: int, high: int) -> int:
        if low > high:
            return -1
        mid = (low + high) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            return search(low, mid - 1)
        return search(mid + 1, high)

    return search(0, len(values) - 1)


def last_occurrence(values: Sequence[Any], target: Any) -> int:
    """Return the index of the last `target` in the ascending `values`, or -1."""
    result = -1
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            result = mid
            low = mid + 1
        elif values[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return result


def lower_bound(values: Sequence[Any], target: Any) -> int:
    """Return the first index whose value is >= `target`, or len(values)."""
    return bisect_left(values, target)


def search_insert(values: Sequence[Any], target: Any) -> int:
    """Return where `target` is, or where it would be inserted to keep order."""
    return bisect_left(values, target)


def upper_bound(values: Sequence[Any], target: Any) -> int:
    """Return the first index whose value is > `target`, or len(values)."""
    return bisect_right(values, target)
"""Subarray-sum and two-sum exercises."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate


def longest_subarray_with_sum(values: Sequence[int], target: int) -> int:
    """Return the length of the longest contiguous run summing to `target`, or 0."""
    longest = 0
    for start in range(len(values)):
        for offset, total in enumerate(accumulate(values[start:]), start=1):
            if total == target:
                longest = max(longest, offset)
    return longest


def longest_subarray_with_sum_brute(values: Sequence[int], target: int) -> int:
    """Same as longest_subarray_with_sum, re-adding every subarray from scratch."""
    longest = 0
    for start in range(len(values)):
        for end in range(start, len(values)):
            if sum(values[start : end + 1]) == target:
                longest = max(longest, end - start + 1)
    return longest


def two_sum_indices(values: Sequence[int], target: int) -> list[tuple[int, int]]:
    """Return every index pair (i, j), i < j, whose values add up to `target`."""
    return [
        (i, j)
        for i, first in enumerate(values)
        for j in range(i + 1, len(values))
        if first + values[j] == target
    ]


def has_two_sum(values: Iterable[int], target: int) -> bool:
    """Tell whether two distinct entries of `values` add up to `target`."""
    counts = Counter(values)
    for value in counts:
        complement = target - value
        needed = 2 if complement == value else 1
        if counts.get(complement, 0) >= needed:
            return True
    return False


def two_pointer_sum(values: Iterable[int], target: int) -> tuple[int, int] | None:
    """Find a pair summing to `target` with two pointers over the sorted values.

    Returns the pair's indices in sorted order, or None if there is no such pair.
    """
    ordered = sorted(values)
    left, right = 0, len(ordered) - 1
    while left < right:
        total = ordered[left] + ordered[right]
        if total == target:
            return left, right
        if total > target:
            right -= 1
        else:
            left += 1
    return None
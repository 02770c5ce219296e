"""Easy array exercises: counting, de-duplication, majority, missing values, rotation."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable, MutableSequence, Sequence
from itertools import groupby
from typing import Any, TypeVar

from drillbook.recursion import reverse_in_place

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


def single_occurrences(values: Iterable[H]) -> list[H]:
    """Return the values that occur exactly once, in order of first appearance."""
    counts = Counter(values)
    return [value for value, count in counts.items() if count == 1]


def dedupe_sorted(values: Iterable[T]) -> list[T]:
    """Collapse runs of equal neighbours, keeping one of each run."""
    return [key for key, _ in groupby(values)]


def majority_element(values: Sequence[T]) -> T | None:
    """Return the first value occurring more than len//2 times, by pairwise counting."""
    threshold = len(values) // 2
    for candidate in values:
        if sum(1 for other in values if other == candidate) > threshold:
            return candidate
    return None


def majority_element_counting(values: Sequence[H]) -> H | None:
    """Return the first value occurring more than len//2 times, using a count table."""
    threshold = len(values) // 2
    counts = Counter(values)
    return next((value for value in values if counts[value] > threshold), None)


def max_consecutive_ones(values: Iterable[int]) -> int:
    """Return the length of the longest run of 1s."""
    return max(
        (sum(1 for _ in run) for key, run in groupby(values) if key == 1),
        default=0,
    )


def missing_numbers(values: Iterable[int], n: int) -> list[int]:
    """Return the numbers in 1..n that do not occur in `values`."""
    seen = set()
    for value in values:
        if not 0 <= value <= n:
            raise ValueError(f"value {value} is outside the range 0..{n}")
        seen.add(value)
    return [k for k in range(1, n + 1) if k not in seen]


def missing_by_sum(values: Iterable[int], n: int) -> int:
    """Return the one number of 1..n absent from `values`, found from the sums."""
    return n * (n + 1) // 2 - sum(values)


def first_missing(values: Iterable[int]) -> int:
    """Return the first k such that `values` does not start 1, 2, ..., k."""
    expected = 1
    for value in values:
        if value != expected:
            break
        expected += 1
    return expected


def _normalise_shift(length: int, d: int) -> int:
    if d < 0:
        raise ValueError("shift must not be negative")
    return d % length if length else 0


def rotate_left_one(values: Sequence[T]) -> list[T]:
    """Return a copy of `values` rotated one place to the left."""
    return rotate_left(values, 1)


def rotate_left(values: Sequence[T], d: int) -> list[T]:
    """Return a copy of `values` rotated `d` places to the left."""
    items = list(values)
    d = _normalise_shift(len(items), d)
    return items[d:] + items[:d]


def rotate_left_reversal(values: MutableSequence[Any], d: int) -> None:
    """Rotate `values` `d` places to the left in place, by three reversals."""
    d = _normalise_shift(len(values), d)
    if not values:
        return
    reverse_in_place(values, 0, d - 1)
    reverse_in_place(values, d, len(values) - 1)
    reverse_in_place(values, 0, len(values) - 1)
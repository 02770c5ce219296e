"""Array rearrangement exercises: moving zeros, sorting 0/1/2, searching, union."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, MutableSequence, Sequence
from typing import TypeVar

T = TypeVar("T")


def move_zeros(values: Iterable[int]) -> list[int]:
    """Return a copy with every zero moved to the end, other values kept in order."""
    items = list(values)
    non_zero = [value for value in items if value != 0]
    return non_zero + [0] * (len(items) - len(non_zero))


def move_zeros_in_place(values: MutableSequence[int]) -> None:
    """Move every zero to the end of `values` in place, keeping the others in order."""
    slot = next((index for index, value in enumerate(values) if value == 0), None)
    if slot is None:
        return
    for index in range(slot + 1, len(values)):
        if values[index] != 0:
            values[slot], values[index] = values[index], values[slot]
            slot += 1


def sort_zero_one_two(values: Iterable[int]) -> list[int]:
    """Return the values sorted by counting; only 0, 1 and 2 are allowed."""
    counts = Counter(values)
    unexpected = set(counts) - {0, 1, 2}
    if unexpected:
        raise ValueError(f"only 0, 1 and 2 are allowed, got {sorted(unexpected)}")
    return [0] * counts[0] + [1] * counts[1] + [2] * counts[2]


def linear_search(values: Iterable[T], target: T) -> list[int]:
    """Return every index at which `target` occurs, scanning from the front."""
    return [index for index, value in enumerate(values) if value == target]


def sorted_union(a: Iterable[T], b: Iterable[T]) -> list[T]:
    """Return the distinct values of both inputs in ascending order."""
    return sorted(set(a) | set(b))
"""Basic recursion exercises: factorials, sums, sequences, reversal, powers."""

from __future__ import annotations

import math
from collections.abc import MutableSequence
from typing import Any


def factorial(n: int) -> int:
    """Return n!; any n below 1 yields 1."""
    return math.prod(range(1, n + 1))


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with fibonacci(n) == 1 for every n <= 2."""
    previous, current = 1, 1
    for _ in range(n - 2):
        previous, current = current, previous + current
    return current


def sum_to(n: int) -> int:
    """Return 1 + 2 + ... + n; zero for n < 1."""
    return sum(range(1, n + 1))


def sum_accumulate(n: int, total: int = 0) -> int:
    """Add 1 + 2 + ... + n onto a running `total` and return it."""
    while n >= 1:
        total += n
        n -= 1
    return total


def count_up(start: int = 1, stop: int = 5) -> list[int]:
    """Return the integers from `start` up to and including `stop`."""
    return list(range(start, stop + 1))


def repeat_line(text: str, times: int = 5) -> list[str]:
    """Return `text` repeated `times` times, one entry per line."""
    return [text] * max(times, 0)


def reversed_string(s: str) -> str:
    """Return `s` with its characters in reverse order."""
    return s[::-1]


def is_palindrome(s: str) -> bool:
    """Tell whether `s` reads the same backwards."""
    return reversed_string(s) == s


def reverse_in_place(
    items: MutableSequence[Any], i: int = 0, j: int | None = None
) -> None:
    """Reverse items[i..j] (inclusive) in place; j defaults to the last index."""
    if j is None:
        j = len(items) - 1
    if i > j:
        return
    items[i : j + 1] = items[i : j + 1][::-1]


def count_down(n: int) -> list[int]:
    """Return the integers from `n` down to 1."""
    return list(range(n, 0, -1))


def power(x: float, p: int) -> float:
    """Return x multiplied by itself p times; 1 for p < 1."""
    result = 1.0
    for _ in range(p):
        result = x * result
    return result


def power_iterative(x: float, p: float) -> float:
    """Multiply x into an accumulator once for every integer i with 0 <= i < p."""
    result = 1.0
    for _ in range(max(0, math.ceil(p))):
        result *= x
    return result
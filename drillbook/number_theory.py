"""Small number-theory and counting exercises."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Hashable, Iterable


def binary_representation(num: int, bits: int = 32) -> str:
    """Return the low `bits` bits of `num` in two's complement, most significant first."""
    if bits < 0:
        raise ValueError("bits must not be negative")
    return "".join(str((num >> i) & 1) for i in reversed(range(bits)))


def watermelon(weight: int) -> str:
    """Answer "YES" for an even weight and "NO" for an odd one."""
    _, remainder = divmod(weight, 2)
    is_even = remainder == 0
    return "YES" if is_even else "NO"


def count_letters(text: str) -> Counter[str]:
    """Count how often each character occurs; absent characters count as zero."""
    return Counter(text)


def count_values(values: Iterable[Hashable]) -> Counter:
    """Count how often each value occurs; absent values count as zero."""
    return Counter(values)


def divisors(n: int) -> list[int]:
    """Return the positive divisors of `n` in ascending order; empty for n < 1."""
    if n < 1:
        return []
    found: set[int] = set()
    for i in range(1, math.isqrt(n) + 1):
        if n % i == 0:
            found.update((i, n // i))
    return sorted(found)
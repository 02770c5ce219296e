"""Number pyramids and rhombi rendered as text."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable, Sequence


def _digits(count: int) -> str:
    """Concatenate the numbers 1..count."""
    return "".join(str(k) for k in range(1, count + 1))


def _render(rows: Iterable[tuple[int, int]]) -> str:
    """Render (indent, digit_count) pairs, one newline-terminated row each."""
    return "".join(" " * indent + _digits(count) + "\n" for indent, count in rows)


def full_pyramid(n: int) -> str:
    """Centred pyramid: row i holds 1..2i+1 after n-i spaces."""
    return _render((n - i, 2 * i + 1) for i in range(n))


def inverted_left_pyramid(n: int) -> str:
    """Right-aligned shrinking triangle: row i holds 1..n-i after i spaces."""
    return _render((i, n - i) for i in range(n))


def inverted_pyramid(n: int) -> str:
    """Upside-down centred pyramid: row i holds 1..2(n-i)-1 after i spaces."""
    return _render((i, 2 * (n - i) - 1) for i in range(n))


def inverted_right_half_pyramid(n: int) -> str:
    """Left-aligned shrinking triangle: row i holds 1..n-i."""
    return _render((0, n - i) for i in range(n))


def left_half_pyramid(n: int) -> str:
    """Right-aligned growing triangle: row i holds 1..i+1 after n-i spaces."""
    return _render((n - i, i + 1) for i in range(n))


def rhombus(n: int) -> str:
    """Slanted rhombus: every row holds 1..n, indented by n-i spaces."""
    return _render((n - i, n) for i in range(n))


PATTERNS: dict[str, Callable[[int], str]] = {
    "full-pyramid": full_pyramid,
    "inverted-left-pyramid": inverted_left_pyramid,
    "inverted-pyramid": inverted_pyramid,
    "inverted-right-half-pyramid": inverted_right_half_pyramid,
    "left-half-pyramid": left_half_pyramid,
    "rhombus": rhombus,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Print the chosen pattern with the given number of rows."""
    parser = argparse.ArgumentParser(description="Print a number pattern.")
    parser.add_argument("pattern", choices=sorted(PATTERNS))
    parser.add_argument("rows", nargs="?", type=int, default=5)
    args = parser.parse_args(argv)
    print(PATTERNS[args.pattern](args.rows), end="")
    return 0
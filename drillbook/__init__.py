"""Classic programming drills: patterns, recursion, arrays, searching, strings and data structures."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "binary_search",
    "doubly_linked_list",
    "linked_list",
    "number_theory",
    "patterns",
    "rearrange",
    "recursion",
    "spacecraft",
    "stacks",
    "strings",
    "sums",
]
"""Basic string exercises: anagrams, odd prefixes, parentheses, word order."""

from __future__ import annotations


def is_anagram(a: str, b: str) -> bool:
    """Tell whether `a` and `b` hold the same characters with the same counts."""
    return sorted(a) == sorted(b)


def largest_odd_prefix(s: str) -> str:
    """Return the longest prefix of `s` whose last character has an odd code.

    For a string of digits this is the largest odd number it starts with;
    the result is empty if there is none.
    """
    end = len(s)
    while end and ord(s[end - 1]) % 2 == 0:
        end -= 1
    return s[:end]


def remove_outer_parentheses(s: str) -> str:
    """Strip the outermost pair from every primitive group of parentheses.

    Characters other than parentheses are dropped.
    """
    result = []
    depth = 0
    for char in s:
        if char == "(":
            if depth > 0:
                result.append(char)
            depth += 1
        elif char == ")":
            if depth > 1:
                result.append(char)
            depth -= 1
    return "".join(result)


def reverse_words(s: str) -> str:
    """Reverse the order of the space-separated words of `s`."""
    return " ".join(reversed(s.split(" ")))
"""Bracket matching plus a bounded circular queue and a bounded stack."""

from __future__ import annotations

from typing import Any

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


def is_valid_brackets(s: str) -> bool:
    """Tell whether every bracket in `s` is closed in the right order.

    Any character that is not an opening bracket is treated as a closer,
    so other characters make the string invalid.
    """
    stack: list[str] = []
    for char in s:
        if char in _OPENERS:
            stack.append(char)
            continue
        if not stack or _PAIRS.get(char) != stack.pop():
            return False
    return not stack


class Queue:
    """First-in first-out queue in a fixed-size circular buffer."""

    def __init__(self, max_size: int = 16) -> None:
        if max_size < 1:
            raise ValueError("max_size must be positive")
        self.max_size = max_size
        self._slots: list[Any] = [None] * max_size
        self._start = 0
        self._size = 0

    def push(self, value: Any) -> None:
        """Add `value` at the back of the queue."""
        if self._size == self.max_size:
            raise OverflowError("Queue is full")
        self._slots[(self._start + self._size) % self.max_size] = value
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the value at the front."""
        if not self._size:
            raise IndexError("Queue Empty")
        value = self._slots[self._start]
        self._slots[self._start] = None
        self._start = (self._start + 1) % self.max_size
        self._size -= 1
        if not self._size:
            self._start = 0
        return value

    def top(self) -> Any:
        """Return the value at the front without removing it."""
        if not self._size:
            raise IndexError("Queue is Empty")
        return self._slots[self._start]

    def __len__(self) -> int:
        return self._size


class Stack:
    """Last-in first-out stack with a fixed capacity."""

    def __init__(self, capacity: int = 1000) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put `value` on top."""
        if len(self._items) == self.capacity:
            raise OverflowError("Stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("Stack is empty")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("Stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)
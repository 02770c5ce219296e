"""A singly linked list of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """One link of a singly linked list."""

    data: Any
    next: Node | None = None


class LinkedList:
    """Singly linked list with insertion at either end and removal of the tail."""

    def __init__(self) -> None:
        self.head: Node | None = None

    @classmethod
    def from_iterable(cls, values: Iterable[Any]) -> LinkedList:
        """Build a list holding `values` in the same order."""
        result = cls()
        for value in values:
            result.insert_at_end(value)
        return result

    def insert_at_beginning(self, data: Any) -> None:
        """Put `data` in front of the current head."""
        self.head = Node(data, self.head)

    def _last_node(self) -> Node | None:
        node = self.head
        if node is None:
            return None
        while node.next is not None:
            node = node.next
        return node

    def insert_at_end(self, data: Any) -> None:
        """Append `data` after the last node."""
        last = self._last_node()
        if last is None:
            self.insert_at_beginning(data)
        else:
            last.next = Node(data)

    def delete_tail(self) -> Any:
        """Remove the last node and return its data."""
        if self.head is None:
            raise IndexError("delete_tail from an empty list")
        if self.head.next is None:
            removed = self.head.data
            self.head = None
            return removed
        node = self.head
        while node.next is not None and node.next.next is not None:
            node = node.next
        assert node.next is not None
        removed = node.next.data
        node.next = None
        return removed

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __contains__(self, value: object) -> bool:
        return any(data == value for data in self)

    def display(self) -> None:
        """Print each value on its own line, or a note if the list is empty."""
        if self.head is None:
            print("Linked list is empty")
            return
        for data in self:
            print(data)
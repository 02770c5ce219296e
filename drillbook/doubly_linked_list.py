"""A doubly linked list of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class DoublyNode:
    """One link of a doubly linked list, pointing both forward and back."""

    data: Any
    next: DoublyNode | None = None
    back: DoublyNode | None = None


class DoublyLinkedList:
    """Doubly linked list with insertion at the tail and removal at either end."""

    def __init__(self) -> None:
        self.head: DoublyNode | None = None

    @classmethod
    def from_iterable(cls, values: Iterable[Any]) -> DoublyLinkedList:
        """Build a list holding `values` in the same order."""
        result = cls()
        previous: DoublyNode | None = None
        for value in values:
            node = DoublyNode(value, None, previous)
            if previous is None:
                result.head = node
            else:
                previous.next = node
            previous = node
        return result

    def _tail(self) -> DoublyNode | None:
        node = self.head
        if node is None:
            return None
        while node.next is not None:
            node = node.next
        return node

    def insert_at_tail(self, data: Any) -> None:
        """Append `data` after the last node."""
        node = DoublyNode(data)
        tail = self._tail()
        if tail is None:
            self.head = node
            return
        tail.next = node
        node.back = tail

    def delete_head(self) -> Any:
        """Remove the first node and return its data; None if the list is empty."""
        head = self.head
        if head is None:
            return None
        self.head = head.next
        if self.head is not None:
            self.head.back = None
        head.next = None
        return head.data

    def delete_tail(self) -> Any:
        """Remove the last node and return its data; None if the list is empty."""
        tail = self._tail()
        if tail is None:
            return None
        new_tail = tail.back
        if new_tail is None:
            self.head = None
        else:
            new_tail.next = None
            tail.back = None
        return tail.data

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail()
        while node is not None:
            yield node.data
            node = node.back

    def __len__(self) -> int:
        return sum(1 for _ in self)
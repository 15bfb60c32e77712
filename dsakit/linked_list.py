"""Doubly linked and circular singly linked lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Optional


class EmptyListError(Exception):
    """Raised when removing from, or indexing into, an empty list."""


class _DoubleNode:
    __slots__ = ("value", "next", "prev")

    def __init__(self, value: int) -> None:
        self.value = value
        self.next: Optional[_DoubleNode] = None
        self.prev: Optional[_DoubleNode] = None


class DoublyLinkedList:
    """A list whose nodes link both to their successor and predecessor."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[_DoubleNode] = None
        self._tail: Optional[_DoubleNode] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def push_front(self, value: int) -> None:
        """Insert ``value`` before the first node."""
        node = _DoubleNode(value)
        node.next = self._head
        if self._head is not None:
            self._head.prev = node
        else:
            self._tail = node
        self._head = node
        self._size += 1

    def push_back(self, value: int) -> None:
        """Append ``value`` after the last node."""
        node = _DoubleNode(value)
        node.prev = self._tail
        if self._tail is not None:
            self._tail.next = node
        else:
            self._head = node
        self._tail = node
        self._size += 1

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{value} <-> " for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"


class _SingleNode:
    __slots__ = ("value", "next")

    def __init__(self, value: int) -> None:
        self.value = value
        self.next: _SingleNode = self


class CircularLinkedList:
    """A singly linked list whose last node links back to the first."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._tail: Optional[_SingleNode] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def _link_first(self, value: int) -> _SingleNode:
        node = _SingleNode(value)
        self._tail = node
        self._size = 1
        return node

    def push_front(self, value: int) -> None:
        """Insert ``value`` as the new first node."""
        if self._tail is None:
            self._link_first(value)
            return
        node = _SingleNode(value)
        node.next = self._tail.next
        self._tail.next = node
        self._size += 1

    def push_back(self, value: int) -> None:
        """Insert ``value`` as the new last node."""
        self.push_front(value)
        if self._size > 1 and self._tail is not None:
            self._tail = self._tail.next

    def insert_after(self, position: int, value: int) -> None:
        """Insert ``value`` after the node at 1-based ``position``.

        Positions past the end wrap around the circle.
        """
        if self._tail is None:
            raise EmptyListError("list is empty")
        if position < 1:
            raise ValueError("position must be at least 1")
        node = self._tail.next
        for _ in range(position - 1):
            node = node.next
        new = _SingleNode(value)
        new.next = node.next
        node.next = new
        if node is self._tail:
            self._tail = new
        self._size += 1

    def pop_front(self) -> int:
        """Remove and return the first value."""
        if self._tail is None:
            raise EmptyListError("list is empty")
        head = self._tail.next
        if head is self._tail:
            self._tail = None
        else:
            self._tail.next = head.next
        self._size -= 1
        return head.value

    def pop_back(self) -> int:
        """Remove and return the last value."""
        if self._tail is None:
            raise EmptyListError("list is empty")
        last = self._tail
        if last.next is last:
            self._tail = None
        else:
            node = last.next
            while node.next is not last:
                node = node.next
            node.next = last.next
            self._tail = node
        self._size -= 1
        return last.value

    def __iter__(self) -> Iterator[int]:
        if self._tail is None:
            return
        node = self._tail.next
        while True:
            yield node.value
            if node is self._tail:
                return
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self)

    def __repr__(self) -> str:
        return f"CircularLinkedList({list(self)!r})"
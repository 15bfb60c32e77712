"""A stack with a fixed capacity."""

from __future__ import annotations

from collections.abc import Iterator


class StackFullError(Exception):
    """Raised when pushing onto a full stack."""


class StackEmptyError(Exception):
    """Raised when popping or peeking an empty stack."""


class BoundedStack:
    """Last-in first-out stack that holds at most ``capacity`` values."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[int] = []

    def push(self, value: int) -> int:
        """Push ``value`` and return the position it was stored at."""
        if len(self._items) >= self.capacity:
            raise StackFullError("stack is full")
        self._items.append(value)
        return len(self._items) - 1

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def peek(self) -> int:
        """Return the top value without removing it."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def __iter__(self) -> Iterator[int]:
        """Yield values from top to bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)
"""A bounded last-in, first-out stack."""

from __future__ import annotations

from typing import Any


class StackOverflow(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflow(Exception):
    """Raised when popping or peeking an empty stack."""


class ArrayStack:
    """A stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        if self.is_full():
            raise StackOverflow(f"stack overflow, cannot push {value!r}")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self.is_empty():
            raise StackUnderflow("stack underflow, cannot pop")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if self.is_empty():
            raise StackUnderflow("stack is empty, cannot peek")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)
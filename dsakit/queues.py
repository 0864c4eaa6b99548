"""First-in, first-out queues: a bounded one and a linked, unbounded one."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any


class QueueFull(Exception):
    """Raised when adding to a full queue."""


class QueueEmpty(Exception):
    """Raised when taking from an empty queue."""


class ArrayQueue:
    """A queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        if self.is_full():
            raise QueueFull(f"queue is full, cannot enqueue {value!r}")
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front item."""
        if self.is_empty():
            raise QueueEmpty("queue is empty, cannot dequeue")
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the front item without removing it."""
        if self.is_empty():
            raise QueueEmpty("queue is empty, cannot peek")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class _Node:
    value: Any
    next: _Node | None = None


class LinkedQueue:
    """An unbounded queue built from singly linked nodes."""

    def __init__(self) -> None:
        self._front: _Node | None = None
        self._rear: _Node | None = None
        self._size = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        node = _Node(value)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the front item."""
        if self._front is None:
            raise QueueEmpty("queue is empty, cannot dequeue")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.value

    def peek(self) -> Any:
        """Return the front item without removing it."""
        if self._front is None:
            raise QueueEmpty("queue is empty, cannot peek")
        return self._front.value

    def is_empty(self) -> bool:
        return self._front is None

    def __len__(self) -> int:
        return self._size
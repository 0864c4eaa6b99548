"""A singly linked list whose last node points back to the first."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class _Node:
    value: Any
    next: _Node | None = None


class CircularList:
    """A circular singly linked list, traversed from ``head`` once round."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            node = _Node(value)
            if self._tail is None:
                self._head = node
            else:
                self._tail.next = node
            self._tail = node
            node.next = self._head
            self._size += 1

    @property
    def head(self) -> Any:
        """The value held by the first node."""
        if self._head is None:
            raise IndexError("the list is empty")
        return self._head.value

    def insert_first(self, value: Any) -> None:
        """Insert ``value`` before the current head and make it the head."""
        node = _Node(value)
        if self._head is None or self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._head
            self._tail.next = node
        self._head = node
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        if node is None:
            return
        while True:
            yield node.value
            node = node.next
            if node is self._head or node is None:
                return

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"CircularList({list(self)!r})"
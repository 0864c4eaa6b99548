"""A singly linked list of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """One link of a :class:`LinkedList`."""

    value: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list whose nodes are reachable from ``head``."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._size = 0
        tail: Node | None = None
        for value in values:
            node = Node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _link_after(self, node: Node, value: Any) -> Node:
        new = Node(value, node.next)
        node.next = new
        self._size += 1
        return new

    def push_front(self, value: Any) -> Node:
        """Insert ``value`` at the beginning and return its node."""
        self.head = Node(value, self.head)
        self._size += 1
        return self.head

    def push_back(self, value: Any) -> Node:
        """Insert ``value`` at the end and return its node."""
        if self.head is None:
            return self.push_front(value)
        last = self.head
        while last.next is not None:
            last = last.next
        return self._link_after(last, value)

    def node_at(self, index: int) -> Node:
        """Return the node at position ``index`` (counting from 0)."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} is out of range")
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node
        raise IndexError(f"index {index} is out of range")

    def insert_after(self, node: Node | None, value: Any) -> Node:
        """Insert ``value`` right after ``node`` and return the new node."""
        if node is None:
            raise ValueError("the given previous node cannot be None")
        if not any(candidate is node for candidate in self._nodes()):
            raise ValueError("the given node does not belong to this list")
        return self._link_after(node, value)

    def insert_at(self, index: int, value: Any) -> Node:
        """Insert ``value`` so that it ends up at position ``index``."""
        if not 0 <= index <= self._size:
            raise IndexError(f"index {index} is out of range")
        if index == 0:
            return self.push_front(value)
        return self._link_after(self.node_at(index - 1), value)

    def pop_front(self) -> Any:
        """Remove the first node and return its value."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        node = self.head
        self.head = node.next
        self._size -= 1
        return node.value

    def pop_back(self) -> Any:
        """Remove the last node and return its value."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        if self.head.next is None:
            return self.pop_front()
        previous = self.head
        end = previous.next
        while end.next is not None:
            previous, end = end, end.next
        previous.next = None
        self._size -= 1
        return end.value

    def remove(self, value: Any) -> bool:
        """Unlink the first node holding ``value``; return whether one was found."""
        previous: Node | None = None
        for node in self._nodes():
            if node.value == value:
                if previous is None:
                    self.head = node.next
                else:
                    previous.next = node.next
                self._size -= 1
                return True
            previous = node
        return False

    def sort(self) -> None:
        """Sort the values in ascending order, keeping the nodes in place."""
        for current in self._nodes():
            index = current.next
            while index is not None:
                if current.value > index.value:
                    current.value, index.value = index.value, current.value
                index = index.next

    def __contains__(self, value: object) -> bool:
        return any(node.value == value for node in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"
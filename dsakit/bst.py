"""Binary tree nodes, traversals and a binary search tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding ``key``."""

    key: Any
    left: TreeNode | None = None
    right: TreeNode | None = None

    def insert_left(self, value: Any) -> TreeNode:
        """Set a new left child holding ``value`` and return it."""
        self.left = TreeNode(value)
        return self.left

    def insert_right(self, value: Any) -> TreeNode:
        """Set a new right child holding ``value`` and return it."""
        self.right = TreeNode(value)
        return self.right


def inorder(node: TreeNode | None) -> Iterator[Any]:
    """Yield keys in left, node, right order."""
    if node is None:
        return
    yield from inorder(node.left)
    yield node.key
    yield from inorder(node.right)


def preorder(node: TreeNode | None) -> Iterator[Any]:
    """Yield keys in node, left, right order."""
    if node is None:
        return
    yield node.key
    yield from preorder(node.left)
    yield from preorder(node.right)


def postorder(node: TreeNode | None) -> Iterator[Any]:
    """Yield keys in left, right, node order."""
    if node is None:
        return
    yield from postorder(node.left)
    yield from postorder(node.right)
    yield node.key


class BinarySearchTree:
    """An unbalanced binary search tree.

    Without ``allow_duplicates`` a key already present is ignored; with it,
    equal keys go into the right subtree.
    """

    def __init__(self, values: Iterable[Any] = (), allow_duplicates: bool = False) -> None:
        self.root: TreeNode | None = None
        self.allow_duplicates = allow_duplicates
        for value in values:
            self.insert(value)

    def insert(self, key: Any) -> bool:
        """Add ``key``; return False when it was ignored as a duplicate."""
        if self.root is None:
            self.root = TreeNode(key)
            return True
        node = self.root
        while True:
            if key == node.key and not self.allow_duplicates:
                return False
            if key < node.key:
                if node.left is None:
                    node.left = TreeNode(key)
                    return True
                node = node.left
            else:
                if node.right is None:
                    node.right = TreeNode(key)
                    return True
                node = node.right

    def delete(self, key: Any) -> bool:
        """Remove one node holding ``key``; return whether one was found."""
        parent: TreeNode | None = None
        node = self.root
        while node is not None and node.key != key:
            parent = node
            node = node.left if key < node.key else node.right
        if node is None:
            return False

        if node.left is None or node.right is None:
            child = node.right if node.left is None else node.left
            if parent is None:
                self.root = child
            elif parent.left is node:
                parent.left = child
            else:
                parent.right = child
            return True

        succ_parent = node
        succ = node.right
        while succ.left is not None:
            succ_parent = succ
            succ = succ.left
        if succ_parent is node:
            succ_parent.right = succ.right
        else:
            succ_parent.left = succ.right
        node.key = succ.key
        return True

    def __contains__(self, key: object) -> bool:
        node = self.root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right  # type: ignore[operator]
        return False

    def __iter__(self) -> Iterator[Any]:
        return inorder(self.root)
"""Binary search trees and searches over sequential tables."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class BSTNode:
    """A node of a binary search tree."""

    key: Any
    lchild: BSTNode | None = field(default=None, repr=False)
    rchild: BSTNode | None = field(default=None, repr=False)


class BinarySearchTree:
    """Binary search tree holding distinct keys."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self.root: BSTNode | None = None
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> bool:
        """Insert *key*; return False if it was already present."""
        if self.root is None:
            self.root = BSTNode(key)
            return True
        node = self.root
        while True:
            if key == node.key:
                return False
            if key < node.key:
                if node.lchild is None:
                    node.lchild = BSTNode(key)
                    return True
                node = node.lchild
            else:
                if node.rchild is None:
                    node.rchild = BSTNode(key)
                    return True
                node = node.rchild

    def search(self, key: Any) -> BSTNode | None:
        """Return the node holding *key*, or None."""
        node = self.root
        while node is not None and node.key != key:
            node = node.lchild if key < node.key else node.rchild
        return node

    def search_recursive(self, key: Any) -> BSTNode | None:
        """Return the node holding *key*, or None, searching recursively."""

        def walk(node: BSTNode | None) -> BSTNode | None:
            if node is None or node.key == key:
                return node
            return walk(node.lchild if key < node.key else node.rchild)

        return walk(self.root)

    def __contains__(self, key: Any) -> bool:
        return self.search(key) is not None

    def __iter__(self) -> Iterator[Any]:
        """Yield the keys in ascending order."""
        pending: list[BSTNode] = []
        node = self.root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.lchild
            node = pending.pop()
            yield node.key
            node = node.rchild


def binary_search(table: Sequence[Any], key: Any) -> int:
    """Return an index of *key* in the ascending *table*, or -1."""
    low, high = 0, len(table) - 1
    while low <= high:
        mid = (low + high) // 2
        if table[mid] == key:
            return mid
        if table[mid] > key:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def sequential_search(table: Sequence[Any], key: Any) -> int:
    """Return the index of the first *key* in *table*, or -1."""
    return next((i for i, item in enumerate(table) if item == key), -1)
"""Singly and doubly linked lists with a head node and 1-based positions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from itertools import takewhile
from typing import Any

END_MARKER = 9999


@dataclass(eq=False)
class Node:
    """A singly linked node."""

    data: Any = None
    next: Node | None = field(default=None, repr=False)


class LinkedList:
    """Singly linked list with a head node."""

    def __init__(self) -> None:
        self.head = Node()

    def _nodes(self) -> Iterator[Node]:
        node = self.head.next
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def get_node(self, position: int) -> Node | None:
        """Return the node at *position*; 0 is the head node, None if out of range."""
        if position < 0:
            return None
        node: Node | None = self.head
        for _ in range(position):
            node = node.next
            if node is None:
                return None
        return node

    def locate(self, value: Any) -> Node | None:
        """Return the first node holding *value*, or None."""
        return next((node for node in self._nodes() if node.data == value), None)

    def insert(self, position: int, value: Any) -> None:
        """Insert *value* so that it becomes the node at *position*."""
        previous = self.get_node(position - 1) if position >= 1 else None
        if previous is None:
            raise IndexError(f"cannot insert at position {position}")
        previous.next = Node(value, previous.next)

    def delete(self, position: int) -> Any:
        """Remove the node at *position* and return its data."""
        previous = self.get_node(position - 1) if position >= 1 else None
        if previous is None or previous.next is None:
            raise IndexError(f"no node at position {position}")
        target = previous.next
        previous.next = target.next
        return target.data

    @classmethod
    def from_head_insert(cls, values: Iterable[Any]) -> LinkedList:
        """Build a list by inserting each value at the front, up to END_MARKER."""
        result = cls()
        for value in takewhile(lambda v: v != END_MARKER, values):
            result.head.next = Node(value, result.head.next)
        return result

    @classmethod
    def from_tail_insert(cls, values: Iterable[Any]) -> LinkedList:
        """Build a list by appending each value, up to END_MARKER."""
        result = cls()
        tail = result.head
        for value in takewhile(lambda v: v != END_MARKER, values):
            tail.next = Node(value)
            tail = tail.next
        return result


@dataclass(eq=False)
class _DNode:
    data: Any = None
    prev: _DNode | None = field(default=None, repr=False)
    next: _DNode | None = field(default=None, repr=False)


class DoublyLinkedList:
    """Doubly linked list with a head node and 1-based positions."""

    def __init__(self) -> None:
        self._head = _DNode()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[_DNode]:
        node = self._head.next
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        tail = self._head
        while tail.next is not None:
            tail = tail.next
        while tail is not self._head:
            yield tail.data
            tail = tail.prev

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"

    def _node_at(self, position: int) -> _DNode:
        node = self._head
        for _ in range(position):
            node = node.next
        return node

    def insert(self, position: int, value: Any) -> None:
        """Insert *value* so that it becomes the node at *position*."""
        if not 1 <= position <= self._size + 1:
            raise IndexError(f"cannot insert at position {position}")
        previous = self._node_at(position - 1)
        node = _DNode(value, previous, previous.next)
        if previous.next is not None:
            previous.next.prev = node
        previous.next = node
        self._size += 1

    def delete(self, position: int) -> Any:
        """Remove the node at *position* and return its data."""
        if not 1 <= position <= self._size:
            raise IndexError(f"no node at position {position}")
        target = self._node_at(position)
        target.prev.next = target.next
        if target.next is not None:
            target.next.prev = target.prev
        self._size -= 1
        return target.data
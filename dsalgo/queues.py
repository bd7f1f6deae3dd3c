"""Circular array queue and linked queue."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

MAX_SIZE = 50


class QueueFullError(OverflowError):
    """Raised when enqueuing onto a full queue."""


class QueueEmptyError(IndexError):
    """Raised when dequeuing from an empty queue."""


class CircularQueue:
    """Ring-buffer queue that keeps one slot free, holding at most max_size - 1 items."""

    def __init__(self, max_size: int = MAX_SIZE) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self._slots: list[Any] = [None] * max_size
        self._front = 0
        self._rear = 0

    def __len__(self) -> int:
        return (self._rear - self._front) % self.max_size

    def is_empty(self) -> bool:
        return self._front == self._rear

    def is_full(self) -> bool:
        return (self._rear + 1) % self.max_size == self._front

    def enqueue(self, value: Any) -> None:
        if self.is_full():
            raise QueueFullError("queue is full")
        self._slots[self._rear] = value
        self._rear = (self._rear + 1) % self.max_size

    def dequeue(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.max_size
        return value


@dataclass(eq=False)
class _LinkNode:
    data: Any = None
    next: _LinkNode | None = field(default=None, repr=False)


class LinkedQueue:
    """Unbounded queue of linked nodes behind a head node."""

    def __init__(self) -> None:
        self._front = self._rear = _LinkNode()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._front is self._rear

    def enqueue(self, value: Any) -> None:
        node = _LinkNode(value)
        self._rear.next = node
        self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        node = self._front.next
        self._front.next = node.next
        if self._rear is node:
            self._rear = self._front
        self._size -= 1
        return node.data
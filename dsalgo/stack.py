"""Sequential and linked stacks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

MAX_SIZE = 50


class StackFullError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackEmptyError(IndexError):
    """Raised when reading from an empty stack."""


class SeqStack:
    """Stack stored in a block of fixed capacity."""

    def __init__(self, capacity: int = MAX_SIZE) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def push(self, value: Any) -> None:
        if len(self._items) >= self.capacity:
            raise StackFullError("stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def top(self) -> Any:
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[-1]


@dataclass(eq=False)
class _LinkNode:
    data: Any
    next: _LinkNode | None = field(default=None, repr=False)


class LinkedStack:
    """Unbounded stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: _LinkNode | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._top is None

    def push(self, value: Any) -> None:
        self._top = _LinkNode(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        if self._top is None:
            raise StackEmptyError("stack is empty")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.data

    def top(self) -> Any:
        if self._top is None:
            raise StackEmptyError("stack is empty")
        return self._top.data
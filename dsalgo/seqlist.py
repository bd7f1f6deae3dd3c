"""Sequential list of fixed capacity addressed by 1-based positions."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

MAX_SIZE = 100


class SeqList:
    """A contiguous list with a fixed capacity; positions start at 1."""

    def __init__(self, capacity: int = MAX_SIZE) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"SeqList({self._items!r}, capacity={self.capacity})"

    def _check_position(self, position: int) -> None:
        if not 1 <= position <= len(self._items):
            raise IndexError(f"position {position} out of range 1..{len(self._items)}")

    def __getitem__(self, position: int) -> Any:
        """Return the element at 1-based *position*."""
        self._check_position(position)
        return self._items[position - 1]

    def insert(self, position: int, value: Any) -> None:
        """Insert *value* so that it ends up at 1-based *position*."""
        if not 1 <= position <= len(self._items) + 1:
            raise IndexError(f"position {position} out of range 1..{len(self._items) + 1}")
        if len(self._items) >= self.capacity:
            raise OverflowError("list is full")
        self._items.insert(position - 1, value)

    def delete(self, position: int) -> Any:
        """Remove and return the element at 1-based *position*."""
        self._check_position(position)
        return self._items.pop(position - 1)

    def locate(self, value: Any) -> int:
        """Return the 1-based position of the first *value*, or 0 if absent."""
        for position, item in enumerate(self._items, start=1):
            if item == value:
                return position
        return 0
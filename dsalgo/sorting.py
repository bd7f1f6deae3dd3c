"""In-place comparison sorts over mutable sequences."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any


def bubble_sort(items: MutableSequence[Any]) -> None:
    """Sort *items* in place, stopping early once a pass makes no swap."""
    n = len(items)
    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break


def insert_sort(items: MutableSequence[Any]) -> None:
    """Sort *items* in place by straight insertion."""
    for i in range(1, len(items)):
        current = items[i]
        if current < items[i - 1]:
            j = i - 1
            while j >= 0 and items[j] > current:
                items[j + 1] = items[j]
                j -= 1
            items[j + 1] = current


def shell_sort(items: MutableSequence[Any]) -> None:
    """Sort *items* in place with gaps halving from n // 2."""
    n = len(items)
    gap = n // 2
    while gap >= 1:
        for i in range(gap, n):
            current = items[i]
            if current < items[i - gap]:
                j = i - gap
                while j >= 0 and current < items[j]:
                    items[j + gap] = items[j]
                    j -= gap
                items[j + gap] = current
        gap //= 2


def partition(items: MutableSequence[Any], low: int, high: int) -> int:
    """Partition items[low..high] around items[low]; return the pivot's final index."""
    pivot = items[low]
    while low < high:
        while low < high and items[high] >= pivot:
            high -= 1
        items[low] = items[high]
        while low < high and items[low] <= pivot:
            low += 1
        items[high] = items[low]
    items[low] = pivot
    return low


def quick_sort(items: MutableSequence[Any], low: int = 0, high: int | None = None) -> None:
    """Sort items[low..high] in place; *high* defaults to the last index."""
    if high is None:
        high = len(items) - 1
    while low < high:
        pivot = partition(items, low, high)
        if pivot - low < high - pivot:
            quick_sort(items, low, pivot - 1)
            low = pivot + 1
        else:
            quick_sort(items, pivot + 1, high)
            high = pivot - 1


def select_sort(items: MutableSequence[Any]) -> None:
    """Sort *items* in place by repeated selection of the minimum."""
    n = len(items)
    for i in range(n - 1):
        smallest = min(range(i, n), key=items.__getitem__)
        if smallest != i:
            items[i], items[smallest] = items[smallest], items[i]
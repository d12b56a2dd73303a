"""Classic comparison sorts, each returning a new sorted list."""

from collections.abc import Iterable
from typing import Any


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and items[j] > current:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def _partition(items: list[Any], low: int, high: int) -> int:
    """Partition ``items[low:high + 1]`` around its last element."""
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Quicksort with the last element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot_index = _partition(items, low, high)
        pending.append((low, pivot_index - 1))
        pending.append((pivot_index + 1, high))
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Repeatedly move the smallest remaining element to the front."""
    items = list(values)
    size = len(items)
    for i in range(size - 1):
        smallest = min(range(i, size), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Swap adjacent out-of-order pairs, one pass per element."""
    items = list(values)
    size = len(items)
    for i in range(size - 1):
        for j in range(size - i - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def shell_sort(values: Iterable[Any]) -> list[Any]:
    """Shell sort with a gap sequence halving from ``n // 2`` down to 1."""
    items = list(values)
    gap = len(items) // 2
    while gap >= 1:
        for i in range(gap, len(items)):
            current = items[i]
            j = i - gap
            while j >= 0 and items[j] > current:
                items[j + gap] = items[j]
                j -= gap
            items[j + gap] = current
        gap //= 2
    return items


def sort_string(text: str) -> str:
    """Return the characters of ``text`` in ascending order."""
    return "".join(sorted(text))
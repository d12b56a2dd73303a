"""Searching a sequence for a value."""

from collections.abc import Sequence
from typing import Any


def binary_search(values: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in the ascending ``values``, or None."""
    first, last = 0, len(values) - 1
    while first <= last:
        middle = (first + last) // 2
        candidate = values[middle]
        if candidate == target:
            return middle
        if candidate > target:
            last = middle - 1
        else:
            first = middle + 1
    return None


def linear_search(values: Sequence[Any], target: Any) -> int | None:
    """Return the index of the first element equal to ``target``, or None."""
    return next((index for index, value in enumerate(values) if value == target), None)
"""A bounded FIFO queue and a LIFO stack."""

from collections import deque
from collections.abc import Iterator
from typing import Any


class QueueFull(Exception):
    """Raised when enqueueing onto a full queue."""


class QueueEmpty(IndexError):
    """Raised when dequeueing from an empty queue."""


class StackUnderflow(IndexError):
    """Raised when popping or peeking an empty stack."""


class BoundedQueue:
    """A first-in first-out queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def enqueue(self, item: Any) -> None:
        if len(self._items) >= self.capacity:
            raise QueueFull("queue is full")
        self._items.append(item)

    def dequeue(self) -> Any:
        if not self._items:
            raise QueueEmpty("queue is empty")
        return self._items.popleft()

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to rear."""
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)


class Stack:
    """A last-in first-out stack."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        self._items.append(item)

    def pop(self) -> Any:
        if not self._items:
            raise StackUnderflow("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        if not self._items:
            raise StackUnderflow("stack is empty")
        return self._items[-1]

    def __iter__(self) -> Iterator[Any]:
        """Iterate from top to bottom."""
        return reversed(list(self._items))

    def __len__(self) -> int:
        return len(self._items)
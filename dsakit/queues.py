"""First-in first-out queues: a linked one and a growing ring buffer."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class LinkedQueue:
    """An unbounded queue."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def enqueue(self, element: Any) -> None:
        """Add ``element`` at the back."""
        self._items.append(element)

    def front(self) -> Any:
        """Return the element at the front; raise IndexError if empty."""
        if not self._items:
            raise IndexError("front of an empty queue")
        return self._items[0]

    def dequeue(self) -> Any:
        """Remove and return the element at the front; raise IndexError if empty."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()


class DynamicQueue:
    """A queue in a circular buffer that doubles its capacity when full."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._slots: list[Any] = [None] * capacity
        self._first = 0
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        capacity = len(self._slots)
        return (self._slots[(self._first + i) % capacity] for i in range(self._size))

    @property
    def capacity(self) -> int:
        """The number of elements the buffer holds before it grows."""
        return len(self._slots)

    def enqueue(self, element: Any) -> None:
        """Add ``element`` at the back, doubling the buffer if it is full."""
        if self._size == len(self._slots):
            grown = list(self)
            self._slots = grown + [None] * len(grown)
            self._first = 0
        self._slots[(self._first + self._size) % len(self._slots)] = element
        self._size += 1

    def front(self) -> Any:
        """Return the element at the front; raise IndexError if empty."""
        if not self._size:
            raise IndexError("front of an empty queue")
        return self._slots[self._first]

    def dequeue(self) -> Any:
        """Remove and return the element at the front; raise IndexError if empty."""
        if not self._size:
            raise IndexError("dequeue from an empty queue")
        element = self._slots[self._first]
        self._slots[self._first] = None
        self._first = (self._first + 1) % len(self._slots)
        self._size -= 1
        if not self._size:
            self._first = 0
        return element
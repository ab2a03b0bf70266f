"""First-in, first-out queues: bounded, unbounded and built from two stacks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from itertools import chain
from typing import Any

from .stack import Stack, StackFullError

DEFAULT_ARRAY_CAPACITY = 5
DEFAULT_STACK_CAPACITY = 100


class QueueFullError(OverflowError):
    """Raised when enqueueing onto a queue that is at capacity."""


class QueueEmptyError(IndexError):
    """Raised when dequeueing or peeking an empty queue."""


class ArrayQueue:
    """A FIFO queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_ARRAY_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back of the queue."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the value at the front without removing it."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to back."""
        return iter(list(self._items))


class LinkedQueue:
    """An unbounded FIFO queue."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back of the queue."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the value at the front without removing it."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to back."""
        return iter(list(self._items))


class StackQueue:
    """A FIFO queue built from two bounded stacks.

    New values go onto an inbox stack; dequeueing drains the inbox into an
    outbox stack only when the outbox is empty, so order is preserved.
    """

    def __init__(self, capacity: int = DEFAULT_STACK_CAPACITY) -> None:
        self._inbox = Stack(capacity)
        self._outbox = Stack(capacity)

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back of the queue."""
        try:
            self._inbox.push(value)
        except StackFullError as exc:
            raise QueueFullError("queue is full") from exc

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        if self._outbox.is_empty():
            while not self._inbox.is_empty():
                self._outbox.push(self._inbox.pop())
        return self._outbox.pop()

    def is_empty(self) -> bool:
        return self._inbox.is_empty() and self._outbox.is_empty()

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to back."""
        return chain(reversed(list(self._outbox)), list(self._inbox))
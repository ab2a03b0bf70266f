"""A circular singly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class _Node:
    value: Any
    next: Optional["_Node"] = None


class CircularLinkedList:
    """A singly linked list whose last node points back to the first."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add ``value`` after the last node, closing the ring again."""
        node = _Node(value)
        if self._tail is None:
            node.next = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._tail = node
        self._size += 1

    def cycle(self) -> Iterator[Any]:
        """Yield values round the ring endlessly, starting at the first."""
        if self._tail is None:
            return
        node = self._tail.next
        while True:
            yield node.value
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        """Yield each value once, from the first to the last."""
        if self._tail is None:
            return
        head = self._tail.next
        node = head
        while True:
            yield node.value
            node = node.next
            if node is head:
                break

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"CircularLinkedList({list(self)!r})"
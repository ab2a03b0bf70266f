"""A singly linked list with positional editing, reversal and sorting."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One cell of a singly linked list."""

    value: Any
    next: Optional["Node"] = None


def _split(head: Node) -> tuple[Node, Optional[Node]]:
    """Cut the chain at its middle and return both halves."""
    slow = head
    fast = head.next
    while fast is not None:
        fast = fast.next
        if fast is not None:
            slow = slow.next
            fast = fast.next
    second = slow.next
    slow.next = None
    return head, second


def _merge(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Merge two sorted chains, taking from ``first`` on ties."""
    anchor = Node(None)
    last = anchor
    while first is not None and second is not None:
        if first.value <= second.value:
            last.next, first = first, first.next
        else:
            last.next, second = second, second.next
        last = last.next
    last.next = first if first is not None else second
    return anchor.next


def _merge_sort(head: Optional[Node]) -> Optional[Node]:
    if head is None or head.next is None:
        return head
    first, second = _split(head)
    return _merge(_merge_sort(first), _merge_sort(second))


class SinglyLinkedList:
    """A singly linked list of values.

    ``insert`` and ``delete`` take 1-based positions; ``swap`` takes
    0-based indexes.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    @property
    def head(self) -> Optional[Node]:
        """The first node, or None when the list is empty."""
        return self._head

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> Node:
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node
        raise IndexError(f"index {index} out of range")

    def append(self, value: Any) -> None:
        """Add ``value`` at the end of the list."""
        node = Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert(self, value: Any, position: int) -> None:
        """Insert ``value`` so that it becomes the node at 1-based ``position``."""
        if not 1 <= position <= self._size + 1:
            raise IndexError(f"invalid position {position}")
        node = Node(value)
        if position == 1:
            node.next = self._head
            self._head = node
        else:
            previous = self._node_at(position - 2)
            node.next = previous.next
            previous.next = node
        if node.next is None:
            self._tail = node
        self._size += 1

    def delete(self, position: int) -> Any:
        """Remove the node at 1-based ``position`` and return its value."""
        if not 1 <= position <= self._size:
            raise IndexError(f"invalid position {position}")
        if position == 1:
            removed = self._head
            self._head = removed.next
            if self._head is None:
                self._tail = None
        else:
            previous = self._node_at(position - 2)
            removed = previous.next
            previous.next = removed.next
            if previous.next is None:
                self._tail = previous
        self._size -= 1
        return removed.value

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous: Optional[Node] = None
        node = self._head
        self._tail = node
        while node is not None:
            node.next, previous, node = previous, node, node.next
        self._head = previous

    def reversed_values(self) -> list[Any]:
        """Return the values from last to first, leaving the list unchanged."""
        values = list(self)
        values.reverse()
        return values

    def bubble_sort(self) -> None:
        """Sort the values in place by exchanging them between nodes."""
        for current in self._nodes():
            other = current.next
            while other is not None:
                if current.value > other.value:
                    current.value, other.value = other.value, current.value
                other = other.next

    def merge_sort(self) -> None:
        """Sort the list stably in place by relinking its nodes."""
        self._head = _merge_sort(self._head)
        self._tail = None
        for node in self._nodes():
            self._tail = node

    def swap(self, i: int, j: int) -> None:
        """Exchange the values at 0-based indexes ``i`` and ``j``."""
        for index in (i, j):
            if not 0 <= index < self._size:
                raise IndexError(f"index {index} out of range")
        first = self._node_at(i)
        second = self._node_at(j)
        first.value, second.value = second.value, first.value

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"
"""A Fenwick (binary indexed) tree for prefix and range sums."""

from __future__ import annotations


class FenwickTree:
    """Point additions and range sums over ``size`` slots, all starting at 0."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._bits = [0] * (size + 1)

    def add(self, index: int, value: int) -> None:
        """Add ``value`` to the slot at 0-based ``index``."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range")
        position = index + 1
        while position <= self._size:
            self._bits[position] += value
            position += position & -position

    def prefix_sum(self, index: int) -> int:
        """Return the sum of slots 0..``index`` inclusive; -1 gives 0."""
        if not -1 <= index < self._size:
            raise IndexError(f"index {index} out of range")
        position = index + 1
        total = 0
        while position > 0:
            total += self._bits[position]
            position -= position & -position
        return total

    def range_sum(self, left: int, right: int) -> int:
        """Return the sum of slots ``left``..``right`` inclusive."""
        if left > right:
            raise ValueError("left must not exceed right")
        if left < 0:
            raise IndexError(f"index {left} out of range")
        return self.prefix_sum(right) - self.prefix_sum(left - 1)

    def __len__(self) -> int:
        return self._size
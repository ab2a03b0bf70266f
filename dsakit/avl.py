"""A self-balancing AVL tree used as an ordered set with rank queries."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import chain
from typing import Any, Optional


@dataclass(eq=False)
class _Node:
    value: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None
    height: int = 1
    size: int = 1


def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else 0


def _size(node: Optional[_Node]) -> int:
    return node.size if node is not None else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))
    node.size = 1 + _size(node.left) + _size(node.right)


def _rotate(root: _Node, right: bool) -> _Node:
    if right:
        new_root = root.left
        root.left = new_root.right
        new_root.right = root
    else:
        new_root = root.right
        root.right = new_root.left
        new_root.left = root
    _update(root)
    _update(new_root)
    return new_root


def _balance(root: _Node) -> _Node:
    balance = _height(root.left) - _height(root.right)
    if balance > 1:
        child = root.left
        if _height(child.left) < _height(child.right):
            root.left = _rotate(child, right=False)
        return _rotate(root, right=True)
    if balance < -1:
        child = root.right
        if _height(child.right) < _height(child.left):
            root.right = _rotate(child, right=True)
        return _rotate(root, right=False)
    _update(root)
    return root


def _max_value(node: _Node) -> Any:
    while node.right is not None:
        node = node.right
    return node.value


def _insert(root: Optional[_Node], value: Any) -> _Node:
    if root is None:
        return _Node(value)
    if value < root.value:
        root.left = _insert(root.left, value)
    elif value > root.value:
        root.right = _insert(root.right, value)
    return _balance(root)


def _erase(root: Optional[_Node], value: Any) -> Optional[_Node]:
    if root is None:
        return None
    if value < root.value:
        root.left = _erase(root.left, value)
    elif value > root.value:
        root.right = _erase(root.right, value)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        predecessor = _max_value(root.left)
        root.left = _erase(root.left, predecessor)
        root.value = predecessor
    return _balance(root)


def _preorder(node: Optional[_Node]) -> Iterator[Any]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: Optional[_Node]) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _postorder(node: Optional[_Node]) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


class AVLTree:
    """An ordered set of distinct values kept height-balanced."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def insert(self, value: Any) -> None:
        """Add ``value``; a value already present is left alone."""
        self._root = _insert(self._root, value)

    def erase(self, value: Any) -> None:
        """Remove ``value`` if present."""
        self._root = _erase(self._root, value)

    def __contains__(self, value: Any) -> bool:
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False

    def kth(self, index: int) -> Any:
        """Return the value at 0-based ``index`` in ascending order."""
        if not 0 <= index < len(self):
            raise IndexError(f"index {index} out of range")
        node = self._root
        while True:
            left_size = _size(node.left)
            if index < left_size:
                node = node.left
            elif index > left_size:
                index -= left_size + 1
                node = node.right
            else:
                return node.value

    def rank(self, value: Any) -> int:
        """Return how many stored values are less than ``value``."""
        count = 0
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                count += _size(node.left) + 1
                node = node.right
            else:
                return count + _size(node.left)
        return count

    def minimum(self) -> Any:
        """Return the smallest value."""
        node = self._root
        if node is None:
            raise ValueError("tree is empty")
        while node.left is not None:
            node = node.left
        return node.value

    def maximum(self) -> Any:
        """Return the largest value."""
        if self._root is None:
            raise ValueError("tree is empty")
        return _max_value(self._root)

    def preorder(self) -> list[Any]:
        return list(_preorder(self._root))

    def inorder(self) -> list[Any]:
        return list(_inorder(self._root))

    def postorder(self) -> list[Any]:
        return list(_postorder(self._root))

    def height(self) -> int:
        """Return the number of levels in the tree; 0 when empty."""
        return _height(self._root)

    def __len__(self) -> int:
        return _size(self._root)

    def __repr__(self) -> str:
        return f"AVLTree({self.inorder()!r})"


def run_queries(lines: Iterable[str]) -> list[str]:
    """Run a query script and return its output lines.

    The script starts with the number of queries, followed by that many
    pairs ``op n``: ``I`` inserts, ``D`` erases, ``K`` asks for the n-th
    smallest value (1-based, ``invalid`` when out of range) and any other
    op asks for the count of values less than n.
    """
    tokens = iter(list(chain.from_iterable(line.split() for line in lines)))
    first = next(tokens, None)
    if first is None:
        return []
    count = int(first)
    tree = AVLTree()
    output: list[str] = []
    for _ in range(count):
        try:
            op = next(tokens)
            number = int(next(tokens))
        except StopIteration:
            raise ValueError("query script ended early") from None
        if op == "I":
            tree.insert(number)
        elif op == "D":
            tree.erase(number)
        elif op == "K":
            if 1 <= number <= len(tree):
                output.append(str(tree.kth(number - 1)))
            else:
                output.append("invalid")
        else:
            output.append(str(tree.rank(number)))
    return output


def main(argv: Optional[list[str]] = None) -> int:
    """Read an order-statistics query script from standard input."""
    parser = argparse.ArgumentParser(
        description="Answer insert/delete/k-th/count queries on an ordered set."
    )
    parser.parse_args(argv)
    for line in run_queries(sys.stdin):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
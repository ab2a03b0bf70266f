"""Plain binary tree nodes with depth-first traversals and the bottom view."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    value: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def _preorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _postorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


def preorder(root: Optional[TreeNode]) -> list[Any]:
    """Return values in root, left, right order."""
    return list(_preorder(root))


def inorder(root: Optional[TreeNode]) -> list[Any]:
    """Return values in left, root, right order."""
    return list(_inorder(root))


def postorder(root: Optional[TreeNode]) -> list[Any]:
    """Return values in left, right, root order."""
    return list(_postorder(root))


def bottom_view(root: Optional[TreeNode]) -> list[Any]:
    """Return the values seen from below, from leftmost to rightmost column.

    Where several nodes share a column, the one reached last in a
    level-order walk is the one seen.
    """
    if root is None:
        return []
    columns: dict[int, Any] = {}
    pending: deque[tuple[TreeNode, int]] = deque([(root, 0)])
    while pending:
        node, column = pending.popleft()
        columns[column] = node.value
        if node.left is not None:
            pending.append((node.left, column - 1))
        if node.right is not None:
            pending.append((node.right, column + 1))
    return [columns[column] for column in sorted(columns)]
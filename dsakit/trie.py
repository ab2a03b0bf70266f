"""A prefix tree of ASCII strings."""

from __future__ import annotations

from dataclasses import dataclass, field

ALPHABET_SIZE = 128


@dataclass(eq=False)
class _Node:
    is_end: bool = False
    children: dict[str, "_Node"] = field(default_factory=dict)


class Trie:
    """A set of ASCII strings stored by shared prefixes."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, key: str) -> None:
        """Add ``key``; it must contain only ASCII characters."""
        if any(ord(char) >= ALPHABET_SIZE for char in key):
            raise ValueError("keys must be ASCII")
        node = self._root
        for char in key:
            node = node.children.setdefault(char, _Node())
        node.is_end = True

    def search(self, key: str) -> bool:
        """Return True if ``key`` was inserted and not deleted since."""
        node = self._root
        for char in key:
            node = node.children.get(char)
            if node is None:
                return False
        return node.is_end

    def delete(self, key: str) -> bool:
        """Remove ``key`` and prune nodes no longer needed.

        Returns True if the key was present.
        """
        path = [self._root]
        for char in key:
            child = path[-1].children.get(char)
            if child is None:
                return False
            path.append(child)
        if not path[-1].is_end:
            return False
        path[-1].is_end = False
        for char, parent, child in reversed(list(zip(key, path, path[1:]))):
            if child.is_end or child.children:
                break
            del parent.children[char]
        return True

    def is_empty(self) -> bool:
        """Return True when no keys are stored."""
        return not self._root.children and not self._root.is_end

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.search(key)
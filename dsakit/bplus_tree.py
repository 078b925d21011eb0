"""A B+ tree of integer keys with linked leaves."""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

DEFAULT_MAX_KEYS = 3


@dataclass(eq=False)
class _Node:
    is_leaf: bool
    keys: list[int] = field(default_factory=list)
    children: list[_Node] = field(default_factory=list, repr=False)
    next: _Node | None = field(default=None, repr=False)


def _render(node: _Node) -> Iterator[str]:
    yield " ".join(str(key) for key in node.keys)
    if not node.is_leaf:
        for child in node.children:
            yield from _render(child)


class BPlusTree:
    """A B+ tree whose nodes hold at most ``max_keys`` keys."""

    def __init__(self, keys: Iterable[int] = (), max_keys: int = DEFAULT_MAX_KEYS) -> None:
        if max_keys < 2:
            raise ValueError("max_keys must be at least 2")
        self.max_keys = max_keys
        self.root: _Node | None = None
        for key in keys:
            self.insert(key)

    def _descend(self, key: int) -> tuple[_Node, list[_Node]]:
        assert self.root is not None
        path: list[_Node] = []
        node = self.root
        while not node.is_leaf:
            path.append(node)
            node = node.children[bisect.bisect_right(node.keys, key)]
        return node, path

    def search(self, key: int) -> bool:
        """Tell whether ``key`` is stored in the tree."""
        if self.root is None:
            return False
        leaf, _ = self._descend(key)
        return key in leaf.keys

    def insert(self, key: int) -> None:
        """Add ``key``, splitting full nodes on the way back up."""
        if self.root is None:
            self.root = _Node(True, [key])
            return
        leaf, path = self._descend(key)
        bisect.insort_left(leaf.keys, key)
        if len(leaf.keys) <= self.max_keys:
            return
        half = (self.max_keys + 1) // 2
        sibling = _Node(True, leaf.keys[half:], next=leaf.next)
        leaf.keys = leaf.keys[:half]
        leaf.next = sibling
        self._insert_into_parent(leaf, sibling.keys[0], sibling, path)

    def _insert_into_parent(
        self, left: _Node, key: int, right: _Node, path: list[_Node]
    ) -> None:
        half = (self.max_keys + 1) // 2
        while path:
            parent = path.pop()
            index = bisect.bisect_left(parent.keys, key)
            parent.keys.insert(index, key)
            parent.children.insert(index + 1, right)
            if len(parent.keys) <= self.max_keys:
                return
            sibling = _Node(False, parent.keys[half + 1 :], parent.children[half + 1 :])
            key = parent.keys[half]
            parent.keys = parent.keys[:half]
            parent.children = parent.children[: half + 1]
            left, right = parent, sibling
        self.root = _Node(False, [key], [left, right])

    def render(self) -> str:
        """List each node's keys on its own line, parents before their children."""
        if self.root is None:
            return ""
        return "\n".join(_render(self.root))
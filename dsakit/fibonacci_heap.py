"""A Fibonacci min-heap of integer keys."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(eq=False)
class _FibNode:
    key: int
    parent: _FibNode | None = field(default=None, repr=False)
    children: list[_FibNode] = field(default_factory=list, repr=False)
    mark: bool = False


class FibonacciHeap:
    """A min-heap with cheap insertion and key decrease."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._roots: list[_FibNode] = []
        self._min: _FibNode | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def _index(self, node: _FibNode) -> int:
        return next(i for i, root in enumerate(self._roots) if root is node)

    def _add_root(self, node: _FibNode) -> None:
        """Splice ``node`` into the root ring just before the minimum."""
        node.parent = None
        if self._min is None:
            self._roots.append(node)
            self._min = node
            return
        self._roots.insert(self._index(self._min), node)
        if node.key < self._min.key:
            self._min = node

    def _find(self, value: int) -> _FibNode | None:
        pending = list(self._roots)
        while pending:
            node = pending.pop()
            if node.key == value:
                return node
            pending.extend(node.children)
        return None

    def _cut(self, node: _FibNode, parent: _FibNode) -> None:
        parent.children.remove(node)
        self._add_root(node)
        node.mark = False

    def _cascading_cut(self, node: _FibNode) -> None:
        parent = node.parent
        while parent is not None:
            if not node.mark:
                node.mark = True
                return
            self._cut(node, parent)
            node, parent = parent, parent.parent

    def _consolidate(self, nodes: list[_FibNode]) -> None:
        by_degree: dict[int, _FibNode] = {}
        for x in nodes:
            degree = len(x.children)
            while degree in by_degree:
                y = by_degree.pop(degree)
                if x.key > y.key:
                    x, y = y, x
                y.parent = x
                y.mark = False
                x.children.append(y)
                degree += 1
            by_degree[degree] = x
        self._roots = []
        self._min = None
        for degree in sorted(by_degree):
            self._add_root(by_degree[degree])

    def insert(self, value: int) -> None:
        """Add ``value`` as a new root."""
        self._add_root(_FibNode(value))
        self._size += 1

    def minimum(self) -> int:
        """Return the smallest key; raise IndexError on an empty heap."""
        if self._min is None:
            raise IndexError("heap is empty")
        return self._min.key

    def extract_min(self) -> int:
        """Remove and return the smallest key; raise IndexError on an empty heap."""
        z = self._min
        if z is None:
            raise IndexError("heap is empty")
        for child in z.children:
            self._roots.insert(self._index(z), child)
            child.parent = None
        z.children = []
        position = self._index(z)
        rest = self._roots[position + 1 :] + self._roots[:position]
        self._size -= 1
        if rest:
            self._consolidate(rest)
        else:
            self._roots = []
            self._min = None
        return z.key

    def decrease_key(self, old: int, new: int) -> None:
        """Lower a node holding ``old`` to ``new``.

        Raises KeyError when no node holds ``old`` and ValueError when ``new``
        is greater than ``old``.
        """
        node = self._find(old)
        if node is None:
            raise KeyError(old)
        if new > node.key:
            raise ValueError("new key is greater than current key")
        node.key = new
        parent = node.parent
        if parent is not None and node.key < parent.key:
            self._cut(node, parent)
            self._cascading_cut(parent)
        assert self._min is not None
        if node.key < self._min.key:
            self._min = node

    def delete(self, value: int) -> None:
        """Remove a node holding ``value``; raise KeyError when there is none."""
        node = self._find(value)
        if node is None:
            raise KeyError(value)
        parent = node.parent
        if parent is not None:
            self._cut(node, parent)
            self._cascading_cut(parent)
        self._min = node
        self.extract_min()

    def roots(self) -> list[int]:
        """Return the root keys in ring order, starting at the minimum."""
        if self._min is None:
            return []
        position = self._index(self._min)
        ordered = self._roots[position:] + self._roots[:position]
        return [node.key for node in ordered]

    def __len__(self) -> int:
        return self._size
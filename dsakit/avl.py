"""A self-balancing AVL binary search tree of distinct keys."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class _AVLNode:
    key: int
    left: _AVLNode | None = field(default=None, repr=False)
    right: _AVLNode | None = field(default=None, repr=False)
    height: int = 1


def _height(node: _AVLNode | None) -> int:
    return node.height if node is not None else 0


def _update(node: _AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: _AVLNode | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(y: _AVLNode) -> _AVLNode:
    x = y.left
    assert x is not None
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: _AVLNode) -> _AVLNode:
    y = x.right
    assert y is not None
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _insert(node: _AVLNode | None, key: int) -> _AVLNode:
    if node is None:
        return _AVLNode(key)
    if key < node.key:
        node.left = _insert(node.left, key)
    elif key > node.key:
        node.right = _insert(node.right, key)
    else:
        return node

    _update(node)
    balance = _balance(node)
    if balance > 1:
        assert node.left is not None
        if key < node.left.key:
            return _rotate_right(node)
        if key > node.left.key:
            node.left = _rotate_left(node.left)
            return _rotate_right(node)
    if balance < -1:
        assert node.right is not None
        if key > node.right.key:
            return _rotate_left(node)
        if key < node.right.key:
            node.right = _rotate_right(node.right)
            return _rotate_left(node)
    return node


def _minimum(node: _AVLNode) -> _AVLNode:
    while node.left is not None:
        node = node.left
    return node


def _delete(node: _AVLNode | None, key: int) -> _AVLNode | None:
    if node is None:
        return None
    if key < node.key:
        node.left = _delete(node.left, key)
    elif key > node.key:
        node.right = _delete(node.right, key)
    elif node.left is None or node.right is None:
        return node.left if node.left is not None else node.right
    else:
        successor = _minimum(node.right)
        node.key = successor.key
        node.right = _delete(node.right, successor.key)

    _update(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) >= 0:
            return _rotate_right(node)
        assert node.left is not None
        node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) <= 0:
            return _rotate_left(node)
        assert node.right is not None
        node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _render(node: _AVLNode | None, indent: str, last: bool) -> Iterator[str]:
    if node is None:
        return
    if last:
        yield f"{indent}R----{node.key}"
        indent += "   "
    else:
        yield f"{indent}L----{node.key}"
        indent += "|  "
    yield from _render(node.left, indent, False)
    yield from _render(node.right, indent, True)


class AVLTree:
    """A height-balanced search tree; inserting a present key does nothing."""

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self.root: _AVLNode | None = None
        for key in keys:
            self.insert(key)

    def insert(self, key: int) -> None:
        """Add ``key`` and rebalance."""
        self.root = _insert(self.root, key)

    def delete(self, key: int) -> None:
        """Remove ``key`` if present and rebalance."""
        self.root = _delete(self.root, key)

    def __contains__(self, key: object) -> bool:
        node = self.root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right  # type: ignore[operator]
        return False

    def __iter__(self) -> Iterator[int]:
        """Iterate over the keys in ascending order."""
        stack: list[_AVLNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def render(self) -> str:
        """Draw the tree one node per line, left subtrees before right ones."""
        return "\n".join(_render(self.root, "", True))
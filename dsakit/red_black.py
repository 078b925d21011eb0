"""A red-black binary search tree of integer keys."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class _RBNode:
    key: int
    red: bool = True
    parent: _RBNode | None = field(default=None, repr=False)
    left: _RBNode | None = field(default=None, repr=False)
    right: _RBNode | None = field(default=None, repr=False)


class RedBlackTree:
    """A balanced search tree; equal keys are kept and go to the right."""

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self._nil = _RBNode(0, red=False)
        self._root: _RBNode = self._nil
        for key in keys:
            self.insert(key)

    # -- rotations and repairs -------------------------------------------------

    def _rotate_left(self, x: _RBNode) -> None:
        y = x.right
        assert y is not None
        x.right = y.left
        if y.left is not self._nil:
            y.left.parent = x  # type: ignore[union-attr]
        y.parent = x.parent
        if x.parent is None:
            self._root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _rotate_right(self, x: _RBNode) -> None:
        y = x.left
        assert y is not None
        x.left = y.right
        if y.right is not self._nil:
            y.right.parent = x  # type: ignore[union-attr]
        y.parent = x.parent
        if x.parent is None:
            self._root = y
        elif x is x.parent.right:
            x.parent.right = y
        else:
            x.parent.left = y
        y.right = x
        x.parent = y

    def _insert_fix(self, k: _RBNode) -> None:
        while k.parent is not None and k.parent.red:
            parent = k.parent
            grand = parent.parent
            assert grand is not None
            if parent is grand.right:
                uncle = grand.left
                assert uncle is not None
                if uncle.red:
                    uncle.red = False
                    parent.red = False
                    grand.red = True
                    k = grand
                else:
                    if k is parent.left:
                        k = parent
                        self._rotate_right(k)
                    assert k.parent is not None and k.parent.parent is not None
                    k.parent.red = False
                    k.parent.parent.red = True
                    self._rotate_left(k.parent.parent)
            else:
                uncle = grand.right
                assert uncle is not None
                if uncle.red:
                    uncle.red = False
                    parent.red = False
                    grand.red = True
                    k = grand
                else:
                    if k is parent.right:
                        k = parent
                        self._rotate_left(k)
                    assert k.parent is not None and k.parent.parent is not None
                    k.parent.red = False
                    k.parent.parent.red = True
                    self._rotate_right(k.parent.parent)
            if k is self._root:
                break
        self._root.red = False

    def _transplant(self, u: _RBNode, v: _RBNode) -> None:
        if u.parent is None:
            self._root = v
        elif u is u.parent.left:
            u.parent.left = v
        else:
            u.parent.right = v
        v.parent = u.parent

    def _delete_fix(self, x: _RBNode) -> None:
        while x is not self._root and not x.red:
            parent = x.parent
            assert parent is not None
            if x is parent.left:
                s = parent.right
                assert s is not None
                if s.red:
                    s.red = False
                    parent.red = True
                    self._rotate_left(parent)
                    s = parent.right
                    assert s is not None
                assert s.left is not None and s.right is not None
                if not s.left.red and not s.right.red:
                    s.red = True
                    x = parent
                else:
                    if not s.right.red:
                        s.left.red = False
                        s.red = True
                        self._rotate_right(s)
                        s = parent.right
                        assert s is not None and s.right is not None
                    s.red = parent.red
                    parent.red = False
                    s.right.red = False
                    self._rotate_left(parent)
                    x = self._root
            else:
                s = parent.left
                assert s is not None
                if s.red:
                    s.red = False
                    parent.red = True
                    self._rotate_right(parent)
                    s = parent.left
                    assert s is not None
                assert s.left is not None and s.right is not None
                if not s.left.red and not s.right.red:
                    s.red = True
                    x = parent
                else:
                    if not s.left.red:
                        s.right.red = False
                        s.red = True
                        self._rotate_left(s)
                        s = parent.left
                        assert s is not None and s.left is not None
                    s.red = parent.red
                    parent.red = False
                    s.left.red = False
                    self._rotate_right(parent)
                    x = self._root
        x.red = False

    # -- lookups ---------------------------------------------------------------

    def _subtree_min(self, node: _RBNode) -> _RBNode:
        while node.left is not self._nil:
            node = node.left  # type: ignore[assignment]
        return node

    def _subtree_max(self, node: _RBNode) -> _RBNode:
        while node.right is not self._nil:
            node = node.right  # type: ignore[assignment]
        return node

    def _find(self, key: int) -> _RBNode | None:
        node = self._root
        while node is not self._nil:
            if key == node.key:
                return node
            node = node.left if key < node.key else node.right  # type: ignore[assignment]
        return None

    def _find_or_raise(self, key: int) -> _RBNode:
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        return node

    # -- public interface ------------------------------------------------------

    def insert(self, key: int) -> None:
        """Add ``key`` and restore the red-black properties."""
        node = _RBNode(key, True, None, self._nil, self._nil)
        parent: _RBNode | None = None
        current = self._root
        while current is not self._nil:
            parent = current
            current = current.left if key < current.key else current.right  # type: ignore[assignment]
        node.parent = parent
        if parent is None:
            self._root = node
        elif key < parent.key:
            parent.left = node
        else:
            parent.right = node

        if node.parent is None:
            node.red = False
            return
        if node.parent.parent is None:
            return
        self._insert_fix(node)

    def delete(self, key: int) -> None:
        """Remove one occurrence of ``key``; raise KeyError when it is absent."""
        z = self._nil
        node = self._root
        while node is not self._nil:
            if node.key == key:
                z = node
            node = node.right if node.key <= key else node.left  # type: ignore[assignment]
        if z is self._nil:
            raise KeyError(key)

        y = z
        y_was_red = y.red
        if z.left is self._nil:
            x = z.right
            assert x is not None
            self._transplant(z, x)
        elif z.right is self._nil:
            x = z.left
            assert x is not None
            self._transplant(z, x)
        else:
            assert z.right is not None
            y = self._subtree_min(z.right)
            y_was_red = y.red
            x = y.right
            assert x is not None
            if y.parent is z:
                x.parent = y
            else:
                self._transplant(y, x)
                y.right = z.right
                y.right.parent = y
            self._transplant(z, y)
            y.left = z.left
            assert y.left is not None
            y.left.parent = y
            y.red = z.red
        if not y_was_red:
            self._delete_fix(x)

    def search(self, key: int) -> bool:
        """Tell whether ``key`` is stored in the tree."""
        return self._find(key) is not None

    def _preorder(self, node: _RBNode) -> Iterator[int]:
        if node is not self._nil:
            yield node.key
            yield from self._preorder(node.left)  # type: ignore[arg-type]
            yield from self._preorder(node.right)  # type: ignore[arg-type]

    def _inorder(self, node: _RBNode) -> Iterator[int]:
        if node is not self._nil:
            yield from self._inorder(node.left)  # type: ignore[arg-type]
            yield node.key
            yield from self._inorder(node.right)  # type: ignore[arg-type]

    def _postorder(self, node: _RBNode) -> Iterator[int]:
        if node is not self._nil:
            yield from self._postorder(node.left)  # type: ignore[arg-type]
            yield from self._postorder(node.right)  # type: ignore[arg-type]
            yield node.key

    def preorder(self) -> list[int]:
        """Return the keys node first, then left subtree, then right subtree."""
        return list(self._preorder(self._root))

    def inorder(self) -> list[int]:
        """Return the keys in ascending order."""
        return list(self._inorder(self._root))

    def postorder(self) -> list[int]:
        """Return the keys subtrees first, then the node."""
        return list(self._postorder(self._root))

    def minimum(self) -> int:
        """Return the smallest key; raise ValueError on an empty tree."""
        if self._root is self._nil:
            raise ValueError("tree is empty")
        return self._subtree_min(self._root).key

    def maximum(self) -> int:
        """Return the largest key; raise ValueError on an empty tree."""
        if self._root is self._nil:
            raise ValueError("tree is empty")
        return self._subtree_max(self._root).key

    def successor(self, key: int) -> int | None:
        """Return the key following ``key`` in order, or None when it is the last."""
        node = self._find_or_raise(key)
        if node.right is not self._nil:
            return self._subtree_min(node.right).key  # type: ignore[arg-type]
        parent = node.parent
        while parent is not None and node is parent.right:
            node, parent = parent, parent.parent
        return parent.key if parent is not None else None

    def predecessor(self, key: int) -> int | None:
        """Return the key preceding ``key`` in order, or None when it is the first."""
        node = self._find_or_raise(key)
        if node.left is not self._nil:
            return self._subtree_max(node.left).key  # type: ignore[arg-type]
        parent = node.parent
        while parent is not None and node is parent.left:
            node, parent = parent, parent.parent
        return parent.key if parent is not None else None

    def _render(self, node: _RBNode, indent: str, last: bool) -> Iterator[str]:
        if node is self._nil:
            return
        colour = "RED" if node.red else "BLACK"
        if last:
            yield f"{indent}R----{node.key}({colour})"
            indent += "   "
        else:
            yield f"{indent}L----{node.key}({colour})"
            indent += "|  "
        yield from self._render(node.left, indent, False)  # type: ignore[arg-type]
        yield from self._render(node.right, indent, True)  # type: ignore[arg-type]

    def render(self) -> str:
        """Draw the tree one node per line with each node's colour."""
        return "\n".join(self._render(self._root, "", True))
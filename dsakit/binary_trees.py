"""Shape checks for plain binary trees."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    key: int
    left: TreeNode | None = field(default=None, repr=False)
    right: TreeNode | None = field(default=None, repr=False)


def is_full_binary_tree(root: TreeNode | None) -> bool:
    """Tell whether every node has either no children or exactly two."""
    if root is None:
        return True
    if root.left is None and root.right is None:
        return True
    if root.left is not None and root.right is not None:
        return is_full_binary_tree(root.left) and is_full_binary_tree(root.right)
    return False


def depth(root: TreeNode | None) -> int:
    """Return the number of nodes on the path that always goes left."""
    count = 0
    while root is not None:
        count += 1
        root = root.left
    return count


def _is_perfect(node: TreeNode | None, target: int, level: int) -> bool:
    if node is None:
        return True
    if node.left is None and node.right is None:
        return target == level + 1
    if node.left is None or node.right is None:
        return False
    return _is_perfect(node.left, target, level + 1) and _is_perfect(
        node.right, target, level + 1
    )


def is_perfect(root: TreeNode | None) -> bool:
    """Tell whether every internal node has two children and all leaves share a level."""
    return _is_perfect(root, depth(root), 0)
import random

import pytest

from dsakit.red_black import RedBlackTree

SOURCE_KEYS = [55, 40, 65, 60, 75, 57]


def _check_invariants(tree):
    nil = tree._nil
    root = tree._root
    assert not root.red
    assert root is nil or root.parent is None

    def walk(node):
        if node is nil:
            return 1
        for child in (node.left, node.right):
            if child is not nil:
                assert child.parent is node
                if node.red:
                    assert not child.red
        left = walk(node.left)
        right = walk(node.right)
        assert left == right
        return left + (0 if node.red else 1)

    walk(root)
    keys = tree.inorder()
    assert keys == sorted(keys)


def test_render_matches_source_example():
    tree = RedBlackTree(SOURCE_KEYS)
    assert tree.render() == "\n".join(
        [
            "R----55(BLACK)",
            "   L----40(BLACK)",
            "   R----65(RED)",
            "      L----60(BLACK)",
            "      |  L----57(RED)",
            "      R----75(BLACK)",
        ]
    )


def test_render_after_delete_matches_source_example():
    tree = RedBlackTree(SOURCE_KEYS)
    tree.delete(40)
    assert tree.render() == "\n".join(
        [
            "R----65(BLACK)",
            "   L----57(RED)",
            "   |  L----55(BLACK)",
            "   |  R----60(BLACK)",
            "   R----75(BLACK)",
        ]
    )
    _check_invariants(tree)


def test_traversals():
    tree = RedBlackTree(SOURCE_KEYS)
    assert tree.preorder() == [55, 40, 65, 60, 57, 75]
    assert tree.inorder() == sorted(SOURCE_KEYS)
    post = tree.postorder()
    assert sorted(post) == sorted(SOURCE_KEYS)
    assert post[-1] == tree.preorder()[0]


def test_empty_tree():
    tree = RedBlackTree()
    assert tree.render() == ""
    assert tree.inorder() == []
    assert tree.search(3) is False
    with pytest.raises(ValueError):
        tree.minimum()
    with pytest.raises(ValueError):
        tree.maximum()


def test_delete_missing_raises():
    tree = RedBlackTree(SOURCE_KEYS)
    with pytest.raises(KeyError):
        tree.delete(99)
    assert tree.inorder() == sorted(SOURCE_KEYS)


def test_search():
    tree = RedBlackTree(SOURCE_KEYS)
    assert all(tree.search(key) for key in SOURCE_KEYS)
    assert tree.search(41) is False


def test_minimum_and_maximum():
    tree = RedBlackTree(SOURCE_KEYS)
    assert tree.minimum() == min(SOURCE_KEYS)
    assert tree.maximum() == max(SOURCE_KEYS)


def test_successor_and_predecessor_follow_sorted_order():
    keys = sorted(SOURCE_KEYS)
    tree = RedBlackTree(SOURCE_KEYS)
    for before, after in zip(keys, keys[1:]):
        assert tree.successor(before) == after
        assert tree.predecessor(after) == before
    assert tree.successor(keys[-1]) is None
    assert tree.predecessor(keys[0]) is None


def test_successor_of_missing_key_raises():
    tree = RedBlackTree(SOURCE_KEYS)
    with pytest.raises(KeyError):
        tree.successor(1)
    with pytest.raises(KeyError):
        tree.predecessor(1)


def test_duplicates_are_kept():
    tree = RedBlackTree([5, 5, 3])
    assert tree.inorder() == [3, 5, 5]
    tree.delete(5)
    assert tree.inorder() == [3, 5]
    _check_invariants(tree)


def test_random_inserts_and_deletes_keep_invariants():
    rng = random.Random(7)
    keys = rng.sample(range(1000), 200)
    tree = RedBlackTree()
    for key in keys:
        tree.insert(key)
        _check_invariants(tree)
    assert tree.inorder() == sorted(keys)
    remaining = set(keys)
    for key in rng.sample(keys, 150):
        tree.delete(key)
        remaining.discard(key)
        _check_invariants(tree)
    assert tree.inorder() == sorted(remaining)


def test_delete_everything_empties_tree():
    tree = RedBlackTree(range(20))
    for key in range(20):
        tree.delete(key)
    assert tree.inorder() == []
    _check_invariants(tree)
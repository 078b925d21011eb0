import random

import pytest

from dsakit.bplus_tree import BPlusTree

DRIVER_KEYS = [5, 15, 25, 35, 45, 55, 40, 30, 20]


def _rendered_numbers(tree):
    return {int(token) for token in tree.render().split()}


def test_driver_search_finds_15():
    tree = BPlusTree(DRIVER_KEYS)
    assert tree.search(15) is True


def test_driver_keys_all_found():
    tree = BPlusTree(DRIVER_KEYS)
    for key in DRIVER_KEYS:
        assert tree.search(key) is True
    for key in (0, 10, 50, 100):
        assert tree.search(key) is False


def test_single_leaf_render():
    tree = BPlusTree([25, 5, 15])
    assert tree.render() == "5 15 25"


def test_first_split_render():
    tree = BPlusTree([5, 15, 25, 35])
    assert tree.render() == "25\n5 15\n25 35"


def test_empty_tree():
    tree = BPlusTree()
    assert tree.search(1) is False
    assert tree.render() == ""


def test_render_mentions_every_key():
    tree = BPlusTree(DRIVER_KEYS)
    assert set(DRIVER_KEYS) <= _rendered_numbers(tree)


@pytest.mark.parametrize("max_keys", [2, 3, 4, 5])
@pytest.mark.parametrize("seed", [0, 1, 2])
def test_random_inserts_are_searchable(max_keys, seed):
    rng = random.Random(seed)
    keys = rng.sample(range(0, 2000, 2), 150)
    tree = BPlusTree(keys, max_keys=max_keys)
    for key in keys:
        assert tree.search(key) is True
    for key in rng.sample(range(1, 2000, 2), 50):
        assert tree.search(key) is False


@pytest.mark.parametrize("max_keys", [2, 3, 4])
def test_nodes_respect_capacity(max_keys):
    tree = BPlusTree(range(200), max_keys=max_keys)
    for line in tree.render().splitlines():
        assert 1 <= len(line.split()) <= max_keys


def test_ascending_and_descending_inserts():
    ascending = BPlusTree(range(100))
    descending = BPlusTree(range(99, -1, -1))
    for key in range(100):
        assert ascending.search(key) is True
        assert descending.search(key) is True


def test_invalid_capacity():
    with pytest.raises(ValueError):
        BPlusTree(max_keys=1)
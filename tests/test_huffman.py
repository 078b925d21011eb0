import pytest

from dsakit.huffman import build_tree, huffman_codes

ITEMS = ["A", "B", "C", "D"]
FREQUENCIES = [5, 1, 6, 3]


def _leaves(node):
    if node.is_leaf:
        return [node]
    return _leaves(node.left) + _leaves(node.right)


def _internal_nodes(node):
    if node.is_leaf:
        return []
    return [node] + _internal_nodes(node.left) + _internal_nodes(node.right)


def test_source_example():
    codes = huffman_codes(ITEMS, FREQUENCIES)
    assert list(codes.items()) == [("C", "0"), ("B", "100"), ("D", "101"), ("A", "11")]


def test_root_frequency_is_total():
    root = build_tree(ITEMS, FREQUENCIES)
    assert root.frequency == sum(FREQUENCIES)
    assert root.item is None


def test_leaves_hold_the_items():
    root = build_tree(ITEMS, FREQUENCIES)
    leaves = _leaves(root)
    assert sorted(leaf.item for leaf in leaves) == sorted(ITEMS)
    lookup = dict(zip(ITEMS, FREQUENCIES))
    for leaf in leaves:
        assert leaf.frequency == lookup[leaf.item]


def test_internal_nodes_are_sums_of_children():
    root = build_tree("abcdefg", [7, 3, 9, 1, 1, 12, 4])
    for node in _internal_nodes(root):
        assert node.left is not None and node.right is not None
        assert node.frequency == node.left.frequency + node.right.frequency


def test_codes_are_prefix_free():
    codes = huffman_codes("abcdefg", [7, 3, 9, 1, 1, 12, 4])
    values = list(codes.values())
    for a in values:
        for b in values:
            if a is not b:
                assert not b.startswith(a)


def test_kraft_sum_is_one():
    codes = huffman_codes("abcdefg", [7, 3, 9, 1, 1, 12, 4])
    assert sum(2 ** -len(code) for code in codes.values()) == 1


def test_more_frequent_items_get_no_longer_codes():
    items = "abcdefg"
    freqs = [7, 3, 9, 1, 1, 12, 4]
    codes = huffman_codes(items, freqs)
    pairs = list(zip(items, freqs))
    for item_a, freq_a in pairs:
        for item_b, freq_b in pairs:
            if freq_a > freq_b:
                assert len(codes[item_a]) <= len(codes[item_b])


def test_lone_item_gets_empty_code():
    assert huffman_codes(["x"], [4]) == {"x": ""}


def test_two_items_split_on_one_bit():
    codes = huffman_codes(["x", "y"], [2, 5])
    assert sorted(codes.values()) == ["0", "1"]


def test_rejects_empty_input():
    with pytest.raises(ValueError):
        build_tree([], [])


def test_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        build_tree(["a", "b"], [1])


def test_rejects_negative_frequency():
    with pytest.raises(ValueError):
        build_tree(["a", "b"], [1, -2])


def test_rejects_duplicate_items():
    with pytest.raises(ValueError):
        huffman_codes(["a", "a"], [1, 2])
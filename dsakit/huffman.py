"""Huffman trees and prefix codes built from item frequencies."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class HuffmanNode:
    """A node of a Huffman tree; internal nodes carry no item."""

    frequency: int
    item: Hashable | None = None
    left: HuffmanNode | None = field(default=None, repr=False)
    right: HuffmanNode | None = field(default=None, repr=False)

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _sift_down(heap: list[HuffmanNode], index: int) -> None:
    size = len(heap)
    while True:
        smallest = index
        left, right = 2 * index + 1, 2 * index + 2
        if left < size and heap[left].frequency < heap[smallest].frequency:
            smallest = left
        if right < size and heap[right].frequency < heap[smallest].frequency:
            smallest = right
        if smallest == index:
            return
        heap[smallest], heap[index] = heap[index], heap[smallest]
        index = smallest


def _pop_min(heap: list[HuffmanNode]) -> HuffmanNode:
    top = heap[0]
    last = heap.pop()
    if heap:
        heap[0] = last
        _sift_down(heap, 0)
    return top


def _push(heap: list[HuffmanNode], node: HuffmanNode) -> None:
    heap.append(node)
    index = len(heap) - 1
    while index and node.frequency < heap[(index - 1) // 2].frequency:
        parent = (index - 1) // 2
        heap[index] = heap[parent]
        index = parent
    heap[index] = node


def build_tree(items: Iterable[Hashable], frequencies: Iterable[int]) -> HuffmanNode:
    """Build a Huffman tree, repeatedly joining the two least frequent subtrees."""
    items = list(items)
    frequencies = list(frequencies)
    if len(items) != len(frequencies):
        raise ValueError("items and frequencies must have the same length")
    if not items:
        raise ValueError("at least one item is required")
    if any(frequency < 0 for frequency in frequencies):
        raise ValueError("frequencies must be non-negative")

    heap = [HuffmanNode(frequency, item) for item, frequency in zip(items, frequencies)]
    for index in range((len(heap) - 2) // 2, -1, -1):
        _sift_down(heap, index)

    while len(heap) > 1:
        left = _pop_min(heap)
        right = _pop_min(heap)
        _push(heap, HuffmanNode(left.frequency + right.frequency, None, left, right))
    return heap[0]


def _leaf_codes(node: HuffmanNode, prefix: str) -> Iterator[tuple[Hashable, str]]:
    if node.left is not None:
        yield from _leaf_codes(node.left, prefix + "0")
    if node.right is not None:
        yield from _leaf_codes(node.right, prefix + "1")
    if node.is_leaf:
        yield node.item, prefix


def huffman_codes(
    items: Iterable[Hashable], frequencies: Iterable[int]
) -> dict[Hashable, str]:
    """Return each item's bit string, ordered from the leftmost leaf to the rightmost.

    A left branch contributes ``0`` and a right branch ``1``; a lone item gets
    the empty code.
    """
    items = list(items)
    if len(set(items)) != len(items):
        raise ValueError("items must be distinct")
    return dict(_leaf_codes(build_tree(items, frequencies), ""))
"""Singly and doubly linked lists and helpers that walk them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class Node:
    """A singly linked list node; nodes compare by identity."""

    data: int
    next: Node | None = field(default=None, repr=False)


@dataclass(eq=False)
class DoublyNode:
    """A doubly linked list node; nodes compare by identity."""

    data: int
    next: DoublyNode | None = field(default=None, repr=False)
    prev: DoublyNode | None = field(default=None, repr=False)


def _nodes(head: Node | DoublyNode | None) -> Iterator[Node | DoublyNode]:
    while head is not None:
        yield head
        head = head.next


class LinkedList:
    """A singly linked list that grows at its head."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Node | None = None
        for value in values:
            self.push(value)

    def push(self, data: int) -> None:
        """Put ``data`` in front of the list."""
        self.head = Node(data, self.head)

    def reverse(self) -> None:
        """Reverse the list in place by relinking its nodes."""
        previous = None
        current = self.head
        while current is not None:
            current.next, previous, current = previous, current, current.next
        self.head = previous

    def count(self, value: int) -> int:
        """Return how many nodes hold ``value``."""
        return sum(1 for data in self if data == value)

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in _nodes(self.head))


def from_values(values: Iterable[int]) -> Node | None:
    """Build a singly linked chain holding ``values`` in order; return its head."""
    head: Node | None = None
    tail: Node | None = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def length(head: Node | DoublyNode | None) -> int:
    """Return the number of nodes reachable from ``head``."""
    return sum(1 for _ in _nodes(head))


def intersect_point(head1: Node | None, head2: Node | None) -> int | None:
    """Return the data of the first node shared by two chains, or None."""
    longer, shorter = head1, head2
    difference = length(head1) - length(head2)
    if difference < 0:
        longer, shorter = shorter, longer
        difference = -difference
    for _ in range(difference):
        longer = longer.next  # type: ignore[union-attr]
    while longer is not None and shorter is not None:
        if longer is shorter:
            return longer.data
        longer, shorter = longer.next, shorter.next
    return None


def doubly_from_values(values: Iterable[int]) -> DoublyNode | None:
    """Build a chain of DoublyNode linked forwards only; return its head."""
    head: DoublyNode | None = None
    tail: DoublyNode | None = None
    for value in values:
        node = DoublyNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def make_doubly(head: DoublyNode | None) -> None:
    """Fill in every ``prev`` link so the chain can be walked backwards."""
    for node in _nodes(head):
        if node.next is not None:
            node.next.prev = node


def backward(head: DoublyNode | None) -> Iterator[int]:
    """Yield the data from the last node back to ``head`` along ``prev`` links."""
    tail = None
    for tail in _nodes(head):
        pass
    node = tail
    while node is not None:
        yield node.data
        if node is head:
            return
        node = node.prev
"""A bounded last-in, first-out stack."""

from __future__ import annotations

from collections.abc import Iterator

DEFAULT_CAPACITY = 10


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that is at capacity."""


class StackEmptyError(IndexError):
    """Raised when popping from an empty stack."""


class Stack:
    """A stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[int] = []

    def push(self, item: int) -> None:
        """Put ``item`` on top; raise StackFullError when at capacity."""
        if self.is_full():
            raise StackFullError("stack full")
        self._items.append(item)

    def pop(self) -> int:
        """Remove and return the top item; raise StackEmptyError when empty."""
        if self.is_empty():
            raise StackEmptyError("stack empty")
        return self._items.pop()

    def is_full(self) -> bool:
        """Tell whether the stack has reached its capacity."""
        return len(self._items) >= self.capacity

    def is_empty(self) -> bool:
        """Tell whether the stack holds no items."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate from the bottom of the stack to the top."""
        return iter(self._items)
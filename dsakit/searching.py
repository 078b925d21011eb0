"""Searching, merging and inserting in plain and sorted sequences."""

from __future__ import annotations

import bisect
import heapq
from collections.abc import Sequence


def contains_sorted(values: Sequence[int], target: int) -> bool:
    """Tell whether ``target`` occurs in the ascending sequence ``values``."""
    position = bisect.bisect_left(values, target)
    return position < len(values) and values[position] == target


def find_crossover(values: Sequence[int], low: int, high: int, x: int) -> int:
    """Find the index in ``values[low..high]`` around which ``x`` crosses over.

    Returns ``high`` when every element is <= x, ``low`` when every element is
    greater, otherwise the last index whose element is <= x.
    """
    while True:
        if values[high] <= x:
            return high
        if values[low] > x:
            return low
        mid = (low + high) // 2
        if values[mid] <= x < values[mid + 1]:
            return mid
        if values[mid] < x:
            low = mid + 1
        else:
            high = mid - 1


def k_closest(values: Sequence[int], x: int, k: int) -> list[int]:
    """Return up to ``k`` elements of the sorted, distinct ``values`` closest to ``x``.

    ``x`` itself is never included. Elements come in the order they are chosen,
    nearest first; on a tie the right-hand element wins.
    """
    if not values:
        return []
    left = find_crossover(values, 0, len(values) - 1, x)
    right = left + 1
    if values[left] == x:
        left -= 1
    chosen: list[int] = []
    while left >= 0 and right < len(values) and len(chosen) < k:
        if x - values[left] < values[right] - x:
            chosen.append(values[left])
            left -= 1
        else:
            chosen.append(values[right])
            right += 1
    while len(chosen) < k and left >= 0:
        chosen.append(values[left])
        left -= 1
    while len(chosen) < k and right < len(values):
        chosen.append(values[right])
        right += 1
    return chosen


def linear_search(values: Sequence[int], target: int) -> int | None:
    """Return the index of the first occurrence of ``target``, or None."""
    return next((i for i, value in enumerate(values) if value == target), None)


def intersect_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the distinct values common to two ascending sequences."""
    i = j = 0
    common: list[int] = []
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            i += 1
        elif second[j] < first[i]:
            j += 1
        else:
            repeated = (i > 0 and first[i] == first[i - 1]) or (
                j > 0 and second[j] == second[j - 1]
            )
            if not repeated:
                common.append(second[j])
            i += 1
            j += 1
    return common


def merge_three(a: Sequence[int], b: Sequence[int], c: Sequence[int]) -> list[int]:
    """Merge three ascending sequences into one ascending list."""
    return list(heapq.merge(a, b, c))


def insert_at_index(values: Sequence[int], index: int, element: int) -> list[int]:
    """Return a copy of ``values`` with ``element`` inserted at ``index``."""
    if not 0 <= index <= len(values):
        raise IndexError(f"index {index} out of range for {len(values)} elements")
    return [*values[:index], element, *values[index:]]
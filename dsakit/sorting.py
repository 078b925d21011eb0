"""Classic comparison and distribution sorts returning new lists."""

from __future__ import annotations

import bisect
from collections.abc import Iterable
from itertools import chain

DEFAULT_BUCKET_COUNT = 6
DEFAULT_INTERVAL = 10


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted by repeated ordered insertion (stable)."""
    result: list[int] = []
    for value in values:
        bisect.insort_right(result, value)
    return result


def bucket_sort(
    values: Iterable[int],
    bucket_count: int = DEFAULT_BUCKET_COUNT,
    interval: int = DEFAULT_INTERVAL,
) -> list[int]:
    """Sort non-negative integers by spreading them over fixed-width buckets.

    A value lands in bucket ``value // interval``; every value must fall into
    one of the ``bucket_count`` buckets.
    """
    if bucket_count <= 0:
        raise ValueError("bucket_count must be positive")
    if interval <= 0:
        raise ValueError("interval must be positive")
    buckets: list[list[int]] = [[] for _ in range(bucket_count)]
    for value in values:
        if value < 0 or value // interval >= bucket_count:
            raise ValueError(
                f"value {value} does not fit in {bucket_count} buckets of width {interval}"
            )
        buckets[value // interval].insert(0, value)
    return list(chain.from_iterable(insertion_sort(bucket) for bucket in buckets))


def shell_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted with gaps n/2, n/4, ..., 1."""
    result = list(values)
    size = len(result)
    gap = size // 2
    while gap > 0:
        for i in range(gap, size):
            current = result[i]
            j = i
            while j >= gap and result[j - gap] > current:
                result[j] = result[j - gap]
                j -= gap
            result[j] = current
        gap //= 2
    return result


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted by swapping adjacent out-of-order pairs."""
    result = list(values)
    for end in range(len(result) - 1, 0, -1):
        swapped = False
        for i in range(end):
            if result[i] > result[i + 1]:
                result[i], result[i + 1] = result[i + 1], result[i]
                swapped = True
        if not swapped:
            break
    return result


def radix_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers digit by digit, least significant first."""
    result = list(values)
    if not result:
        return result
    if min(result) < 0:
        raise ValueError("radix_sort only handles non-negative integers")
    largest = max(result)
    place = 1
    while largest // place > 0:
        digits: list[list[int]] = [[] for _ in range(10)]
        for value in result:
            digits[(value // place) % 10].append(value)
        result = list(chain.from_iterable(digits))
        place *= 10
    return result
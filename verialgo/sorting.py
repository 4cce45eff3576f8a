"""Comparison and distribution sorts, plus merging of sorted runs.

Every sort takes any iterable and returns a new ascending list; the
input is never modified.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")

_RADIX = 10


def _insert_shifting(items: list, ) -> None:
    """Sort ``items`` in place by straight insertion (shifting larger items)."""
    for i in range(1, len(items)):
        moving = items[i]
        j = i
        while j > 0 and items[j - 1] > moving:
            items[j] = items[j - 1]
            j -= 1
        items[j] = moving


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Sort by sinking each new element leftwards through adjacent swaps."""
    items = list(values)
    for up in range(1, len(items)):
        down = up
        while down > 0 and items[down] < items[down - 1]:
            items[down], items[down - 1] = items[down - 1], items[down]
            down -= 1
    return items


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Sort by straight insertion."""
    items = list(values)
    _insert_shifting(items)
    return items


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Sort numbers in the half-open interval [0, 1) using one bucket per item.

    Raises ValueError if any value lies outside [0, 1).
    """
    items = list(values)
    n = len(items)
    for value in items:
        if not 0.0 <= value < 1.0:
            raise ValueError(f"bucket_sort needs values in [0, 1), got {value!r}")
    buckets: list[list[float]] = [[] for _ in range(n)]
    for value in items:
        buckets[int(value * n)].append(value)
    result: list[float] = []
    for bucket in buckets:
        _insert_shifting(bucket)
        result.extend(bucket)
    return result


def counting_sort(values: Iterable[int], max_value: int) -> list[int]:
    """Sort integers known to lie in ``0..max_value`` by counting occurrences.

    Raises ValueError if ``max_value`` is negative or a value is out of range.
    """
    if max_value < 0:
        raise ValueError(f"max_value must be non-negative, got {max_value}")
    items = list(values)
    counts = [0] * (max_value + 1)
    for value in items:
        if not 0 <= value <= max_value:
            raise ValueError(f"value {value} outside 0..{max_value}")
        counts[value] += 1
    # Prefix sums give the end position of each key in the output.
    for key in range(1, max_value + 1):
        counts[key] += counts[key - 1]
    output = [0] * len(items)
    for value in reversed(items):
        counts[value] -= 1
        output[counts[value]] = value
    return output


def _sift_down(items: list, size: int, root: int) -> None:
    """Restore the max-heap property below ``root`` within ``items[:size]``."""
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[T]) -> list[T]:
    """Sort by building a max-heap and repeatedly moving its top to the end."""
    items = list(values)
    n = len(items)
    for root in range(n // 2 - 1, -1, -1):
        _sift_down(items, n, root)
    for end in range(n - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def quick_sort(values: Iterable[T]) -> list[T]:
    """Sort by quicksort, partitioning around the first element of each range."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        lo, hi = pending.pop()
        if lo >= hi:
            continue
        pivot = items[lo]
        boundary = lo
        for i in range(lo + 1, hi + 1):
            if items[i] < pivot:
                boundary += 1
                items[i], items[boundary] = items[boundary], items[i]
        items[lo], items[boundary] = items[boundary], items[lo]
        pending.append((lo, boundary - 1))
        pending.append((boundary + 1, hi))
    return items


def _sort_by_digit(items: list[int], exp: int) -> list[int]:
    """Stable counting sort of ``items`` on the decimal digit selected by ``exp``."""
    counts = [0] * _RADIX
    for value in items:
        counts[(value // exp) % _RADIX] += 1
    for digit in range(1, _RADIX):
        counts[digit] += counts[digit - 1]
    output = [0] * len(items)
    for value in reversed(items):
        digit = (value // exp) % _RADIX
        counts[digit] -= 1
        output[counts[digit]] = value
    return output


def radix_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers digit by digit, least significant first.

    Raises ValueError if any value is negative.
    """
    items = list(values)
    if not items:
        return items
    if any(value < 0 for value in items):
        raise ValueError("radix_sort needs non-negative integers")
    largest = max(items)
    exp = 1
    while largest // exp > 0:
        items = _sort_by_digit(items, exp)
        exp *= _RADIX
    return items


def merge(first: Sequence[Any], second: Sequence[Any]) -> list[Any]:
    """Merge two ascending sequences into one ascending list.

    On ties the element from ``first`` comes first.
    """
    result: list[Any] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] <= second[j]:
            result.append(first[i])
            i += 1
        else:
            result.append(second[j])
            j += 1
    result.extend(first[i:])
    result.extend(second[j:])
    return result
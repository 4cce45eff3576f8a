"""Partitioning, order statistics and maximum search."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence
from typing import Any, TypeVar

T = TypeVar("T")

_GROUP_SIZE = 5


def _check_bounds(items: Sequence[Any], lo: int, hi: int) -> None:
    if lo < 0 or hi >= len(items):
        raise IndexError(f"range {lo}..{hi} outside a sequence of length {len(items)}")


def partition_lomuto(items: MutableSequence[T], lo: int, hi: int) -> int:
    """Partition ``items[lo..hi]`` in place around its last element.

    Returns the final index ``p`` of the pivot: everything in ``lo..p-1`` is
    no greater than it and everything in ``p+1..hi`` is no smaller.
    Raises ValueError if ``lo > hi`` and IndexError if the range is out of bounds.
    """
    if lo > hi:
        raise ValueError(f"empty range {lo}..{hi}")
    _check_bounds(items, lo, hi)
    pivot = items[hi]
    boundary = lo - 1
    for j in range(lo, hi):
        if items[j] <= pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    boundary += 1
    items[boundary], items[hi] = items[hi], items[boundary]
    return boundary


def partition_hoare(items: MutableSequence[T], lo: int, hi: int) -> int:
    """Partition ``items[lo..hi]`` in place around the value of ``items[lo]``.

    Returns ``j`` with ``lo <= j < hi`` such that ``items[lo..j]`` are no
    greater than the pivot and ``items[j+1..hi]`` are no smaller.
    Raises ValueError unless ``lo < hi`` and IndexError if the range is out of bounds.
    """
    if lo >= hi:
        raise ValueError(f"range {lo}..{hi} needs at least two elements")
    _check_bounds(items, lo, hi)
    pivot = items[lo]
    i = lo - 1
    j = hi + 1
    while True:
        i += 1
        while items[i] < pivot:
            i += 1
        j -= 1
        while items[j] > pivot:
            j -= 1
        if i >= j:
            return j
        items[i], items[j] = items[j], items[i]


def _select(items: list[T], k: int) -> T:
    while len(items) > _GROUP_SIZE:
        groups = (
            sorted(items[start:start + _GROUP_SIZE])
            for start in range(0, len(items), _GROUP_SIZE)
        )
        medians = [group[len(group) // 2] for group in groups]
        pivot = _select(medians, len(medians) // 2)
        lower = [item for item in items if item < pivot]
        higher = [item for item in items if pivot < item]
        equal_count = len(items) - len(lower) - len(higher)
        if k < len(lower):
            items = lower
        elif k < len(lower) + equal_count:
            return pivot
        else:
            k -= len(lower) + equal_count
            items = higher
    return sorted(items)[k]


def linear_select(values: Iterable[T], k: int) -> T:
    """Return the ``k``-th smallest value (counting from 0) in worst-case linear time.

    Uses the median-of-medians pivot rule. The input is not modified.
    Raises IndexError if ``k`` is not a valid rank.
    """
    items = list(values)
    if not 0 <= k < len(items):
        raise IndexError(f"rank {k} outside 0..{len(items) - 1}")
    return _select(items, k)


def max_element(values: Sequence[Any]) -> int:
    """Return the index of the first largest value, or 0 for an empty sequence."""
    if not values:
        return 0
    return max(range(len(values)), key=values.__getitem__)


def max_seq(values: Sequence[T]) -> T:
    """Return the largest value of a non-empty sequence.

    Raises ValueError if ``values`` is empty.
    """
    if not values:
        raise ValueError("max_seq needs at least one value")
    return values[max_element(values)]
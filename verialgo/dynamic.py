"""Classic dynamic-programming problems on sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def edit_distance(source: Sequence[Any], target: Sequence[Any]) -> int:
    """Return the Levenshtein distance between two sequences.

    Insertions, deletions and substitutions each cost one.
    """
    previous = list(range(len(target) + 1))
    for i, source_item in enumerate(source, start=1):
        current = [i]
        for j, target_item in enumerate(target, start=1):
            if source_item == target_item:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j - 1], previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def lcs_length(first: Sequence[Any], second: Sequence[Any]) -> int:
    """Return the length of a longest common subsequence of two sequences."""
    previous = [0] * (len(second) + 1)
    for first_item in first:
        current = [0]
        for j, second_item in enumerate(second, start=1):
            if first_item == second_item:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def lis_length(values: Iterable[Any]) -> int:
    """Return the length of a longest strictly increasing subsequence."""
    items = list(values)
    ending_at: list[int] = []
    for i, value in enumerate(items):
        best_before = max(
            (length for earlier, length in zip(items[:i], ending_at) if earlier < value),
            default=0,
        )
        ending_at.append(best_before + 1)
    return max(ending_at, default=0)


def matrix_chain_order(dims: Sequence[int]) -> int:
    """Return the fewest scalar multiplications needed to multiply a matrix chain.

    Matrix ``i`` (from 1) has shape ``dims[i-1] x dims[i]``, so ``dims`` holds
    one more entry than there are matrices.
    Raises ValueError if fewer than two dimensions are given.
    """
    n = len(dims) - 1
    if n < 1:
        raise ValueError("matrix_chain_order needs at least one matrix (two dimensions)")
    cost = [[0] * (n + 1) for _ in range(n + 1)]
    for length in range(2, n + 1):
        for i in range(1, n - length + 2):
            j = i + length - 1
            cost[i][j] = min(
                cost[i][k] + cost[k + 1][j] + dims[i - 1] * dims[k] * dims[j]
                for k in range(i, j)
            )
    return cost[1][n]


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane's algorithm).

    Raises ValueError if ``values`` is empty.
    """
    iterator = iter(values)
    try:
        current = best = next(iterator)
    except StopIteration:
        raise ValueError("max_subarray_sum needs at least one value") from None
    for value in iterator:
        current = value if current < 0 else current + value
        best = max(best, current)
    return best


def rod_cutting(prices: Sequence[int]) -> int:
    """Return the best revenue from cutting a rod of length ``len(prices)``.

    ``prices[i]`` is the price of a piece of length ``i + 1``.
    """
    best = [0]
    for length in range(1, len(prices) + 1):
        best.append(
            max(prices[cut - 1] + best[length - cut] for cut in range(1, length + 1))
        )
    return best[-1]
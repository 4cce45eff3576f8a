from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from verialgo.selection import (
    linear_select,
    max_element,
    max_seq,
    partition_hoare,
    partition_lomuto,
)

small_ints = st.integers(min_value=-50, max_value=50)


@st.composite
def list_and_range(draw, min_span=1):
    items = draw(st.lists(small_ints, min_size=min_span, max_size=40))
    lo = draw(st.integers(min_value=0, max_value=len(items) - min_span))
    hi = draw(st.integers(min_value=lo + min_span - 1, max_value=len(items) - 1))
    return items, lo, hi


@given(list_and_range())
def test_lomuto_partitions_around_last_element(case):
    items, lo, hi = case
    original = list(items)
    p = partition_lomuto(items, lo, hi)
    assert lo <= p <= hi
    assert items[p] == original[hi]
    assert all(x <= items[p] for x in items[lo:p])
    assert all(x >= items[p] for x in items[p + 1:hi + 1])
    assert Counter(items[lo:hi + 1]) == Counter(original[lo:hi + 1])
    assert items[:lo] == original[:lo]
    assert items[hi + 1:] == original[hi + 1:]


@given(list_and_range(min_span=2))
def test_hoare_partitions_around_first_element(case):
    items, lo, hi = case
    original = list(items)
    pivot = original[lo]
    j = partition_hoare(items, lo, hi)
    assert lo <= j < hi
    assert all(x <= pivot for x in items[lo:j + 1])
    assert all(x >= pivot for x in items[j + 1:hi + 1])
    assert Counter(items[lo:hi + 1]) == Counter(original[lo:hi + 1])
    assert items[:lo] == original[:lo]
    assert items[hi + 1:] == original[hi + 1:]


def test_lomuto_rejects_empty_range():
    with pytest.raises(ValueError):
        partition_lomuto([1, 2, 3], 2, 1)


def test_lomuto_rejects_out_of_bounds():
    with pytest.raises(IndexError):
        partition_lomuto([1, 2, 3], 0, 3)


def test_hoare_needs_two_elements():
    with pytest.raises(ValueError):
        partition_hoare([4, 5, 6], 1, 1)


def test_hoare_rejects_out_of_bounds():
    with pytest.raises(IndexError):
        partition_hoare([4, 5, 6], -1, 2)


@given(st.lists(small_ints, min_size=1, max_size=80), st.data())
def test_linear_select_matches_sorted_rank(values, data):
    k = data.draw(st.integers(min_value=0, max_value=len(values) - 1))
    snapshot = list(values)
    assert linear_select(values, k) == sorted(values)[k]
    assert values == snapshot


def test_linear_select_every_rank_of_large_input():
    values = [(i * 37) % 101 for i in range(101)]
    assert [linear_select(values, k) for k in range(len(values))] == sorted(values)


def test_linear_select_accepts_iterables():
    values = [9, 4, 7, 1, 8, 2, 6]
    assert linear_select(iter(values), 0) == min(values)


@pytest.mark.parametrize("k", [-1, 3])
def test_linear_select_rank_out_of_range(k):
    with pytest.raises(IndexError):
        linear_select([3, 1, 2], k)


def test_linear_select_empty():
    with pytest.raises(IndexError):
        linear_select([], 0)


@given(st.lists(small_ints, min_size=1, max_size=40))
def test_max_element_is_first_maximum(values):
    index = max_element(values)
    assert values[index] == max(values)
    assert all(x < values[index] for x in values[:index])


def test_max_element_of_empty_sequence_is_zero():
    assert max_element([]) == 0


def test_max_element_prefers_first_of_ties():
    values = [2, 9, 5, 9]
    assert max_element(values) == values.index(9)


@given(st.lists(small_ints, min_size=1, max_size=40))
def test_max_seq_returns_largest(values):
    assert max_seq(values) == max(values)


def test_max_seq_rejects_empty():
    with pytest.raises(ValueError):
        max_seq([])
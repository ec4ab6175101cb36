import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from qsortbench.sorting import insertion_sort, quicksort, selection_sort

BAD_RANGES = [(-1, 2), (3, 2), (0, 6)]


def _subrange_case(data, cuts):
    start, stop = sorted(min(c, len(data)) for c in cuts)
    return start, stop, list(data)


def _assert_only_subrange_sorted(data, original, start, stop):
    assert data[:start] == original[:start]
    assert data[stop:] == original[stop:]
    assert data[start:stop] == sorted(original[start:stop])


@given(st.lists(st.integers(min_value=-(2**31), max_value=2**31 - 1)))
def test_quicksort_matches_sorted(data):
    expected = sorted(data)
    quicksort(data)
    assert data == expected


@given(st.lists(st.integers(min_value=0, max_value=5), max_size=200))
def test_quicksort_many_duplicates(data):
    expected = sorted(data)
    quicksort(data)
    assert data == expected


@pytest.mark.parametrize("size", [0, 1, 2, 9, 10, 11, 12, 13, 50, 2048])
def test_quicksort_threshold_sizes(size):
    rng = random.Random(size)
    data = [rng.randrange(2**31) for _ in range(size)]
    expected = sorted(data)
    quicksort(data)
    assert data == expected


@pytest.mark.parametrize("size", [11, 100, 1000])
def test_quicksort_already_sorted_and_reversed(size):
    ascending = list(range(size))
    descending = list(reversed(ascending))
    quicksort(ascending)
    quicksort(descending)
    assert ascending == list(range(size))
    assert descending == list(range(size))


def test_quicksort_constant_input():
    data = [7] * 300
    quicksort(data)
    assert data == [7] * 300


def test_quicksort_preserves_multiset():
    rng = random.Random(42)
    data = [rng.randrange(-1000, 1000) for _ in range(500)]
    original = list(data)
    quicksort(data)
    assert sorted(original) == data
    assert all(a <= b for a, b in zip(data, data[1:]))


@given(data=st.lists(st.integers()))
def test_insertion_sort_full_range(data):
    expected = sorted(data)
    insertion_sort(data)
    assert data == expected


@given(data=st.lists(st.integers()))
def test_selection_sort_full_range(data):
    expected = sorted(data)
    selection_sort(data)
    assert data == expected


@given(
    data=st.lists(st.integers(), min_size=0, max_size=40),
    cuts=st.tuples(st.integers(0, 40), st.integers(0, 40)),
)
def test_insertion_sort_subrange_only(data, cuts):
    start, stop, original = _subrange_case(data, cuts)
    insertion_sort(data, start, stop)
    _assert_only_subrange_sorted(data, original, start, stop)


@given(
    data=st.lists(st.integers(), min_size=0, max_size=40),
    cuts=st.tuples(st.integers(0, 40), st.integers(0, 40)),
)
def test_selection_sort_subrange_only(data, cuts):
    start, stop, original = _subrange_case(data, cuts)
    selection_sort(data, start, stop)
    _assert_only_subrange_sorted(data, original, start, stop)


def test_insertion_sort_fixed_example():
    data = [5, 3, 9, 1, 4]
    insertion_sort(data, 1, 4)
    assert data == [5, 1, 3, 9, 4]


def test_selection_sort_fixed_example():
    data = [5, 3, 9, 1, 4]
    selection_sort(data, 1, 4)
    assert data == [5, 1, 3, 9, 4]


@pytest.mark.parametrize("start, stop", BAD_RANGES)
def test_insertion_sort_rejects_bad_range(start, stop):
    with pytest.raises(ValueError):
        insertion_sort([1, 2, 3, 4, 5], start, stop)


@pytest.mark.parametrize("start, stop", BAD_RANGES)
def test_selection_sort_rejects_bad_range(start, stop):
    with pytest.raises(ValueError):
        selection_sort([1, 2, 3, 4, 5], start, stop)


def test_quicksort_works_on_strings():
    data = list("quicksortbenchmarkdataset")
    expected = sorted(data)
    quicksort(data)
    assert data == expected
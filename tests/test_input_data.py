from collections import Counter

from qsortbench.input_data import DATA_SIZE, input_values
from qsortbench.sorting import quicksort


def test_has_data_size_elements():
    assert len(input_values()) == DATA_SIZE == 2048


def test_first_elements_match_source():
    values = input_values()
    assert values[:5] == [89400484, 976015092, 1792756324, 721524505, 1214379246]


def test_last_elements_match_source():
    values = input_values()
    assert values[-3:] == [1217804021, 934700736, 878744414]


def test_extremes_match_source():
    values = input_values()
    assert min(values) == 690983
    assert max(values) == 2145930822


def test_values_fit_in_signed_32_bit_nonnegative_range():
    assert all(0 <= v < 2**31 for v in input_values())


def test_input_is_not_already_sorted():
    values = input_values()
    assert values != sorted(values)


def test_each_call_returns_independent_copy():
    first = input_values()
    first.reverse()
    first[0] = -1
    second = input_values()
    assert second[0] == 89400484
    assert second[-1] == 878744414


def test_quicksort_of_input_is_sorted_permutation():
    values = input_values()
    quicksort(values)
    assert all(a <= b for a, b in zip(values, values[1:]))
    assert Counter(values) == Counter(input_values())
    assert values[0] == 690983
    assert values[-1] == 2145930822
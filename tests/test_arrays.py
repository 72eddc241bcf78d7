from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.arrays import (
    closest_to_zero_sum,
    majority_element,
    match_nuts_and_bolts,
    max_index_diff,
    smallest_missing_positive,
    wave_array,
)

small_ints = st.integers(min_value=-50, max_value=50)


@given(st.lists(small_ints, min_size=1, max_size=40))
def test_max_index_diff_is_largest_valid_gap(values):
    gap = max_index_diff(values)
    assert 0 <= gap < len(values)
    assert any(values[i] <= values[i + gap] for i in range(len(values) - gap))
    for wider in range(gap + 1, len(values)):
        assert all(values[i] > values[i + wider] for i in range(len(values) - wider))


def test_max_index_diff_sorted_spans_whole_list():
    values = [1, 2, 3, 4, 5, 6]
    assert max_index_diff(values) == len(values) - 1


def test_max_index_diff_strictly_decreasing():
    assert max_index_diff([9, 7, 5, 3]) == 0


def test_max_index_diff_empty():
    with pytest.raises(ValueError):
        max_index_diff([])


def test_match_nuts_and_bolts_example():
    nuts = "@%$#^"
    bolts = "%@#$^"
    assert match_nuts_and_bolts(nuts, bolts) == sorted(nuts)


@given(st.lists(st.sampled_from("abcdef"), max_size=20), st.lists(st.sampled_from("abcdef"), max_size=20))
def test_match_nuts_and_bolts_is_sorted_intersection(nuts, bolts):
    matched = match_nuts_and_bolts(nuts, bolts)
    assert matched == sorted(matched)
    assert Counter(matched) == Counter(nuts) & Counter(bolts)


def test_closest_to_zero_sum_example():
    assert closest_to_zero_sum([-8, -66, -60]) == -68


def test_closest_to_zero_sum_opposites():
    assert closest_to_zero_sum([7, 3, -3]) == 0


@given(st.lists(small_ints, min_size=2, max_size=30))
def test_closest_to_zero_sum_is_a_pair_sum(values):
    total = closest_to_zero_sum(values)
    sums = {values[i] + values[j] for i in range(len(values)) for j in range(len(values)) if i != j}
    assert total in sums


def test_closest_to_zero_sum_needs_two_values():
    with pytest.raises(ValueError):
        closest_to_zero_sum([4])


def test_wave_array_example():
    assert wave_array([1, 2, 3, 4, 5]) == [2, 1, 4, 3, 5]


@given(st.lists(small_ints, max_size=30))
def test_wave_array_shape(values):
    waved = wave_array(values)
    assert sorted(waved) == sorted(values)
    for i, (first, second) in enumerate(zip(waved, waved[1:])):
        if i % 2 == 0:
            assert first >= second
        else:
            assert first <= second


def test_majority_element_found():
    assert majority_element([3, 1, 3, 3, 2]) == 3


def test_majority_element_absent():
    assert majority_element([1, 2, 3]) is None


@given(st.lists(st.integers(min_value=0, max_value=3), max_size=30))
def test_majority_element_invariant(values):
    result = majority_element(values)
    counts = Counter(values)
    if result is None:
        assert all(seen <= len(values) // 2 for seen in counts.values())
    else:
        assert counts[result] > len(values) // 2


@given(st.lists(st.integers(min_value=-10, max_value=30), max_size=30))
def test_smallest_missing_positive_invariant(values):
    original = list(values)
    missing = smallest_missing_positive(values)
    assert values == original
    assert missing >= 1
    assert missing not in values
    assert all(k in values for k in range(1, missing))
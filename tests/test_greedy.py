import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.greedy import (
    max_activities,
    meeting_order,
    merge,
    merge_sort,
    spanning_tree_weight,
)


def test_spanning_tree_triangle():
    graph = [[0, 5, 1], [5, 0, 3], [1, 3, 0]]
    assert spanning_tree_weight(graph) == 4


def test_spanning_tree_of_a_tree_is_its_total():
    weights = {1: 4, 2: 7, 3: 2}
    graph = [[0] * 4 for _ in range(4)]
    for leaf, weight in weights.items():
        graph[0][leaf] = graph[leaf][0] = weight
    assert spanning_tree_weight(graph) == sum(weights.values())


def test_spanning_tree_uniform_complete_graph():
    weight, size = 3, 5
    graph = [[0 if i == j else weight for j in range(size)] for i in range(size)]
    assert spanning_tree_weight(graph) == weight * (size - 1)


def test_spanning_tree_ignores_unreachable():
    graph = [[0, 5, 0], [5, 0, 0], [0, 0, 0]]
    assert spanning_tree_weight(graph) == 5


def test_spanning_tree_rejects_ragged_matrix():
    with pytest.raises(ValueError):
        spanning_tree_weight([[0, 1], [1]])


@given(st.lists(st.integers()), st.lists(st.integers()))
def test_merge_of_sorted_inputs(left, right):
    left.sort()
    right.sort()
    assert merge(left, right) == sorted(left + right)


def test_merge_keeps_left_first_on_ties():
    left = [(1, "left")]
    right = [(1, "left")]
    first, second = merge([1.0], [1])
    assert isinstance(first, float) and second == 1
    assert merge(left, right) == left + right


@given(st.lists(st.integers()))
def test_merge_sort_sorts(values):
    original = list(values)
    assert merge_sort(values) == sorted(original)
    assert values == original


def test_meeting_order_example():
    starts = [1, 3, 0, 5, 8, 5]
    ends = [2, 4, 6, 7, 9, 9]
    assert meeting_order(starts, ends) == [1, 2, 4, 5]


def test_max_activities_example():
    assert max_activities([1, 3, 0, 5, 8, 5], [2, 4, 6, 7, 9, 9]) == 4


def test_no_meetings():
    assert meeting_order([], []) == []
    assert max_activities([], []) == 0


def test_mismatched_lengths():
    with pytest.raises(ValueError):
        meeting_order([1, 2], [3])
    with pytest.raises(ValueError):
        max_activities([1], [2, 3])


intervals = st.lists(
    st.tuples(st.integers(min_value=0, max_value=50), st.integers(min_value=0, max_value=20)),
    max_size=25,
)


@given(intervals)
def test_selected_meetings_do_not_overlap(pairs):
    starts = [start for start, _ in pairs]
    ends = [start + length for start, length in pairs]
    chosen = meeting_order(starts, ends)
    assert len(set(chosen)) == len(chosen)
    assert max_activities(starts, ends) == len(chosen)
    for earlier, later in zip(chosen, chosen[1:]):
        assert starts[later - 1] >= ends[earlier - 1]
        assert ends[later - 1] >= ends[earlier - 1]
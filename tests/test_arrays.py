from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from arraydrills.arrays import (
    is_sorted,
    largest_two,
    longest_subarray_with_sum,
    longest_subarray_with_sum_positive,
    majority_element,
    missing_number,
    move_zeros_to_end,
    remove_duplicates,
    rotate_left,
    sort_zeros_ones_twos,
    sorted_union,
    two_sum,
    two_sum_sorted,
)


def test_largest_two_tracks_previous_maximum():
    assert largest_two([3, 1, 4, 1, 5]) == (4, 5)


def test_largest_two_when_first_is_largest():
    assert largest_two([5, 3, 1]) == (None, 5)


def test_largest_two_empty_raises():
    with pytest.raises(ValueError):
        largest_two([])


@given(st.lists(st.integers(), min_size=1))
def test_largest_two_max_is_max(items):
    previous, largest = largest_two(items)
    assert largest == max(items)
    assert previous is None or previous < largest


@pytest.mark.parametrize("items", [[], [7], [2, 1], [1, 2, 3], [3, 2, 1], [5, 5, 2]])
def test_is_sorted_true(items):
    assert is_sorted(items) is True


@pytest.mark.parametrize("items", [[1, 3, 2], [2, 1, 3], [1, 2, 2]])
def test_is_sorted_false(items):
    assert is_sorted(items) is False


@given(st.lists(st.integers(), min_size=3, unique=True))
def test_is_sorted_accepts_both_directions(items):
    assert is_sorted(sorted(items))
    assert is_sorted(sorted(items, reverse=True))


def test_remove_duplicates_example():
    assert remove_duplicates([1, 1, 2, 3, 3]) == [1, 2, 3]


@given(st.lists(st.integers()))
def test_remove_duplicates_on_sorted_input(items):
    assert remove_duplicates(sorted(items)) == sorted(set(items))


def test_rotate_left_example():
    assert rotate_left([1, 2, 3, 4, 5], 2) == [3, 4, 5, 1, 2]


def test_rotate_left_empty():
    assert rotate_left([], 3) == []


@given(st.lists(st.integers(), min_size=1), st.integers(min_value=0, max_value=100))
def test_rotate_left_round_trip(items, n):
    rotated = rotate_left(items, n)
    assert rotate_left(rotated, len(items) - n % len(items)) == items
    assert rotate_left(items, n + len(items)) == rotated


def test_move_zeros_example():
    assert move_zeros_to_end([0, 1, 0, 3, 12]) == [1, 3, 12, 0, 0]


@given(st.lists(st.integers(min_value=-3, max_value=3)))
def test_move_zeros_preserves_items(items):
    result = move_zeros_to_end(items)
    assert Counter(result) == Counter(items)
    assert [v for v in result if v != 0] == [v for v in items if v != 0]
    zeros = items.count(0)
    assert result[len(result) - zeros:] == [0] * zeros


def test_sorted_union_example():
    assert sorted_union([1, 2, 3], [2, 3, 4, 5]) == [1, 2, 3, 4, 5]


@given(st.lists(st.integers()), st.lists(st.integers()))
def test_sorted_union_invariants(first, second):
    result = sorted_union(first, second)
    assert all(a < b for a, b in zip(result, result[1:]))
    assert set(result) == set(first) | set(second)


@given(st.data())
def test_missing_number_recovers_removed(data):
    n = data.draw(st.integers(min_value=1, max_value=60))
    missing = data.draw(st.integers(min_value=1, max_value=n))
    values = data.draw(st.permutations([x for x in range(1, n + 1) if x != missing]))
    assert missing_number(values, n) == missing


def test_missing_number_too_few_values():
    with pytest.raises(ValueError):
        missing_number([1, 2], 5)


def test_missing_number_bad_n():
    with pytest.raises(ValueError):
        missing_number([], 0)


def test_longest_positive_subarray_example():
    assert longest_subarray_with_sum_positive([1, 2, 3, 1, 1, 1, 1, 4, 2, 3], 3) == [1, 1, 1]


def test_longest_positive_subarray_none():
    assert longest_subarray_with_sum_positive([5, 6], 1) == []


@given(st.lists(st.integers(min_value=0, max_value=9)), st.integers(min_value=0, max_value=30))
def test_longest_positive_subarray_sums_to_target(items, target):
    result = longest_subarray_with_sum_positive(items, target)
    if result:
        assert sum(result) == target
        assert any(items[i:i + len(result)] == result for i in range(len(items)))


def test_longest_subarray_whole_sequence():
    items = [1, -1, 5, -2, 3]
    assert longest_subarray_with_sum(items, sum(items)) == len(items)


def test_longest_subarray_none():
    assert longest_subarray_with_sum([1, 2], 10) == 0


@given(st.lists(st.integers(min_value=-5, max_value=5), min_size=1), st.data())
def test_longest_subarray_at_least_found_run(items, data):
    start = data.draw(st.integers(min_value=0, max_value=len(items) - 1))
    stop = data.draw(st.integers(min_value=start + 1, max_value=len(items)))
    target = sum(items[start:stop])
    assert longest_subarray_with_sum(items, target) >= 1


def test_two_sum_example():
    assert two_sum([2, 7, 11, 15], 9) == (0, 1)


def test_two_sum_absent():
    assert two_sum([1, 2], 10) is None


@given(st.lists(st.integers(min_value=-20, max_value=20), min_size=2), st.integers(-40, 40))
def test_two_sum_result_sums_to_target(items, target):
    result = two_sum(items, target)
    if result is not None:
        i, j = result
        assert items[i] + items[j] == target


def test_two_sum_sorted_absent():
    assert two_sum_sorted([1, 2], 10) is None


@given(st.lists(st.integers(min_value=-20, max_value=20), min_size=2), st.integers(-40, 40))
def test_two_sum_sorted_result_sums_to_target(items, target):
    result = two_sum_sorted(items, target)
    ordered = sorted(items)
    if result is not None:
        left, right = result
        assert left < right
        assert ordered[left] + ordered[right] == target


@given(st.lists(st.sampled_from([0, 1, 2])))
def test_sort_zeros_ones_twos_sorts(items):
    assert sort_zeros_ones_twos(items) == sorted(items)


def test_majority_example():
    assert majority_element([2, 2, 1, 1, 1, 2, 2]) == 2


def test_majority_empty_raises():
    with pytest.raises(ValueError):
        majority_element([])


@given(st.integers(-5, 5), st.lists(st.integers(-5, 5)), st.randoms())
def test_majority_finds_true_majority(major, others, rnd):
    items = others + [major] * (len(others) + 1)
    rnd.shuffle(items)
    assert majority_element(items) == major
# arraydrills

A small collection of classic array exercises written as plain Python
functions. They take ordinary iterables or sequences and return new values;
no input is ever modified in place.

## Installation

```
pip install arraydrills
```

To run the test suite, install the test extra:

```
pip install "arraydrills[test]"
pytest
```

## Modules

### `arraydrills.sorting`

Each sort accepts any iterable of mutually comparable items and returns a new
ascending list:

- `selection_sort(values)`
- `bubble_sort(values)`: stops early once a pass makes no swap
- `insertion_sort(values)`
- `merge_sort(values)`: stable
- `recursive_bubble_sort(values)`
- `recursive_insertion_sort(values)`
- `quick_sort(values)`: first item of each range is the pivot

Counting helpers:

- `count_occurrences(values)`: a list of `(value, count)` pairs in order of
  each value's first appearance
- `most_frequent(values)`: the most common value, the smallest one on a tie;
  raises `ValueError` for empty input

```python
from arraydrills.sorting import merge_sort, most_frequent

merge_sort([510, 0, 15, 11, 51, 3, 10, 10, 20, 300])
# [0, 3, 10, 10, 11, 15, 20, 51, 300, 510]
most_frequent([510, 0, 15, 11, 51, 3, 10, 10, 20, 300])
# 10
```

### `arraydrills.search`

Binary searches over rotated sorted sequences:

- `search_rotated(values, target)`: index of `target` in a rotated sorted
  sequence of distinct items, or `None` when it is absent
- `contains_rotated(values, target)`: `True`/`False` membership test that
  also copes with repeated items
- `min_in_rotated(values)`: smallest item of a rotated sorted sequence of
  distinct items; raises `ValueError` for an empty sequence or one the search
  can tell is not rotated sorted
- `single_non_duplicate(values)`: the one item of a sorted sequence that is
  not part of an adjacent pair; raises `ValueError` when none is found

```python
from arraydrills.search import search_rotated, single_non_duplicate

search_rotated([7, 8, 9, 1, 2, 3, 4, 5, 6], 1)          # 3
single_non_duplicate([1, 1, 2, 2, 3, 3, 4, 5, 5, 6, 6])  # 4
```

### `arraydrills.arrays`

Common list problems:

- `largest_two(values)`: `(previous_max, max)` from one pass, where
  `previous_max` is the running maximum just before the final maximum first
  appeared (`None` if the maximum is the first item); raises `ValueError` for
  empty input
- `is_sorted(values)`: whether the items run in one direction; the direction
  is taken from the last two items, and fewer than three items count as sorted
- `remove_duplicates(values)`: collapses runs of equal adjacent items
- `rotate_left(values, n)`: rotation by `n` places, modulo the length
- `move_zeros_to_end(values)`: zeros moved to the end, other items kept in
  order
- `sorted_union(first, second)`: distinct items of both inputs, ascending
- `missing_number(values, n)`: the number from `1..n` missing among the first
  `n - 1` values; raises `ValueError` if `n < 1` or too few values are given
- `longest_subarray_with_sum_positive(values, target)`: the longest
  contiguous run summing to `target` (earliest on a tie, empty list if none);
  meant for non-negative items
- `longest_subarray_with_sum(values, target)`: the length of the longest such
  run, using prefix sums, so negative items are allowed
- `two_sum(values, target)`: a pair of indices `(i, j)` whose values add up
  to `target`, or `None`; each value maps to its last index, and a partner at
  index 0 is never reported
- `two_sum_sorted(values, target)`: two-pointer search over the values in
  ascending order; the returned indices refer to that sorted order
- `sort_zeros_ones_twos(values)`: one-pass Dutch national flag partition;
  any item other than 0 or 1 is treated as a 2
- `majority_element(values)`: the Boyer–Moore majority candidate, which is
  the majority item whenever one fills more than half the input; raises
  `ValueError` for empty input

## Command line

The package installs an `arraydrills` command that reads standard input and
writes back the integer it starts with, without a trailing newline:

```
echo 42 | arraydrills
```

Input that does not begin with an integer (after leading whitespace) gives
`0`, and values outside the signed 32-bit range are clamped to its limits.

## What it does not do

The command only echoes an integer. None of the sorting, searching or list
functions is reachable from the command line; use them from Python.
"""Everyday array exercises: maxima, rotations, unions, subarrays and pair sums."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import reduce
from itertools import accumulate, groupby, pairwise
from operator import xor
from typing import Any, TypeVar

T = TypeVar("T")


def largest_two(values: Iterable[Any]) -> tuple[Any | None, Any]:
    """Return ``(previous_max, max)`` from one pass over ``values``.

    ``previous_max`` is the running maximum just before the final maximum
    first appeared, or None when the maximum is the first item.  Raises
    ValueError when there are no values.
    """
    items = list(values)
    if not items:
        raise ValueError("largest_two() of an empty sequence")
    previous = None
    largest = items[0]
    for value in items[1:]:
        if value > largest:
            previous, largest = largest, value
    return previous, largest


def is_sorted(values: Iterable[Any]) -> bool:
    """Tell whether ``values`` run in one direction throughout.

    The direction is taken from the last two items: if the last is not
    greater than the one before it, the whole sequence must be
    non-increasing; otherwise it must be non-decreasing.  Sequences of fewer
    than three items count as sorted.
    """
    items = list(values)
    if len(items) < 3:
        return True
    pairs = list(pairwise(items))
    if items[-1] <= items[-2]:
        return all(later <= earlier for earlier, later in pairs)
    return all(earlier <= later for earlier, later in pairs)


def remove_duplicates(values: Iterable[T]) -> list[T]:
    """Collapse runs of equal adjacent items, as in a sorted sequence."""
    return [value for value, _ in groupby(values)]


def rotate_left(values: Iterable[T], n: int) -> list[T]:
    """Return ``values`` rotated ``n`` places to the left."""
    items = list(values)
    if not items:
        return []
    n %= len(items)
    return items[n:] + items[:n]


def move_zeros_to_end(values: Iterable[Any]) -> list[Any]:
    """Move every zero to the end, keeping the other items in order."""
    items = list(values)
    non_zero = [value for value in items if value != 0]
    return non_zero + [0] * (len(items) - len(non_zero))


def sorted_union(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Return the distinct items of both inputs in ascending order."""
    return sorted({*first, *second})


def missing_number(values: Iterable[int], n: int) -> int:
    """Return the number from 1..n that is missing among the first n-1 values.

    Raises ValueError when ``n`` is below 1 or fewer than n-1 values are given.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    present = list(values)[: n - 1]
    if len(present) < n - 1:
        raise ValueError(f"expected {n - 1} values, got {len(present)}")
    return reduce(xor, present, 0) ^ reduce(xor, range(1, n + 1), 0)


def longest_subarray_with_sum_positive(values: Sequence[int], target: int) -> list[int]:
    """Return the longest contiguous run summing to ``target``.

    Meant for non-negative items: a run is abandoned as soon as its sum
    exceeds the target.  The earliest of equally long runs wins; an empty
    list means there is none.
    """
    items = list(values)
    best_start, best_stop = 0, 0
    for start in range(len(items)):
        for stop, total in enumerate(accumulate(items[start:]), start + 1):
            if total == target and stop - start > best_stop - best_start:
                best_start, best_stop = start, stop
            if total > target:
                break
    return items[best_start:best_stop]


def longest_subarray_with_sum(values: Iterable[int], target: int) -> int:
    """Return the length of the longest contiguous run summing to ``target``.

    Uses prefix sums, so negative items are allowed.  For each prefix sum the
    most recent index at which it occurred is kept.
    """
    last_index: dict[int, int] = {}
    longest = 0
    for index, total in enumerate(accumulate(values)):
        if total == target:
            longest = index + 1
        earlier = last_index.get(total - target)
        if earlier is not None:
            longest = max(longest, index - earlier)
        last_index[total] = index
    return longest


def two_sum(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return indices ``(i, j)`` with ``values[i] + values[j] == target``, or None.

    Each value maps to the last index it occurs at.  A partner found at
    index 0 is never reported.
    """
    items = list(values)
    last_index = {value: index for index, value in enumerate(items)}
    for index, value in enumerate(items):
        partner = last_index.get(target - value)
        if partner:
            return index, partner
    return None


def two_sum_sorted(values: Iterable[int], target: int) -> tuple[int, int] | None:
    """Find a pair summing to ``target`` by closing in from both ends.

    The indices returned refer to the values in ascending order; None means
    there is no such pair.
    """
    items = sorted(values)
    left, right = 0, len(items) - 1
    while left < right:
        total = items[left] + items[right]
        if total == target:
            return left, right
        if total < target:
            left += 1
        else:
            right -= 1
    return None


def sort_zeros_ones_twos(values: Iterable[int]) -> list[int]:
    """Sort a sequence of 0s, 1s and 2s in one pass (any other item counts as 2)."""
    items = list(values)
    low, mid, high = 0, 0, len(items) - 1
    while mid <= high:
        if items[mid] == 0:
            items[low], items[mid] = items[mid], items[low]
            low += 1
            mid += 1
        elif items[mid] == 1:
            mid += 1
        else:
            items[high], items[mid] = items[mid], items[high]
            high -= 1
    return items


def majority_element(values: Iterable[Any]) -> Any:
    """Return the Boyer-Moore majority candidate.

    The result is the majority item whenever one item fills more than half
    of the sequence.  Raises ValueError when there are no values.
    """
    items = list(values)
    if not items:
        raise ValueError("majority_element() of an empty sequence")
    candidate = items[0]
    count = 0
    for value in items:
        if value == candidate:
            count += 1
        elif count > 0:
            count -= 1
        else:
            count = 1
            candidate = value
    return candidate
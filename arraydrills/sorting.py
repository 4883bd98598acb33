"""Counting helpers and classic comparison sorts.

Every sort takes any iterable of mutually comparable items and returns a new
ascending list, leaving the input untouched.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable
from typing import Any, TypeVar

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


def count_occurrences(values: Iterable[H]) -> list[tuple[H, int]]:
    """Return ``(value, count)`` pairs in order of each value's first appearance."""
    return list(Counter(values).items())


def most_frequent(values: Iterable[H]) -> H:
    """Return the most frequent value; ties go to the smallest value.

    Raises ValueError when there are no values.
    """
    counts = Counter(values)
    if not counts:
        raise ValueError("most_frequent() of an empty sequence")
    return min(counts, key=lambda value: (-counts[value], value))


def selection_sort(values: Iterable[T]) -> list[T]:
    """Sort by repeatedly moving the smallest remaining item into place."""
    items = list(values)
    for i in range(len(items)):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        if smallest != i:
            items[i], items[smallest] = items[smallest], items[i]
    return items


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Sort by adjacent swaps, stopping early once a pass swaps nothing."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Sort by inserting each item into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[T]) -> list[T]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def recursive_bubble_sort(values: Iterable[T]) -> list[T]:
    """Bubble sort in which each pass recurses on the shorter unsorted prefix."""
    items = list(values)

    def _pass(length: int) -> None:
        swapped = False
        for i in range(length - 1):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if length - 1 > 0 and swapped:
            _pass(length - 1)

    _pass(len(items))
    return items


def recursive_insertion_sort(values: Iterable[T]) -> list[T]:
    """Insertion sort that recurses once per inserted position."""
    items = list(values)

    def _insert(index: int) -> None:
        if index == len(items):
            return
        for i in range(index - 1, -1, -1):
            if items[i + 1] < items[i]:
                items[i], items[i + 1] = items[i + 1], items[i]
            else:
                break
        _insert(index + 1)

    _insert(0)
    return items


def _partition(items: list[Any], low: int, high: int) -> int:
    pivot = items[low]
    i, j = low + 1, high
    while i <= j:
        while i <= high and items[i] <= pivot:
            i += 1
        while items[j] > pivot:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
    items[low], items[j] = items[j], items[low]
    return j


def quick_sort(values: Iterable[T]) -> list[T]:
    """Quick sort using the first item of each range as pivot."""
    items = list(values)

    def _sort(low: int, high: int) -> None:
        if high > low:
            pivot_index = _partition(items, low, high)
            _sort(low, pivot_index - 1)
            _sort(pivot_index + 1, high)

    _sort(0, len(items) - 1)
    return items
"""Binary searches over rotated sorted sequences and paired sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def search_rotated(values: Sequence[Any], target: Any) -> int | None:
    """Return the index of ``target`` in a rotated sorted sequence of distinct items.

    Returns None when the target is absent.
    """
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return mid
        if values[low] <= values[mid]:
            if values[low] <= target <= values[mid]:
                high = mid - 1
            else:
                low = mid + 1
        else:
            if values[mid] <= target <= values[high]:
                low = mid + 1
            else:
                high = mid - 1
    return None


def contains_rotated(values: Sequence[Any], target: Any) -> bool:
    """Tell whether ``target`` occurs in a rotated sorted sequence that may repeat items."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return True
        if values[low] == values[mid] == values[high]:
            low += 1
            high -= 1
            continue
        if values[low] <= values[mid]:
            if values[low] <= target < values[mid]:
                high = mid - 1
            else:
                low = mid + 1
        else:
            if values[mid] < target <= values[high]:
                low = mid + 1
            else:
                high = mid - 1
    return False


def min_in_rotated(values: Sequence[Any]) -> Any:
    """Return the smallest item of a rotated sorted sequence of distinct items.

    Raises ValueError for an empty sequence or one that is not a rotated
    sorted sequence in a way the search can detect.
    """
    if not values:
        raise ValueError("min_in_rotated() of an empty sequence")
    low, high = 0, len(values) - 1
    answer = values[0]
    while low <= high:
        mid = (low + high) // 2
        answer = min(answer, values[mid])
        moved = False
        if values[low] <= values[mid]:
            answer = min(answer, values[low])
            low = mid + 1
            moved = True
        if values[mid] <= values[high]:
            high = mid - 1
            moved = True
        if not moved:
            raise ValueError("sequence is not a rotated sorted sequence")
    return answer


def single_non_duplicate(values: Sequence[Any]) -> Any:
    """Return the one item of a sorted sequence that is not part of an adjacent pair.

    Raises ValueError when no such item can be found.
    """
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if low == high:
            return values[mid]
        if mid > low and values[mid - 1] == values[mid]:
            if (mid - 1 - low) % 2 == 0:
                low = mid + 1
            else:
                high = mid - 2
        elif values[mid] == values[mid + 1]:
            if (high - (mid + 1)) % 2 == 0:
                high = mid - 1
            else:
                low = mid + 2
        else:
            return values[mid]
    raise ValueError("no unpaired item in sequence")
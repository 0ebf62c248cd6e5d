"""In-place heap, merge and quick sorts over mutable sequences."""

from __future__ import annotations

import operator
from collections.abc import Callable, MutableSequence, Sequence
from typing import Any


def _sift_down(
    arr: MutableSequence[Any], root: int, end: int, before: Callable[[Any, Any], bool]
) -> None:
    while True:
        chosen = root
        for child in (2 * root + 1, 2 * root + 2):
            if child < end and before(arr[chosen], arr[child]):
                chosen = child
        if chosen == root:
            return
        arr[root], arr[chosen] = arr[chosen], arr[root]
        root = chosen


def _heap_sort(arr: MutableSequence[Any], before: Callable[[Any, Any], bool]) -> None:
    n = len(arr)
    for root in range(n // 2 - 1, -1, -1):
        _sift_down(arr, root, n, before)
    for end in range(n - 1, 0, -1):
        arr[0], arr[end] = arr[end], arr[0]
        _sift_down(arr, 0, end, before)


def heap_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` ascending in place using a max-heap."""
    _heap_sort(arr, operator.lt)


def heap_sort_descending(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` descending in place using a min-heap."""
    _heap_sort(arr, operator.gt)


def _merge(left: Sequence[Any], right: Sequence[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if right[j] < left[i]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _merge_sorted(items: Sequence[Any]) -> list[Any]:
    if len(items) <= 1:
        return list(items)
    mid = len(items) // 2
    return _merge(_merge_sorted(items[:mid]), _merge_sorted(items[mid:]))


def merge_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` ascending in place by top-down merge sort."""
    arr[:] = _merge_sorted(list(arr))


def partition(arr: MutableSequence[Any], left: int, right: int) -> int:
    """Partition ``arr[left:right + 1]`` around its first element; return its final index."""
    pivot = arr[left]
    while left < right:
        while left < right and arr[right] >= pivot:
            right -= 1
        arr[left] = arr[right]
        while left < right and arr[left] <= pivot:
            left += 1
        arr[right] = arr[left]
    arr[left] = pivot
    return left


def quick_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` ascending in place by quicksort."""
    pending = [(0, len(arr) - 1)]
    while pending:
        left, right = pending.pop()
        if left < right:
            mid = partition(arr, left, right)
            pending.append((left, mid - 1))
            pending.append((mid + 1, right))
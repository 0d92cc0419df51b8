"""Classic comparison and distribution sorts.

Every function takes an iterable and returns a new sorted list in ascending
order; the input is never modified.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")

__all__ = [
    "bubble_sort",
    "insertion_sort",
    "selection_sort",
    "merge_sort",
    "quick_sort",
    "heapify",
    "heap_sort",
    "bucket_sort",
    "radix_sort",
]


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    items = list(values)
    n = len(items)
    for done in range(n - 1):
        for j in range(n - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Sort by inserting each element into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def selection_sort(values: Iterable[T]) -> list[T]:
    """Sort by moving the smallest remaining element to the front."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        min_idx = min(range(i, n), key=items.__getitem__)
        if min_idx != i:
            items[i], items[min_idx] = items[min_idx], items[i]
    return items


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
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
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def quick_sort(values: Iterable[T]) -> list[T]:
    """Quick sort using the last element as pivot.

    Each partition gathers the elements smaller than the pivot, then the
    pivot and its equals, then the larger ones.
    """
    items = list(values)
    if len(items) <= 1:
        return items
    pivot = items[-1]
    smaller = [x for x in items if x < pivot]
    equal = [x for x in items if x == pivot]
    larger = [x for x in items if x > pivot]
    return quick_sort(smaller) + equal + quick_sort(larger)


def _sift_down(items: list[T], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heapify(values: Iterable[T]) -> list[T]:
    """Return the elements rearranged into a max-heap (0-based layout)."""
    items = list(values)
    for i in range(len(items) // 2 - 1, -1, -1):
        _sift_down(items, len(items), i)
    return items


def heap_sort(values: Iterable[T]) -> list[T]:
    """Sort by building a max-heap and repeatedly extracting its root."""
    items = heapify(values)
    for end in range(len(items) - 1, -1, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Sort floats in the half-open range [0, 1) using one bucket per element.

    Raises ValueError for a value outside that range.
    """
    items = list(values)
    n = len(items)
    buckets: list[list[float]] = [[] for _ in range(n)]
    for value in items:
        if not 0 <= value < 1:
            raise ValueError(f"bucket sort needs values in [0, 1), got {value!r}")
        buckets[int(n * value)].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]


def _counting_sort_by_digit(items: list[int], exp: int) -> list[int]:
    counts = [0] * 10
    for value in items:
        counts[(value // exp) % 10] += 1
    for digit in range(1, 10):
        counts[digit] += counts[digit - 1]
    output = [0] * len(items)
    for value in reversed(items):
        digit = (value // exp) % 10
        counts[digit] -= 1
        output[counts[digit]] = value
    return output


def radix_sort(values: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort of non-negative integers.

    Raises ValueError for a negative value.
    """
    items = list(values)
    if not items:
        return items
    if any(value < 0 for value in items):
        raise ValueError("radix sort needs non-negative integers")
    largest = max(items)
    exp = 1
    while largest // exp > 0:
        items = _counting_sort_by_digit(items, exp)
        exp *= 10
    return items
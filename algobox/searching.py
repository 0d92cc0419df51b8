"""Linear and binary search over sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

__all__ = ["linear_search", "binary_search", "binary_search_position"]


def linear_search(values: Sequence[Any], key: Any) -> int | None:
    """Return the index of the first element equal to key, or None."""
    return next((i for i, value in enumerate(values) if value == key), None)


def binary_search(values: Sequence[Any], key: Any) -> int | None:
    """Return an index of key in the ascending sequence values, or None."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == key:
            return mid
        if values[mid] > key:
            high = mid - 1
        else:
            low = mid + 1
    return None


def binary_search_position(values: Sequence[Any], key: Any) -> int | None:
    """Return the 1-based location of key in the ascending sequence, or None."""
    index = binary_search(values, key)
    return None if index is None else index + 1
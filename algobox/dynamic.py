"""Dynamic-programming classics: Kadane, subset sum, LCS and a set-union puzzle."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

__all__ = [
    "max_subarray_sum",
    "subset_sum",
    "lcs_length",
    "largest_union_excluding_one",
]


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane)."""
    best: int | None = None
    running = 0
    for value in values:
        running += value
        best = running if best is None else max(best, running)
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("max_subarray_sum needs at least one value")
    return best


def subset_sum(values: Iterable[int], target: int) -> bool:
    """Tell whether some subset of the non-negative values sums to target."""
    if target < 0:
        raise ValueError("target must not be negative")
    reachable = {0}
    for value in values:
        if value < 0:
            raise ValueError("values must not be negative")
        reachable |= {s + value for s in reachable if s + value <= target}
        if target in reachable:
            return True
    return target in reachable


def lcs_length(s: str, t: str) -> int:
    """Return the length of the longest common subsequence of s and t."""
    previous = [0] * (len(t) + 1)
    for a in s:
        current = [0]
        for j, b in enumerate(t, start=1):
            if a == b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(current[j - 1], previous[j]))
        previous = current
    return previous[-1]


def largest_union_excluding_one(sets: Iterable[Iterable[int]]) -> int:
    """Return the largest union of sets that is smaller than the union of all.

    For each element, the sets that do not hold it are joined; the size of
    the largest such union is returned, or 0 when there is none.
    """
    groups: list[frozenset[int]] = [frozenset(group) for group in sets]
    universe = frozenset().union(*groups)
    best = 0
    for value in universe:
        union = frozenset().union(*(g for g in groups if value not in g))
        if len(union) != len(universe):
            best = max(best, len(union))
    return best


def _as_sets(sets: Sequence[Iterable[int]]) -> list[frozenset[int]]:
    return [frozenset(group) for group in sets]
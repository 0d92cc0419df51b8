import pytest

from algobox.dynamic import (
    largest_union_excluding_one,
    lcs_length,
    max_subarray_sum,
    subset_sum,
)

KADANE_EXAMPLE = [-2, -3, 4, -1, -2, 1, 5, -3]


def test_kadane_source_example():
    assert max_subarray_sum(KADANE_EXAMPLE) == 7


def test_kadane_all_negative_gives_largest_element():
    values = [-8, -3, -6, -2, -5, -4]
    assert max_subarray_sum(values) == max(values)


def test_kadane_bounds():
    values = [3, -1, 4, -1, -5, 9, -2, 6]
    result = max_subarray_sum(values)
    assert max(values) <= result <= sum(v for v in values if v > 0)


def test_kadane_all_positive_is_total():
    values = [1, 2, 3, 4]
    assert max_subarray_sum(values) == sum(values)


def test_kadane_empty_raises():
    with pytest.raises(ValueError):
        max_subarray_sum([])


def test_subset_sum_source_example():
    assert subset_sum([1, 5, 3, 7, 4], 12) is True


def test_subset_sum_zero_target():
    assert subset_sum([], 0) is True


def test_subset_sum_whole_set():
    values = [3, 34, 4, 12, 5, 2]
    assert subset_sum(values, sum(values)) is True
    assert subset_sum(values, sum(values) + 1) is False


def test_subset_sum_unreachable():
    assert subset_sum([2, 4], 5) is False


def test_subset_sum_negative_target_raises():
    with pytest.raises(ValueError):
        subset_sum([1, 2], -1)


def test_lcs_with_itself():
    assert lcs_length("dynamic", "dynamic") == len("dynamic")


def test_lcs_of_subsequence_is_its_length():
    assert lcs_length("abcde", "ace") == len("ace")


def test_lcs_empty():
    assert lcs_length("", "abc") == 0
    assert lcs_length("abc", "") == 0


def test_lcs_symmetric_and_bounded():
    s, t = "AGGTAB", "GXTXAYB"
    result = lcs_length(s, t)
    assert result == lcs_length(t, s)
    assert result <= min(len(s), len(t))


def test_largest_union_small_case():
    assert largest_union_excluding_one([[1, 2], [2, 3]]) == 2


def test_largest_union_is_smaller_than_universe():
    sets = [[1, 2, 3], [3, 4], [5], [1, 5, 6]]
    universe = {x for group in sets for x in group}
    result = largest_union_excluding_one(sets)
    assert 0 <= result < len(universe)


def test_largest_union_empty():
    assert largest_union_excluding_one([]) == 0
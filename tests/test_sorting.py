from collections import Counter

import pytest

from algokit.sorting import (
    MOD,
    count_smaller,
    group_anagrams,
    remove_duplicates,
    sort_array,
    sum_subseq_widths,
    top_k_frequent,
)


@pytest.mark.parametrize(
    "nums",
    [[], [1], [5, 2, 3, 1], [5, 1, 1, 2, 0, 0], [-3, 10, -3, 7, 0, 2, 2]],
)
def test_sort_array_matches_sorted(nums):
    assert sort_array(nums) == sorted(nums)


def test_sort_array_does_not_mutate_input():
    nums = [3, 1, 2]
    sort_array(nums)
    assert nums == [3, 1, 2]


def test_count_smaller_worked_example():
    assert count_smaller([5, 2, 6, 1]) == [2, 1, 1, 0]


def test_count_smaller_sorted_inputs():
    assert count_smaller(list(range(8))) == [0] * 8
    assert count_smaller(list(range(8))[::-1]) == list(range(7, -1, -1))


def test_count_smaller_equal_values_not_counted():
    assert count_smaller([4, 4, 4]) == [0, 0, 0]
    assert count_smaller([-1, -1]) == [0, 0]


def test_count_smaller_last_is_zero_and_bounded():
    nums = [9, -2, 7, 7, 3, 0, 11, -5]
    counts = count_smaller(nums)
    assert counts[-1] == 0
    assert all(c <= len(nums) - 1 - i for i, c in enumerate(counts))


def test_top_k_frequent_example():
    assert top_k_frequent([1, 1, 1, 2, 2, 3], 2) == [1, 2]
    assert top_k_frequent([1], 1) == [1]


def test_top_k_frequent_tie_prefers_larger():
    assert top_k_frequent([4, 9, 4, 9], 1) == [9]


def test_top_k_frequent_k_too_large():
    with pytest.raises(ValueError):
        top_k_frequent([1, 2], 3)


def test_remove_duplicates_example():
    assert remove_duplicates([1, 1, 1, 2, 2, 3]) == [1, 1, 2, 2, 3]
    assert remove_duplicates([0, 0, 1, 1, 1, 1, 2, 3, 3]) == [0, 0, 1, 1, 2, 3, 3]


def test_remove_duplicates_invariants():
    nums = [5, 5, 5, 5, -1, 2, 2, 2, 8]
    result = remove_duplicates(nums)
    assert result == sorted(result)
    assert set(result) == set(nums)
    assert max(Counter(result).values()) <= 2


def test_sum_subseq_widths_example():
    assert sum_subseq_widths([2, 1, 3]) == 6


def test_sum_subseq_widths_small_cases():
    assert sum_subseq_widths([7]) == 0
    assert sum_subseq_widths([4, 4, 4, 4]) == 0
    assert sum_subseq_widths([3, 10]) == 10 - 3


def test_sum_subseq_widths_order_independent_and_reduced():
    nums = [100000] * 3 + list(range(1, 200))
    result = sum_subseq_widths(nums)
    assert 0 <= result < MOD
    assert sum_subseq_widths(nums[::-1]) == result


def test_group_anagrams_example():
    groups = group_anagrams(["eat", "tea", "tan", "ate", "nat", "bat"])
    normalised = sorted(sorted(group) for group in groups)
    assert normalised == [["ate", "eat", "tea"], ["bat"], ["nat", "tan"]]


def test_group_anagrams_edge_cases():
    assert group_anagrams([""]) == [[""]]
    assert group_anagrams(["a"]) == [["a"]]
    assert group_anagrams([]) == []


def test_group_anagrams_keeps_every_word():
    words = ["ab", "ba", "abc", "cab", "x", "ab"]
    groups = group_anagrams(words)
    assert sorted(w for g in groups for w in g) == sorted(words)
    assert all(len({"".join(sorted(w)) for w in g}) == 1 for g in groups)
"""Sorting-based algorithms: merge sort, inversion counts and grouping."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from heapq import merge

MOD = 10**9 + 7


def sort_array(nums: Iterable[int]) -> list[int]:
    """Return the values in ascending order using a stable merge sort."""
    items = list(nums)
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    return list(merge(sort_array(items[:mid]), sort_array(items[mid:])))


def count_smaller(nums: Sequence[int]) -> list[int]:
    """For each position, count the strictly smaller values to its right."""
    counts = [0] * len(nums)

    def sort(pairs: list[tuple[int, int]]) -> list[tuple[int, int]]:
        if len(pairs) <= 1:
            return pairs
        mid = len(pairs) // 2
        left, right = sort(pairs[:mid]), sort(pairs[mid:])
        merged: list[tuple[int, int]] = []
        taken_right = 0
        r = 0
        for value, index in left:
            while r < len(right) and right[r][0] < value:
                merged.append(right[r])
                r += 1
                taken_right += 1
            counts[index] += taken_right
            merged.append((value, index))
        merged.extend(right[r:])
        return merged

    sort([(value, index) for index, value in enumerate(nums)])
    return counts


def top_k_frequent(nums: Iterable[int], k: int) -> list[int]:
    """The ``k`` most frequent values; ties go to the larger value."""
    ranked = sorted(
        ((count, num) for num, count in Counter(nums).items()), reverse=True
    )
    if not 0 <= k <= len(ranked):
        raise ValueError(f"k must be between 0 and {len(ranked)}")
    return [num for _, num in ranked[:k]]


def remove_duplicates(nums: Iterable[int]) -> list[int]:
    """Sorted values with each one kept at most twice."""
    counts = Counter(nums)
    return [num for num in sorted(counts) for _ in range(min(counts[num], 2))]


def sum_subseq_widths(nums: Iterable[int]) -> int:
    """Sum of (max - min) over all non-empty subsequences, modulo 1e9+7."""
    values = sorted(nums)
    n = len(values)
    pow2 = [1] * (n + 1)
    for i in range(n):
        pow2[i + 1] = pow2[i] * 2 % MOD
    total = 0
    for i, value in enumerate(values):
        total = (total + (pow2[i] - pow2[n - i - 1]) * value) % MOD
    return total


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of each other, in first-seen order."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())
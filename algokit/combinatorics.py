"""Counting, subset and backtracking problems."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

MOD = 10**9 + 7
_COUNT_LIMIT = 2**31 - 1


def combination_sum4(nums: Iterable[int], target: int) -> int:
    """Number of ordered sequences drawn from ``nums`` that add up to ``target``.

    A zero target counts as having no sequences. Partial counts that would reach
    2**31 - 1 are left out, so results stay within a signed 32-bit range.
    """
    if target == 0:
        return 0
    if target < 0:
        raise ValueError("target must not be negative")
    values = list(nums)
    ways = [0] * (target + 1)
    ways[0] = 1
    for total in range(1, target + 1):
        for num in values:
            if num <= total and ways[total] + ways[total - num] < _COUNT_LIMIT:
                ways[total] += ways[total - num]
    return ways[target]


def can_partition(nums: Sequence[int]) -> bool:
    """Whether ``nums`` splits into two groups with equal sums."""
    if not nums:
        raise ValueError("nums must not be empty")
    if any(num < 0 for num in nums):
        raise ValueError("nums must not be negative")
    total = sum(nums)
    if total % 2:
        return False
    half = total // 2
    reachable = 1
    for num in nums:
        reachable |= reachable << num
    return bool(reachable >> half & 1)


def check_record(n: int) -> int:
    """Number of attendance records of length ``n`` that earn an award, modulo 1e9+7.

    A record uses ``A`` (absent), ``L`` (late) and ``P`` (present); it earns an
    award with fewer than two absences and never three lates in a row.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    # counts[late_run][absences]
    counts = [[1, 1], [1, 0], [0, 0]]
    for _ in range(n - 1):
        no_absence = sum(row[0] for row in counts) % MOD
        one_absence = sum(row[1] for row in counts) % MOD
        counts = [
            [no_absence, (no_absence + one_absence) % MOD],
            [counts[0][0], counts[0][1]],
            [counts[1][0], counts[1][1]],
        ]
    return sum(sum(row) for row in counts) % MOD


def _sums_by_size(values: Sequence[int]) -> list[set[int]]:
    by_size: list[set[int]] = [set() for _ in range(len(values) + 1)]
    by_size[0].add(0)
    for value in values:
        for size in reversed(range(len(values))):
            by_size[size + 1].update(s + value for s in by_size[size])
    return by_size


def split_array_same_average(nums: Sequence[int]) -> bool:
    """Whether ``nums`` splits into two non-empty groups with the same average."""
    n = len(nums)
    total = sum(nums)
    left = _sums_by_size(nums[: n // 2])
    right = _sums_by_size(nums[n // 2 :])
    for i, left_sums in enumerate(left):
        for j, right_sums in enumerate(right):
            size = i + j
            if size == 0 or size == n:
                continue
            if (total * size) % n:
                continue
            wanted = total * size // n
            if any(wanted - lsum in right_sums for lsum in left_sums):
                return True
    return False


def tallest_billboard(rods: Iterable[int]) -> int:
    """Greatest equal height two supports can reach, welded from disjoint sets of rods."""
    # Difference between the two supports -> tallest first support so far.
    best: dict[int, int] = {0: 0}
    for rod in rods:
        updated = dict(best)
        for diff, tall in best.items():
            for new_diff, new_tall in ((diff + rod, tall + rod), (diff - rod, tall)):
                if updated.get(new_diff, -1) < new_tall:
                    updated[new_diff] = new_tall
        best = updated
    return best[0]


def _pow(x: float, n: int) -> float:
    if n == 0:
        return 1.0
    if n == 1:
        return x
    half = _pow(x, n // 2)
    if n & 1:
        return half * half * x
    return half * half


def my_pow(x: float, n: int) -> float:
    """``x`` raised to the integer power ``n`` by repeated squaring."""
    if n < 0:
        return 1 / _pow(x, -n)
    return _pow(x, n)


def _place_queens(n: int) -> Iterator[list[str]]:
    columns: set[int] = set()
    falling: set[int] = set()
    rising: set[int] = set()
    board: list[str] = []

    def place(y: int) -> Iterator[list[str]]:
        if y == n:
            yield list(board)
            return
        for x in range(n):
            if x in columns or y - x in falling or y + x in rising:
                continue
            columns.add(x)
            falling.add(y - x)
            rising.add(y + x)
            board.append("." * x + "Q" + "." * (n - x - 1))
            yield from place(y + 1)
            board.pop()
            columns.discard(x)
            falling.discard(y - x)
            rising.discard(y + x)

    yield from place(0)


def solve_n_queens(n: int) -> list[list[str]]:
    """Every placement of ``n`` non-attacking queens on an ``n`` by ``n`` board."""
    if n < 0:
        raise ValueError("n must not be negative")
    return list(_place_queens(n))


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """All subsets of ``nums``; each element is first taken, then left out."""

    def build(index: int) -> Iterator[list[int]]:
        if index == len(nums):
            yield []
            return
        for rest in build(index + 1):
            yield [nums[index], *rest]
        yield from build(index + 1)

    return list(build(0))


def gray_code(n: int) -> list[int]:
    """An ``n``-bit Gray code starting at 0, always flipping the lowest bit that gives a new value."""
    if n < 0:
        raise ValueError("n must not be negative")
    return [i ^ (i >> 1) for i in range(1 << n)]


def max_containers(n: int, w: int, max_weight: int) -> int:
    """Containers of weight ``w`` that fit on an ``n`` by ``n`` deck under ``max_weight``."""
    if w <= 0:
        raise ValueError("w must be positive")
    return min(max_weight // w, n * n)


def min_sensors(n: int, m: int, k: int) -> int:
    """Fewest sensors of reach ``k`` that cover an ``n`` by ``m`` grid."""
    if k < 0:
        raise ValueError("k must not be negative")
    side = 2 * k + 1
    return -(-n // side) * -(-m // side)
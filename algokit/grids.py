"""Search and dynamic programming over rectangular grids."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterator, Sequence

_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _neighbours(y: int, x: int, rows: int, cols: int) -> Iterator[tuple[int, int]]:
    for dy, dx in _STEPS:
        ny, nx = y + dy, x + dx
        if 0 <= ny < rows and 0 <= nx < cols:
            yield ny, nx


def _dimensions(grid: Sequence[Sequence[object]]) -> tuple[int, int]:
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    cols = len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("grid rows must all have the same length")
    return len(grid), cols


def _square_size(grid: Sequence[Sequence[object]]) -> int:
    rows, cols = _dimensions(grid)
    if rows != cols:
        raise ValueError("grid must be square")
    return rows


def _bottleneck_path(values: Sequence[Sequence[float]], better_is_larger: bool) -> float:
    """Best achievable worst value over paths from the top-left to the bottom-right cell."""
    n = len(values)
    sign = -1 if better_is_larger else 1
    best = {(0, 0): values[0][0]}
    heap = [(sign * values[0][0], 0, 0)]
    while heap:
        key, y, x = heapq.heappop(heap)
        score = sign * key
        if (y, x) == (n - 1, n - 1):
            return score
        if best.get((y, x)) != score:
            continue
        for ny, nx in _neighbours(y, x, n, n):
            candidate = (
                min(score, values[ny][nx]) if better_is_larger else max(score, values[ny][nx])
            )
            known = best.get((ny, nx))
            if known is None or (candidate > known if better_is_larger else candidate < known):
                best[ny, nx] = candidate
                heapq.heappush(heap, (sign * candidate, ny, nx))
    raise ValueError("the bottom-right cell cannot be reached")


def maximum_safeness_factor(grid: Sequence[Sequence[int]]) -> int:
    """Largest possible minimum Manhattan distance to a thief (cells set to 1) along a path.

    The path runs from the top-left to the bottom-right corner of a square grid.
    """
    n = _square_size(grid)
    distance: list[list[float]] = [[math.inf] * n for _ in range(n)]
    queue: deque[tuple[int, int]] = deque()
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell:
                distance[y][x] = 0
                queue.append((y, x))
    while queue:
        y, x = queue.popleft()
        for ny, nx in _neighbours(y, x, n, n):
            if distance[ny][nx] == math.inf:
                distance[ny][nx] = distance[y][x] + 1
                queue.append((ny, nx))
    capped = [[min(d, n * n) for d in row] for row in distance]
    return int(_bottleneck_path(capped, better_is_larger=True))


def longest_increasing_path(matrix: Sequence[Sequence[int]]) -> int:
    """Length of the longest strictly increasing path moving between adjacent cells."""
    rows, cols = _dimensions(matrix)
    cells = sorted(
        ((matrix[y][x], y, x) for y in range(rows) for x in range(cols)), reverse=True
    )
    length = [[1] * cols for _ in range(rows)]
    for value, y, x in cells:
        for ny, nx in _neighbours(y, x, rows, cols):
            if matrix[ny][nx] > value:
                length[y][x] = max(length[y][x], length[ny][nx] + 1)
    return max(max(row) for row in length)


def _uphill_from(
    starts: list[tuple[int, int]], heights: Sequence[Sequence[int]]
) -> set[tuple[int, int]]:
    rows, cols = len(heights), len(heights[0])
    seen = set(starts)
    queue = deque(seen)
    while queue:
        y, x = queue.popleft()
        for ny, nx in _neighbours(y, x, rows, cols):
            if (ny, nx) not in seen and heights[ny][nx] >= heights[y][x]:
                seen.add((ny, nx))
                queue.append((ny, nx))
    return seen


def pacific_atlantic(heights: Sequence[Sequence[int]]) -> list[list[int]]:
    """Sorted ``[row, col]`` cells from which water can flow to both oceans.

    The Pacific touches the top and left edges, the Atlantic the bottom and right edges.
    """
    rows, cols = _dimensions(heights)
    pacific = _uphill_from(
        [(y, 0) for y in range(rows)] + [(0, x) for x in range(cols)], heights
    )
    atlantic = _uphill_from(
        [(y, cols - 1) for y in range(rows)] + [(rows - 1, x) for x in range(cols)],
        heights,
    )
    return [[y, x] for y, x in sorted(pacific & atlantic)]


def count_battleships(board: Sequence[Sequence[str]]) -> int:
    """Number of connected groups of non-``'.'`` cells."""
    rows, cols = _dimensions(board)
    seen: set[tuple[int, int]] = set()
    ships = 0
    for y in range(rows):
        for x in range(cols):
            if board[y][x] == "." or (y, x) in seen:
                continue
            ships += 1
            seen.add((y, x))
            queue = deque([(y, x)])
            while queue:
                cy, cx = queue.popleft()
                for ny, nx in _neighbours(cy, cx, rows, cols):
                    if board[ny][nx] != "." and (ny, nx) not in seen:
                        seen.add((ny, nx))
                        queue.append((ny, nx))
    return ships


def unique_paths(m: int, n: int) -> int:
    """Number of right/down paths across an ``m`` by ``n`` grid."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")
    return math.comb(m + n - 2, m - 1)


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Smallest sum along a right/down path from the top-left to the bottom-right cell."""
    _dimensions(grid)
    previous: list[int] | None = None
    for row in grid:
        current: list[int] = []
        for x, value in enumerate(row):
            candidates = []
            if previous is not None:
                candidates.append(previous[x])
            if current:
                candidates.append(current[-1])
            current.append(value + min(candidates, default=0))
        previous = current
    assert previous is not None
    return previous[-1]


def word_exists(board: Sequence[Sequence[str]], word: str) -> bool:
    """Whether ``word`` can be traced through adjacent cells, using each cell at most once."""
    rows, cols = _dimensions(board)
    if not word:
        raise ValueError("word must not be empty")
    used: set[tuple[int, int]] = set()

    def trace(y: int, x: int, index: int) -> bool:
        if index == len(word) - 1:
            return True
        used.add((y, x))
        try:
            return any(
                (ny, nx) not in used
                and board[ny][nx] == word[index + 1]
                and trace(ny, nx, index + 1)
                for ny, nx in _neighbours(y, x, rows, cols)
            )
        finally:
            used.discard((y, x))

    return any(
        board[y][x] == word[0] and trace(y, x, 0)
        for y in range(rows)
        for x in range(cols)
    )


def swim_in_water(grid: Sequence[Sequence[int]]) -> int:
    """Least time after which the bottom-right cell is reachable, the water level being the time."""
    _square_size(grid)
    return int(_bottleneck_path(grid, better_is_larger=False))


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Whether the filled cells of a 9x9 board break no row, column or box rule."""
    if len(board) != 9 or any(len(row) != 9 for row in board):
        raise ValueError("board must be 9x9")
    seen: set[tuple[str, int, str]] = set()
    for y, row in enumerate(board):
        for x, digit in enumerate(row):
            if digit == ".":
                continue
            keys = (
                ("row", y, digit),
                ("col", x, digit),
                ("box", (y // 3) * 3 + x // 3, digit),
            )
            if any(key in seen for key in keys):
                return False
            seen.update(keys)
    return True
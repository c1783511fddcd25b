"""Algorithms over two-dimensional grids and matrices."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from math import inf
from operator import itemgetter
from typing import Any, Sequence

_ORTHOGONAL = ((-1, 0), (1, 0), (0, -1), (0, 1))
_ALL_DIRECTIONS = ((-1, -1), (-1, 1), (-1, 0), (0, 1), (0, -1), (1, 1), (1, -1), (1, 0))


def count_islands(grid: Sequence[Sequence[int]]) -> int:
    """Count groups of 1-cells joined up, down, left or right."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    seen: set[tuple[int, int]] = set()
    count = 0
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell != 1 or (r, c) in seen:
                continue
            count += 1
            seen.add((r, c))
            stack = [(r, c)]
            while stack:
                cr, cc = stack.pop()
                for dr, dc in _ORTHOGONAL:
                    nr, nc = cr + dr, cc + dc
                    if (
                        0 <= nr < rows
                        and 0 <= nc < cols
                        and grid[nr][nc] == 1
                        and (nr, nc) not in seen
                    ):
                        seen.add((nr, nc))
                        stack.append((nr, nc))
    return count


def find_word(grid: Sequence[Sequence[Any]], word: Sequence[Any]) -> list[tuple[int, int]]:
    """Cells where ``word`` starts along a straight line in any of 8 directions.

    A cell appears once for every direction in which the word fits.
    """
    height = len(grid)
    width = len(grid[0]) if height else 0

    def spelled(r: int, c: int, dr: int, dc: int) -> bool:
        for offset, letter in enumerate(word):
            rr, cc = r + dr * offset, c + dc * offset
            if not (0 <= rr < height and 0 <= cc < width) or grid[rr][cc] != letter:
                return False
        return True

    return [
        (r, c)
        for r in range(height)
        for c in range(width)
        for dr, dc in _ALL_DIRECTIONS
        if spelled(r, c, dr, dc)
    ]


def spiral_order(matrix: Sequence[Sequence[Any]]) -> list[Any]:
    """Elements read clockwise from the outside ring inwards."""
    if not matrix:
        return []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    result: list[Any] = []
    while top <= bottom and left <= right:
        result.extend(matrix[top][c] for c in range(left, right + 1))
        top += 1
        result.extend(matrix[r][right] for r in range(top, bottom + 1))
        right -= 1
        if top < bottom:
            result.extend(matrix[bottom][c] for c in range(right, left - 1, -1))
            bottom -= 1
        if left < right:
            result.extend(matrix[r][left] for r in range(bottom, top - 1, -1))
            left += 1
    return result


def rotate_clockwise(matrix: Sequence[Sequence[Any]]) -> list[list[Any]]:
    """A new matrix turned a quarter turn clockwise."""
    return [list(row) for row in zip(*reversed(matrix))]


def search_sorted_matrix(matrix: Sequence[Sequence[Any]], target: Any) -> bool:
    """True when ``target`` is in a matrix whose rows, read in turn, ascend."""
    row_index = bisect_right(matrix, target, key=itemgetter(0)) - 1
    if row_index < 0:
        return False
    row = matrix[row_index]
    position = bisect_left(row, target)
    return position < len(row) and row[position] == target


def min_path_cost(matrix: Sequence[Sequence[int]]) -> int:
    """Cheapest sum of cells from top-left to bottom-right, stepping right,
    down or diagonally down-right."""
    if not matrix or not matrix[0]:
        raise ValueError("min_path_cost() needs a non-empty matrix")
    rows, cols = len(matrix), len(matrix[0])
    below: list[float] = [inf] * (cols + 1)
    for r in reversed(range(rows)):
        current: list[float] = [inf] * (cols + 1)
        for c in reversed(range(cols)):
            if r == rows - 1 and c == cols - 1:
                current[c] = matrix[r][c]
            else:
                current[c] = matrix[r][c] + min(current[c + 1], below[c], below[c + 1])
        below = current
    return int(below[0])
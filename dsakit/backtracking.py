"""Backtracking searches: N queens, sudoku and paths through a maze."""

from __future__ import annotations

from typing import Optional, Sequence

_MAZE_MOVES = (("D", 1, 0), ("L", 0, -1), ("R", 0, 1), ("U", -1, 0))


def solve_n_queens(n: int) -> Optional[list[list[int]]]:
    """First placement of ``n`` non-attacking queens found column by column.

    The board holds 1 where a queen stands and 0 elsewhere; None when no
    placement exists.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    board = [[0] * n for _ in range(n)]

    def safe(row: int, col: int) -> bool:
        if any(board[row][c] for c in range(col)):
            return False
        if any(board[r][c] for r, c in zip(range(row, n), range(col, -1, -1))):
            return False
        return not any(
            board[r][c] for r, c in zip(range(row, -1, -1), range(col, -1, -1))
        )

    def place(col: int) -> bool:
        if col >= n:
            return True
        for row in range(n):
            if safe(row, col):
                board[row][col] = 1
                if place(col + 1):
                    return True
                board[row][col] = 0
        return False

    return board if place(0) else None


def format_board(board: Sequence[Sequence[int]]) -> str:
    """Draw a board with ``Q`` for queens and ``.`` for empty squares."""
    return "".join(
        "".join("Q " if cell == 1 else ". " for cell in row) + "\n" for row in board
    )


def solve_sudoku(grid: Sequence[Sequence[int]]) -> Optional[list[list[int]]]:
    """A solved copy of a 9x9 sudoku (0 marks an empty cell), or None."""
    board = [list(row) for row in grid]

    def allowed(row: int, col: int, number: int) -> bool:
        if number in board[row] or any(line[col] == number for line in board):
            return False
        top, left = row - row % 3, col - col % 3
        return all(
            board[top + i][left + j] != number for i in range(3) for j in range(3)
        )

    def first_empty() -> Optional[tuple[int, int]]:
        return next(
            (
                (r, c)
                for r, line in enumerate(board)
                for c, value in enumerate(line)
                if value == 0
            ),
            None,
        )

    def solve() -> bool:
        cell = first_empty()
        if cell is None:
            return True
        row, col = cell
        for number in range(1, 10):
            if allowed(row, col, number):
                board[row][col] = number
                if solve():
                    return True
                board[row][col] = 0
        return False

    return board if solve() else None


def maze_paths(maze: Sequence[Sequence[int]]) -> list[str]:
    """Every route from top-left to bottom-right of a square maze, sorted.

    Routes use open (truthy) cells, never revisit a cell, and are spelled with
    D, L, R and U moves.
    """
    size = len(maze)
    if size == 0 or not maze[0][0] or not maze[size - 1][size - 1]:
        return []
    visited: set[tuple[int, int]] = set()
    steps: list[str] = []
    paths: list[str] = []

    def walk(row: int, col: int) -> None:
        if row == size - 1 and col == size - 1:
            paths.append("".join(steps))
            return
        visited.add((row, col))
        for letter, dr, dc in _MAZE_MOVES:
            nr, nc = row + dr, col + dc
            if (
                0 <= nr < size
                and 0 <= nc < size
                and maze[nr][nc]
                and (nr, nc) not in visited
            ):
                steps.append(letter)
                walk(nr, nc)
                steps.pop()
        visited.discard((row, col))

    walk(0, 0)
    return sorted(paths)
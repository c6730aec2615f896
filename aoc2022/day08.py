"""Day 8: judging the view from trees in a grid."""

from __future__ import annotations

from collections.abc import Sequence

Grid = Sequence[Sequence[int]]


def parse_grid(text: str) -> list[list[int]]:
    """Parse rows of digits into a rectangular grid of tree heights."""
    rows = [line.strip() for line in text.splitlines() if line.strip()]
    if not rows:
        raise ValueError("empty grid")
    width = len(rows[0])
    grid = []
    for row in rows:
        if not (row.isascii() and row.isdigit()):
            raise ValueError(f"invalid grid row: {row!r}")
        if len(row) != width:
            raise ValueError(f"grid rows differ in length: {row!r}")
        grid.append([int(char) for char in row])
    return grid


def _lines_of_sight(grid: Grid, row: int, col: int) -> list[list[int]]:
    column = [line[col] for line in grid]
    return [
        list(column[:row][::-1]),
        list(grid[row][:col][::-1]),
        column[row + 1:],
        list(grid[row][col + 1:]),
    ]


def tree_view(grid: Grid, row: int, col: int) -> tuple[bool, int]:
    """Return whether the tree is visible from outside and its scenic score."""
    if not (0 <= row < len(grid) and 0 <= col < len(grid[row])):
        raise IndexError(f"no tree at row {row}, column {col}")
    tree = grid[row][col]
    visible = False
    score = 1
    for line in _lines_of_sight(grid, row, col):
        distance = 0
        blocked = False
        for other in line:
            distance += 1
            if other >= tree:
                blocked = True
                break
        if not blocked:
            visible = True
        score *= distance
    return visible, score


def scan(grid: Grid) -> tuple[int, int]:
    """Return the number of visible trees and the highest scenic score."""
    visible_count = 0
    best = 0
    for row, line in enumerate(grid):
        for col in range(len(line)):
            visible, score = tree_view(grid, row, col)
            visible_count += visible
            best = max(best, score)
    return visible_count, best


def part1(text: str) -> int:
    """Number of trees visible from outside the grid."""
    return scan(parse_grid(text))[0]


def part2(text: str) -> int:
    """Highest scenic score of any tree."""
    return scan(parse_grid(text))[1]


def solve(text: str) -> tuple[int, int]:
    """Return the answers to both parts."""
    return scan(parse_grid(text))
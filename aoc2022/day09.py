"""Day 9: following a rope's knots across a grid."""

from __future__ import annotations

import enum
from collections.abc import Iterable

Position = tuple[int, int]


class Direction(enum.Enum):
    """A step direction for the head of the rope, as (dx, dy)."""

    UP = (0, 1)
    DOWN = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @classmethod
    def parse(cls, symbol: str) -> Direction:
        """Parse U, D, L or R into a direction."""
        try:
            return _DIRECTION_SYMBOLS[symbol]
        except KeyError:
            raise ValueError(f"Unknown movement: {symbol!r}") from None

    def step(self, position: Position) -> Position:
        """Return ``position`` moved one step in this direction."""
        dx, dy = self.value
        return position[0] + dx, position[1] + dy


_DIRECTION_SYMBOLS = {
    "U": Direction.UP,
    "D": Direction.DOWN,
    "L": Direction.LEFT,
    "R": Direction.RIGHT,
}


def parse_motions(text: str) -> list[tuple[Direction, int]]:
    """Parse lines such as ``R 4`` into (direction, steps) pairs."""
    motions = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            continue
        parts = line.split()
        if len(parts) != 2 or not (parts[1].isascii() and parts[1].isdigit()):
            raise ValueError(f"invalid motion: {line!r}")
        motions.append((Direction.parse(parts[0]), int(parts[1])))
    return motions


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def follow(tail: Position, head: Position) -> Position:
    """Return where ``tail`` moves to keep touching ``head``."""
    dx = head[0] - tail[0]
    dy = head[1] - tail[1]
    if abs(dx) <= 1 and abs(dy) <= 1:
        return tail
    return tail[0] + _sign(dx), tail[1] + _sign(dy)


def count_tail_positions(
    motions: Iterable[tuple[Direction, int]], knots: int
) -> int:
    """Number of distinct positions the last knot visits, start included."""
    if knots < 1:
        raise ValueError(f"a rope needs at least one knot, got {knots}")
    rope: list[Position] = [(0, 0)] * knots
    visited = {rope[-1]}
    for direction, steps in motions:
        for _ in range(steps):
            rope[0] = direction.step(rope[0])
            for index in range(1, knots):
                rope[index] = follow(rope[index], rope[index - 1])
            visited.add(rope[-1])
    return len(visited)


def part1(text: str) -> int:
    """Positions visited by the tail of a two-knot rope."""
    return count_tail_positions(parse_motions(text), 2)


def part2(text: str) -> int:
    """Positions visited by the tail of a ten-knot rope."""
    return count_tail_positions(parse_motions(text), 10)


def solve(text: str) -> tuple[int, int]:
    """Return the answers to both parts."""
    motions = parse_motions(text)
    return count_tail_positions(motions, 2), count_tail_positions(motions, 10)
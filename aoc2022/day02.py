"""Day 2: scoring a rock-paper-scissors strategy guide."""

from __future__ import annotations

import enum


class Outcome(enum.Enum):
    """Result of a round from our point of view."""

    WIN = "win"
    DRAW = "draw"
    LOSE = "lose"

    def points(self) -> int:
        """Points awarded for this outcome."""
        return {Outcome.WIN: 6, Outcome.DRAW: 3, Outcome.LOSE: 0}[self]


class Shape(enum.Enum):
    """A hand shape."""

    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    @classmethod
    def parse(cls, symbol: str) -> Shape:
        """Parse A/X, B/Y or C/Z into a shape."""
        try:
            return _SHAPE_SYMBOLS[symbol]
        except KeyError:
            raise ValueError(f"invalid shape: {symbol!r}") from None

    def score(self) -> int:
        """Points for playing this shape."""
        return self.value

    def outcome_against(self, opponent: Shape) -> Outcome:
        """Outcome of playing this shape against ``opponent``."""
        if self is opponent:
            return Outcome.DRAW
        if _BEATS[self] is opponent:
            return Outcome.WIN
        return Outcome.LOSE

    def compete_points(self, opponent: Shape) -> int:
        """Points won by playing this shape against ``opponent``."""
        return self.outcome_against(opponent).points()

    def find_match(self, expected: str) -> Shape | None:
        """Shape to play against this one for the outcome X/Y/Z, or None."""
        try:
            strategy = Strategy.parse(expected)
        except ValueError:
            return None
        return strategy.respond_to(self)


_SHAPE_SYMBOLS = {
    "A": Shape.ROCK,
    "X": Shape.ROCK,
    "B": Shape.PAPER,
    "Y": Shape.PAPER,
    "C": Shape.SCISSORS,
    "Z": Shape.SCISSORS,
}

# Each shape mapped to the shape it defeats.
_BEATS = {
    Shape.ROCK: Shape.SCISSORS,
    Shape.PAPER: Shape.ROCK,
    Shape.SCISSORS: Shape.PAPER,
}
_BEATEN_BY = {loser: winner for winner, loser in _BEATS.items()}


class Strategy(enum.Enum):
    """The outcome we are told to aim for."""

    LOSE = "X"
    DRAW = "Y"
    WIN = "Z"

    @classmethod
    def parse(cls, symbol: str) -> Strategy:
        """Parse X, Y or Z into a strategy."""
        try:
            return cls(symbol)
        except ValueError:
            raise ValueError(f"invalid strategy: {symbol!r}") from None

    def respond_to(self, their: Shape) -> Shape:
        """Shape that reaches this strategy's outcome against ``their``."""
        if self is Strategy.LOSE:
            return _BEATS[their]
        if self is Strategy.WIN:
            return _BEATEN_BY[their]
        return their


def tokenize(text: str) -> list[tuple[str, str]]:
    """Split the guide into (their, our) symbol pairs."""
    pairs = []
    for line in text.strip().split("\n"):
        chars = line.strip()
        if len(chars) < 3:
            raise ValueError("Unexpected end of line")
        pairs.append((chars[0], chars[2]))
    return pairs


def part1(text: str) -> int:
    """Total score reading the second column as our shape."""
    total = 0
    for their_symbol, our_symbol in tokenize(text):
        their = Shape.parse(their_symbol)
        our = Shape.parse(our_symbol)
        total += our.score() + our.compete_points(their)
    return total


def part2(text: str) -> int:
    """Total score reading the second column as the desired outcome."""
    total = 0
    for their_symbol, our_symbol in tokenize(text):
        their = Shape.parse(their_symbol)
        our = Strategy.parse(our_symbol).respond_to(their)
        total += our.score() + our.compete_points(their)
    return total


def solve(text: str) -> tuple[int, int]:
    """Return the answers to both parts."""
    return part1(text), part2(text)
"""Day 5: rearranging stacks of crates."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Move:
    """Move ``count`` crates from stack ``source`` to stack ``target`` (0-based)."""

    count: int
    source: int
    target: int

    @classmethod
    def parse(cls, line: str) -> Move:
        """Parse a line such as ``move 1 from 5 to 8``."""
        tokens = line.split(" ")
        if len(tokens) != 6:
            raise ValueError(f"invalid move: {line!r}")
        try:
            count, source, target = (int(tokens[i]) for i in (1, 3, 5))
        except ValueError:
            raise ValueError(f"invalid move: {line!r}") from None
        if count < 0 or source < 1 or target < 1:
            raise ValueError(f"invalid move: {line!r}")
        return cls(count, source - 1, target - 1)


@dataclass
class Stacks:
    """Stacks of crates, each listed from bottom to top."""

    stacks: list[list[str]] = field(default_factory=list)

    @classmethod
    def parse(cls, lines: list[str]) -> Stacks:
        """Parse the drawing of the stacks, numbering line included."""
        if not lines:
            raise ValueError("missing stack drawing")
        count = len(lines[-1].split())
        stacks: list[list[str]] = [[] for _ in range(count)]
        for line in reversed(lines[:-1]):
            for index, start in enumerate(range(0, len(line), 4)):
                token = line[start:start + 4]
                if len(token) < 2 or token[1] == " ":
                    continue
                if index >= count:
                    raise ValueError(f"crate outside of any stack: {line!r}")
                stacks[index].append(token[1])
        return cls(stacks)

    def copy(self) -> Stacks:
        """Return an independent copy."""
        return Stacks([list(stack) for stack in self.stacks])

    def _take(self, move: Move) -> list[str]:
        try:
            source = self.stacks[move.source]
            self.stacks[move.target]
        except IndexError:
            raise ValueError(f"no such stack in {move}") from None
        if move.count > len(source):
            raise ValueError(f"not enough crates for {move}")
        taken = source[len(source) - move.count:]
        del source[len(source) - move.count:]
        return taken

    def apply_one_by_one(self, move: Move) -> None:
        """Move crates one at a time, reversing their order."""
        taken = self._take(move)
        self.stacks[move.target].extend(reversed(taken))

    def apply_all_at_once(self, move: Move) -> None:
        """Move crates together, keeping their order."""
        taken = self._take(move)
        self.stacks[move.target].extend(taken)

    def tops(self) -> str:
        """The top crate of each stack; a space for an empty stack."""
        return "".join(stack[-1] if stack else " " for stack in self.stacks)


def parse_input(text: str) -> tuple[Stacks, list[Move]]:
    """Split the input into the starting stacks and the moves."""
    lines = text.splitlines()
    try:
        blank = lines.index("")
    except ValueError:
        blank = len(lines)
    stacks = Stacks.parse(lines[:blank])
    moves = [Move.parse(line) for line in lines[blank + 1:] if line.strip()]
    return stacks, moves


def _run(text: str, all_at_once: bool) -> str:
    stacks, moves = parse_input(text)
    apply = stacks.apply_all_at_once if all_at_once else stacks.apply_one_by_one
    for move in moves:
        apply(move)
    return stacks.tops()


def part1(text: str) -> str:
    """Top crates after moving crates one at a time."""
    return _run(text, all_at_once=False)


def part2(text: str) -> str:
    """Top crates after moving crates several at once."""
    return _run(text, all_at_once=True)


def solve(text: str) -> tuple[str, str]:
    """Return the answers to both parts."""
    return part1(text), part2(text)
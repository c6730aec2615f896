"""Day 10: simulating a simple CPU and its CRT screen."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

SCREEN_WIDTH = 40
SIGNAL_CYCLES = (20, 60, 100, 140, 180, 220)
INITIAL_X = 1


@dataclass(frozen=True)
class Instruction:
    """An instruction: add ``delta`` to X after taking ``cycles`` cycles."""

    delta: int = 0
    cycles: int = 1

    @classmethod
    def parse(cls, line: str) -> Instruction:
        """Parse ``noop`` or ``addx N``."""
        tokens = line.split()
        if not tokens:
            raise ValueError("empty instruction")
        opcode = tokens[0]
        if opcode == "noop":
            if len(tokens) != 1:
                raise ValueError(f"invalid instruction: {line!r}")
            return cls()
        if opcode == "addx":
            if len(tokens) != 2:
                raise ValueError(f"invalid instruction: {line!r}")
            try:
                delta = int(tokens[1])
            except ValueError:
                raise ValueError(f"invalid instruction: {line!r}") from None
            return cls(delta=delta, cycles=2)
        raise ValueError(f"unsupported opcode: {opcode!r}")


def _parse_program(text: str) -> list[Instruction]:
    return [Instruction.parse(line) for line in text.splitlines() if line.strip()]


def register_history(instructions: Iterable[Instruction]) -> list[int]:
    """Value of X during each cycle, the first cycle at index 0."""
    history: list[int] = []
    x = INITIAL_X
    for instruction in instructions:
        history.extend([x] * instruction.cycles)
        x += instruction.delta
    return history


def signal_strength(history: Sequence[int]) -> int:
    """Sum of cycle number times X over the sampled cycles."""
    if len(history) < SIGNAL_CYCLES[-1]:
        raise ValueError(
            f"program runs {len(history)} cycles, needs {SIGNAL_CYCLES[-1]}"
        )
    return sum(cycle * history[cycle - 1] for cycle in SIGNAL_CYCLES)


def render(history: Sequence[int]) -> list[str]:
    """Draw the screen rows: ``#`` where the sprite covers the pixel."""
    pixels = [
        "#" if abs(index % SCREEN_WIDTH - x) <= 1 else "."
        for index, x in enumerate(history)
    ]
    text = "".join(pixels)
    return [text[start:start + SCREEN_WIDTH] for start in range(0, len(text), SCREEN_WIDTH)]


def part1(text: str) -> int:
    """Sum of the sampled signal strengths."""
    return signal_strength(register_history(_parse_program(text)))


def part2(text: str) -> str:
    """The rendered screen, one row per line."""
    return "\n".join(render(register_history(_parse_program(text))))


def solve(text: str) -> tuple[int, str]:
    """Return the answers to both parts."""
    history = register_history(_parse_program(text))
    return signal_strength(history), "\n".join(render(history))
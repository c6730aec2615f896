"""Day 1: counting the calories carried by each elf."""

from __future__ import annotations

import heapq


def elf_totals(text: str) -> list[int]:
    """Return the calorie total of each elf, in input order.

    Groups of numbers are separated by blank lines.
    """
    totals: list[int] = []
    current: int | None = None
    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            if current is not None:
                totals.append(current)
            current = None
            continue
        try:
            value = int(line)
        except ValueError:
            raise ValueError(f"invalid calorie value: {line!r}") from None
        current = value if current is None else current + value
    if current is not None:
        totals.append(current)
    return totals


def part1(text: str) -> int:
    """Return the largest calorie total carried by one elf (0 if none)."""
    return max(elf_totals(text), default=0)


def part2(text: str) -> int:
    """Return the sum of the three largest calorie totals."""
    return sum(heapq.nlargest(3, elf_totals(text)))


def solve(text: str) -> tuple[int, int]:
    """Return the answers to both parts."""
    totals = elf_totals(text)
    return max(totals, default=0), sum(heapq.nlargest(3, totals))
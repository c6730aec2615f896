"""Day 3: finding misplaced items in rucksacks."""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce


def priority(item: str) -> int:
    """Priority of an item: a-z are 1-26, A-Z are 27-52."""
    if len(item) == 1 and item.isascii():
        if item.islower():
            return ord(item) - ord("a") + 1
        if item.isupper():
            return ord(item) - ord("A") + 27
    raise ValueError(f"invalid item: {item!r}")


def _common_priority(common: set[str]) -> int:
    return priority(min(common)) if common else 0


def rucksack_priority(rucksack: str) -> int:
    """Priority of the item found in both compartments, or 0."""
    half = len(rucksack) // 2
    return _common_priority(set(rucksack[:half]) & set(rucksack[half:]))


def badge_priority(group: Iterable[str]) -> int:
    """Priority of the item shared by every rucksack of a group, or 0."""
    sets = [set(rucksack) for rucksack in group]
    if not sets:
        return 0
    return _common_priority(reduce(set.intersection, sets))


def _rucksacks(text: str) -> list[str]:
    return [line.strip() for line in text.strip().splitlines()]


def part1(text: str) -> int:
    """Sum of the priorities of items in both compartments."""
    return sum(rucksack_priority(rucksack) for rucksack in _rucksacks(text))


def part2(text: str) -> int:
    """Sum of the badge priorities of each complete group of three."""
    rucksacks = _rucksacks(text)
    groups = zip(*[iter(rucksacks)] * 3)
    return sum(badge_priority(group) for group in groups)


def solve(text: str) -> tuple[int, int]:
    """Return the answers to both parts."""
    return part1(text), part2(text)
"""Day 4: finding overlapping section assignments."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TextIO


def _parse_id(text: str, source: str) -> int:
    if not (text.isascii() and text.isdigit()):
        raise ValueError(f"invalid section id {text!r} in {source!r}")
    return int(text)


@dataclass(frozen=True)
class Section:
    """An inclusive range of section ids."""

    begin: int
    end: int

    @classmethod
    def parse(cls, text: str) -> Section:
        """Parse a range such as ``12-24``.

        Raises ValueError when a bound is missing or not a number, or when
        the lower bound is greater than the upper one.
        """
        parts = text.split("-")
        if len(parts) < 2:
            raise ValueError(f"Missing end of range: {text}")
        begin = _parse_id(parts[0], text)
        end = _parse_id(parts[1], text)
        if begin > end:
            raise ValueError(f"invalid range, start is after end: {text}")
        return cls(begin, end)

    def contains(self, other: Section) -> bool:
        """Whether this section fully contains ``other``."""
        return self.begin <= other.begin and self.end >= other.end

    def overlaps(self, other: Section) -> bool:
        """Whether this section shares at least one id with ``other``."""
        return self.begin <= other.end and other.begin <= self.end


@dataclass(frozen=True)
class Assignment:
    """The pair of sections given to two elves."""

    first: Section
    second: Section

    @classmethod
    def parse(cls, line: str) -> Assignment:
        """Parse a line such as ``12-24,23-36``."""
        parts = line.split(",")
        if len(parts) < 2:
            raise ValueError(f"Missing section 2: {line}")
        return cls(Section.parse(parts[0]), Section.parse(parts[1]))

    def has_subset(self) -> bool:
        """Whether one section fully contains the other."""
        return self.first.contains(self.second) or self.second.contains(self.first)

    def has_overlap(self) -> bool:
        """Whether the two sections overlap at all."""
        return self.first.overlaps(self.second)


@dataclass(frozen=True)
class Assignments:
    """A list of assignments read from the puzzle input."""

    items: tuple[Assignment, ...]

    @classmethod
    def _from_lines(cls, lines: Iterable[str]) -> Assignments:
        return cls(tuple(Assignment.parse(line) for line in lines))

    @classmethod
    def from_string(cls, text: str) -> Assignments:
        """Build from text holding one assignment per line."""
        return cls._from_lines(text.splitlines())

    @classmethod
    def from_reader(cls, reader: TextIO) -> Assignments:
        """Build from a text stream holding one assignment per line."""
        return cls._from_lines(
            line.removesuffix("\n").removesuffix("\r") for line in reader
        )

    def __iter__(self) -> Iterator[Assignment]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def count_subset(self) -> int:
        """Number of assignments in which one section contains the other."""
        return sum(1 for assignment in self.items if assignment.has_subset())

    def count_overlap(self) -> int:
        """Number of assignments whose sections overlap."""
        return sum(1 for assignment in self.items if assignment.has_overlap())
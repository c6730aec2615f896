"""Day 7: measuring directory sizes from a terminal transcript."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

DISK_SIZE = 70_000_000
NEEDED_SPACE = 30_000_000
SMALL_DIRECTORY_LIMIT = 100_000


@dataclass(eq=False)
class Directory:
    """A directory holding files and subdirectories."""

    name: str
    parent: Directory | None = field(default=None, repr=False)
    children: dict[str, Directory] = field(default_factory=dict, repr=False)
    files: dict[str, int] = field(default_factory=dict)

    def total_size(self) -> int:
        """Size of all files in this directory and below it."""
        return sum(self.files.values()) + sum(
            child.total_size() for child in self.children.values()
        )

    def walk(self) -> Iterator[Directory]:
        """Yield this directory and every directory below it, parents first."""
        yield self
        for child in self.children.values():
            yield from child.walk()


def build_tree(lines: Iterable[str]) -> Directory:
    """Rebuild the file tree from the lines of a terminal transcript."""
    root = Directory("/")
    current = root
    for number, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue
        tokens = line.split()
        if tokens[0] == "$":
            command = tokens[1] if len(tokens) > 1 else ""
            if command == "ls":
                continue
            if command != "cd" or len(tokens) != 3:
                raise ValueError(f"line {number}: invalid command {line!r}")
            target = tokens[2]
            if target == "/":
                current = root
            elif target == "..":
                if current.parent is None:
                    raise ValueError(f"line {number}: root has no parent")
                current = current.parent
            else:
                try:
                    current = current.children[target]
                except KeyError:
                    raise ValueError(
                        f"line {number}: {target} is not a dir"
                    ) from None
        elif len(tokens) != 2:
            raise ValueError(f"line {number}: invalid listing {line!r}")
        elif tokens[0] == "dir":
            name = tokens[1]
            current.children.setdefault(name, Directory(name, parent=current))
        else:
            if not (tokens[0].isascii() and tokens[0].isdigit()):
                raise ValueError(f"line {number}: invalid file size {tokens[0]!r}")
            current.files[tokens[1]] = int(tokens[0])
    return root


def directory_sizes(root: Directory) -> list[int]:
    """Total sizes of every directory, in the order of ``root.walk()``."""
    return [directory.total_size() for directory in root.walk()]


def _small_total(sizes: list[int]) -> int:
    return sum(size for size in sizes if size < SMALL_DIRECTORY_LIMIT)


def _smallest_to_free(sizes: list[int], used: int) -> int:
    needed = NEEDED_SPACE - (DISK_SIZE - used)
    candidates = [size for size in sizes if size >= needed]
    if not candidates:
        raise ValueError("no directory frees enough space")
    return min(candidates)


def part1(text: str) -> int:
    """Sum of the sizes of directories smaller than the limit."""
    return _small_total(directory_sizes(build_tree(text.splitlines())))


def part2(text: str) -> int:
    """Size of the smallest directory whose removal frees enough space."""
    root = build_tree(text.splitlines())
    return _smallest_to_free(directory_sizes(root), root.total_size())


def solve(text: str) -> tuple[int, int]:
    """Return the answers to both parts."""
    root = build_tree(text.splitlines())
    sizes = directory_sizes(root)
    return _small_total(sizes), _smallest_to_free(sizes, root.total_size())
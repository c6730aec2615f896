"""Command line entry point printing the answers for one puzzle day."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

from aoc2022 import day01, day02, day03, day04, day05, day06, day07, day08, day09, day10


def _solve_day04(text: str) -> tuple[int, int]:
    assignments = day04.Assignments.from_string(text)
    return assignments.count_subset(), assignments.count_overlap()


_SOLVERS: dict[int, Callable[[str], tuple[object, object]]] = {
    1: day01.solve,
    2: day02.solve,
    3: day03.solve,
    4: _solve_day04,
    5: day05.solve,
    6: day06.solve,
    7: day07.solve,
    8: day08.solve,
    9: day09.solve,
    10: day10.solve,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aoc2022", description="Print the answers to one puzzle day."
    )
    parser.add_argument("day", type=int, choices=sorted(_SOLVERS), help="puzzle day")
    parser.add_argument(
        "input_file", nargs="?", default="-", help="puzzle input (default: stdin)"
    )
    return parser


def _print_answer(part: int, answer: object) -> None:
    text = str(answer)
    if "\n" in text:
        print(f"Part {part}:")
        print(text)
    else:
        print(f"Part {part}: {text}")


def main(argv: list[str] | None = None) -> int:
    """Run the solver for a day and print both answers; return the exit code."""
    args = _build_parser().parse_args(argv)
    try:
        if args.input_file == "-":
            text = sys.stdin.read()
        else:
            with open(args.input_file, encoding="utf-8") as handle:
                text = handle.read()
    except OSError as error:
        print(f"Failed to open the file: {error}", file=sys.stderr)
        return 1
    try:
        first, second = _SOLVERS[args.day](text)
    except (ValueError, IndexError) as error:
        print(f"Failed to solve day {args.day}: {error}", file=sys.stderr)
        return 1
    _print_answer(1, first)
    _print_answer(2, second)
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Solvers for the Advent of Code 2022 puzzles, days 1 to 10, and a command line."""

__version__ = "0.1.0"

__all__ = [
    "day01",
    "day02",
    "day03",
    "day04",
    "day05",
    "day06",
    "day07",
    "day08",
    "day09",
    "day10",
    "cli",
]
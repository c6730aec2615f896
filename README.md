# aoc2022

Solvers for days 1 to 10 of Advent of Code 2022, usable as a library or
from the command line. The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

The package installs an `aoc2022` command. It takes the day number (1 to 10)
and, optionally, the path of an input file; without a file, or with `-`,
it reads the input from standard input.

```
aoc2022 4 input.txt
aoc2022 1 < input.txt
aoc2022 --help
```

It prints `Part 1: ...` and `Part 2: ...`. An answer that spans several
lines (the screen drawn on day 10) is printed below its `Part N:` heading.
If the file cannot be opened or the input is malformed, a message goes to
standard error and the exit status is 1.

## Library

Each day lives in its own module, `aoc2022.day01` to `aoc2022.day10`.
Every module except `day04` and `day06` has `part1(text)`, `part2(text)`
and `solve(text)`, which take the raw puzzle input as a string; `solve`
returns both answers as a tuple. `day06` has `solve(text)` and
`find_marker(data, length)`; `day04` works through the `Assignments` class.

```python
from aoc2022 import day01, day04, day06

calories = "1000\n2000\n3000\n\n4000\n\n5000\n6000\n\n7000\n8000\n9000\n\n10000\n"
day01.part1(calories)   # 24000, largest total carried by one elf
day01.part2(calories)   # 45000, sum of the three largest totals

pairs = day04.Assignments.from_string("2-4,6-8\n2-8,3-7\n")
pairs.count_subset()    # 1, pairs where one range contains the other
pairs.count_overlap()   # 1, pairs whose ranges overlap at all

day06.find_marker("mjqjpqmgbljsphdztnvjfqwrcgsmlb", 4)   # 7
```

The days also expose their building blocks, among them:

- `day01.elf_totals` – calorie total of each elf.
- `day02.Shape`, `day02.Outcome`, `day02.Strategy`, `day02.tokenize`.
- `day03.priority`, `day03.rucksack_priority`, `day03.badge_priority`.
- `day04.Section`, `day04.Assignment`, `day04.Assignments`
  (`from_string` or `from_reader` for a text stream).
- `day05.Move`, `day05.Stacks`, `day05.parse_input`.
- `day07.Directory`, `day07.build_tree`, `day07.directory_sizes`.
- `day08.parse_grid`, `day08.tree_view`, `day08.scan`.
- `day09.Direction`, `day09.parse_motions`, `day09.follow`,
  `day09.count_tail_positions`.
- `day10.Instruction`, `day10.register_history`, `day10.signal_strength`,
  `day10.render` (day 10 part 2 returns the screen as `#`/`.` rows joined
  by newlines).

Malformed input raises `ValueError`; `day08.tree_view` raises `IndexError`
for a position outside the grid.

## Limits

The package only solves inputs it is given; it does not fetch puzzle inputs
or submit answers.
import pytest

from aoc2022 import day03

EXAMPLE = """vJrwpWtwJgWrhcsFMMfFFhFp
jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL
PmmdzqPrVvPwwTWBwg
wMqvLMZHhHMvwLHjbvcjnnSBnvTQFn
ttgJtRGJQctTZtZT
CrZsJsPPZsGzwwsLwLmpwMDw
"""


def test_priority():
    assert day03.priority("a") == 1
    assert day03.priority("z") == 26
    assert day03.priority("A") == 27
    assert day03.priority("Z") == 52


@pytest.mark.parametrize("item", ["1", "", "ab", "é"])
def test_priority_invalid(item):
    with pytest.raises(ValueError):
        day03.priority(item)


@pytest.mark.parametrize(
    "rucksack, expected",
    [
        ("vJrwpWtwJgWrhcsFMMfFFhFp", 16),
        ("jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL", 38),
        ("PmmdzqPrVvPwwTWBwg", 42),
        ("wMqvLMZHhHMvwLHjbvcjnnSBnvTQFn", 22),
        ("ttgJtRGJQctTZtZT", 20),
        ("CrZsJsPPZsGzwwsLwLmpwMDw", 19),
    ],
)
def test_single_rucksack(rucksack, expected):
    assert day03.rucksack_priority(rucksack) == expected


def test_find_badge():
    group_1 = [
        "vJrwpWtwJgWrhcsFMMfFFhFp",
        "jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL",
        "PmmdzqPrVvPwwTWBwg",
    ]
    group_2 = [
        "wMqvLMZHhHMvwLHjbvcjnnSBnvTQFn",
        "ttgJtRGJQctTZtZT",
        "CrZsJsPPZsGzwwsLwLmpwMDw",
    ]
    assert day03.badge_priority(group_1) == 18
    assert day03.badge_priority(group_2) == 52


def test_no_common_item():
    assert day03.rucksack_priority("abcd") == 0
    assert day03.badge_priority(["ab", "cd", "ef"]) == 0
    assert day03.badge_priority([]) == 0


def test_solve_q1_with_example():
    assert day03.part1(EXAMPLE) == 157


def test_solve_q2_with_example():
    assert day03.part2(EXAMPLE) == 70


def test_solve():
    assert day03.solve(EXAMPLE) == (157, 70)


def test_incomplete_group_is_ignored():
    extra = EXAMPLE + "aa\n"
    assert day03.part2(extra) == day03.part2(EXAMPLE)
import pytest

from aoc2022.day09 import (
    Direction,
    count_tail_positions,
    follow,
    parse_motions,
    part1,
    part2,
    solve,
)

EXAMPLE = "R 4\nU 4\nL 3\nD 1\nR 4\nD 1\nL 5\nR 2\n"
LARGER = "R 5\nU 8\nL 8\nD 3\nR 17\nD 10\nL 25\nU 20\n"


def test_example_parts():
    assert part1(EXAMPLE) == 13
    assert part2(EXAMPLE) == 1


def test_larger_example_part2():
    assert part2(LARGER) == 36


def test_solve_matches_parts():
    assert solve(LARGER) == (part1(LARGER), part2(LARGER))


@pytest.mark.parametrize(
    "symbol, expected",
    [("U", Direction.UP), ("D", Direction.DOWN), ("L", Direction.LEFT), ("R", Direction.RIGHT)],
)
def test_direction_parse(symbol, expected):
    assert Direction.parse(symbol) is expected


def test_direction_parse_invalid():
    with pytest.raises(ValueError):
        Direction.parse("X")


def test_parse_motions():
    assert parse_motions("R 4\nU 2\n") == [(Direction.RIGHT, 4), (Direction.UP, 2)]


@pytest.mark.parametrize("text", ["R x", "R", "Q 3", "R 1 2"])
def test_parse_motions_invalid(text):
    with pytest.raises(ValueError):
        parse_motions(text)


@pytest.mark.parametrize("head", [(0, 0), (1, 0), (1, 1), (-1, 1), (0, -1)])
def test_follow_touching_stays(head):
    assert follow((0, 0), head) == (0, 0)


@pytest.mark.parametrize("head", [(2, 0), (0, -2), (2, 1), (-1, 2), (2, 2), (-2, -1)])
def test_follow_ends_touching(head):
    tail = follow((0, 0), head)
    assert max(abs(head[0] - tail[0]), abs(head[1] - tail[1])) <= 1
    assert max(abs(tail[0]), abs(tail[1])) == 1


def test_tail_not_moving_counts_only_start():
    assert count_tail_positions([(Direction.RIGHT, 1)], 2) == count_tail_positions([], 2)


def test_mirrored_motions_give_same_count():
    mirrored = EXAMPLE.replace("R", "x").replace("L", "R").replace("x", "L")
    assert part1(mirrored) == part1(EXAMPLE)
    assert part2(mirrored) == part2(EXAMPLE)


def test_single_knot_counts_head_positions():
    motions = parse_motions("R 3\nL 3")
    assert count_tail_positions(motions, 1) == count_tail_positions(
        parse_motions("R 3"), 1
    )


def test_no_knots_rejected():
    with pytest.raises(ValueError):
        count_tail_positions([], 0)
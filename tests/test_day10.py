import pytest

from aoc2022.day10 import (
    Instruction,
    part1,
    part2,
    register_history,
    render,
    signal_strength,
    solve,
)


def test_parse_noop():
    assert Instruction.parse("noop") == Instruction()


def test_parse_addx():
    instruction = Instruction.parse("addx -5")
    assert instruction.delta == -5
    assert instruction.cycles > Instruction.parse("noop").cycles


@pytest.mark.parametrize("line", ["jump 3", "addx", "addx q", "noop 1", ""])
def test_parse_invalid(line):
    with pytest.raises(ValueError):
        Instruction.parse(line)


def test_history_length_matches_cycles():
    program = [Instruction.parse(line) for line in ["noop", "addx 3", "addx -5"]]
    history = register_history(program)
    assert len(history) == sum(instruction.cycles for instruction in program)
    assert history[0] == 1


def test_history_applies_delta_after_instruction():
    program = [Instruction.parse("addx 3"), Instruction.parse("noop")]
    history = register_history(program)
    assert history[-1] == history[0] + 3


def test_signal_strength_scales_with_register():
    assert signal_strength([2] * 220) == 2 * signal_strength([1] * 220)


def test_signal_strength_short_history():
    with pytest.raises(ValueError):
        signal_strength([1] * 219)


def test_render_sprite_at_start():
    assert render([1] * 40) == ["###" + "." * 37]


def test_render_rows():
    rows = render([5] * 100)
    assert [len(row) for row in rows] == [40, 40, 20]
    assert rows[0] == rows[1]


def test_solve_matches_parts():
    text = "noop\n" * 100 + "addx 4\n" * 60
    assert solve(text) == (part1(text), part2(text))
    assert part2(text).splitlines() == render(
        register_history([Instruction.parse(line) for line in text.splitlines()])
    )
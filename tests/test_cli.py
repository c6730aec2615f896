import io

import pytest

from aoc2022 import day10
from aoc2022.cli import main

CALORIES = "1000\n2000\n3000\n\n4000\n\n5000\n6000\n"


def _write(tmp_path, text):
    path = tmp_path / "input.txt"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_day01_from_file(tmp_path, capsys):
    assert main(["1", _write(tmp_path, CALORIES)]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == ["Part 1: 11000", "Part 2: 21000"]


def test_day06_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("mjqjpqmgbljsphdztnvjfqwrcgsmlb\n"))
    assert main(["6"]) == 0
    assert capsys.readouterr().out.splitlines() == ["Part 1: 7", "Part 2: 19"]


def test_day04_counts(tmp_path, capsys):
    assert main(["4", _write(tmp_path, "2-8,3-7\n2-4,6-8\n")]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("Part 1: ")
    assert int(lines[0].split(": ")[1]) <= int(lines[1].split(": ")[1])


def test_day10_multiline_screen(tmp_path, capsys):
    text = "noop\n" * 240
    assert main(["10", _write(tmp_path, text)]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[1] == "Part 2:"
    assert out.endswith(day10.part2(text) + "\n")


def test_missing_file(tmp_path, capsys):
    assert main(["1", str(tmp_path / "missing.txt")]) == 1
    assert "Failed to open" in capsys.readouterr().err


def test_bad_input_reports_error(tmp_path, capsys):
    assert main(["9", _write(tmp_path, "Q 3\n")]) == 1
    assert "day 9" in capsys.readouterr().err


def test_unknown_day_rejected():
    with pytest.raises(SystemExit) as excinfo:
        main(["42"])
    assert excinfo.value.code == 2
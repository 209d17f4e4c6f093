import subprocess
from unittest.mock import patch

import pytest

from advent import aoc_cli
from advent.day import Day


@pytest.fixture(autouse=True)
def no_year(monkeypatch):
    monkeypatch.delenv("AOC_YEAR", raising=False)


def test_paths():
    day = Day(8)
    assert aoc_cli.get_input_path(day) == "data/inputs/08.txt"
    assert aoc_cli.get_puzzle_path(day) == "data/puzzles/08.md"


def test_build_args_without_year():
    args = aoc_cli.build_args("read", ["--flag"], Day(3))
    assert args == ["--flag", "--day", str(Day(3)), "read"]


def test_build_args_with_year(monkeypatch):
    monkeypatch.setenv("AOC_YEAR", "2021")
    args = aoc_cli.build_args("download", [], Day(4))
    assert args == ["--year", "2021", "--day", str(Day(4)), "download"]


def test_build_args_ignores_invalid_year(monkeypatch):
    monkeypatch.setenv("AOC_YEAR", "nineteen")
    args = aoc_cli.build_args("read", [], Day(4))
    assert "--year" not in args


def test_check_raises_when_missing():
    with patch("advent.aoc_cli.subprocess.run", side_effect=FileNotFoundError()):
        with pytest.raises(aoc_cli.CommandNotFound):
            aoc_cli.check()


def test_submit_argument_order():
    completed = subprocess.CompletedProcess(["aoc"], 0)
    with patch("advent.aoc_cli.subprocess.run", return_value=completed) as run:
        result = aoc_cli.submit(Day(2), 1, "42")
    assert result is completed
    called = run.call_args.args[0]
    assert called[0] == "aoc"
    assert called[-3:] == ["submit", "1", "42"]


def test_bad_exit_status():
    completed = subprocess.CompletedProcess(["aoc"], 3)
    with patch("advent.aoc_cli.subprocess.run", return_value=completed):
        with pytest.raises(aoc_cli.BadExitStatus) as info:
            aoc_cli.read(Day(1))
    assert info.value.completed is completed


def test_not_callable():
    with patch("advent.aoc_cli.subprocess.run", side_effect=OSError()):
        with pytest.raises(aoc_cli.CommandNotCallable):
            aoc_cli.download(Day(1))


def test_download_reports_paths(capsys):
    completed = subprocess.CompletedProcess(["aoc"], 0)
    with patch("advent.aoc_cli.subprocess.run", return_value=completed) as run:
        aoc_cli.download(Day(6))
    called = run.call_args.args[0]
    assert aoc_cli.get_input_path(Day(6)) in called
    assert aoc_cli.get_puzzle_path(Day(6)) in called
    assert aoc_cli.get_input_path(Day(6)) in capsys.readouterr().out


def test_error_messages():
    assert str(aoc_cli.CommandNotFound()) == "aoc-cli is not present in environment."
    assert str(aoc_cli.CommandNotCallable()) == "aoc-cli could not be called."
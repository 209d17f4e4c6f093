import pytest

from advent.cli import CliError, main, parse_args
from advent.day import Day


def test_parse_solve():
    inv = parse_args(["solve", "3", "--release", "--submit", "2"])
    assert inv.command == "solve"
    assert inv.day == Day(3)
    assert inv.release is True
    assert inv.submit == 2


def test_parse_solve_submit_with_equals():
    inv = parse_args(["solve", "3", "--submit=2"])
    assert inv.submit == 2
    assert inv.release is False


def test_solve_day_must_come_first():
    with pytest.raises(CliError):
        parse_args(["solve", "--release", "3"])


def test_parse_time_flags_anywhere():
    inv = parse_args(["time", "--store", "4", "--all"])
    assert inv.day == Day(4)
    assert inv.store is True
    assert inv.run_all is True


def test_parse_time_without_day():
    inv = parse_args(["time"])
    assert inv.day is None
    assert inv.run_all is False


def test_no_command(capsys):
    with pytest.raises(SystemExit) as exc:
        parse_args([])
    assert exc.value.code == 1
    assert "No command specified." in capsys.readouterr().err


def test_flag_is_not_a_command(capsys):
    with pytest.raises(SystemExit):
        parse_args(["--release"])
    assert "No command specified." in capsys.readouterr().err


def test_unknown_command(capsys):
    with pytest.raises(SystemExit) as exc:
        parse_args(["frobnicate"])
    assert exc.value.code == 1
    assert "Unknown command: frobnicate" in capsys.readouterr().err


def test_day_out_of_range():
    with pytest.raises(CliError, match="expecting a day number between 1 and 25"):
        parse_args(["download", "26"])


def test_missing_day():
    with pytest.raises(CliError):
        parse_args(["read"])


def test_submit_without_value():
    with pytest.raises(CliError, match="--submit"):
        parse_args(["solve", "3", "--submit"])


def test_unknown_arguments_warn(capsys):
    inv = parse_args(["all", "--release", "extra"])
    assert inv.release is True
    assert "unknown argument(s)" in capsys.readouterr().err


def test_main_reports_parse_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["read", "x"])
    assert exc.value.code == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_main_time_runs(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    main(["time", "20"])
    out = capsys.readouterr().out
    assert "Day 20" in out
    assert "Not solved." in out
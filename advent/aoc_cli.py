"""Wrapper around the ``aoc`` command-line client."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Sequence

from advent.day import Day

_AOC = "aoc"


class AocCommandError(Exception):
    """Base class for failures of the ``aoc`` command."""


class CommandNotFound(AocCommandError):
    """The ``aoc`` command is not present in the environment."""

    def __init__(self) -> None:
        super().__init__("aoc-cli is not present in environment.")


class CommandNotCallable(AocCommandError):
    """The ``aoc`` command could not be started."""

    def __init__(self) -> None:
        super().__init__("aoc-cli could not be called.")


class BadExitStatus(AocCommandError):
    """The ``aoc`` command exited with a non-zero status."""

    def __init__(self, completed: subprocess.CompletedProcess) -> None:
        super().__init__("aoc-cli exited with a non-zero status.")
        self.completed = completed


def check() -> None:
    """Make sure the ``aoc`` command can be run."""
    try:
        subprocess.run([_AOC, "-V"], capture_output=True, check=False)
    except OSError as err:
        raise CommandNotFound() from err


def get_input_path(day: Day) -> str:
    """Path the puzzle input of ``day`` is written to."""
    return f"data/inputs/{day}.txt"


def get_puzzle_path(day: Day) -> str:
    """Path the puzzle description of ``day`` is written to."""
    return f"data/puzzles/{day}.md"


def _get_year() -> int | None:
    raw = os.environ.get("AOC_YEAR")
    if raw is None or not raw.isascii() or not raw.lstrip("+").isdigit():
        return None
    year = int(raw)
    return year if year <= 0xFFFF else None


def build_args(command: str, args: Sequence[str], day: Day) -> list[str]:
    """Build the argument list for an ``aoc`` subcommand."""
    cmd_args = list(args)
    year = _get_year()
    if year is not None:
        cmd_args += ["--year", str(year)]
    cmd_args += ["--day", str(day), command]
    return cmd_args


def _call_aoc_cli(args: Sequence[str]) -> subprocess.CompletedProcess:
    try:
        completed = subprocess.run([_AOC, *args], check=False)
    except OSError as err:
        raise CommandNotCallable() from err
    if completed.returncode != 0:
        raise BadExitStatus(completed)
    return completed


def read(day: Day) -> subprocess.CompletedProcess:
    """Show the puzzle description of ``day``."""
    args = build_args(
        "read",
        ["--description-only", "--puzzle-file", get_puzzle_path(day)],
        day,
    )
    return _call_aoc_cli(args)


def download(day: Day) -> subprocess.CompletedProcess:
    """Download the input and description of ``day``."""
    input_path = get_input_path(day)
    puzzle_path = get_puzzle_path(day)
    args = build_args(
        "download",
        ["--overwrite", "--input-file", input_path, "--puzzle-file", puzzle_path],
        day,
    )
    completed = _call_aoc_cli(args)
    print("---")
    print(f'🎄 Successfully wrote input to "{input_path}".')
    print(f'🎄 Successfully wrote puzzle to "{puzzle_path}".')
    return completed


def submit(day: Day, part: int, result: str) -> subprocess.CompletedProcess:
    """Submit ``result`` as the answer to ``part`` of ``day``."""
    # The positional arguments of submit come after the subcommand.
    args = build_args("submit", [], day)
    args += [str(part), str(result)]
    return _call_aoc_cli(args)
"""Handlers of the command-line subcommands."""

from __future__ import annotations

import subprocess
import sys

from advent import aoc_cli, readme_benchmarks
from advent.day import Day, all_days
from advent.run_multi import _child_env, _solution_command, run_multi
from advent.timings import Timings

_AOC_MISSING = (
    'command "aoc" not found or not callable. '
    'Try running "cargo install aoc-cli" to install it.'
)


def _fail(message: str) -> None:
    print(message, file=sys.stderr)
    raise SystemExit(1)


def _require_aoc() -> None:
    try:
        aoc_cli.check()
    except aoc_cli.AocCommandError:
        _fail(_AOC_MISSING)


def handle_all(is_release: bool = False) -> None:
    """Run every day's solution."""
    run_multi(set(all_days()), is_release, False)


def handle_download(day: Day) -> None:
    """Download the input and description of ``day``."""
    _require_aoc()
    try:
        aoc_cli.download(day)
    except aoc_cli.AocCommandError as err:
        _fail(f"failed to call aoc-cli: {err}")


def handle_read(day: Day) -> None:
    """Show the description of ``day``."""
    _require_aoc()
    try:
        aoc_cli.read(day)
    except aoc_cli.AocCommandError as err:
        _fail(f"failed to call aoc-cli: {err}")


def handle_solve(day: Day, release: bool = False, submit_part: int | None = None) -> int:
    """Run the solution of ``day`` in a child process; return its exit status."""
    extra = [] if submit_part is None else ["--submit", str(submit_part)]
    completed = subprocess.run(
        _solution_command(day, release, extra), env=_child_env(), check=False
    )
    return completed.returncode


def handle_time(day: Day | None = None, run_all: bool = False, store: bool = False) -> None:
    """Benchmark one day, all days, or the days not yet fully benched."""
    stored = Timings.read_from_file()

    if day is not None:
        days = {day}
    elif run_all:
        days = set(all_days())
    else:
        days = {d for d in all_days() if not stored.is_day_complete(d)}

    timings = run_multi(days, True, True)
    if not store:
        return

    merged = stored.merge(timings)
    merged.store_file()
    print()
    try:
        readme_benchmarks.update(merged)
    except readme_benchmarks.ReadmeError:
        print("Failed to store updated benchmarks.", file=sys.stderr)
    else:
        print("Stored updated benchmarks.")


def handle_today() -> None:
    """Download and show today's puzzle during advent."""
    day = Day.today()
    if day is None:
        _fail(
            "`today` command can only be run between the 1st and the 25th of december. "
            "Please use `scaffold` with a specific day."
        )
        return
    handle_download(day)
    handle_read(day)
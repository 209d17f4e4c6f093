"""Reading puzzle inputs and examples from the data directory."""

from __future__ import annotations

from pathlib import Path

from advent.day import Day


def _as_day(day: Day | int) -> Day:
    return day if isinstance(day, Day) else Day(day)


def read_file(folder: str, day: Day | int) -> str:
    """Read ``data/<folder>/<day>.txt`` relative to the working directory."""
    path = Path.cwd() / "data" / folder / f"{_as_day(day)}.txt"
    return path.read_text(encoding="utf-8")


def read_file_part(folder: str, day: Day | int, part: int) -> str:
    """Read ``data/<folder>/<day>-<part>.txt`` relative to the working directory."""
    path = Path.cwd() / "data" / folder / f"{_as_day(day)}-{part}.txt"
    return path.read_text(encoding="utf-8")
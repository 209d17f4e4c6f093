"""Updating the benchmark table in the README."""

from __future__ import annotations

import re
from pathlib import Path

from advent.day import Day
from advent.timings import Timings

MARKER = "<!--- benchmarking table --->"
_MARKER_PATTERN = re.compile(re.escape(MARKER))


class ReadmeError(Exception):
    """Raised when the README table cannot be located or written."""


def get_path_for_bin(day: Day) -> str:
    """Path of the solution file of ``day`` linked from the table."""
    return f"./src/bin/{day}.rs"


def locate_table(readme: str) -> tuple[int, int]:
    """Return the start and end offsets of the marked table."""
    matches = list(_MARKER_PATTERN.finditer(readme))
    if len(matches) > 2:
        raise ReadmeError("too many occurences of marker in README.")
    if not matches:
        raise ReadmeError("Could not find table start position.")
    return matches[0].start(), matches[-1].end()


def construct_table(prefix: str, timings: Timings, total_millis: float) -> str:
    """Render the benchmark table with its surrounding markers."""
    lines = [
        MARKER,
        f"{prefix} Benchmarks",
        "",
        "| Day | Part 1 | Part 2 |",
        "| :---: | :---: | :---:  |",
    ]
    lines.extend(
        f"| [Day {int(timing.day)}]({get_path_for_bin(timing.day)}) "
        f"| `{timing.part_1 or '-'}` | `{timing.part_2 or '-'}` |"
        for timing in timings.data
    )
    lines += ["", f"**Total: {total_millis:.2f}ms**", MARKER]
    return "\n".join(lines)


def update_content(text: str, timings: Timings, total_millis: float) -> str:
    """Return ``text`` with its marked table replaced by a fresh one."""
    start, end = locate_table(text)
    return text[:start] + construct_table("##", timings, total_millis) + text[end:]


def update(timings: Timings, path: str | Path = "README.md") -> None:
    """Rewrite the benchmark table in the README file."""
    readme_path = Path(path)
    try:
        readme = readme_path.read_bytes().decode("utf-8", errors="replace")
    except OSError as err:
        raise ReadmeError(str(err)) from err
    updated = update_content(readme, timings, timings.total_millis())
    try:
        readme_path.write_bytes(updated.encode("utf-8"))
    except OSError as err:
        raise ReadmeError(str(err)) from err
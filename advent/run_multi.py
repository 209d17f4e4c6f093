"""Running several solutions in child processes and collecting their timings."""

from __future__ import annotations

import os
import re
import subprocess
import sys
import threading
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import IO

from advent.day import Day, all_days
from advent.runner import ANSI_BOLD, ANSI_ITALIC, ANSI_RESET
from advent.timings import Timing, Timings

_PACKAGE_DIR = Path(__file__).resolve().parent
_FLOAT = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|[+-]?(?:inf|infinity|nan)",
    re.IGNORECASE,
)


def get_path_for_bin(day: Day) -> Path:
    """Path of the solution module of ``day``."""
    return _PACKAGE_DIR / "solutions" / f"day{day}.py"


def _solution_module(day: Day) -> str:
    return f"advent.solutions.day{day}"


def _child_env() -> dict[str, str]:
    env = dict(os.environ)
    root = str(_PACKAGE_DIR.parent)
    existing = env.get("PYTHONPATH")
    env["PYTHONPATH"] = os.pathsep.join([root, existing]) if existing else root
    env["PYTHONIOENCODING"] = "utf-8"
    return env


def _solution_command(day: Day, is_release: bool, extra: Sequence[str] = ()) -> list[str]:
    command = [sys.executable]
    if is_release:
        command.append("-O")
    command += ["-m", _solution_module(day), *extra]
    return command


def _decode_line(raw: bytes) -> str:
    text = raw.decode("utf-8", errors="replace")
    if text.endswith("\n"):
        text = text[:-1]
        if text.endswith("\r"):
            text = text[:-1]
    return text


def _forward_stderr(stream: IO[bytes]) -> None:
    for raw in stream:
        print(_decode_line(raw), file=sys.stderr)


def run_solution(day: Day, is_timed: bool, is_release: bool) -> list[str]:
    """Run the solution of ``day`` in a child process, echoing and returning its stdout lines."""
    if not get_path_for_bin(day).exists():
        return []

    extra = ["--time"] if is_timed else []
    command = _solution_command(day, is_release, extra)
    output: list[str] = []
    with subprocess.Popen(
        command, stdout=subprocess.PIPE, stderr=subprocess.PIPE, env=_child_env()
    ) as proc:
        assert proc.stdout is not None and proc.stderr is not None
        forwarder = threading.Thread(target=_forward_stderr, args=(proc.stderr,), daemon=True)
        forwarder.start()
        for raw in proc.stdout:
            line = _decode_line(raw)
            print(line)
            output.append(line)
        forwarder.join()
        proc.wait()
    return output


def _to_float(text: str) -> float | None:
    return float(text) if _FLOAT.fullmatch(text) else None


def _scaled(text: str, unit: str, factor: float) -> float | None:
    value = _to_float(text.split(unit)[0])
    return None if value is None else value * factor


def parse_time(line: str) -> tuple[str, float] | None:
    """Extract the timing text and its value in nanoseconds from a result line."""
    timing = line.split(" samples)")[0].split("(")[-1].split("@")[0].strip()
    if "ns" in timing:
        nanos = _to_float(timing.split("ns")[0])
    elif "µs" in timing:
        nanos = _scaled(timing, "µs", 1_000.0)
    elif "ms" in timing:
        nanos = _scaled(timing, "ms", 1_000_000.0)
    else:
        nanos = _scaled(timing, "s", 1_000_000_000.0)
    if nanos is None:
        return None
    return timing, nanos


def parse_exec_time(output: Iterable[str], day: Day) -> Timing:
    """Collect the benchmark timings printed by a solution run."""
    timing = Timing(day=day)
    for line in output:
        if " samples)" not in line:
            continue
        parsed = parse_time(line)
        if parsed is None:
            print(f"Could not parse timings from line: {line}", file=sys.stderr)
            continue
        text, nanos = parsed
        part = line.split(":")[0]
        if "Part 1" in part:
            timing.part_1 = text
        elif "Part 2" in part:
            timing.part_2 = text
        timing.total_nanos += nanos
    return timing


def run_multi(days_to_run: Iterable[Day], is_release: bool, is_timed: bool) -> Timings | None:
    """Run the given days in order; return their timings when ``is_timed``."""
    wanted = set(days_to_run)
    collected: list[Timing] = []

    for index, day in enumerate(day for day in all_days() if day in wanted):
        if index:
            print()
        print(f"{ANSI_BOLD}Day {day}{ANSI_RESET}")
        print("------")

        output = run_solution(day, is_timed, is_release)
        if output:
            collected.append(parse_exec_time(output, day))
        else:
            print("Not solved.")

    if not is_timed:
        return None
    timings = Timings(data=collected)
    print(
        f"\n{ANSI_BOLD}Total (Run):{ANSI_RESET} "
        f"{ANSI_ITALIC}{timings.total_millis():.2f}ms{ANSI_RESET}"
    )
    return timings
"""Running, timing and submitting solution parts."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable, Sequence
from typing import Any

from advent import aoc_cli
from advent.day import Day
from advent.inputs import read_file

ANSI_ITALIC = "\x1b[3m"
ANSI_BOLD = "\x1b[1m"
ANSI_RESET = "\x1b[0m"

_SUBMIT_USAGE = "Unexpected command-line input. Format: cargo solve 1 --submit 1"
_NANOS_PER_SECOND = 1_000_000_000
_UNITS = ((1_000_000_000, "s"), (1_000_000, "ms"), (1_000, "µs"), (1, "ns"))


def _arguments(argv: Sequence[str] | None) -> list[str]:
    return list(sys.argv[1:] if argv is None else argv)


def run_part(
    func: Callable[[Any], Any],
    puzzle_input: Any,
    day: Day,
    part: int,
    argv: Sequence[str] | None = None,
) -> None:
    """Run one part, print its result and timing, and submit it if asked."""
    args = _arguments(argv)
    label = f"Part {part}"
    result, nanos, samples = run_timed(
        func,
        puzzle_input,
        lambda value: _print_result(value, label, ""),
        "--time" in args,
    )
    _print_result(result, label, format_duration(nanos, samples))
    if result is not None:
        try:
            submit_result(result, day, part, args)
        except aoc_cli.AocCommandError as err:
            print(f"failed to call aoc-cli: {err}", file=sys.stderr)


def run_timed(
    func: Callable[[Any], Any],
    puzzle_input: Any,
    hook: Callable[[Any], None],
    timed: bool = False,
) -> tuple[Any, int, int]:
    """Run ``func`` once, then bench it if ``timed``; return result, nanoseconds, samples."""
    start = time.perf_counter_ns()
    result = func(puzzle_input)
    base_nanos = time.perf_counter_ns() - start
    hook(result)
    if timed:
        nanos, samples = bench(func, puzzle_input, base_nanos)
        return result, nanos, samples
    return result, base_nanos, 1


def bench(func: Callable[[Any], Any], puzzle_input: Any, base_nanos: int) -> tuple[int, int]:
    """Run ``func`` for about a second, between 10 and 10000 times; return mean and count."""
    print(f" > {ANSI_ITALIC}benching{ANSI_RESET}", end="", flush=True)
    iterations = min(max(_NANOS_PER_SECOND // max(base_nanos, 10), 10), 10_000)
    timers = []
    for _ in range(iterations):
        start = time.perf_counter_ns()
        func(puzzle_input)
        timers.append(time.perf_counter_ns() - start)
    return average_duration(timers), iterations


def average_duration(durations: Sequence[int]) -> int:
    """Integer mean of durations in nanoseconds."""
    return sum(durations) // len(durations)


def _format_nanos(nanos: int) -> str:
    divisor, unit = next((d, u) for d, u in _UNITS if nanos >= d or d == 1)
    whole, remainder = divmod(nanos, divisor)
    tenths, rest = divmod(remainder * 10, divisor)
    if rest > 0 and rest * 2 >= divisor:
        tenths += 1
        if tenths == 10:
            whole, tenths = whole + 1, 0
    return f"{whole}.{tenths}{unit}"


def format_duration(nanos: int, samples: int) -> str:
    """Describe a timing, with the sample count if there was more than one run."""
    text = _format_nanos(nanos)
    if samples == 1:
        return f" ({text})"
    return f" ({text} @ {samples} samples)"


def _print_result(result: Any, part: str, duration_str: str) -> None:
    intermediate = duration_str == ""
    if result is None:
        if intermediate:
            print(f"{part}: ✖", end="", flush=True)
        else:
            print("\r", end="")
            print(f"{part}: ✖             ")
        return

    text = str(result)
    if "\n" in text:
        line = f"{part}: ▼ {duration_str}"
        if intermediate:
            print(line, end="", flush=True)
        else:
            print("\r", end="")
            print(line)
            print(text)
    else:
        line = f"{part}: {ANSI_BOLD}{text}{ANSI_RESET}{duration_str}"
        if intermediate:
            print(line, end="", flush=True)
        else:
            print("\r", end="")
            print(line)


def _exit_with(message: str) -> None:
    print(message, file=sys.stderr)
    raise SystemExit(1)


def submit_result(result: Any, day: Day, part: int, argv: Sequence[str] | None = None):
    """Submit ``result`` when the arguments ask for this part with ``--submit``."""
    args = _arguments(argv)
    if "--submit" not in args:
        return None
    if len(args) < 2:
        _exit_with(_SUBMIT_USAGE)

    index = args.index("--submit") + 1
    raw = args[index] if index < len(args) else ""
    if not raw.isascii() or not raw.lstrip("+").isdigit() or int(raw) > 255:
        _exit_with(_SUBMIT_USAGE)
    if int(raw) != part:
        return None

    try:
        aoc_cli.check()
    except aoc_cli.AocCommandError:
        _exit_with(
            'command "aoc" not found or not callable. '
            'Try running "cargo install aoc-cli" to install it.'
        )

    print("Submitting result via aoc-cli...")
    return aoc_cli.submit(day, part, str(result))


def solution_main(
    day: Day | int,
    part_one: Callable[[str], Any] | None,
    part_two: Callable[[str], Any] | None,
    argv: Sequence[str] | None = None,
) -> None:
    """Read the day's input and run the given parts on it."""
    if not isinstance(day, Day):
        day = Day(day)
    puzzle_input = read_file("inputs", day)
    for part, func in ((1, part_one), (2, part_two)):
        if func is not None:
            run_part(func, puzzle_input, day, part, argv)
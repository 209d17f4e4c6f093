"""Syntax scoring of bracket lines."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from advent.day import Day
from advent.runner import solution_main

DAY = Day(10)

_CLOSERS = {"(": ")", "[": "]", "{": "}", "<": ">"}
_CORRUPTION_SCORES = {")": 3, "]": 57, "}": 1197, ">": 25137}
_COMPLETION_SCORES = {")": 1, "]": 2, "}": 3, ">": 4}


class LineKind(Enum):
    CORRUPTED = "corrupted"
    INCOMPLETE = "incomplete"


@dataclass(frozen=True)
class LineCheck:
    """How a line failed, and its score."""

    kind: LineKind
    score: int


def check_line(line: str) -> LineCheck:
    """Score a line as corrupted at its first bad closer, or as incomplete."""
    expected: list[str] = []
    for ch in line:
        closer = _CLOSERS.get(ch)
        if closer is not None:
            expected.append(closer)
        elif not expected or expected.pop() != ch:
            return LineCheck(LineKind.CORRUPTED, _CORRUPTION_SCORES.get(ch, 0))

    score = 0
    for ch in reversed(expected):
        score = score * 5 + _COMPLETION_SCORES[ch]
    return LineCheck(LineKind.INCOMPLETE, score)


def part_one(puzzle_input: str) -> int | None:
    checks = (check_line(line) for line in puzzle_input.splitlines())
    return sum(check.score for check in checks if check.kind is LineKind.CORRUPTED)


def part_two(puzzle_input: str) -> int | None:
    scores = sorted(
        check.score
        for check in map(check_line, puzzle_input.splitlines())
        if check.kind is LineKind.INCOMPLETE
    )
    return scores[len(scores) // 2] if scores else None


def main(argv: Sequence[str] | None = None) -> None:
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()
"""Sonar sweep: count depth increases."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Sequence
from itertools import pairwise

from advent.day import Day
from advent.runner import solution_main

DAY = Day(1)

_U32 = re.compile(r"\+?[0-9]+")


def _depths(puzzle_input: str) -> Iterator[int]:
    for line in puzzle_input.splitlines():
        if _U32.fullmatch(line) and int(line) < 2**32:
            yield int(line)


def count_increases(values: Iterable[int]) -> int | None:
    """Count values larger than the one before; None when there are none."""
    values = list(values)
    if not values:
        return None
    return sum(later > earlier for earlier, later in pairwise(values))


def count_three_value_window_increases(values: Iterable[int]) -> int | None:
    """Count increases of three-value sliding window sums; None for fewer than three values."""
    values = list(values)
    if len(values) < 3:
        return None
    return sum(later > earlier for earlier, later in zip(values, values[3:]))


def part_one(puzzle_input: str) -> int | None:
    return count_increases(_depths(puzzle_input))


def part_two(puzzle_input: str) -> int | None:
    return count_three_value_window_increases(_depths(puzzle_input))


def main(argv: Sequence[str] | None = None) -> None:
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()
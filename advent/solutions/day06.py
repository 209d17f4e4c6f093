"""Lanternfish population growth."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from advent.day import Day
from advent.runner import solution_main

DAY = Day(6)

_UINT = re.compile(r"\+?[0-9]+")
_AGES = 9


class PopulationError(ValueError):
    """Raised when a population cannot be parsed."""


@dataclass(frozen=True)
class LanternFishPopulation:
    """Number of fish for each timer value from 0 to 8."""

    counts: tuple[int, ...]

    @classmethod
    def parse(cls, text: str) -> LanternFishPopulation:
        """Parse comma-separated timer values."""
        counts = [0] * _AGES
        for fish in text.strip().split(","):
            if not _UINT.fullmatch(fish):
                raise PopulationError(f"not an age: {fish!r}")
            age = int(fish)
            if age >= _AGES:
                raise PopulationError(f"age out of range: {age}")
            counts[age] += 1
        return cls(tuple(counts))

    def progress(self) -> LanternFishPopulation:
        """The population one day later."""
        c = self.counts
        return LanternFishPopulation(
            (c[1], c[2], c[3], c[4], c[5], c[6], c[7] + c[0], c[8], c[0])
        )

    def after_days(self, days: int) -> LanternFishPopulation:
        state = self
        for _ in range(days):
            state = state.progress()
        return state

    def total(self) -> int:
        return sum(self.counts)


def part_one(puzzle_input: str) -> int | None:
    try:
        return LanternFishPopulation.parse(puzzle_input).after_days(80).total()
    except PopulationError:
        return None


def part_two(puzzle_input: str) -> int | None:
    try:
        return LanternFishPopulation.parse(puzzle_input).after_days(256).total()
    except PopulationError:
        return None


def main(argv: Sequence[str] | None = None) -> None:
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()
"""The treachery of whales: aligning crab submarines."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from advent.day import Day
from advent.runner import solution_main

DAY = Day(7)

_UINT = re.compile(r"\+?[0-9]+")


class PositionsError(ValueError):
    """Raised when submarine positions cannot be parsed."""


@dataclass(frozen=True)
class SubmarinePositions:
    """Horizontal positions of the submarines and their range."""

    highest: int
    lowest: int
    positions: tuple[int, ...]

    @classmethod
    def parse(cls, text: str) -> SubmarinePositions:
        """Parse comma-separated positions."""
        positions = []
        for raw in text.strip().split(","):
            if not _UINT.fullmatch(raw):
                raise PositionsError(f"not a position: {raw!r}")
            positions.append(int(raw))
        return cls(highest=max(positions), lowest=min(positions), positions=tuple(positions))

    @staticmethod
    def fuel_consumption_for_distance(distance: int) -> int:
        return distance * (distance + 1) // 2

    def total_distance_to(self, position: int) -> int:
        return sum(abs(sub - position) for sub in self.positions)

    def total_fuel_consumption_to(self, position: int) -> int:
        return sum(
            self.fuel_consumption_for_distance(abs(sub - position)) for sub in self.positions
        )

    def cheapest_aligned_position(self, fuel_based: bool) -> int | None:
        """Lowest cost of moving every submarine to one position in range."""
        cost = self.total_fuel_consumption_to if fuel_based else self.total_distance_to
        return min(
            (cost(position) for position in range(self.lowest, self.highest + 1)),
            default=None,
        )


def part_one(puzzle_input: str) -> int | None:
    try:
        positions = SubmarinePositions.parse(puzzle_input)
    except PositionsError:
        return None
    return positions.cheapest_aligned_position(False)


def part_two(puzzle_input: str) -> int | None:
    try:
        positions = SubmarinePositions.parse(puzzle_input)
    except PositionsError:
        return None
    return positions.cheapest_aligned_position(True)


def main(argv: Sequence[str] | None = None) -> None:
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()
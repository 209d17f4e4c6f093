"""Dumbo octopus: flashing energy levels."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from advent.day import Day
from advent.runner import solution_main

DAY = Day(11)

GRID_SIZE = 10
GRID_SIZE_TOTAL = GRID_SIZE * GRID_SIZE
_DIGITS = "0123456789"
_FLASH_LEVEL = 9

# North, northeast, east, southeast, south, southwest, west, northwest.
_COMPASS = ((-1, 0), (-1, 1), (0, 1), (1, 1), (1, 0), (1, -1), (0, -1), (-1, -1))


class OctopusGridError(ValueError):
    """Raised when an octopus grid cannot be parsed."""


@dataclass
class OctopusGrid:
    """Energy levels of a 10 by 10 grid, with flash counts."""

    spaces: list[int] = field(default_factory=lambda: [0] * GRID_SIZE_TOTAL)
    latest: int = 0
    flashes: int = 0

    @classmethod
    def parse(cls, text: str) -> OctopusGrid:
        """Parse up to ten lines of up to ten digits."""
        spaces = [0] * GRID_SIZE_TOTAL
        for row, line in enumerate(text.splitlines()):
            for col, ch in enumerate(line):
                if ch not in _DIGITS:
                    raise OctopusGridError(f"not an energy level: {ch!r}")
                if row >= GRID_SIZE or col >= GRID_SIZE:
                    raise OctopusGridError("grid is larger than 10 by 10")
                spaces[row * GRID_SIZE + col] = int(ch)
        return cls(spaces=spaces)

    @staticmethod
    def neighbours(position: int) -> Iterator[int]:
        """The up to eight positions around ``position``, clockwise from north."""
        row, col = divmod(position, GRID_SIZE)
        for d_row, d_col in _COMPASS:
            r, c = row + d_row, col + d_col
            if 0 <= r < GRID_SIZE and 0 <= c < GRID_SIZE:
                yield r * GRID_SIZE + c

    def progress(self) -> None:
        """Advance one step, letting flashes spread."""
        self.latest = 0
        flashed = [False] * GRID_SIZE_TOTAL
        queue = deque(range(GRID_SIZE_TOTAL))

        while queue:
            pos = queue.popleft()
            if flashed[pos]:
                continue
            if self.spaces[pos] == _FLASH_LEVEL:
                self.spaces[pos] = 0
                queue.extend(self.neighbours(pos))
                flashed[pos] = True
                self.latest += 1
                continue
            self.spaces[pos] += 1

        self.flashes += self.latest

    def _copy(self) -> OctopusGrid:
        return OctopusGrid(spaces=list(self.spaces), latest=self.latest, flashes=self.flashes)

    def flashes_after(self, steps: int) -> int:
        """Total flashes after ``steps`` more steps; this grid is left unchanged."""
        grid = self._copy()
        for _ in range(steps):
            grid.progress()
        return grid.flashes

    def cycle_when_all_flash(self) -> int:
        """Number of steps until every octopus flashes at once; this grid is left unchanged."""
        grid = self._copy()
        steps = 0
        while grid.latest != GRID_SIZE_TOTAL:
            grid.progress()
            steps += 1
        return steps


def part_one(puzzle_input: str) -> int | None:
    try:
        grid = OctopusGrid.parse(puzzle_input)
    except OctopusGridError:
        return None
    return grid.flashes_after(100)


def part_two(puzzle_input: str) -> int | None:
    try:
        grid = OctopusGrid.parse(puzzle_input)
    except OctopusGridError:
        return None
    return grid.cycle_when_all_flash()


def main(argv: Sequence[str] | None = None) -> None:
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()
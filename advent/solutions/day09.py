"""Smoke basin: low points and basins of a height map."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from advent.day import Day
from advent.runner import solution_main

DAY = Day(9)

_DIGITS = "0123456789"
_BASIN_RIM = 9


class CaveMapError(ValueError):
    """Raised when a height map cannot be parsed."""


@dataclass(frozen=True)
class LowPoint:
    position: int
    height: int


@dataclass(frozen=True)
class CaveMap:
    """Heights stored row by row, ``width`` to a row."""

    heights: tuple[int, ...]
    width: int

    @classmethod
    def parse(cls, text: str) -> CaveMap:
        """Parse lines of single-digit heights."""
        heights: list[int] = []
        width = 0
        for line in text.splitlines():
            if not width:
                width = len(line)
            for ch in line:
                if ch not in _DIGITS:
                    raise CaveMapError(f"not a height: {ch!r}")
                heights.append(int(ch))
        return cls(heights=tuple(heights), width=width)

    def neighbours(self, position: int) -> Iterator[int]:
        """Positions to the north, east, south and west that lie on the map."""
        col = position % self.width
        if position >= self.width:
            yield position - self.width
        if col + 1 < self.width and position + 1 < len(self.heights):
            yield position + 1
        if position + self.width < len(self.heights):
            yield position + self.width
        if col > 0:
            yield position - 1

    def find_low_points(self) -> Iterator[LowPoint]:
        """Points lower than all of their neighbours, in map order."""
        for position, height in enumerate(self.heights):
            if all(self.heights[n] > height for n in self.neighbours(position)):
                yield LowPoint(position=position, height=height)

    def basin_size(self, low_point: LowPoint) -> int:
        """Number of points that flow down to ``low_point``."""
        visited: set[int] = set()
        queue = deque([low_point])
        while queue:
            point = queue.popleft()
            visited.add(point.position)
            for neighbour in self.neighbours(point.position):
                height = self.heights[neighbour]
                if neighbour not in visited and point.height < height < _BASIN_RIM:
                    queue.append(LowPoint(position=neighbour, height=height))
        return len(visited)

    def three_largest_basins(self) -> tuple[int, int, int]:
        """Sizes of the three largest basins, largest first, padded with zeros."""
        sizes = heapq.nlargest(3, (self.basin_size(pt) for pt in self.find_low_points()))
        a, b, c = sizes + [0] * (3 - len(sizes))
        return a, b, c

    def total_low_point_risk(self) -> int:
        return sum(point.height + 1 for point in self.find_low_points())


def part_one(puzzle_input: str) -> int | None:
    try:
        cave = CaveMap.parse(puzzle_input)
    except CaveMapError:
        return None
    return cave.total_low_point_risk()


def part_two(puzzle_input: str) -> int | None:
    try:
        cave = CaveMap.parse(puzzle_input)
    except CaveMapError:
        return None
    a, b, c = cave.three_largest_basins()
    return a * b * c


def main(argv: Sequence[str] | None = None) -> None:
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()
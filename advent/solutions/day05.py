"""Hydrothermal venture: overlapping vent lines."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from advent.day import Day
from advent.runner import solution_main

DAY = Day(5)

_UINT = re.compile(r"\+?[0-9]+")


class VentError(ValueError):
    """Raised when vent lines cannot be parsed."""


def _parse_uint(text: str) -> int:
    if not _UINT.fullmatch(text):
        raise VentError(f"not a coordinate: {text!r}")
    return int(text)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    @classmethod
    def parse(cls, text: str) -> Point:
        """Parse a point of the form ``x,y``."""
        x, sep, y = text.partition(",")
        if not sep:
            raise VentError(f"not a point: {text!r}")
        return cls(_parse_uint(x), _parse_uint(y))


@dataclass(frozen=True)
class Vent:
    start: Point
    finish: Point

    @classmethod
    def parse(cls, line: str) -> Vent:
        """Parse a vent of the form ``x1,y1 -> x2,y2``."""
        start, sep, finish = line.partition(" -> ")
        if not sep:
            raise VentError(f"not a vent: {line!r}")
        return cls(Point.parse(start), Point.parse(finish))

    def slope(self) -> tuple[int, int]:
        """Direction of travel on each axis as -1, 0 or 1."""
        return (
            _sign(self.finish.x - self.start.x),
            _sign(self.finish.y - self.start.y),
        )

    def points(self, allow_diagonal: bool) -> Iterator[Point]:
        """Points covered by the vent; diagonal vents only when allowed."""
        dx, dy = self.slope()
        if not (allow_diagonal or dx == 0 or dy == 0):
            return
        x, y = self.start.x, self.start.y
        yield Point(x, y)
        if dx == 0 and dy == 0:
            return
        while True:
            x += dx
            y += dy
            if x < 0 or y < 0:
                return
            if (dx > 0 and x > self.finish.x) or (dx < 0 and x < self.finish.x):
                return
            if (dy > 0 and y > self.finish.y) or (dy < 0 and y < self.finish.y):
                return
            yield Point(x, y)


@dataclass(frozen=True)
class VentSystem:
    vents: tuple[Vent, ...]

    @classmethod
    def parse(cls, text: str) -> VentSystem:
        """Parse one vent per line."""
        return cls(tuple(Vent.parse(line) for line in text.splitlines()))

    def count_overlapping_points(self, allow_diagonal: bool) -> int:
        """Number of points covered by at least two vents."""
        counts = Counter(
            point for vent in self.vents for point in vent.points(allow_diagonal)
        )
        return sum(1 for count in counts.values() if count > 1)


def part_one(puzzle_input: str) -> int | None:
    try:
        return VentSystem.parse(puzzle_input).count_overlapping_points(False)
    except VentError:
        return None


def part_two(puzzle_input: str) -> int | None:
    try:
        return VentSystem.parse(puzzle_input).count_overlapping_points(True)
    except VentError:
        return None


def main(argv: Sequence[str] | None = None) -> None:
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()
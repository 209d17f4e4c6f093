"""Dive: steering the submarine."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace

from advent.day import Day
from advent.runner import solution_main

DAY = Day(2)

_U32 = re.compile(r"\+?[0-9]+")


def _instructions(lines: Iterable[str]) -> Iterable[tuple[str, int]]:
    for line in lines:
        command, sep, dist_text = line.partition(" ")
        if not sep or not _U32.fullmatch(dist_text) or int(dist_text) >= 2**32:
            continue
        yield command, int(dist_text)


def _follow(position, lines: Iterable[str]):
    for command, dist in _instructions(lines):
        if command == "forward":
            position = position.forward(dist)
        elif command == "up":
            position = position.up(dist)
        elif command == "down":
            position = position.down(dist)
    return position


@dataclass(frozen=True)
class SimplePosition:
    """Position where up and down change the depth directly."""

    depth: int = 0
    horiz: int = 0

    def forward(self, dist: int) -> SimplePosition:
        return replace(self, horiz=self.horiz + dist)

    def up(self, dist: int) -> SimplePosition:
        return replace(self, depth=max(self.depth - dist, 0))

    def down(self, dist: int) -> SimplePosition:
        return replace(self, depth=self.depth + dist)

    @classmethod
    def from_instructions(cls, lines: Iterable[str]) -> SimplePosition:
        """Follow the instructions from the origin; malformed lines are skipped."""
        return _follow(cls(), lines)


@dataclass(frozen=True)
class ComplicatedPosition:
    """Position where up and down change the aim."""

    aim: int = 0
    depth: int = 0
    horiz: int = 0

    def forward(self, dist: int) -> ComplicatedPosition:
        return replace(self, depth=self.depth + self.aim * dist, horiz=self.horiz + dist)

    def up(self, dist: int) -> ComplicatedPosition:
        return replace(self, aim=max(self.aim - dist, 0))

    def down(self, dist: int) -> ComplicatedPosition:
        return replace(self, aim=self.aim + dist)

    @classmethod
    def from_instructions(cls, lines: Iterable[str]) -> ComplicatedPosition:
        """Follow the instructions from the origin; malformed lines are skipped."""
        return _follow(cls(), lines)


def part_one(puzzle_input: str) -> int | None:
    position = SimplePosition.from_instructions(puzzle_input.splitlines())
    return position.depth * position.horiz


def part_two(puzzle_input: str) -> int | None:
    position = ComplicatedPosition.from_instructions(puzzle_input.splitlines())
    return position.depth * position.horiz


def main(argv: Sequence[str] | None = None) -> None:
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()
"""Passage pathing through a cave system."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from advent.day import Day
from advent.runner import solution_main

DAY = Day(12)

START = 0
END = 1
_MAX_CAVES = 64


class CaveSystemError(ValueError):
    """Raised when a cave system cannot be parsed."""


def _is_large(name: str) -> bool:
    first = name[:1]
    return first.isascii() and first.isupper()


@dataclass
class CaveSystem:
    """Caves as bit sets: connections per cave and the set of large caves."""

    connections: list[int]
    length: int
    sizes: int

    @classmethod
    def parse(cls, text: str) -> CaveSystem:
        """Parse lines of the form ``a-b``."""
        connections = [0] * _MAX_CAVES
        keys = {"start": START, "end": END}
        sizes = 0

        for line in text.splitlines():
            first, sep, second = line.partition("-")
            if not sep:
                raise CaveSystemError(f"not a connection: {line!r}")
            a = keys.setdefault(first, len(keys))
            b = keys.setdefault(second, len(keys))
            if len(keys) > _MAX_CAVES:
                raise CaveSystemError(f"more than {_MAX_CAVES} caves")

            if _is_large(first):
                sizes |= 1 << a
            if _is_large(second):
                sizes |= 1 << b
            connections[a] |= 1 << b
            connections[b] |= 1 << a

        return cls(connections=connections, length=len(keys), sizes=sizes)

    def connections_to(self, start: int, end: int, visited: int) -> int:
        """Count paths visiting small caves at most once."""
        if start == end:
            return 1
        return sum(
            self.connections_to(neighbour, end, visited | (1 << neighbour))
            for neighbour in self.neighbours(start)
            if self.is_large_cave(neighbour) or not visited & (1 << neighbour)
        )

    def connections_with_visiting_twice_to(
        self, start: int, end: int, visited: int, twice: bool
    ) -> int:
        """Count paths where one small cave other than start may be visited twice."""
        if start == end:
            return 1

        total = 0
        for neighbour in self.neighbours(start):
            if neighbour == START:
                continue
            already = bool(visited & (1 << neighbour))
            now_visited = visited | (1 << neighbour)
            if self.is_large_cave(neighbour) or not already:
                total += self.connections_with_visiting_twice_to(
                    neighbour, end, now_visited, twice
                )
            elif not twice:
                total += self.connections_with_visiting_twice_to(
                    neighbour, end, now_visited, True
                )
        return total

    def is_connected(self, pos: int, other: int) -> bool:
        return bool(self.connections[pos] & (1 << other))

    def is_large_cave(self, pos: int) -> bool:
        return bool(self.sizes & (1 << pos))

    def neighbours(self, pos: int) -> Iterator[int]:
        """Caves connected to ``pos``, in index order."""
        return (other for other in range(self.length) if self.is_connected(pos, other))


def part_one(puzzle_input: str) -> int | None:
    try:
        system = CaveSystem.parse(puzzle_input)
    except CaveSystemError:
        return None
    return system.connections_to(START, END, 1 << START)


def part_two(puzzle_input: str) -> int | None:
    try:
        system = CaveSystem.parse(puzzle_input)
    except CaveSystemError:
        return None
    return system.connections_with_visiting_twice_to(START, END, 1 << START, False)


def main(argv: Sequence[str] | None = None) -> None:
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()
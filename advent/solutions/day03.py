"""Binary diagnostic: gamma, epsilon and life-support ratings."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from advent.day import Day
from advent.runner import solution_main

DAY = Day(3)

_BINARY = re.compile(r"\+?[01]+")


class NumberSetError(ValueError):
    """Raised when a diagnostic report cannot be parsed."""


@dataclass
class NumberSet:
    """A set of binary numbers that are all ``digits`` bits wide."""

    digits: int
    values: set[int] = field(default_factory=set)

    @classmethod
    def parse(cls, text: str) -> NumberSet:
        """Parse one binary number per line; the widest line fixes the bit width."""
        values: set[int] = set()
        digits = 0
        for line in text.splitlines():
            if not _BINARY.fullmatch(line):
                raise NumberSetError(f"not a binary number: {line!r}")
            bits = line.lstrip("+")
            digits = max(digits, len(bits))
            values.add(int(bits, 2))
        return cls(digits=digits, values=values)

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self.values))

    def insert(self, value: int) -> None:
        self.values.add(value)

    def remove(self, value: int) -> None:
        self.values.discard(value)

    def retain_only_matching(self, digit: int) -> None:
        """Keep only the numbers that have the bit ``digit`` set."""
        self.values = {value for value in self.values if value & digit}

    def remove_matching(self, digit: int) -> None:
        """Drop the numbers that have the bit ``digit`` set."""
        self.values = {value for value in self.values if not value & digit}

    def digit_counts(self, digit: int) -> tuple[int, int]:
        """How many numbers have the bit ``digit`` clear and set."""
        ones = sum(1 for value in self.values if value & digit)
        return len(self.values) - ones, ones

    def best_match(self, common: bool) -> int | None:
        """Filter by the most (or least) common bit, highest first, until one is left."""
        numbers = NumberSet(digits=self.digits, values=set(self.values))
        for pos in reversed(range(self.digits)):
            digit = 1 << pos
            zeroes, ones = numbers.digit_counts(digit)
            keep_ones = ones >= zeroes if common else ones < zeroes
            if keep_ones:
                numbers.retain_only_matching(digit)
            else:
                numbers.remove_matching(digit)
            if len(numbers) == 1:
                return next(iter(numbers))
        return None


def part_one(puzzle_input: str) -> int | None:
    try:
        numbers = NumberSet.parse(puzzle_input)
    except NumberSetError:
        return None
    gamma = epsilon = 0
    for pos in range(numbers.digits):
        digit = 1 << pos
        zeroes, ones = numbers.digit_counts(digit)
        if ones >= zeroes:
            gamma |= digit
        else:
            epsilon |= digit
    return gamma * epsilon


def part_two(puzzle_input: str) -> int | None:
    try:
        numbers = NumberSet.parse(puzzle_input)
    except NumberSetError:
        return None
    oxygen = numbers.best_match(True) or 0
    carbon = numbers.best_match(False) or 0
    return oxygen * carbon


def main(argv: Sequence[str] | None = None) -> None:
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()
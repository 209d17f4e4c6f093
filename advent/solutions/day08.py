"""Seven segment search: decoding scrambled displays."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from advent.day import Day
from advent.runner import solution_main

DAY = Day(8)

_WIRE_BITS = {ch: 1 << index for index, ch in enumerate("abcdefg")}
_UNIQUE_LENGTHS = {2, 3, 4, 7}
_PATTERN_COUNT = 10
_OUTPUT_COUNT = 4


class DisplayError(ValueError):
    """Raised when a display line cannot be parsed."""


def parse_wire_labels(text: str) -> int:
    """Turn wire letters into a bit mask; letters outside a-g add nothing."""
    if not text:
        raise DisplayError("empty wire label")
    mask = 0
    for ch in text:
        mask |= _WIRE_BITS.get(ch, 0)
    return mask


def _parse_masks(text: str, size: int) -> tuple[int, ...]:
    masks = [parse_wire_labels(word) for word in text.split()]
    if len(masks) > size:
        raise DisplayError(f"expected at most {size} patterns, got {len(masks)}")
    return tuple(masks + [0] * (size - len(masks)))


@dataclass(frozen=True)
class Display:
    patterns: tuple[int, ...]
    output: tuple[int, ...]

    @classmethod
    def parse(cls, line: str) -> Display:
        """Parse ``patterns | output`` with wire letters as words."""
        patterns_str, sep, output_str = line.strip().partition(" | ")
        if not sep:
            raise DisplayError(f"not a display: {line!r}")
        return cls(
            _parse_masks(patterns_str, _PATTERN_COUNT),
            _parse_masks(output_str, _OUTPUT_COUNT),
        )

    def unique_outputs(self) -> int:
        """Output digits that are a 1, 4, 7 or 8."""
        return sum(1 for out in self.output if out.bit_count() in _UNIQUE_LENGTHS)

    def read_output(self) -> int:
        """Decode the wiring and return the four output digits as a number."""
        decoded = [0] * 10
        wires = [0] * 7
        by_length = {2: 1, 3: 7, 4: 4, 7: 8}

        wire_counts = [
            sum(1 for pattern in self.patterns if pattern & (1 << bit)) for bit in range(7)
        ]
        for pattern in self.patterns:
            digit = by_length.get(pattern.bit_count())
            if digit is not None:
                decoded[digit] = pattern

        # Wire 'a' is in 7 but not in 1.
        wires[0] = next(
            (
                1 << bit
                for bit in range(7)
                if decoded[7] & (1 << bit) and not decoded[1] & (1 << bit)
            ),
            0,
        )

        # Four more wires are identified by how often they appear.
        for bit, count in enumerate(wire_counts):
            value = 1 << bit
            if count == 4:
                wires[4] = value
            elif count == 6:
                wires[1] = value
            elif count == 8:
                if value != wires[0]:
                    wires[2] = value
            elif count == 9:
                wires[5] = value

        for pattern in self.patterns:
            segments = pattern.bit_count()
            if segments == 5 and not pattern & wires[1] and not pattern & wires[4]:
                decoded[3] = pattern
            if segments == 5 and not pattern & wires[2] and not pattern & wires[4]:
                decoded[5] = pattern
            if segments == 6 and not pattern & wires[2]:
                decoded[6] = pattern
            if segments == 6 and not pattern & wires[4]:
                decoded[9] = pattern

        # The remaining two patterns follow by elimination.
        for pattern in self.patterns:
            segments = pattern.bit_count()
            if segments == 5 and pattern not in (decoded[3], decoded[5]):
                decoded[2] = pattern
            if segments == 6 and pattern not in (decoded[6], decoded[9]):
                decoded[0] = pattern

        digits = [
            sum(value for value, pattern in enumerate(decoded) if pattern == out)
            for out in self.output
        ]
        total = 0
        for digit in digits:
            total = total * 10 + digit
        return total


@dataclass(frozen=True)
class DisplaySystem:
    displays: tuple[Display, ...]

    @classmethod
    def parse(cls, text: str) -> DisplaySystem:
        """Parse one display per line."""
        return cls(tuple(Display.parse(line) for line in text.splitlines()))

    def total_unique_outputs(self) -> int:
        return sum(display.unique_outputs() for display in self.displays)

    def total_of_outputs(self) -> int:
        return sum(display.read_output() for display in self.displays)


def part_one(puzzle_input: str) -> int | None:
    try:
        return DisplaySystem.parse(puzzle_input).total_unique_outputs()
    except DisplayError:
        return None


def part_two(puzzle_input: str) -> int | None:
    try:
        return DisplaySystem.parse(puzzle_input).total_of_outputs()
    except DisplayError:
        return None


def main(argv: Sequence[str] | None = None) -> None:
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()
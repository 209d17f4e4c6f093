"""Extended polymerization: pair insertion counts."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field

from advent.day import Day
from advent.runner import solution_main

DAY = Day(14)


class PolymerError(ValueError):
    """Raised when a polymer template or its rules cannot be parsed."""


def parse_element(character: str) -> int:
    """Map a letter, in either case, to 0 to 25."""
    lower = character.lower()
    if len(lower) != 1 or not ("a" <= lower <= "z"):
        raise PolymerError(f"not an element: {character!r}")
    return ord(lower) - ord("a")


@dataclass(frozen=True)
class InsertionRule:
    """Between ``left`` and ``right``, insert ``output``."""

    left: int
    right: int
    output: int

    @classmethod
    def parse(cls, line: str) -> InsertionRule:
        """Parse ``AB -> C``."""
        pair, sep, output = line.partition(" -> ")
        if not sep or len(pair) < 2 or not output:
            raise PolymerError(f"not an insertion rule: {line!r}")
        return cls(parse_element(pair[0]), parse_element(pair[1]), parse_element(output[0]))


@dataclass
class Polymer:
    """Element counts, adjacent pair counts and the insertion rules."""

    counts: Counter = field(default_factory=Counter)
    pairs: Counter = field(default_factory=Counter)
    rules: list[InsertionRule] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> Polymer:
        """Parse the template, a blank line, then one rule per line."""
        template, sep, rules_str = text.partition("\n\n")
        if not sep:
            raise PolymerError("missing blank line after the template")
        elements = [parse_element(ch) for ch in template]
        counts = Counter(elements)
        pairs = Counter(zip(elements, elements[1:]))
        rules = [InsertionRule.parse(line) for line in rules_str.splitlines()]
        return cls(counts=counts, pairs=pairs, rules=rules)

    def expand(self, steps: int) -> None:
        """Apply every rule simultaneously, ``steps`` times."""
        for _ in range(steps):
            counts = Counter(self.counts)
            pairs = Counter(self.pairs)
            for rule in self.rules:
                count = self.pairs[(rule.left, rule.right)]
                pairs[(rule.left, rule.right)] -= count
                pairs[(rule.left, rule.output)] += count
                pairs[(rule.output, rule.right)] += count
                counts[rule.output] += count
            self.counts = counts
            self.pairs = pairs

    def check_sum(self) -> int | None:
        """Most common element count minus least common; None if there are none."""
        present = [count for count in self.counts.values() if count > 0]
        if not present:
            return None
        return max(present) - min(present)


def _solve(puzzle_input: str, steps: int) -> int | None:
    try:
        polymer = Polymer.parse(puzzle_input)
    except PolymerError:
        return None
    polymer.expand(steps)
    return polymer.check_sum()


def part_one(puzzle_input: str) -> int | None:
    return _solve(puzzle_input, 10)


def part_two(puzzle_input: str) -> int | None:
    return _solve(puzzle_input, 40)


def main(argv: Sequence[str] | None = None) -> None:
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()
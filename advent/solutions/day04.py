"""Giant squid: playing bingo."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field

from advent.day import Day
from advent.runner import solution_main

DAY = Day(4)

_U8 = re.compile(r"\+?[0-9]+")
_CARD_SIZE = 5
_HIGHEST_NUMBER = 100


class BingoError(ValueError):
    """Raised when a bingo game cannot be parsed."""


def _parse_number(text: str) -> int:
    if not _U8.fullmatch(text) or int(text) > 255:
        raise BingoError(f"not a bingo number: {text!r}")
    return int(text)


@dataclass
class BitSet:
    """A set of small non-negative numbers held as bits of an integer."""

    value: int = 0

    def contains(self, number: int) -> bool:
        return bool(self.value & (1 << number))

    def insert(self, number: int) -> None:
        self.value |= 1 << number

    def remove(self, number: int) -> None:
        self.value &= ~(1 << number)

    def is_empty(self) -> bool:
        return self.value == 0


def _empty_lines() -> list[BitSet]:
    return [BitSet() for _ in range(_CARD_SIZE)]


@dataclass
class BingoCard:
    """Unmarked numbers of a card, per column and per row."""

    cols: list[BitSet] = field(default_factory=_empty_lines)
    rows: list[BitSet] = field(default_factory=_empty_lines)

    @classmethod
    def parse(cls, text: str) -> BingoCard:
        """Parse five rows of five whitespace-separated numbers."""
        card = cls()
        for row, line in enumerate(text.splitlines()):
            for col, number_str in enumerate(line.split()):
                if row >= _CARD_SIZE or col >= _CARD_SIZE:
                    raise BingoError("a card holds at most five rows and columns")
                card.add_number(row, col, _parse_number(number_str))
        return card

    def add_number(self, row: int, col: int, number: int) -> None:
        self.cols[col].insert(number)
        self.rows[row].insert(number)

    def call_number(self, number: int) -> None:
        """Mark ``number`` wherever it appears on the card."""
        for line in (*self.cols, *self.rows):
            line.remove(number)

    def has_won(self) -> bool:
        """Whether any row or column is fully marked."""
        return any(line.is_empty() for line in (*self.cols, *self.rows))

    def contains_number(self, number: int) -> bool:
        return any(line.contains(number) for line in (*self.cols, *self.rows))

    def sum_of_unmarked_numbers(self) -> int:
        return sum(
            number for number in range(_HIGHEST_NUMBER) if self.contains_number(number)
        )


@dataclass
class BingoGame:
    """Numbers to be called, in order, and the cards in play."""

    numbers: list[int]
    cards: list[BingoCard]

    @classmethod
    def parse(cls, text: str) -> BingoGame:
        """Parse the called numbers, then cards separated by blank lines."""
        numbers_str, *sections = text.split("\n\n")
        numbers = [_parse_number(number) for number in numbers_str.split(",")]
        cards = [BingoCard.parse(section) for section in sections]
        return cls(numbers=numbers, cards=cards)

    def first_win(self) -> int | None:
        """Score of the first card to win, or None if no card wins."""
        for number in self.numbers:
            for card in self.cards:
                card.call_number(number)
                if card.has_won():
                    return card.sum_of_unmarked_numbers() * number
        return None

    def all_wins(self) -> list[int]:
        """Scores of every card in the order they win."""
        wins = []
        for number in self.numbers:
            for card in self.cards:
                if card.has_won():
                    continue
                card.call_number(number)
                if card.has_won():
                    wins.append(card.sum_of_unmarked_numbers() * number)
        return wins


def part_one(puzzle_input: str) -> int | None:
    try:
        game = BingoGame.parse(puzzle_input)
    except BingoError:
        return None
    return game.first_win()


def part_two(puzzle_input: str) -> int | None:
    try:
        game = BingoGame.parse(puzzle_input)
    except BingoError:
        return None
    wins = game.all_wins()
    return wins[-1] if wins else None


def main(argv: Sequence[str] | None = None) -> None:
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()
"""Transparent origami: folding dotted paper."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from advent.day import Day
from advent.runner import solution_main

DAY = Day(13)

_UINT = re.compile(r"\+?[0-9]+")
_FOLD_PREFIX = "fold along "

Point = tuple[int, int]


class PaperError(ValueError):
    """Raised when the paper or its folds cannot be parsed."""


def _parse_uint(text: str) -> int:
    if not _UINT.fullmatch(text):
        raise PaperError(f"not a coordinate: {text!r}")
    return int(text)


@dataclass(frozen=True)
class Fold:
    """A fold along the vertical line ``x = line`` or the horizontal line ``y = line``."""

    axis: str
    line: int

    @classmethod
    def parse(cls, text: str) -> Fold:
        """Parse ``fold along x=5`` or ``fold along y=7``."""
        if not text.startswith(_FOLD_PREFIX):
            raise PaperError(f"not a fold: {text!r}")
        axis, sep, coord = text[len(_FOLD_PREFIX):].partition("=")
        if not sep or axis not in ("x", "y"):
            raise PaperError(f"not a fold: {text!r}")
        return cls(axis=axis, line=_parse_uint(coord))

    @staticmethod
    def move_coordinate(coord: int, fold_line: int) -> int | None:
        """Mirror a coordinate past the fold line; None if it falls off the paper."""
        if coord > fold_line:
            mirrored = fold_line - (coord - fold_line)
            return mirrored if mirrored >= 0 else None
        return coord

    def move_dot(self, dot: Point) -> Point | None:
        x, y = dot
        if self.axis == "x":
            x = self.move_coordinate(x, self.line)
        else:
            y = self.move_coordinate(y, self.line)
        if x is None or y is None:
            return None
        return x, y


@dataclass
class Paper:
    """Dots on the paper and the folds still to make, the next one last."""

    dots: set[Point] = field(default_factory=set)
    folds: list[Fold] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> Paper:
        """Parse dot lines, a blank line, then fold instructions."""
        dots_str, sep, folds_str = text.partition("\n\n")
        if not sep:
            raise PaperError("missing blank line between dots and folds")
        dots = set()
        for line in dots_str.splitlines():
            x, comma, y = line.partition(",")
            if not comma:
                raise PaperError(f"not a dot: {line!r}")
            dots.add((_parse_uint(x), _parse_uint(y)))
        folds = [Fold.parse(line) for line in reversed(folds_str.splitlines())]
        return cls(dots=dots, folds=folds)

    @staticmethod
    def dots_after(dots: Iterable[Point], fold: Fold) -> set[Point]:
        moved = (fold.move_dot(dot) for dot in dots)
        return {dot for dot in moved if dot is not None}

    def fold_once(self) -> None:
        """Make the next fold, if any."""
        if self.folds:
            self.dots = self.dots_after(self.dots, self.folds.pop())

    @staticmethod
    def render(dots: Iterable[Point]) -> str:
        """Draw the dots as rows of blocks and spaces, each row ending in a newline."""
        dots = set(dots)
        max_x = max((x for x, _ in dots), default=0)
        max_y = max((y for _, y in dots), default=0)
        return "".join(
            "".join("█" if (x, y) in dots else " " for x in range(max_x + 1)) + "\n"
            for y in range(max_y + 1)
        )

    def fold_and_output(self) -> str:
        """Make every remaining fold and draw the result; this paper is left unchanged."""
        dots: set[Point] = set(self.dots)
        for fold in reversed(self.folds):
            dots = self.dots_after(dots, fold)
        return self.render(dots)


def part_one(puzzle_input: str) -> int | None:
    try:
        paper = Paper.parse(puzzle_input)
    except PaperError:
        return None
    paper.fold_once()
    return len(paper.dots)


def part_two(puzzle_input: str) -> str | None:
    try:
        paper = Paper.parse(puzzle_input)
    except PaperError:
        return None
    return paper.fold_and_output()


def main(argv: Sequence[str] | None = None) -> None:
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()
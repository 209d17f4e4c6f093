"""Validated day numbers of the advent calendar."""

from __future__ import annotations

import re
from collections.abc import Iterator
from datetime import datetime, timedelta, timezone
from functools import total_ordering

_DAY_PATTERN = re.compile(r"\+?[0-9]+")
_SERVER_TIMEZONE = timezone(timedelta(hours=-5))
_FIRST_DAY = 1
_LAST_DAY = 25


class DayParseError(ValueError):
    """Raised when a value is not a day number between 1 and 25."""

    def __init__(self, message: str = "expecting a day number between 1 and 25") -> None:
        super().__init__(message)


@total_ordering
class Day:
    """A day of advent, an integer from 1 to 25, shown as two digits."""

    __slots__ = ("_value",)

    def __init__(self, value: int) -> None:
        if (
            isinstance(value, bool)
            or not isinstance(value, int)
            or not _FIRST_DAY <= value <= _LAST_DAY
        ):
            raise DayParseError()
        self._value = value

    @property
    def value(self) -> int:
        """The day as a plain integer."""
        return self._value

    @classmethod
    def parse(cls, text: str) -> Day:
        """Parse a day number from text such as ``"8"`` or ``"08"``."""
        if not _DAY_PATTERN.fullmatch(text):
            raise DayParseError()
        return cls(int(text))

    @classmethod
    def today(cls) -> Day | None:
        """Return today's day if it is the 1st to 25th of December on the server."""
        now = datetime.now(_SERVER_TIMEZONE)
        if now.month == 12 and now.day <= _LAST_DAY:
            return cls(now.day)
        return None

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return f"{self._value:02d}"

    def __repr__(self) -> str:
        return f"Day({self._value})"

    def __hash__(self) -> int:
        return hash(self._value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Day):
            return self._value == other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Day):
            return self._value < other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value < other
        return NotImplemented


def all_days() -> Iterator[Day]:
    """Yield every day of advent from the 1st to the 25th."""
    for number in range(_FIRST_DAY, _LAST_DAY + 1):
        yield Day(number)
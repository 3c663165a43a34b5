"""Module for pattern token types."""

from dataclasses import dataclass
from enum import Enum


class Token:
    """Base class for all token types."""


@dataclass(slots=True, frozen=True)
class End(Token):
    """Token representing the end of the pattern."""


@dataclass(slots=True, frozen=True)
class Literal(Token):
    """Token representing text copied as-is to the output."""

    text: str


class Letter(Enum):
    """Pattern letters understood by the formatter."""

    Day = "d"
    Month = "M"
    Year = "u"
    YearOfEra = "y"
    Hour = "H"
    ClockHour = "h"
    Minute = "m"
    Second = "s"
    AmPm = "a"
    DayOfWeek = "E"

    @property
    def is_time(self) -> bool:
        """Whether the letter refers to a time-of-day field."""
        return self in _TIME_LETTERS


_TIME_LETTERS = frozenset(
    {Letter.Hour, Letter.ClockHour, Letter.Minute, Letter.Second, Letter.AmPm}
)

# Maximum run length accepted for each letter.
MAX_WIDTH: dict[Letter, int] = {
    Letter.Day: 2,
    Letter.Month: 4,
    Letter.Year: 9,
    Letter.YearOfEra: 9,
    Letter.Hour: 2,
    Letter.ClockHour: 2,
    Letter.Minute: 2,
    Letter.Second: 2,
    Letter.AmPm: 1,
    Letter.DayOfWeek: 4,
}


@dataclass(slots=True, frozen=True)
class Field(Token):
    """Token representing a run of identical pattern letters."""

    letter: Letter
    width: int

    @property
    def symbol(self) -> str:
        """The field as written in the pattern, e.g. ``MMM``."""
        return self.letter.value * self.width

"""Compiled date patterns used for formatting and parsing."""

import calendar
import datetime
import re

from datekit.core.logging import logger
from datekit.core.pattern import tokens
from datekit.core.pattern.tokenizer import PatternLexer
from datekit.exceptions import DateParseError, InvalidInputError, PatternError

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

DAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

AM_PM = ("AM", "PM")

# Two digit years are read relative to this base.
BASE_YEAR = 2000

_FIELD_KEYS = {
    tokens.Letter.Day: "day",
    tokens.Letter.Month: "month",
    tokens.Letter.Year: "year",
    tokens.Letter.YearOfEra: "year",
    tokens.Letter.Hour: "hour",
    tokens.Letter.ClockHour: "clock_hour",
    tokens.Letter.Minute: "minute",
    tokens.Letter.Second: "second",
    tokens.Letter.AmPm: "am_pm",
    tokens.Letter.DayOfWeek: "weekday",
}


def _names(names: tuple[str, ...], width: int) -> tuple[str, ...]:
    """Return full names for width 4 and three letter abbreviations otherwise."""
    return names if width >= 4 else tuple(name[:3] for name in names)


def _digits(width: int) -> str:
    """Regex for a numeric field of the given width."""
    if width == 1:
        return r"\d{1,2}"
    return rf"\d{{{width}}}"


def _year_digits(width: int) -> str:
    """Regex for a year field of the given width."""
    if width == 2:
        return r"\d{2}"
    if width == 1:
        return r"\d{1,9}"
    return rf"\d{{{width},9}}"


class PatternFormatter:
    """Formatter and parser for a letter based date pattern.

    Patterns use the familiar letter notation, for example ``d MMM uuuu``
    renders 3 January 2024 as ``3 Jan 2024``. Supported letters are ``d``,
    ``M``, ``u``, ``y``, ``H``, ``h``, ``m``, ``s``, ``a`` and ``E``. Text in
    single quotes is copied verbatim and ``''`` stands for a single quote.

    Parsing is strict about layout: the whole text must match the pattern.
    A day of month from 29 to 31 that is past the end of the month resolves
    to the last day of that month, so ``02-31-2020`` parses as 2020-02-29.
    Other out of range values are rejected.
    """

    def __init__(self, pattern: str):
        """Compile the given pattern.

        Raises:
            PatternError: If the pattern is empty or malformed.
        """
        if not isinstance(pattern, str) or not pattern:
            raise PatternError(pattern, "a non-empty pattern string is required")
        self._pattern = pattern
        self._tokens = [
            token
            for token in PatternLexer(pattern)
            if not isinstance(token, tokens.End)
        ]
        self._fields: dict[str, tokens.Field] = {}
        parts = []
        for token in self._tokens:
            if isinstance(token, tokens.Literal):
                parts.append(re.escape(token.text))
            elif isinstance(token, tokens.Field):
                group = f"f{len(self._fields)}"
                self._fields[group] = token
                parts.append(f"(?P<{group}>{self._field_regex(token)})")
        self._regex = re.compile("".join(parts), re.ASCII)
        logger.debug("Compiled pattern %r into %d tokens.", pattern, len(self._tokens))

    @property
    def pattern(self) -> str:
        """The pattern this formatter was compiled from."""
        return self._pattern

    @property
    def has_time(self) -> bool:
        """Whether the pattern contains any time-of-day field."""
        return any(field.letter.is_time for field in self._fields.values())

    def __eq__(self, other: object) -> bool:
        """Formatters compiled from the same pattern are equal."""
        if not isinstance(other, PatternFormatter):
            return NotImplemented
        return self._pattern == other._pattern

    def __hash__(self) -> int:
        """Hash on the pattern."""
        return hash(self._pattern)

    def __repr__(self) -> str:
        """Return the formatter representation."""
        return f"PatternFormatter({self._pattern!r})"

    @staticmethod
    def _field_regex(field: tokens.Field) -> str:
        match field.letter:
            case tokens.Letter.Month if field.width >= 3:
                return "|".join(_names(MONTH_NAMES, field.width))
            case tokens.Letter.DayOfWeek:
                return "|".join(_names(DAY_NAMES, field.width))
            case tokens.Letter.AmPm:
                return "|".join(AM_PM)
            case tokens.Letter.Year | tokens.Letter.YearOfEra:
                return _year_digits(field.width)
            case _:
                return _digits(field.width)

    # Formatting

    def format(self, value: datetime.date) -> str:
        """Render a date or datetime according to the pattern.

        Raises:
            InvalidInputError: If the value is not a date or datetime.
            PatternError: If the pattern needs time fields and the value is a
                plain date.
        """
        if not isinstance(value, datetime.date):
            raise InvalidInputError(value, "A date or datetime value is required.")
        parts = []
        for token in self._tokens:
            if isinstance(token, tokens.Literal):
                parts.append(token.text)
            elif isinstance(token, tokens.Field):
                parts.append(self._format_field(token, value))
        return "".join(parts)

    def _format_field(self, field: tokens.Field, value: datetime.date) -> str:
        width = field.width
        match field.letter:
            case tokens.Letter.Day:
                return f"{value.day:0{width}d}"
            case tokens.Letter.Month if width >= 3:
                return _names(MONTH_NAMES, width)[value.month - 1]
            case tokens.Letter.Month:
                return f"{value.month:0{width}d}"
            case tokens.Letter.Year | tokens.Letter.YearOfEra if width == 2:
                return f"{value.year % 100:02d}"
            case tokens.Letter.Year | tokens.Letter.YearOfEra:
                return f"{value.year:0{width}d}"
            case tokens.Letter.DayOfWeek:
                return _names(DAY_NAMES, width)[value.weekday()]

        if not isinstance(value, datetime.datetime):
            raise PatternError(
                self._pattern,
                f"field '{field.symbol}' requires a time value, got {value!r}",
            )
        match field.letter:
            case tokens.Letter.Hour:
                return f"{value.hour:0{width}d}"
            case tokens.Letter.ClockHour:
                return f"{value.hour % 12 or 12:0{width}d}"
            case tokens.Letter.Minute:
                return f"{value.minute:0{width}d}"
            case tokens.Letter.Second:
                return f"{value.second:0{width}d}"
            case _:
                return AM_PM[value.hour // 12]

    # Parsing

    def parse_date(self, text: str) -> datetime.date:
        """Parse text into a date.

        Time fields present in the pattern must still match but are discarded.

        Raises:
            DateParseError: If the text does not match the pattern or does not
                describe a valid date.
        """
        values = self._resolve(text)
        return self._build_date(text, values)

    def parse_datetime(self, text: str) -> datetime.datetime:
        """Parse text into a datetime, missing time fields default to zero.

        Raises:
            DateParseError: If the text does not match the pattern or does not
                describe a valid date and time.
        """
        values = self._resolve(text)
        parsed_date = self._build_date(text, values)
        hour = self._resolve_hour(text, values)
        try:
            return datetime.datetime.combine(
                parsed_date,
                datetime.time(hour, values.get("minute", 0), values.get("second", 0)),
            )
        except ValueError as e:
            raise DateParseError(
                text, self._pattern, f"Text '{text}' is not a valid time: {e}"
            ) from e

    def _resolve(self, text: str) -> dict[str, int]:
        """Match the text and collect the numeric value of every field."""
        if not isinstance(text, str):
            raise DateParseError(str(text), self._pattern)
        matched = self._regex.fullmatch(text)
        if matched is None:
            raise DateParseError(text, self._pattern)

        values: dict[str, int] = {}
        for group, field in self._fields.items():
            raw = matched.group(group)
            match field.letter:
                case tokens.Letter.Month if field.width >= 3:
                    number = _names(MONTH_NAMES, field.width).index(raw) + 1
                case tokens.Letter.DayOfWeek:
                    number = _names(DAY_NAMES, field.width).index(raw)
                case tokens.Letter.AmPm:
                    number = AM_PM.index(raw)
                case tokens.Letter.Year | tokens.Letter.YearOfEra if field.width == 2:
                    number = BASE_YEAR + int(raw)
                case _:
                    number = int(raw)

            key = _FIELD_KEYS[field.letter]
            if key in values and values[key] != number:
                raise DateParseError(
                    text,
                    self._pattern,
                    f"Text '{text}' has conflicting values for field "
                    f"'{field.symbol}'.",
                )
            values[key] = number
        return values

    def _build_date(self, text: str, values: dict[str, int]) -> datetime.date:
        missing = [key for key in ("year", "month", "day") if key not in values]
        if missing:
            raise DateParseError(
                text,
                self._pattern,
                f"Pattern '{self._pattern}' does not provide: {', '.join(missing)}.",
            )
        year, month, day = values["year"], values["month"], values["day"]
        # Days 29-31 past the end of the month resolve to its last day.
        if (
            datetime.MINYEAR <= year <= datetime.MAXYEAR
            and 1 <= month <= 12
            and 29 <= day <= 31
        ):
            day = min(day, calendar.monthrange(year, month)[1])
        try:
            parsed = datetime.date(year, month, day)
        except ValueError as e:
            raise DateParseError(
                text, self._pattern, f"Text '{text}' is not a valid date: {e}"
            ) from e

        if "weekday" in values and values["weekday"] != parsed.weekday():
            raise DateParseError(
                text,
                self._pattern,
                f"Text '{text}' names {DAY_NAMES[values['weekday']]} "
                f"but {parsed.isoformat()} is a {DAY_NAMES[parsed.weekday()]}.",
            )
        return parsed

    def _resolve_hour(self, text: str, values: dict[str, int]) -> int:
        if "clock_hour" in values:
            if "am_pm" not in values:
                raise DateParseError(
                    text,
                    self._pattern,
                    f"Pattern '{self._pattern}' uses a clock hour without AM/PM.",
                )
            if not 1 <= values["clock_hour"] <= 12:
                raise DateParseError(
                    text,
                    self._pattern,
                    f"Text '{text}' has an invalid clock hour: {values['clock_hour']}.",
                )
            hour = values["clock_hour"] % 12 + 12 * values["am_pm"]
            if "hour" in values and values["hour"] != hour:
                raise DateParseError(
                    text,
                    self._pattern,
                    f"Text '{text}' has conflicting hour values.",
                )
            return hour
        return values.get("hour", 0)

"""Conversions between strings, dates and datetimes."""

import datetime

from datekit.core.logging import logger
from datekit.core.pattern import PatternFormatter
from datekit.core.validators import DateValidator
from datekit.exceptions import InvalidInputError, NullReferenceError
from datekit.models.fields import DateTimeFields
from datekit.services.helpers import compute_legacy_difference

DEFAULT_PATTERN = "d MMM uuuu"


def _require_date(value: object) -> datetime.date:
    if value is None:
        raise InvalidInputError(value, "A date value must be provided!")
    if not isinstance(value, datetime.date):
        raise InvalidInputError(value, f"Expected a date, got {type(value).__name__}.")
    return value


def _require_datetime(value: object) -> datetime.datetime:
    if value is None:
        raise InvalidInputError(value, "A datetime value must be provided!")
    if not isinstance(value, datetime.datetime):
        raise InvalidInputError(
            value, f"Expected a datetime, got {type(value).__name__}."
        )
    if value.tzinfo is not None:
        raise InvalidInputError(value, "Timezone-aware datetimes are not supported.")
    return value


class DateFormatter:
    """Convert between strings and date or datetime values.

    The pattern and the compiled formatter are separate settings. Changing
    :attr:`pattern` does not recompile :attr:`formatter`, so callers that want
    the new pattern to take effect must also assign a new formatter:

    >>> dates = DateFormatter(DateValidator())
    >>> dates.pattern = "MM-dd-uuuu"
    >>> dates.formatter = PatternFormatter(dates.pattern)

    Instances are not safe to mutate from several threads at once.
    """

    def __init__(self, validator: DateValidator, pattern: str = DEFAULT_PATTERN):
        """Initialize the DateFormatter.

        The formatter is compiled from ``pattern`` while :attr:`pattern`
        itself always starts out as :data:`DEFAULT_PATTERN`.

        Args:
            validator: Validator consulted before any string is parsed.
            pattern: Pattern for the formatter, defaults to ``d MMM uuuu``.

        Raises:
            InvalidInputError: If the validator is None or the pattern is
                None or empty.
        """
        if pattern is None or pattern == "":
            raise InvalidInputError(pattern, "You must provide a formatting pattern!")
        self._pattern = DEFAULT_PATTERN
        self.formatter = PatternFormatter(pattern)
        self.validator = validator

    @property
    def validator(self) -> DateValidator:
        """The validator used before parsing strings."""
        return self._validator

    @validator.setter
    def validator(self, value: DateValidator) -> None:
        if value is None:
            raise InvalidInputError(value, "A date validator object must be provided!")
        self._validator = value

    @property
    def pattern(self) -> str:
        """The formatting pattern.

        Assigning a new pattern does not rebuild :attr:`formatter`.
        """
        return self._pattern

    @pattern.setter
    def pattern(self, value: str) -> None:
        if value is None or value == "":
            raise InvalidInputError(value, "You must provide a formatting pattern!")
        logger.debug("Pattern set to %r.", value)
        self._pattern = value

    @property
    def formatter(self) -> PatternFormatter:
        """The compiled formatter used for every conversion."""
        return self._formatter

    @formatter.setter
    def formatter(self, value: PatternFormatter) -> None:
        if value is None:
            raise NullReferenceError("Formatter object cannot be null!")
        logger.debug("Formatter set to %r.", value)
        self._formatter = value

    def format_date(self, value: datetime.date) -> str:
        """Convert a date into a string using the current formatter."""
        return self.formatter.format(_require_date(value))

    def format_datetime(self, value: datetime.datetime) -> str:
        """Convert a datetime into a string using the current formatter."""
        return self.formatter.format(_require_datetime(value))

    def format_date_with_pattern(self, value: datetime.date, pattern: str) -> str:
        """Convert a date into a string.

        Known defect: ``pattern`` is ignored and the current formatter is used.
        Existing callers depend on this, see :meth:`format_date`.
        """
        return self.formatter.format(_require_date(value))

    def datetime_to_date(self, value: datetime.datetime) -> datetime.date:
        """Return the date part of a datetime."""
        return _require_datetime(value).date()

    def date_to_datetime(self, value: datetime.date) -> datetime.datetime:
        """Return a datetime at midnight of the given date."""
        value = _require_date(value)
        return datetime.datetime(value.year, value.month, value.day, 0, 0)

    def parse_date(self, text: str) -> datetime.date:
        """Convert a string into a date.

        The string is checked by the validator first and then parsed with the
        current formatter. The two use unrelated layouts, so a string may pass
        one and fail the other.

        Raises:
            InvalidInputError: If the validator rejects the string.
            DateParseError: If the string does not match the formatter pattern.
        """
        if not self.validator.is_date_valid(text):
            raise InvalidInputError(text, "The date provided is not valid!")
        return self.formatter.parse_date(text)

    def get_date_difference(
        self, date_one: datetime.datetime, date_two: datetime.datetime
    ) -> DateTimeFields:
        """Return the difference from ``date_one`` to ``date_two``.

        The result has year, month and day set to zero. Hour, minute and
        second hold the total number of whole hours, minutes and seconds
        between the two values, each computed independently.
        """
        return compute_legacy_difference(
            _require_datetime(date_one), _require_datetime(date_two)
        )

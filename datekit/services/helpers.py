"""Helpers for different services."""

import datetime

from datekit.core.logging import logger
from datekit.models.fields import DateTimeFields

_MICROSECONDS = {
    "days": 86_400_000_000,
    "hours": 3_600_000_000,
    "minutes": 60_000_000,
    "seconds": 1_000_000,
}


def units_between(
    start: datetime.datetime, end: datetime.datetime, unit: str
) -> int:
    """Return the number of whole units from start to end.

    The result is truncated towards zero and is negative when end is before
    start.

    Args:
        start (datetime.datetime): Start of the interval.
        end (datetime.datetime): End of the interval.
        unit (str): One of ``days``, ``hours``, ``minutes`` or ``seconds``.

    Returns:
        int: The signed number of complete units.
    """
    delta = end - start
    total = (delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds
    whole = abs(total) // _MICROSECONDS[unit]
    return whole if total >= 0 else -whole


def compute_legacy_difference(
    date_one: datetime.datetime, date_two: datetime.datetime
) -> DateTimeFields:
    """Compute the difference between two datetimes in the legacy layout.

    Each unit is computed independently over the whole interval, so hours are
    the total hours rather than the remainder after whole days. The totals are
    packed into the time fields of a value whose year, month and day are all
    zero. The day count is computed but not part of the result.

    This layout is kept for compatibility with existing callers. A corrected
    difference returning a proper duration should replace this function.

    Args:
        date_one (datetime.datetime): Start of the interval.
        date_two (datetime.datetime): End of the interval.

    Returns:
        DateTimeFields: The packed difference.
    """
    days = units_between(date_one, date_two, "days")
    hours = units_between(date_one, date_two, "hours")
    minutes = units_between(date_one, date_two, "minutes")
    seconds = units_between(date_one, date_two, "seconds")
    logger.debug(
        "Difference from %s to %s: %d days, %d hours, %d minutes, %d seconds.",
        date_one,
        date_two,
        days,
        hours,
        minutes,
        seconds,
    )
    return DateTimeFields(
        year=0, month=0, day=0, hour=hours, minute=minutes, second=seconds
    )

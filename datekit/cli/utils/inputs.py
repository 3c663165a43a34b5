"""Utility functions for handling user inputs."""

import datetime

import click


def parse_iso(value: str) -> datetime.date:
    """Parse an ISO 8601 string into a date, or a datetime if it has a time.

    Raises:
        ValueError: If the value is not a valid ISO 8601 date or datetime.
    """
    try:
        return datetime.date.fromisoformat(value)
    except ValueError:
        return datetime.datetime.fromisoformat(value)


def iso_date_callback(
    ctx: click.Context, param: click.Parameter, value: str
) -> datetime.date:
    """Click callback converting an argument to a date or datetime.

    Datetimes with a timezone offset are rejected.
    """
    try:
        parsed = parse_iso(value)
    except ValueError:
        raise click.BadParameter(
            f"'{value}' is not an ISO 8601 date or datetime.", ctx=ctx, param=param
        ) from None
    if isinstance(parsed, datetime.datetime) and parsed.tzinfo is not None:
        raise click.BadParameter(
            f"'{value}' has a timezone offset; only naive values are supported.",
            ctx=ctx,
            param=param,
        )
    return parsed


def iso_datetime_callback(
    ctx: click.Context, param: click.Parameter, value: str
) -> datetime.datetime:
    """Click callback converting an argument to a datetime.

    Plain dates are read as midnight.
    """
    parsed = iso_date_callback(ctx, param, value)
    if isinstance(parsed, datetime.datetime):
        return parsed
    return datetime.datetime(parsed.year, parsed.month, parsed.day)

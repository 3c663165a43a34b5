"""CLI commands for validating, formatting and parsing dates."""

import datetime

import click

from datekit.cli.app import AppState
from datekit.cli.utils import flags, inputs, output
from datekit.cli.utils.overrides import command
from datekit.core.logging import logger


@command()
@click.argument("values", nargs=-1, required=True, metavar="<date>...")
@click.pass_context
def validate(ctx: click.Context, values: tuple[str, ...]) -> None:
    """Check that each <date> looks like MM-DD-YYYY.

    The separators may be '-', ' ', '/' or '.'. Exits with status 1 if any
    value is invalid.
    """
    state = ctx.ensure_object(AppState)
    invalid = 0
    for value in values:
        if state.validator.is_date_valid(value):
            output.display_success(f"{value}: valid")
        else:
            invalid += 1
            output.display_error(f"{value}: invalid", tag="Invalid:")

    logger.debug("Validated %d values, %d invalid.", len(values), invalid)
    if invalid:
        ctx.exit(1)


@command("format")
@click.argument("value", metavar="<iso-date>", callback=inputs.iso_date_callback)
@flags.pattern()
@click.pass_context
def format_(ctx: click.Context, value: datetime.date, pattern: str) -> None:
    """Format an ISO 8601 date or datetime using a pattern.

    Values with a time part are formatted as datetimes, so the pattern may use
    hour, minute and second fields. Pattern letters: d (day), M (month),
    u or y (year), H (hour), h (clock hour), m (minute), s (second), a (AM/PM)
    and E (day name).
    """
    state = ctx.ensure_object(AppState)
    dates = state.get_date_formatter(pattern)
    if isinstance(value, datetime.datetime):
        output.display_message(dates.format_datetime(value))
    else:
        output.display_message(dates.format_date(value))


@command()
@click.argument("text", metavar="<text>")
@flags.pattern()
@click.pass_context
def parse(ctx: click.Context, text: str, pattern: str) -> None:
    """Parse <text> into an ISO 8601 date.

    The text must first look like MM-DD-YYYY and must then match the pattern,
    for example: datekit parse 01-15-2024 --pattern MM-dd-uuuu
    """
    state = ctx.ensure_object(AppState)
    dates = state.get_date_formatter(pattern)
    output.display_message(dates.parse_date(text).isoformat())


@command()
@click.argument("date_one", metavar="<start>", callback=inputs.iso_datetime_callback)
@click.argument("date_two", metavar="<end>", callback=inputs.iso_datetime_callback)
@flags.output("format")
@click.pass_context
def diff(
    ctx: click.Context,
    date_one: datetime.datetime,
    date_two: datetime.datetime,
    format: output.OutputFormat,
) -> None:
    """Show the difference from <start> to <end>.

    Hour, minute and second each hold the total number of whole units between
    the two values. Year, month and day are always zero.
    """
    state = ctx.ensure_object(AppState)
    difference = state.get_date_formatter().get_date_difference(date_one, date_two)
    output.display_model(difference, format)

"""Click decorators preconfigured for datekit commands."""

from collections.abc import Callable
from typing import Any

import click

from datekit.cli.utils import output
from datekit.exceptions import (
    DateParseError,
    DatekitError,
    InvalidInputError,
    PatternError,
)

_AnyCallable = Callable[..., Any]

PATTERN_LETTERS_HINT = (
    "Supported pattern letters: d (day), M (month), u/y (year), H (hour), "
    "h (clock hour), m (minute), s (second), a (AM/PM), E (day name). "
    "Quote literal text with single quotes."
)


def group(*args, **kwargs) -> click.Group:
    """Create a click group whose commands are listed as <command>."""
    _set_common_options(kwargs)
    kwargs.setdefault("subcommand_metavar", "<command>")
    return click.group(*args, **kwargs)


def _set_common_options(kwargs):
    kwargs.setdefault("context_settings", {})
    kwargs["context_settings"].setdefault("help_option_names", ["-h", "--help"])
    kwargs.setdefault("options_metavar", "[options]")


def _error_hint(error: DatekitError) -> str | None:
    """Return a follow-up line explaining how to fix the error, if any."""
    match error:
        case DateParseError():
            return f"Expected text laid out as '{error.pattern}'."
        case PatternError():
            return PATTERN_LETTERS_HINT
        case InvalidInputError() if error.input_value is not None:
            return f"Received: {error.input_value!r}"
        case _:
            return None


class DatekitCommand(click.Command):
    """Command reporting datekit errors as messages with exit status 1."""

    def invoke(self, ctx):
        """Invoke the command, turning datekit errors into error messages."""
        try:
            return super().invoke(ctx)
        except DatekitError as e:
            output.handle_error(e, hint=_error_hint(e))
            ctx.exit(1)


def command(*args, **kwargs) -> Callable[[_AnyCallable], DatekitCommand]:
    """Create a click command that reports datekit errors."""
    _set_common_options(kwargs)

    return click.command(*args, **kwargs, cls=DatekitCommand)

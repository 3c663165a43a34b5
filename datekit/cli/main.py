"""Main CLI entry point for datekit."""

import sys

import click

from datekit.cli import dates
from datekit.cli.app import AppState
from datekit.cli.utils import flags, output
from datekit.cli.utils.overrides import group


@group()
@flags.common_options
@flags.debug()
@flags.no_color()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Validate, format and parse dates."""
    state = ctx.ensure_object(AppState)

    output.initialize_app_state(state)


cli.add_command(dates.validate)
cli.add_command(dates.format_)
cli.add_command(dates.parse)
cli.add_command(dates.diff)

if __name__ == "__main__":
    sys.exit(cli())

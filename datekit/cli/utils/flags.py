"""Common flags for CLI commands."""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from datekit.cli.app import AppState
from datekit.cli.utils.output import OutputFormat
from datekit.services.formatter import DEFAULT_PATTERN

_AnyCallable = Callable[..., Any]
FC = TypeVar("FC", bound="_AnyCallable | click.Command")


def _callback(ctx: click.Context, param: click.Parameter, value: Any) -> Any:
    """Callback to handle common flag."""
    if not ctx.resilient_parsing:
        state = ctx.ensure_object(AppState)
        if param.name == "debug" and value:
            state.debug = value
        elif param.name == "no_color" and value:
            state.no_color = value
    return value


def debug() -> Callable[[FC], FC]:
    """Common debug/verbose option for CLI commands."""
    return click.option(
        "--debug",
        "--verbose",
        "-d",
        is_flag=True,
        help="Enable verbose logging.",
        expose_value=False,
        callback=_callback,
        envvar=("DATEKIT_DEBUG", "DEBUG"),
    )


def no_color() -> Callable[[FC], FC]:
    """Common no-color option for CLI commands."""
    return click.option(
        "--no-color",
        is_flag=True,
        help="Disable colored output.",
        expose_value=False,
        callback=_callback,
        envvar=("DATEKIT_NO_COLOR", "NO_COLOR"),
    )


def pattern() -> Callable[[FC], FC]:
    """Formatting pattern option for CLI commands."""
    return click.option(
        "--pattern",
        "-p",
        default=DEFAULT_PATTERN,
        help="Pattern used to format or parse dates.",
        show_default=True,
        envvar="DATEKIT_PATTERN",
    )


def output(name: str = "format") -> Callable[[FC], FC]:
    """Common output format option for CLI commands."""
    return click.option(
        "--format",
        "-f",
        name,
        type=click.Choice([fmt.value for fmt in OutputFormat], case_sensitive=False),
        default=OutputFormat.TABLE.value,
        callback=lambda ctx, param, value: OutputFormat(value.lower()),
        help="Output format.",
        show_default=True,
    )


def common_options(f: Callable[..., Any]) -> Callable[..., Any]:
    """Apply common options to a Click command."""
    options = [
        click.version_option(None, "--version", "-v", prog_name="datekit"),
    ]
    return functools.reduce(lambda x, opt: opt(x), options, f)

"""Utility functions for styling CLI output."""

import csv
from enum import StrEnum, auto
from io import StringIO

from pydantic import BaseModel
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from datekit.cli.app import AppState
from datekit.cli.utils import logging
from datekit.core.logging import logger
from datekit.exceptions import DatekitError

_console = Console()  # Global console instance for utility functions
_error_console = Console(stderr=True)  # Console for error messages


class OutputFormat(StrEnum):
    """Enumeration of supported output formats."""

    TABLE = auto()
    CSV = auto()
    JSON = auto()


def _ordered_fields(model: BaseModel) -> list[str]:
    """Return the model field names sorted by their display order."""
    fields = type(model).model_fields
    return sorted(
        fields.keys(),
        key=lambda x: (fields[x].json_schema_extra or {}).get("order", 0),  # type: ignore
    )


def _convert_model_to_rich_table(model: BaseModel) -> Table:
    """Convert a Pydantic model to a single row Rich Table."""
    fields = type(model).model_fields
    table = Table(header_style="dim", box=box.SIMPLE)
    ordered = _ordered_fields(model)
    for field_name in ordered:
        field_info = fields[field_name]
        extras: dict = field_info.json_schema_extra or {}  # type: ignore
        table.add_column(
            field_info.title or field_name.capitalize(),
            justify=extras.get("justify", "left"),
            style=extras.get("style") if isinstance(extras.get("style"), str) else None,
        )
    table.add_row(*(str(getattr(model, field_name)) for field_name in ordered))
    return table


def display_message(*objects: object, console: Console | None = None) -> None:
    """Display a general message to the console."""
    (console or _console).print(*objects, markup=False, highlight=False)


def display_success(message: str, console: Console | None = None) -> None:
    """Display a success message to the console."""
    (console or _console).print(escape(message), style="green")


def display_error(
    message: str, tag: str = "Error:", console: Console | None = None
) -> None:
    """Display an error message to the error console."""
    (console or _error_console).print(f"[bold red]{tag}[/bold red] {escape(message)}")


def display_model(model: BaseModel, fmt: OutputFormat) -> None:
    """Display a single model to the console in the specified format.

    Args:
        model (BaseModel): The model to display.
        fmt (OutputFormat): The desired output format (TABLE, CSV, JSON).
    """
    if fmt == OutputFormat.JSON:
        _console.print_json(model.model_dump_json(indent=4))
    elif fmt == OutputFormat.CSV:
        f = StringIO()
        writer = csv.DictWriter(f, fieldnames=_ordered_fields(model))
        writer.writeheader()
        writer.writerow(model.model_dump())
        _console.print(f.getvalue(), soft_wrap=True, markup=False, highlight=False)
    else:
        _console.print(_convert_model_to_rich_table(model))


def initialize_app_state(state: AppState) -> None:
    """Initialize the application state for CLI operations.

    This function applies color settings and initializes logging.

    Args:
        state (AppState): The application state object to initialize.
    """
    if state.no_color:
        _console.no_color = True
        _error_console.no_color = True

    logging.setup(state.debug, _error_console)  # Initialize logging with debug flag


def handle_error(error: DatekitError, hint: str | None = None) -> None:
    """Handle and display errors in the CLI.

    Args:
        error (DatekitError): The error to handle.
        hint (str | None): Optional line printed dimmed below the error.
    """
    logger.info(
        "An error of type %s occurred: %s",
        type(error).__name__,
        error.message,
        exc_info=True,
    )
    display_error(error.message)
    if hint:
        _error_console.print(escape(hint), style="dim")

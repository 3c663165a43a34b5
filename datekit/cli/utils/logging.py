"""Log handlers used by the datekit CLI."""

import os
from logging import DEBUG, INFO, WARNING, Filter, Formatter
from logging.handlers import RotatingFileHandler
from pathlib import Path

import platformdirs
from rich.console import Console
from rich.logging import RichHandler

from datekit.core import logging

LOG_DIR_ENVVAR = "DATEKIT_LOG_DIR"
LOG_FILE_NAME = "datekit.log"
LOG_FORMAT = "%(asctime)s :: %(name)-24s :: %(levelname)-8s :: %(message)s"


class HideTracebackFilter(Filter):
    """Drop exception details so the console shows only the message."""

    def filter(self, record):
        """Strip exception info from the record and keep it."""
        record.exc_info = None
        record.exc_text = None
        return True


def get_log_path() -> Path:
    """Return the log file path.

    The directory comes from ``DATEKIT_LOG_DIR`` when set, otherwise from the
    platform user log directory. It is created if missing.
    """
    if log_dir := os.environ.get(LOG_DIR_ENVVAR):
        directory = Path(log_dir).expanduser()
        directory.mkdir(parents=True, exist_ok=True)
    else:
        directory = platformdirs.user_log_path("datekit", ensure_exists=True)
    return (directory / LOG_FILE_NAME).resolve()


def setup(debug: bool, console: Console) -> None:
    """Attach a rotating file handler and a rich console handler.

    The file records INFO and above, or everything in debug mode. The console
    shows warnings only, or INFO with tracebacks in debug mode.
    """
    log_path = get_log_path()
    file_handler = RotatingFileHandler(
        log_path, maxBytes=1_000_000, backupCount=3, encoding="utf-8"
    )
    file_handler.setFormatter(Formatter(fmt=LOG_FORMAT))
    file_handler.setLevel(DEBUG if debug else INFO)

    console_handler = RichHandler(
        level=INFO if debug else WARNING,
        console=console,
        show_path=debug,
        show_time=debug,
        log_time_format="[%Y-%m-%d %H:%M:%S]",
        rich_tracebacks=debug,
        markup=False,
    )
    if not debug:
        console_handler.addFilter(HideTracebackFilter())

    logging.setup(file_handler, console_handler)
    logging.logger.debug("Logging to file: %s", log_path.as_posix())

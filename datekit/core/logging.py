"""Logging setup for datekit."""

import logging

logger = logging.getLogger("datekit")


def setup(*handlers: logging.Handler) -> None:
    """Set up logging configuration.

    Replace any handlers attached by a previous call.
    """
    logger.setLevel(logging.DEBUG)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.debug("Logging initialized with handlers: %s.", handlers)

"""Logging setup for servedir."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "servedir"


def configure_logging(level: str = "INFO", console: Console | None = None) -> logging.Logger:
    """
    Install a rich handler on the package logger.

    Calling this again replaces the previous handler instead of stacking.

    Args:
        level: Log level name (DEBUG/INFO/WARNING/ERROR)
        console: Console to write to, stderr by default

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    logger.propagate = False
    return logger

"""
Logging setup for digestlint.

Modules log through ``logging.getLogger(__name__)``; the command-line entry
point calls configure_logging() once to route those records to stderr
through Rich.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from digestlint.core.config import LoggingConfig

_HANDLER_NAME = "digestlint-rich"


def configure_logging(config: LoggingConfig, console: Console | None = None) -> logging.Logger:
    """
    Attach a RichHandler to the ``digestlint`` logger.

    Calling this again replaces the previously installed handler rather than
    stacking a second one.

    Args:
        config: Logging level and format
        console: Console to write to. Defaults to a stderr console.

    Returns:
        The configured ``digestlint`` logger
    """
    level = getattr(logging, config.level.upper(), None)
    if not isinstance(level, int):
        level = logging.WARNING

    logger = logging.getLogger("digestlint")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(config.format))
    logger.addHandler(handler)

    return logger

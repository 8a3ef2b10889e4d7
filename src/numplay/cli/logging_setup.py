"""Logging configuration for the CLI entry points.

Diagnostics go to stderr through a single handler on the ``numplay``
logger; stdout is reserved for program output.  Rich's
:class:`~rich.logging.RichHandler` is used when Rich is importable.
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "numplay"

PLAIN_FORMAT = "[%(levelname)s] %(message)s"


def _build_handler() -> logging.Handler:
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(stream=sys.stderr)
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
        return handler

    from numplay.cli.console import get_rich_console

    return RichHandler(
        console=get_rich_console(stderr=True),
        show_time=False,
        show_path=False,
    )


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Configure and return the package logger.

    Safe to call more than once: previous handlers are replaced, so
    repeated ``main()`` calls in one process do not duplicate output.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False

    logger.handlers.clear()
    logger.addHandler(_build_handler())
    return logger

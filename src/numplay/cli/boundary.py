"""Script-level error boundary shared by every console entry point.

This is the **only** place that translates between the domain world
and the OS process exit code.  It catches
:class:`~numplay.exceptions.NumplayError`, ``KeyboardInterrupt`` and any
unexpected ``Exception``, rendering user-friendly messages on stderr.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import NoReturn

from numplay.cli import exit_codes
from numplay.cli.console import console
from numplay.exceptions import NumplayError

logger = logging.getLogger(__name__)


def run_guarded(main: Callable[[], int]) -> int:
    """Run *main* and map any escaping exception to an exit code."""
    try:
        return main()
    except NumplayError as exc:
        console.err(f"Error: {exc}", style="bold red")
        if exc.hint:
            console.err(f"Hint: {exc.hint}", style="yellow")
        return exit_codes.GENERAL_ERROR
    except KeyboardInterrupt:
        console.err("\nAborted by user.", style="yellow")
        return exit_codes.KEYBOARD_INTERRUPT
    except Exception as exc:  # noqa: BLE001
        logger.debug("Unhandled exception", exc_info=True)
        console.err(
            "Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}",
            style="bold red",
        )
        return exit_codes.UNEXPECTED_ERROR


def exit_with(main: Callable[[], int]) -> NoReturn:
    """Run *main* under :func:`run_guarded` and exit the process."""
    sys.exit(run_guarded(main))

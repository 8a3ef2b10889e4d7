"""``numsum`` — print the sum of the integers given on the command line.

Usage::

    numsum 10 -3        # prints "Total: 7"
    numsum 1 nope       # stderr "Error: Could not parse 'nope' as an integer", exit 1

Only the exact spellings ``-h``/``--help``, ``-V``/``--version`` and
``-v``/``--verbose`` are flags.  Every other argument is a token, in its
original order, including ones that look like options: ``-x``, ``-vx``
and ``--verbose=1`` are all reported as bad integers.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from numplay.cli import exit_codes
from numplay.cli.boundary import exit_with
from numplay.cli.console import console
from numplay.cli.logging_setup import configure_logging
from numplay.core.parsing import parse_args
from numplay.core.summation import sum_numbers
from numplay.version import __version__

logger = logging.getLogger(__name__)

RESERVED_FLAGS: frozenset[str] = frozenset(
    {"-h", "--help", "-V", "--version", "-v", "--verbose"}
)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the parser for the reserved flags.

    No positional argument is declared: the parser only ever sees the
    arguments :func:`_split_flags` recognised as reserved.
    """
    parser = argparse.ArgumentParser(
        prog="numsum",
        description="Print the sum of the integers given as arguments.",
        usage="%(prog)s [-h] [-V] [-v] [token ...]",
        allow_abbrev=False,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log parsing details to stderr.",
    )
    return parser


def _split_flags(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Separate exact reserved flags from tokens, keeping token order."""
    flags: list[str] = []
    tokens: list[str] = []
    for arg in argv:
        (flags if arg in RESERVED_FLAGS else tokens).append(arg)
    return flags, tokens


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the ``numsum`` CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    ParseError
        For the first token that is not a 32-bit integer literal.
    SumOverflowError
        When the total does not fit in 32 bits.
    """
    if argv is None:
        argv = sys.argv[1:]
    flags, tokens = _split_flags(argv)
    args = _build_parser().parse_args(flags)
    configure_logging(args.verbose)

    logger.debug("Tokens: %s", tokens)
    numbers = parse_args(tokens)
    total = sum_numbers(numbers)

    console.out(f"Total: {total}")
    return exit_codes.SUCCESS


def cli() -> None:
    """Console-script entry point wrapped in the error boundary."""
    exit_with(main)


if __name__ == "__main__":
    cli()

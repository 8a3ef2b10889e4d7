"""``guess-game`` — guess a secret number between 1 and 100.

The game prints its greeting, draws the secret once, then loops
reading one guess per line from stdin until the guess is right.
Unparseable lines are skipped without feedback.  End of input before a
win is an error.
"""

from __future__ import annotations

import argparse

from numplay.cli import exit_codes
from numplay.cli.boundary import exit_with
from numplay.cli.console import console
from numplay.cli.logging_setup import configure_logging
from numplay.core.guess_loop import GuessGame, run_guess_loop
from numplay.core.protocols import LineSource, RandomSource
from numplay.core.secret import generate_secret
from numplay.infra.line_reader import StreamLineReader
from numplay.infra.random_source import PythonRandomSource
from numplay.version import __version__

GREETING: str = "guess the number!"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="guess-game",
        description="Guess the secret number between 1 and 100.",
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
        help="Log game transitions to stderr.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the random source for a reproducible secret.",
    )
    return parser


def play(rng: RandomSource, read_line: LineSource) -> int:
    """Play one full game and return the number of lines consumed."""
    console.out(GREETING)
    console.out(GREETING)

    game = GuessGame(generate_secret(rng))
    return run_guess_loop(game, read_line, console.out)


def main(
    argv: list[str] | None = None,
    *,
    rng: RandomSource | None = None,
    read_line: LineSource | None = None,
) -> int:
    """Run the ``guess-game`` CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    rng:
        Randomness source.  Defaults to a :class:`PythonRandomSource`
        seeded from ``--seed``.
    read_line:
        Line source.  Defaults to reading :data:`sys.stdin`.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` once the player wins.

    Raises
    ------
    InputClosedError
        If input ends before the secret is found.
    """
    args = _build_parser().parse_args(argv)
    configure_logging(args.verbose)

    if rng is None:
        rng = PythonRandomSource(args.seed)
    if read_line is None:
        read_line = StreamLineReader()

    play(rng, read_line)
    return exit_codes.SUCCESS


def cli() -> None:
    """Console-script entry point wrapped in the error boundary."""
    exit_with(main)


if __name__ == "__main__":
    cli()

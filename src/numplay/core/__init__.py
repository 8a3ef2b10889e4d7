"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No console or process I/O; input and randomness are injected.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from numplay.core.commands import parse_command
from numplay.core.guess_loop import GuessGame, parse_guess, run_guess_loop
from numplay.core.models import (
    AddCommand,
    Command,
    GameState,
    GuessAttempt,
    GuessOutcome,
    ListCommand,
    QuitCommand,
    Verb,
)
from numplay.core.parsing import parse_args, parse_int_token
from numplay.core.protocols import RandomSource
from numplay.core.secret import SECRET_MAX, SECRET_MIN, generate_secret
from numplay.core.summation import sum_numbers

__all__: list[str] = [
    "SECRET_MAX",
    "SECRET_MIN",
    "AddCommand",
    "Command",
    "GameState",
    "GuessAttempt",
    "GuessGame",
    "GuessOutcome",
    "ListCommand",
    "QuitCommand",
    "RandomSource",
    "Verb",
    "generate_secret",
    "parse_args",
    "parse_command",
    "parse_guess",
    "parse_int_token",
    "run_guess_loop",
    "sum_numbers",
]

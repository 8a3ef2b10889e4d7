"""Command dispatch for the ``add`` / ``list`` / ``quit`` verbs.

The first token selects the verb (compared case-insensitively); only
``add`` looks at the remaining tokens.  This is a library-level API and
is not wired to the ``numsum`` command line.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from numplay.core.models import AddCommand, Command, ListCommand, QuitCommand, Verb
from numplay.core.parsing import parse_args
from numplay.exceptions import CommandError, ParseError

logger = logging.getLogger(__name__)


def parse_command(tokens: Sequence[str]) -> Command:
    """Interpret *tokens* as a command.

    Raises
    ------
    CommandError
        * ``no input provided`` for an empty sequence.
        * ``add needs at least one number`` for a bare ``add``.
        * ``bad number: <token>`` when an ``add`` operand does not parse.
        * ``unknown command: <verb>`` for anything else.  The verb is
          echoed in its original case.
    """
    if not tokens:
        raise CommandError("no input provided")

    raw_verb = tokens[0]
    try:
        verb = Verb(raw_verb.lower())
    except ValueError:
        raise CommandError(
            f"unknown command: {raw_verb}",
            token=raw_verb,
            hint="Known commands: add, list, quit.",
        ) from None

    logger.debug("Dispatching verb %r with %d operand(s)", verb.value, len(tokens) - 1)

    if verb is Verb.LIST:
        return ListCommand()
    if verb is Verb.QUIT:
        return QuitCommand()

    operands = tokens[1:]
    if not operands:
        raise CommandError("add needs at least one number")
    try:
        numbers = parse_args(operands)
    except ParseError as exc:
        raise CommandError(f"bad number: {exc.token}", token=exc.token) from exc
    return AddCommand(numbers=tuple(numbers))

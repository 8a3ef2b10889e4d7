"""Domain models for numplay.

All models are **frozen** dataclasses or enums — immutable value objects
with no behaviour beyond data access.  They carry zero I/O and zero
dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

class Verb(str, Enum):
    """Recognised command verbs, in their normalised lowercase form."""

    ADD = "add"
    LIST = "list"
    QUIT = "quit"


@dataclass(frozen=True, slots=True)
class AddCommand:
    """Add one or more integers."""

    numbers: tuple[int, ...]
    """Parsed operands, in the order they were given."""

    verb: Verb = Verb.ADD


@dataclass(frozen=True, slots=True)
class ListCommand:
    """List what has been recorded so far."""

    verb: Verb = Verb.LIST


@dataclass(frozen=True, slots=True)
class QuitCommand:
    """Leave the session."""

    verb: Verb = Verb.QUIT


Command = Union[AddCommand, ListCommand, QuitCommand]


# ---------------------------------------------------------------------------
# Guessing game
# ---------------------------------------------------------------------------

class GameState(str, Enum):
    """States of the guess loop."""

    AWAITING_INPUT = "awaiting_input"
    EVALUATING = "evaluating"
    WON = "won"


class GuessOutcome(str, Enum):
    """Result of comparing one guess to the secret number."""

    TOO_SMALL = "Too small"
    TOO_BIG = "Too big"
    WIN = "You win!"

    @property
    def message(self) -> str:
        """Line shown to the player for this outcome."""
        return self.value


@dataclass(frozen=True, slots=True)
class GuessAttempt:
    """One parsed guess, discarded after it has been compared."""

    value: int
    """The guessed number."""

    line: str
    """Raw input line the guess was read from."""

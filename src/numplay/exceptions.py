"""Custom exception hierarchy for numplay.

All exceptions that cross layer boundaries must inherit from
:class:`NumplayError`.  Raw stream or runtime errors raised by the
infrastructure layer must be caught there and re-raised as a typed
subclass defined here.

Hierarchy
---------
NumplayError
├── ParseError
├── CommandError
├── SumOverflowError
├── InputClosedError
├── GameOverError
├── GameStateError
└── EnvironmentError
"""

from __future__ import annotations


class NumplayError(Exception):
    """Base exception for all numplay errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Token parsing ---------------------------------------------------------

class ParseError(NumplayError):
    """Raised when a token is not a valid base-10 integer literal."""

    def __init__(self, token: str, *, hint: str | None = None) -> None:
        super().__init__(f"Could not parse '{token}' as an integer", hint=hint)
        self.token: str = token
        """The raw, untrimmed token that failed to parse."""


# --- Command dispatch ------------------------------------------------------

class CommandError(NumplayError):
    """Raised when a token sequence does not form a valid command."""

    def __init__(
        self,
        message: str,
        *,
        token: str | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.token: str | None = token
        """Offending token, when the failure is attributable to one."""


# --- Summation -------------------------------------------------------------

class SumOverflowError(NumplayError, OverflowError):
    """Raised when a running total leaves the 32-bit signed range."""


# --- Guessing game ---------------------------------------------------------

class InputClosedError(NumplayError):
    """Raised when the console input ends or fails during a blocking read."""


class GameOverError(NumplayError):
    """Raised when a guess is submitted after the game has been won."""


class GameStateError(NumplayError, RuntimeError):
    """Raised when the guess loop is driven through a transition it forbids.

    This signals a programming error in the caller, not bad player input.
    """


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(NumplayError):
    """Raised when an optional runtime dependency is not available."""

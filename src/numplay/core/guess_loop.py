"""Guessing-game state machine and the loop that drives it.

States
------
``AWAITING_INPUT`` (initial) → ``EVALUATING`` → ``AWAITING_INPUT`` | ``WON``

An unparseable line is an explicit ``AWAITING_INPUT → AWAITING_INPUT``
self-transition: the line is consumed and nothing is reported.  ``WON``
is terminal.

Guarantees
----------
* No I/O of its own; input and output are injected callables.
* Every transition is checked against :data:`_TRANSITIONS` and recorded
  in :attr:`GuessGame.history`.  A forbidden one raises
  :class:`~numplay.exceptions.GameStateError`, a programming error in
  the caller.
"""

from __future__ import annotations

import logging

from numplay.core.models import GameState, GuessAttempt, GuessOutcome
from numplay.core.parsing import parse_unsigned
from numplay.core.protocols import Emit, LineSource
from numplay.exceptions import GameOverError, GameStateError, InputClosedError

logger = logging.getLogger(__name__)

PROMPT: str = "input your number."

_TRANSITIONS: dict[GameState, frozenset[GameState]] = {
    GameState.AWAITING_INPUT: frozenset({GameState.AWAITING_INPUT, GameState.EVALUATING}),
    GameState.EVALUATING: frozenset({GameState.AWAITING_INPUT, GameState.WON}),
    GameState.WON: frozenset(),
}


def parse_guess(line: str) -> int | None:
    """Trim *line* and parse it as an unsigned integer, or return ``None``."""
    return parse_unsigned(line.strip())


class GuessGame:
    """One round of the guessing game against a fixed secret.

    Parameters
    ----------
    secret:
        The number the player must find.  Never changes.
    """

    def __init__(self, secret: int) -> None:
        self._secret: int = secret
        self._state: GameState = GameState.AWAITING_INPUT
        self._history: list[tuple[GameState, GameState]] = []

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def history(self) -> tuple[tuple[GameState, GameState], ...]:
        """Every ``(from, to)`` transition taken so far, oldest first."""
        return tuple(self._history)

    @property
    def is_won(self) -> bool:
        return self._state is GameState.WON

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def _transition(self, target: GameState) -> None:
        if target not in _TRANSITIONS[self._state]:
            raise GameStateError(
                f"illegal transition {self._state.name} -> {target.name}"
            )
        logger.debug("Transition %s -> %s", self._state.name, target.name)
        self._history.append((self._state, target))
        self._state = target

    def evaluate(self, attempt: GuessAttempt) -> GuessOutcome:
        """Compare *attempt* to the secret, leaving ``EVALUATING``."""
        if self._state is not GameState.EVALUATING:
            raise GameStateError(f"cannot evaluate in state {self._state.name}")
        if attempt.value < self._secret:
            self._transition(GameState.AWAITING_INPUT)
            return GuessOutcome.TOO_SMALL
        if attempt.value > self._secret:
            self._transition(GameState.AWAITING_INPUT)
            return GuessOutcome.TOO_BIG
        self._transition(GameState.WON)
        return GuessOutcome.WIN

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def read(self, line: str) -> GuessAttempt | None:
        """Consume one input line in ``AWAITING_INPUT``.

        Returns the parsed attempt (now ``EVALUATING``), or ``None`` after
        the silent self-transition for an unparseable line.

        Raises
        ------
        GameOverError
            If the game has already been won.
        """
        if self.is_won:
            raise GameOverError("The game is already won.")
        value = parse_guess(line)
        if value is None:
            self._transition(GameState.AWAITING_INPUT)
            return None
        self._transition(GameState.EVALUATING)
        return GuessAttempt(value=value, line=line)

    def submit(self, line: str) -> GuessOutcome | None:
        """Read *line* and, if it holds a guess, evaluate it.

        Returns ``None`` when the line was skipped, else the outcome.
        """
        attempt = self.read(line)
        if attempt is None:
            return None
        return self.evaluate(attempt)


def run_guess_loop(game: GuessGame, read_line: LineSource, emit: Emit) -> int:
    """Prompt, read and evaluate until *game* is won.

    There is no iteration limit.

    Returns
    -------
    int
        Number of input lines consumed.

    Raises
    ------
    InputClosedError
        If *read_line* reports end of input before a correct guess.
    """
    consumed = 0
    while not game.is_won:
        emit(PROMPT)
        line = read_line()
        if line == "":
            raise InputClosedError(
                "Input ended before the number was guessed.",
                hint="Type a number and press Enter.",
            )
        consumed += 1

        attempt = game.read(line)
        if attempt is None:
            continue

        emit(f"You guess: {attempt.value}")
        emit(game.evaluate(attempt).message)

    logger.debug("Game won after %d line(s)", consumed)
    return consumed

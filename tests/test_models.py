"""Unit tests for domain models (core/models.py).

Verify immutability, equality and the command/outcome vocabularies.
"""

from __future__ import annotations

import dataclasses

import pytest

from numplay.core.models import (
    AddCommand,
    GameState,
    GuessAttempt,
    GuessOutcome,
    ListCommand,
    QuitCommand,
    Verb,
)


class TestCommands:
    def test_add_is_frozen(self) -> None:
        cmd = AddCommand(numbers=(1, 2))
        with pytest.raises(dataclasses.FrozenInstanceError):
            cmd.numbers = (3,)  # type: ignore[misc]

    def test_equality(self) -> None:
        assert AddCommand(numbers=(1,)) == AddCommand(numbers=(1,))
        assert AddCommand(numbers=(1,)) != AddCommand(numbers=(2,))
        assert ListCommand() == ListCommand()
        assert ListCommand() != QuitCommand()

    def test_verbs(self) -> None:
        assert AddCommand(numbers=()).verb is Verb.ADD
        assert ListCommand().verb is Verb.LIST
        assert QuitCommand().verb is Verb.QUIT

    def test_verb_values_are_lowercase(self) -> None:
        assert [v.value for v in Verb] == ["add", "list", "quit"]


class TestGameModels:
    def test_attempt_is_frozen(self) -> None:
        attempt = GuessAttempt(value=3, line="3\n")
        with pytest.raises(dataclasses.FrozenInstanceError):
            attempt.value = 4  # type: ignore[misc]

    def test_states(self) -> None:
        assert {s.name for s in GameState} == {"AWAITING_INPUT", "EVALUATING", "WON"}

    def test_outcomes(self) -> None:
        assert [o.message for o in GuessOutcome] == ["Too small", "Too big", "You win!"]

"""Shared pytest fixtures and configuration for the numplay test suite.

Guidelines
----------
* No real randomness — secrets come from :class:`FixedRandom`.
* No real stdin — lines come from :func:`scripted_lines`.
* Core tests must be pure — no side effects.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

import pytest


class FixedRandom:
    """``RandomSource`` double that always returns the same value."""

    def __init__(self, value: int) -> None:
        self.value = value
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        return self.value


class ScriptedLines:
    """``LineSource`` double replaying fixed lines, then end of input."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = [line if line.endswith("\n") else f"{line}\n" for line in lines]
        self.consumed = 0

    def __call__(self) -> str:
        if self.consumed >= len(self._lines):
            return ""
        line = self._lines[self.consumed]
        self.consumed += 1
        return line


@pytest.fixture
def fixed_random() -> Callable[[int], FixedRandom]:
    return FixedRandom


@pytest.fixture
def scripted_lines() -> Callable[[Iterable[str]], ScriptedLines]:
    return ScriptedLines

"""Process exit statuses shared by ``numsum`` and ``guess-game``.

The error boundary in :mod:`numplay.cli.boundary` is the only code that
returns anything other than :data:`SUCCESS`.
"""

from __future__ import annotations

SUCCESS: int = 0
"""``numsum`` printed its total, or the player guessed the secret."""

GENERAL_ERROR: int = 1
"""A NumplayError reached the boundary: a bad token, an overflowing
total, or input that ended before the secret was guessed."""

KEYBOARD_INTERRUPT: int = 130
"""Ctrl+C, typically at the ``input your number.`` prompt (128 + SIGINT)."""

UNEXPECTED_ERROR: int = 2
"""An exception outside the NumplayError hierarchy; reported as a bug."""

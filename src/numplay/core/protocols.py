"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols, never on concrete
implementations.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol


class RandomSource(Protocol):
    """Contract for sources of uniformly distributed integers.

    :class:`random.Random` satisfies this protocol structurally, as does
    any test double exposing the same method.
    """

    def randint(self, a: int, b: int) -> int:
        """Return an integer uniformly drawn from the inclusive range ``[a, b]``."""
        ...  # pragma: no cover


LineSource = Callable[[], str]
"""Blocking read of one line of text.

Returns the line including its trailing newline, or ``""`` at end of
input (the :meth:`io.TextIOBase.readline` convention).
"""

Emit = Callable[[str], None]
"""Writes one line of program output."""

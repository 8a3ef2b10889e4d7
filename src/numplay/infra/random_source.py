"""Default :class:`~numplay.core.protocols.RandomSource` adapter."""

from __future__ import annotations

import random


class PythonRandomSource:
    """Private :class:`random.Random` instance behind the ``RandomSource`` protocol.

    The module-level RNG is never touched, so seeding one source has no
    effect on any other code in the process.

    Parameters
    ----------
    seed:
        Optional seed for reproducible draws.  ``None`` seeds from the
        operating system.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._rng: random.Random = random.Random(seed)

    def randint(self, a: int, b: int) -> int:
        return self._rng.randint(a, b)

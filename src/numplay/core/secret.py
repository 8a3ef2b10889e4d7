"""Secret number generation for the guessing game."""

from __future__ import annotations

import logging

from numplay.core.protocols import RandomSource

logger = logging.getLogger(__name__)

SECRET_MIN: int = 1
"""Smallest possible secret (inclusive)."""

SECRET_MAX: int = 100
"""Largest possible secret (inclusive)."""


def generate_secret(rng: RandomSource) -> int:
    """Draw the secret number from *rng*, uniformly over ``[1, 100]``.

    Raises
    ------
    ValueError
        If *rng* returns a value outside the requested range.
    """
    secret = rng.randint(SECRET_MIN, SECRET_MAX)
    if not SECRET_MIN <= secret <= SECRET_MAX:
        raise ValueError(
            f"random source returned {secret}, "
            f"outside [{SECRET_MIN}, {SECRET_MAX}]"
        )
    logger.debug("Secret number drawn")
    return secret

"""Pure token-to-integer parsing.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.

Literal grammar for signed tokens: an optional ``+`` or ``-`` followed
by one or more ASCII digits, with no surrounding whitespace.  Python's
own :func:`int` is more permissive (whitespace, underscores, non-ASCII
digits), so tokens are matched against an explicit pattern first.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from numplay.exceptions import ParseError
from numplay.utils.limits import UINT32_MAX, in_int32_range

logger = logging.getLogger(__name__)

_SIGNED_LITERAL = re.compile(r"[+-]?[0-9]+", re.ASCII)
_UNSIGNED_LITERAL = re.compile(r"\+?[0-9]+", re.ASCII)


# ---------------------------------------------------------------------------
# Single tokens
# ---------------------------------------------------------------------------

def parse_int_token(token: str) -> int:
    """Parse one 32-bit signed base-10 literal.

    Raises
    ------
    ParseError
        If *token* is not a literal, or its value does not fit in 32
        bits.  The error carries the token verbatim.
    """
    if _SIGNED_LITERAL.fullmatch(token) is None:
        raise ParseError(token)
    value = int(token)
    if not in_int32_range(value):
        raise ParseError(token)
    return value


def parse_unsigned(text: str) -> int | None:
    """Parse a 32-bit unsigned literal, returning ``None`` when invalid.

    No trimming is applied; callers decide how to treat whitespace.
    """
    if _UNSIGNED_LITERAL.fullmatch(text) is None:
        return None
    value = int(text)
    if value > UINT32_MAX:
        return None
    return value


# ---------------------------------------------------------------------------
# Token sequences
# ---------------------------------------------------------------------------

def parse_args(tokens: Sequence[str]) -> list[int]:
    """Parse every token, all-or-nothing.

    Returns a list with exact positional correspondence to *tokens*.
    An empty sequence yields an empty list.  Tokens are **not** trimmed.

    Raises
    ------
    ParseError
        For the first token (left to right) that is not a valid literal.
    """
    numbers: list[int] = []
    for token in tokens:
        numbers.append(parse_int_token(token))
    logger.debug("Parsed %d token(s)", len(numbers))
    return numbers

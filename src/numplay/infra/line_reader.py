"""Blocking line reader over a text stream (stdin by default).

Bridges the core's ``LineSource`` contract to a real stream.  End of
input is passed through as ``""`` so the guess loop can decide what it
means; a failing stream is mapped to
:class:`~numplay.exceptions.InputClosedError`.
"""

from __future__ import annotations

import sys
from typing import TextIO

from numplay.exceptions import InputClosedError


class StreamLineReader:
    """Callable that reads one line per call.

    Parameters
    ----------
    stream:
        Text stream to read from.  When ``None``, :data:`sys.stdin` is
        looked up at call time so test harnesses that swap it are honoured.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream: TextIO | None = stream

    def __call__(self) -> str:
        stream = self._stream if self._stream is not None else sys.stdin
        try:
            return stream.readline()
        except (OSError, ValueError) as exc:
            # ValueError: I/O operation on closed file.
            raise InputClosedError(f"Failed to read line: {exc}") from exc

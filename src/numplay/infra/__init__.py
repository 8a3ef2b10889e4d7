"""Infrastructure layer — console stream and randomness adapters.

Every raw stream exception must be caught here and re-raised as a
:class:`~numplay.exceptions.NumplayError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from numplay.infra.line_reader import StreamLineReader
from numplay.infra.random_source import PythonRandomSource

__all__: list[str] = [
    "PythonRandomSource",
    "StreamLineReader",
]

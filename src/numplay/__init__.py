"""numplay — two small console programs: an integer summer and a guessing game.

Both share a strict layered architecture: pure ``core`` logic, thin
``infra`` adapters for stdin and randomness, and a ``cli`` layer that
owns all console output.
"""

from numplay.version import __version__

__all__: list[str] = ["__version__"]

"""Allow ``python -m numplay`` invocation.

Delegates to the ``numsum`` error-boundary entry point so that
``python -m numplay 1 2 3`` behaves identically to ``numsum 1 2 3``.
"""

from __future__ import annotations

from numplay.cli.sum_app import cli

if __name__ == "__main__":
    cli()

"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) and the
programs themselves remain functional even when Rich is not installed.

Text is written verbatim: a token such as ``[bold]``, ``:smile:`` or
one holding a tab is echoed literally, and redirected output is
byte-for-byte the message that was passed in.
"""

from __future__ import annotations

import sys
from typing import Any

from numplay.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = False) -> Any:
    """Create a Rich console instance targeting stdout or stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr, highlight=False, emoji=False)


def _styled(text: str, style: str, color_system: str | None) -> str:
    """Wrap *text* in the ANSI codes for *style*, leaving its characters untouched."""
    from rich.color import ColorSystem
    from rich.style import Style

    systems = {
        "standard": ColorSystem.STANDARD,
        "256": ColorSystem.EIGHT_BIT,
        "truecolor": ColorSystem.TRUECOLOR,
        "windows": ColorSystem.WINDOWS,
    }
    system = systems.get(color_system or "")
    if system is None:
        return text
    return Style.parse(style).render(text, color_system=system)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback.

    Lines are written straight to the console's file so tabs, control
    characters and ``:shortcode:`` text reach the stream unchanged.
    Rich only contributes the style codes, and only on a terminal.
    """

    def _render(self, text: str, *, stderr: bool, style: str | None) -> None:
        try:
            rich_console = get_rich_console(stderr=stderr)
        except EnvironmentError:
            print(text, file=sys.stderr if stderr else sys.stdout)
            return
        line = text
        if style and rich_console.is_terminal:
            line = _styled(text, style, rich_console.color_system)
        stream = rich_console.file
        stream.write(f"{line}\n")
        stream.flush()

    def out(self, text: str, *, style: str | None = None) -> None:
        """Write one line of program output to stdout."""
        self._render(text, stderr=False, style=style)

    def err(self, text: str, *, style: str | None = None) -> None:
        """Write one line of diagnostics to stderr."""
        self._render(text, stderr=True, style=style)


console = _ConsoleProxy()

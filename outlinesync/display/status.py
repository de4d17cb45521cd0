"""Status indicator that prints the breadcrumb to the console."""

from __future__ import annotations

from rich.text import Text

from outlinesync.display.console import get_console


class ConsoleStatus:
    """StatusIndicator writing each breadcrumb as a dim status line."""

    def __init__(self, style: str = "dim") -> None:
        self._style = style
        self.last: str = ""

    def show(self, text: str) -> None:
        self.last = text
        get_console().print(Text(text, style=self._style))

"""User-facing notifications for fetches and written files.

File bodies are printed as plain text; TSX is full of square brackets
that Rich would otherwise read as markup.
"""

from __future__ import annotations

import threading
from typing import Iterable, Optional

from rich.console import Console
from rich.markup import escape
from rich.padding import Padding
from rich.panel import Panel
from rich.text import Text

from . import cli_theme as theme


class Notifier:
    """Renders progress and success messages on a Rich console.

    Component files are written from worker threads, so each message is
    printed under a lock to keep a headline and its panel together.
    """

    def __init__(self, console: Optional[Console] = None, quiet: bool = False):
        self.console = console or Console()
        self.quiet = quiet
        self._lock = threading.Lock()

    def info(self, message: str) -> None:
        if self.quiet:
            return
        with self._lock:
            self.console.print(theme.info(escape(message)))

    def success(self, headline: str, items: Iterable[str] = ()) -> None:
        """Print a success headline followed by each item in a rounded panel."""
        if self.quiet:
            return
        with self._lock:
            self.console.print(theme.ok(escape(headline)))
            for item in items:
                panel = Panel(
                    Text(item),
                    border_style=theme.GREIGE,
                    expand=False,
                )
                self.console.print(Padding(panel, (0, 0, 0, 4)))


"""Terminal color mode and emphasis."""

from __future__ import annotations

from enum import Enum
from typing import IO

from rich.console import Console
from rich.markup import escape


class Color(Enum):
    """Whether to emit terminal styling."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"

    def bold(self, text: str) -> str:
        """Wrap text in rich markup for bold output.

        With NEVER the text comes back escaped but unstyled.
        """
        escaped = escape(text)
        if self is Color.NEVER:
            return escaped
        return f"[bold]{escaped}[/bold]"

    def console(self, file: IO[str] | None = None) -> Console:
        """Build a rich Console that honors this color mode."""
        if self is Color.ALWAYS:
            return Console(file=file, force_terminal=True, highlight=False)
        if self is Color.NEVER:
            return Console(file=file, color_system=None, highlight=False)
        return Console(file=file, highlight=False)

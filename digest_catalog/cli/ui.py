# digest_catalog/cli/ui.py
"""
Diagnostic output for the CLI.

Standard output carries only status lines, so every human-facing message
here goes to stderr through a Rich console.
"""

from __future__ import annotations

import sys

from rich.console import Console
from rich.markup import escape

# Detect if we can use Unicode safely (not Windows legacy console)
CAN_USE_UNICODE = sys.platform != "win32" or (sys.stderr.encoding or "").lower() in (
    "utf-8",
    "utf8",
)

CROSS = "✗" if CAN_USE_UNICODE else "[X]"
WARN = "⚠" if CAN_USE_UNICODE else "[!]"

console = Console(stderr=True, highlight=False)


class UI:
    """Styled stderr messages."""

    def error(self, msg: str) -> None:
        """Print an error message."""
        console.print(f"[red]{escape(CROSS)}[/red] {escape(msg)}")

    def warning(self, msg: str, detail: str = "") -> None:
        """Print a warning message."""
        detail_str = f" [dim]({escape(detail)})[/dim]" if detail else ""
        console.print(f"[yellow]{escape(WARN)}[/yellow] {escape(msg)}{detail_str}")

    def info(self, msg: str) -> None:
        """Print an info/dim message."""
        console.print(f"[dim]{escape(msg)}[/dim]")


ui = UI()

__all__ = ["CROSS", "WARN", "console", "ui", "UI"]

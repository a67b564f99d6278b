"""Coloured status lines for the terminal."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _console() -> Console:
    return Console(highlight=False, soft_wrap=True, emoji=False)


def _announce(symbol: str, message: str, style: str) -> None:
    line = Text.assemble((symbol, style), " ", (message, style))
    _console().print(line)


def warn(message: str) -> None:
    """Print a warning line in red."""
    _announce("!" if no_emoji() else "⚠️ ", message, "red")


def success(message: str) -> None:
    """Print a success line in green."""
    _announce("✓" if no_emoji() else "✅", message, "green")
"""Coloured status lines for the terminal."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _console() -> Console:
    return Console(highlight=False, soft_wrap=True)


def _report(icon: str, fallback: str, message: str, colour: str) -> None:
    mark = fallback if no_emoji() else icon
    line = Text()
    line.append(mark, style=colour)
    line.append(" ")
    line.append(message, style=colour)
    _console().print(line)


def warn(message: str) -> None:
    """Print a warning line in red."""
    _report("⚠️ ", "!", message, "red")


def success(message: str) -> None:
    """Print a success line in green."""
    _report("✅", "✓", message, "green")
"""
Console output utilities for upgradepick using Rich.

This module provides user-facing output helpers for CLI commands.
For diagnostic or debug output, use :mod:`upgradepick.utils.logger`.

Guidelines:
- print_* functions: user-facing status messages
- print_lines: pre-styled menu output (Rich ``Text`` objects)
- Logging should never go through this module
"""

from __future__ import annotations

import os
import sys
import threading
from typing import Iterable, Optional, Union

from rich.text import Text
from rich.theme import Theme
from rich.console import Console

# ---------------------------------------------------------------------------
# Theme configuration
# ---------------------------------------------------------------------------

UPGRADEPICK_THEME = Theme(
    {
        "success": "bold green",
        "error": "bold red",
        "warning": "bold yellow",
        "info": "bold cyan",
        "dim": "dim",
        "highlight": "bold magenta",
    }
)

# ---------------------------------------------------------------------------
# Console lifecycle management
# ---------------------------------------------------------------------------

_console: Optional[Console] = None
_console_lock = threading.Lock()


def _should_use_color() -> bool:
    """Return True if colored output should be enabled."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("CI"):
        return False
    try:
        return sys.stdout.isatty()
    except (AttributeError, OSError):
        return False


def _get_console() -> Console:
    """Return a singleton Rich Console instance."""
    global _console

    if _console is None:
        with _console_lock:
            if _console is None:
                use_color = _should_use_color()
                _console = Console(
                    theme=UPGRADEPICK_THEME,
                    no_color=not use_color,
                    highlight=False,
                )
    return _console


def reconfigure_console() -> None:
    """Reset the global console instance.

    Useful if environment variables (e.g. NO_COLOR) change at runtime.
    """
    global _console
    with _console_lock:
        _console = None


# ---------------------------------------------------------------------------
# Status message helpers
# ---------------------------------------------------------------------------


def print_success(message: str, *, prefix: str = "[OK]") -> None:
    """Print a success message."""
    _get_console().print(f"{prefix} {message}", style="success", markup=False)


def print_error(message: str, *, prefix: str = "[ERROR]") -> None:
    """Print an error message."""
    _get_console().print(f"{prefix} {message}", style="error", markup=False)


def print_warning(message: str, *, prefix: str = "[WARNING]") -> None:
    """Print a warning message."""
    _get_console().print(f"{prefix} {message}", style="warning", markup=False)


# ---------------------------------------------------------------------------
# Structured output
# ---------------------------------------------------------------------------


def print_lines(lines: Iterable[Union[Text, str]]) -> None:
    """Print pre-rendered lines exactly as laid out.

    Lines are printed without wrapping or cropping so column alignment
    computed upstream survives narrow terminals.

    Args:
        lines: Rich ``Text`` objects or plain strings, one per line.
    """
    console = _get_console()
    for line in lines:
        console.print(line, overflow="ignore", crop=False, soft_wrap=True)

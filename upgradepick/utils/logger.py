"""
Logging utilities for upgradepick.

Centralizes logger configuration and retrieval for the ``upgradepick``
namespace. Safe for library use (a ``NullHandler`` is attached until the
CLI configures output) and for repeated configuration from the CLI.
"""

from __future__ import annotations

import os
import sys
import logging
import threading
from typing import IO, Optional

from upgradepick.constants import (
    LOG_DATE_FORMAT,
    LOG_DEFAULT_FORMAT,
    LOG_VERBOSE_FORMAT,
)

ROOT_LOGGER_NAME = "upgradepick"

_lock = threading.Lock()


class ColoredFormatter(logging.Formatter):
    """Formatter that tints the level name with ANSI colors."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(
        self,
        fmt: str,
        *,
        datefmt: Optional[str] = None,
        use_color: bool = True,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname) if self.use_color else None
        if color is None:
            return super().format(record)

        # Handlers may share a record; restore the plain level name afterwards
        original = record.levelname
        record.levelname = f"{color}{original}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def _stream_supports_color(stream: IO[str]) -> bool:
    """Return True when ANSI colors should be written to ``stream``."""
    if os.environ.get("NO_COLOR") or os.environ.get("CI"):
        return False
    try:
        return stream.isatty()
    except (AttributeError, OSError, ValueError):
        return False


def level_for_verbosity(verbose: int) -> int:
    """Map a ``-v`` count to a logging level (0=WARNING, 1=INFO, 2+=DEBUG)."""
    if verbose <= 0:
        return logging.WARNING
    if verbose == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(
    *,
    level: int = logging.INFO,
    verbose: bool = False,
    stream: Optional[IO[str]] = None,
) -> None:
    """Configure the ``upgradepick`` logger hierarchy.

    Safe to call multiple times; previous handlers are replaced.

    Args:
        level: Logging level (e.g., ``logging.INFO``, ``logging.DEBUG``).
        verbose: Use the timestamped format.
        stream: Output stream; defaults to ``sys.stderr``.
    """
    target = stream or sys.stderr

    with _lock:
        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.handlers.clear()
        root_logger.setLevel(level)

        handler = logging.StreamHandler(target)
        handler.setLevel(level)
        handler.setFormatter(
            ColoredFormatter(
                LOG_VERBOSE_FORMAT if verbose else LOG_DEFAULT_FORMAT,
                datefmt=LOG_DATE_FORMAT,
                use_color=_stream_supports_color(target),
            )
        )

        root_logger.addHandler(handler)
        root_logger.propagate = False


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger within the upgradepick namespace.

    Args:
        name: Logger name, with or without the ``upgradepick.`` prefix.

    Returns:
        A logger instance under the ``upgradepick`` hierarchy.
    """
    if not name or name == ROOT_LOGGER_NAME:
        qualified = ROOT_LOGGER_NAME
    elif name.startswith(f"{ROOT_LOGGER_NAME}."):
        qualified = name
    else:
        qualified = f"{ROOT_LOGGER_NAME}.{name}"

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not root_logger.handlers:
        root_logger.addHandler(logging.NullHandler())

    return logging.getLogger(qualified)

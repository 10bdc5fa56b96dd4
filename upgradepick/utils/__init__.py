"""
Utility helpers for upgradepick.

This package provides reusable utilities used across upgradepick:

- Console output helpers (Rich-based)
- Logging configuration and retrieval
- Filesystem safety helpers

Only symbols listed in ``__all__`` are considered part of the public API.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Logging utilities
# ---------------------------------------------------------------------------

from upgradepick.utils.logger import (
    get_logger,
    level_for_verbosity,
    setup_logging,
)

# ---------------------------------------------------------------------------
# Console utilities
# ---------------------------------------------------------------------------

from upgradepick.utils.console import (
    print_error,
    print_lines,
    print_success,
    print_warning,
    reconfigure_console,
)

# ---------------------------------------------------------------------------
# Filesystem utilities
# ---------------------------------------------------------------------------

from upgradepick.utils.filesystem import safe_read_file, safe_write_file

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    # Console
    "print_error",
    "print_lines",
    "print_success",
    "print_warning",
    "reconfigure_console",
    # Logging
    "get_logger",
    "setup_logging",
    "level_for_verbosity",
    # Filesystem
    "safe_read_file",
    "safe_write_file",
]

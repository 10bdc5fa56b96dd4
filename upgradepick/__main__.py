"""
Executable module for upgradepick.

Running:
    python -m upgradepick

is equivalent to:
    upgradepick

This module forwards execution to the CLI entrypoint defined in
`upgradepick.cli`.
"""

from __future__ import annotations

import sys


def _print_startup_error(exc: ImportError) -> int:
    """Report a CLI import failure on stderr and return the exit code."""
    sys.stderr.write("upgradepick CLI could not be loaded.\n")
    sys.stderr.write(f"Python version : {sys.version}\n")
    try:
        from upgradepick.__version__ import __version__

        sys.stderr.write(f"upgradepick version: {__version__}\n")
    except ImportError:
        sys.stderr.write("upgradepick version: <unknown>\n")
    sys.stderr.write(f"ImportError: {exc}\n")
    return 1


def main() -> int:
    """
    Main entrypoint when executing `python -m upgradepick`.

    Returns:
        Exit code returned by the CLI.
    """
    try:
        # Import lazily so dependencies are only loaded during CLI use
        from upgradepick.cli import main as cli_main
    except ImportError as exc:
        return _print_startup_error(exc)

    return cli_main()


if __name__ == "__main__":
    sys.exit(main())

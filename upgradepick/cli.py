"""
Command-line interface for upgradepick.

This module provides the main CLI entry point and handles global options,
configuration loading, and command registration.
"""

from __future__ import annotations

import os
import sys
import logging
from pathlib import Path
from typing import Optional

import click

from upgradepick.config import load_config
from upgradepick.__version__ import __version__
from upgradepick.context import UpgradePickContext
from upgradepick.exceptions import ConfigError, UpgradePickError
from upgradepick.utils.logger import get_logger, level_for_verbosity, setup_logging
from upgradepick.utils.console import (
    print_error,
    print_warning,
    reconfigure_console,
)

logger = get_logger("cli")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file.",
    envvar="UPGRADEPICK_CONFIG",
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (can be repeated: -v, -vv).",
)
@click.option(
    "--color/--no-color",
    default=True,
    help="Enable or disable colored output.",
    envvar="UPGRADEPICK_COLOR",
)
@click.version_option(
    version=__version__,
    prog_name="upgradepick",
    message="%(prog)s %(version)s",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: int,
    color: bool,
) -> None:
    """upgradepick: choose dependency upgrades from a grouped menu.

    \b
    Available commands:
      upgradepick check REPORT     Show packages needing attention
      upgradepick select REPORT    Pick packages to upgrade interactively

    \b
    Examples:
      upgradepick check outdated.json
      upgradepick select outdated.json --format json
      upgradepick -v select outdated.json

    Use ``upgradepick COMMAND --help`` for command-specific options.
    """
    level = level_for_verbosity(verbose)
    setup_logging(level=level, verbose=verbose >= 2)
    logger.debug("Logging initialized at %s level", logging.getLevelName(level))

    try:
        loaded_config = load_config(config)
    except ConfigError as exc:
        print_error(str(exc))
        raise SystemExit(1) from exc

    upgradepick_ctx = UpgradePickContext()
    upgradepick_ctx.config_path = config or loaded_config.source_path
    upgradepick_ctx.color = color
    upgradepick_ctx.verbose = verbose
    upgradepick_ctx.config = loaded_config
    ctx.obj = upgradepick_ctx

    # Respect NO_COLOR for downstream libraries
    if color:
        os.environ.pop("NO_COLOR", None)
    else:
        os.environ["NO_COLOR"] = "1"
    reconfigure_console()

    logger.debug("upgradepick v%s", __version__)
    logger.debug("Config path: %s", upgradepick_ctx.config_path)
    logger.debug("Configuration: %s", loaded_config.to_log_dict())


# Register CLI subcommands
from upgradepick.commands.check import check  # noqa: E402
from upgradepick.commands.select import select  # noqa: E402

cli.add_command(check)
cli.add_command(select)


def main() -> int:
    """Main entry point for the upgradepick CLI.

    Returns:
        Exit code:
            0   Success
            1   Application error, or packages need attention (``check``)
            2   Usage error (Click)
            130 Interrupted by user (Ctrl+C)
    """
    try:
        cli(standalone_mode=False)
        return 0

    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    except click.exceptions.Abort:
        print_warning("\nOperation cancelled by user")
        return 130

    except UpgradePickError as exc:
        print_error(str(exc))
        logger.debug(
            "UpgradePickError details: %s",
            exc.details or "<none>",
            exc_info=True,
        )
        return 1

    except KeyboardInterrupt:
        print_warning("\nOperation cancelled by user")
        return 130

    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 1

    except Exception as exc:
        print_error(f"Unexpected error: {exc}")
        logger.exception("Unhandled exception in CLI")
        return 1


if __name__ == "__main__":
    sys.exit(main())

"""
Shared context object for upgradepick CLI commands.

This module defines the global Click context used to share configuration
and runtime options across CLI subcommands.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional

import click

if TYPE_CHECKING:
    from upgradepick.config import UpgradePickConfig


class UpgradePickContext:
    """Global context object for upgradepick CLI commands.

    An instance of this class is created once per CLI invocation and
    passed to commands using Click's context mechanism.

    Attributes:
        config_path: Path to the configuration file, if provided.
        verbose: Verbosity level (0=WARNING, 1=INFO, 2+=DEBUG).
        color: Whether colored terminal output is enabled.
        config: Loaded configuration, or ``None`` before loading.
    """

    __slots__ = ("config_path", "verbose", "color", "config")

    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self.verbose: int = 0
        self.color: bool = True
        self.config: Optional[UpgradePickConfig] = None


#: Click decorator for injecting :class:`UpgradePickContext` into commands.
pass_context = click.make_pass_decorator(UpgradePickContext, ensure=True)

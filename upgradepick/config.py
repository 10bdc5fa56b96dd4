"""Configuration file loader for upgradepick.

Supports two formats:

- ``upgradepick.toml`` with settings under ``[upgradepick]`` table
- ``pyproject.toml`` with settings under ``[tool.upgradepick]`` table

Discovery order:

1. Explicit path from ``--config`` or ``UPGRADEPICK_CONFIG``
2. ``upgradepick.toml`` in current directory
3. ``pyproject.toml`` with ``[tool.upgradepick]`` section

Example (``upgradepick.toml``)::

    [upgradepick]
    page_margin = 4
    column_widths = [40, 10, 3, 10, 80]
"""

from __future__ import annotations

import tomli as tomllib
from pathlib import Path
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from upgradepick.exceptions import ConfigError
from upgradepick.utils.logger import get_logger
from upgradepick.constants import (
    COLUMN_COUNT,
    DEFAULT_COLUMN_WIDTHS,
    DEFAULT_PAGE_MARGIN,
    MIN_COLUMN_WIDTH,
)

logger = get_logger("config")

SECTION_NAME = "upgradepick"


@dataclass
class UpgradePickConfig:
    """Parsed and validated upgradepick configuration.

    All fields have defaults, so empty config files are valid.

    Attributes:
        page_margin: Terminal rows left free below the prompt.
        column_widths: Widths of the five menu columns, padding included.
        source_path: Path to loaded config file, or ``None`` if using defaults.
    """

    page_margin: int = DEFAULT_PAGE_MARGIN
    column_widths: Tuple[int, ...] = DEFAULT_COLUMN_WIDTHS

    source_path: Optional[Path] = field(default=None, repr=False)

    def to_log_dict(self) -> Dict[str, Any]:
        """Return user-facing options for debug logging."""
        return {
            "page_margin": self.page_margin,
            "column_widths": list(self.column_widths),
        }


def discover_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file to load.

    Args:
        explicit_path: Explicit config path. If provided, must exist.

    Returns:
        Resolved path to config file, or ``None`` if not found.

    Raises:
        ConfigError: Explicit path provided but does not exist.
    """
    if explicit_path is not None:
        resolved = explicit_path.resolve()
        if not resolved.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        logger.debug("Using explicit config: %s", resolved)
        return resolved

    cwd = Path.cwd()

    own_file = cwd / f"{SECTION_NAME}.toml"
    if own_file.is_file():
        logger.debug("Found %s", own_file)
        return own_file

    pyproject = cwd / "pyproject.toml"
    if pyproject.is_file() and _pyproject_has_section(pyproject):
        logger.debug("Found [tool.%s] in %s", SECTION_NAME, pyproject)
        return pyproject

    logger.debug("No configuration file found")
    return None


def _pyproject_has_section(path: Path) -> bool:
    """Return True if ``pyproject.toml`` has a ``[tool.upgradepick]`` table.

    Unreadable or invalid files count as having no section.
    """
    try:
        raw = _read_toml(path)
    except ConfigError:
        return False
    return SECTION_NAME in raw.get("tool", {})


def load_config(config_path: Optional[Path] = None) -> UpgradePickConfig:
    """Load and validate upgradepick configuration.

    Args:
        config_path: Explicit path to config file. If ``None``, uses
            auto-discovery (see :func:`discover_config_file`).

    Returns:
        Validated :class:`UpgradePickConfig` with values from file or defaults.

    Raises:
        ConfigError: File cannot be parsed, has unknown keys, or invalid values.
    """
    resolved = discover_config_file(config_path)

    if resolved is None:
        return UpgradePickConfig()

    logger.info("Loading configuration from %s", resolved)
    raw = _read_toml(resolved)

    if resolved.name == "pyproject.toml":
        section = raw.get("tool", {}).get(SECTION_NAME, {})
    else:
        section = raw.get(SECTION_NAME, {})

    if not section:
        logger.debug("Config file has no %s section, using defaults", SECTION_NAME)
        return UpgradePickConfig(source_path=resolved)

    config = _parse_section(section, config_path=str(resolved))
    config.source_path = resolved

    logger.debug("Loaded configuration: %s", config.to_log_dict())
    return config


def _read_toml(path: Path) -> Dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        ConfigError: File cannot be read or is not valid TOML.
    """
    try:
        with open(path, "rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(
            f"Invalid TOML in {path.name}: {exc}",
            config_path=str(path),
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Cannot read configuration file {path}: {exc}",
            config_path=str(path),
        ) from exc


def _parse_section(
    section: Dict[str, Any],
    *,
    config_path: str,
) -> UpgradePickConfig:
    """Validate the ``[upgradepick]`` table and build a config from it.

    Raises:
        ConfigError: Unknown keys or values of the wrong type or range.
    """
    config = UpgradePickConfig()

    known = {"page_margin", "column_widths"}
    unknown = set(section) - known
    if unknown:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(sorted(unknown))}",
            config_path=config_path,
        )

    if "page_margin" in section:
        val = section["page_margin"]
        if isinstance(val, bool) or not isinstance(val, int) or val < 0:
            raise ConfigError(
                f"page_margin must be a non-negative integer, got {val!r}",
                config_path=config_path,
                option="page_margin",
            )
        config.page_margin = val

    if "column_widths" in section:
        val = section["column_widths"]
        if not isinstance(val, list) or len(val) != COLUMN_COUNT:
            raise ConfigError(
                f"column_widths must be a list of {COLUMN_COUNT} integers",
                config_path=config_path,
                option="column_widths",
            )
        for width in val:
            if isinstance(width, bool) or not isinstance(width, int) or width < MIN_COLUMN_WIDTH:
                raise ConfigError(
                    f"column_widths entries must be integers >= {MIN_COLUMN_WIDTH}, "
                    f"got {width!r}",
                    config_path=config_path,
                    option="column_widths",
                )
        config.column_widths = tuple(val)

    return config

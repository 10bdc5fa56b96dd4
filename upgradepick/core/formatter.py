"""
Row formatting for dependency records.

Turns a :class:`DependencyRecord` into the five cells of its menu row:

====  ================================================================
 1    name, plus ``devDep`` / ``missing`` tags
 2    version shown as current (manifest version on mismatch,
      installed version when an update exists)
 3    ``>`` arrow, only when column 2 has a value
 4    latest version
 5    homepage link, or the lookup error when no latest is known
====  ================================================================

Values are taken as given; nothing here compares versions.
"""

from __future__ import annotations

from typing import Optional, Tuple

from upgradepick.core.classifier import is_actionable
from upgradepick.models.choice import Choice
from upgradepick.models.display import DisplayField
from upgradepick.models.dependency import DependencyRecord

NAME_STYLE = "yellow"
DEV_TAG_STYLE = "green"
MISSING_TAG_STYLE = "red"
LATEST_STYLE = "bold"
HOMEPAGE_STYLE = "blue underline"

ARROW = ">"


def _current_version(record: DependencyRecord) -> str:
    if record.mismatch:
        return record.package_json or ""
    if record.bump is not None:
        return record.installed or ""
    return ""


def label(record: DependencyRecord) -> Tuple[DisplayField, ...]:
    """
    Format a record's row cells.

    Args:
        record: Record to format.

    Returns:
        Five display fields in column order.
    """
    name = DisplayField.of(record.name, NAME_STYLE)
    if record.dev_dependency:
        name = name + DisplayField.of(" devDep", DEV_TAG_STYLE)
    if record.not_installed:
        name = name + DisplayField.of(" missing", MISSING_TAG_STYLE)

    current = _current_version(record)

    if record.latest:
        link = DisplayField.of(record.homepage, HOMEPAGE_STYLE)
    else:
        link = DisplayField.of(record.error)

    return (
        name,
        DisplayField.of(current),
        DisplayField.of(ARROW if current else ""),
        DisplayField.of(record.latest, LATEST_STYLE),
        link,
    )


def short(record: DependencyRecord) -> str:
    """Return the collapsed label ``name@latest``."""
    return f"{record.name}@{record.latest or ''}"


def choice(record: DependencyRecord) -> Optional[Choice]:
    """
    Wrap a record as a menu choice.

    Returns:
        The choice, or ``None`` when the record needs no attention.
    """
    if not is_actionable(record):
        return None
    return Choice(value=record, fields=label(record), short=short(record))

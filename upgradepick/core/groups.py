"""
Menu groups and per-group assembly.

:data:`UI_GROUPS` fixes the sections of the menu and their order:
manifest mismatches, missing packages, then patch, minor, major and
non-semver updates. :func:`assemble_group` turns the records of one
group into a titled, column-aligned block of choices.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from upgradepick.models.choice import Choice, MenuEntry, Separator
from upgradepick.models.dependency import Bump, DependencyRecord
from upgradepick.models.display import DisplayField
from upgradepick.models.group import GroupDefinition
from upgradepick.core.classifier import matches
from upgradepick.core.formatter import choice
from upgradepick.core.table import TableBuilder
from upgradepick.utils.logger import get_logger

logger = get_logger("groups")


def _title(heading: str, color: str, blurb: Optional[str] = None) -> DisplayField:
    """Build a section title: underlined bold heading plus optional blurb."""
    title = DisplayField.of(heading, f"underline bold {color}")
    if blurb:
        title = title + DisplayField.of(" ") + DisplayField.of(blurb, color)
    return title


UI_GROUPS: Tuple[GroupDefinition, ...] = (
    GroupDefinition(
        key="mismatch",
        title=_title("Update package.json to match version installed.", "green"),
        filter={"mismatch": True, "bump": None},
    ),
    GroupDefinition(
        key="missing",
        title=_title("Missing.", "green", "You probably want these."),
        filter={"not_installed": True, "bump": None},
    ),
    GroupDefinition(
        key="patch",
        title=_title("Patch Update", "green", "Backwards-compatible bug fixes."),
        filter={"bump": Bump.PATCH},
    ),
    GroupDefinition(
        key="minor",
        title=_title("Minor Update", "yellow", "New backwards-compatible features."),
        filter={"bump": Bump.MINOR},
        bg_color="yellow",
    ),
    GroupDefinition(
        key="major",
        title=_title(
            "Major Update", "red", "Potentially breaking API changes. Use caution."
        ),
        filter={"bump": Bump.MAJOR},
    ),
    GroupDefinition(
        key="non_semver",
        title=_title("Non-Semver", "magenta", "Versions less than 1.0.0, caution."),
        filter={"bump": Bump.NON_SEMVER},
    ),
)


def assemble_group(
    records: Sequence[DependencyRecord],
    group: GroupDefinition,
    builder: Optional[TableBuilder] = None,
) -> List[MenuEntry]:
    """
    Build the menu block for one group.

    Records matching the group filter are wrapped as choices (records
    needing no attention are dropped), their rows are aligned as one
    table, and each choice is paired with its own table line.

    Args:
        records: All records, in input order.
        group: The group to assemble.
        builder: Table layout to use; defaults to the standard widths.

    Returns:
        ``[blank separator, title separator, *choices]``, or an empty list
        when no record qualifies.
    """
    pending: List[Choice] = []
    for record in records:
        if not matches(record, group.filter):
            continue
        entry = choice(record)
        if entry is not None:
            pending.append(entry)

    if not pending:
        logger.debug("Group '%s' is empty", group.key)
        return []

    lines = (builder or TableBuilder()).build([entry.fields for entry in pending])
    choices = [entry.with_label(line) for entry, line in zip(pending, lines)]

    logger.debug("Group '%s': %d choice(s)", group.key, len(choices))
    return [Separator(), Separator(group.title), *choices]

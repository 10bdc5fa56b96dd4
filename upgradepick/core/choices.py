"""
Final menu assembly.

:func:`build_choice_list` concatenates the group blocks in declaration
order and closes the list with usage instructions. An empty result
means nothing needs attention and no prompt should be shown.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from rich.text import Text

from upgradepick.constants import PROMPT_INSTRUCTIONS
from upgradepick.models.choice import Choice, MenuEntry, Separator
from upgradepick.models.dependency import DependencyRecord
from upgradepick.models.display import DisplayField
from upgradepick.models.group import GroupDefinition
from upgradepick.core.groups import UI_GROUPS, assemble_group
from upgradepick.core.table import TableBuilder
from upgradepick.utils.logger import get_logger

logger = get_logger("choices")


def build_choice_list(
    records: Sequence[DependencyRecord],
    groups: Sequence[GroupDefinition] = UI_GROUPS,
    builder: Optional[TableBuilder] = None,
    *,
    include_instructions: bool = True,
) -> List[MenuEntry]:
    """
    Build the complete menu for a set of records.

    Args:
        records: Dependency check results, in any order.
        groups: Menu sections, in display order.
        builder: Table layout shared by every group.
        include_instructions: Close the list with the usage instructions.

    Returns:
        Choices and separators in display order, ending with a blank and
        an instruction separator; an empty list if no group has entries.
    """
    builder = builder or TableBuilder()

    entries: List[MenuEntry] = []
    for group in groups:
        entries.extend(assemble_group(records, group, builder))

    if not entries:
        logger.info("No packages need attention (%d checked)", len(records))
        return []

    if include_instructions:
        entries.append(Separator())
        entries.append(Separator(DisplayField.of(PROMPT_INSTRUCTIONS)))

    logger.info(
        "Built menu with %d choice(s) from %d record(s)",
        sum(1 for entry in entries if isinstance(entry, Choice)),
        len(records),
    )
    return entries


def render_choice_list(entries: Sequence[MenuEntry]) -> List[Text]:
    """Render menu entries as styled lines for non-interactive output."""
    lines: List[Text] = []
    for entry in entries:
        if isinstance(entry, Separator):
            lines.append(entry.to_text())
        elif entry.label is not None:
            lines.append(entry.label)
        else:
            lines.append(Text(entry.name))
    return lines

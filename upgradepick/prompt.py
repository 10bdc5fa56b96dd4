"""
Interactive upgrade selection.

Bridges the menu built by :func:`~upgradepick.core.build_choice_list` to
an InquirerPy checkbox prompt. When nothing needs attention a single
status line is printed and no prompt is shown.

Cancelling with Ctrl+C raises ``KeyboardInterrupt``; the CLI turns it
into exit code 130.
"""

from __future__ import annotations

import shutil
from typing import Any, Dict, List, Optional, Sequence

from InquirerPy import inquirer
from InquirerPy.base.control import Choice as PromptChoice
from InquirerPy.separator import Separator as PromptSeparator

from upgradepick.constants import (
    DEFAULT_PAGE_MARGIN,
    PROMPT_MESSAGE,
    UP_TO_DATE_MESSAGE,
)
from upgradepick.core.choices import build_choice_list
from upgradepick.core.groups import UI_GROUPS
from upgradepick.core.table import TableBuilder
from upgradepick.models.choice import Choice, MenuEntry
from upgradepick.models.dependency import DependencyRecord
from upgradepick.models.group import GroupDefinition
from upgradepick.utils.console import print_success
from upgradepick.utils.logger import get_logger

logger = get_logger("prompt")


def page_size_hint(margin: int = DEFAULT_PAGE_MARGIN) -> int:
    """Return the terminal height minus ``margin`` rows, at least 1."""
    rows = shutil.get_terminal_size().lines
    return max(1, rows - margin)


def to_prompt_choices(entries: Sequence[MenuEntry]) -> List[Any]:
    """
    Convert menu entries to InquirerPy choices and separators.

    Labels are passed as plain text; the prompt applies its own styling.
    A blank separator is appended so the instructions never sit on the
    last visible row.
    """
    converted: List[Any] = []
    for entry in entries:
        if isinstance(entry, Choice):
            converted.append(PromptChoice(value=entry.value, name=entry.name))
        else:
            converted.append(PromptSeparator(entry.line))
    converted.append(PromptSeparator(""))
    return converted


def _short_labels(entries: Sequence[MenuEntry]) -> Dict[str, str]:
    """Map each choice's displayed label to its collapsed ``name@latest`` form."""
    return {
        entry.name: entry.short for entry in entries if isinstance(entry, Choice)
    }


def upgrade_interactive(
    records: Sequence[DependencyRecord],
    *,
    groups: Sequence[GroupDefinition] = UI_GROUPS,
    builder: Optional[TableBuilder] = None,
    page_size: Optional[int] = None,
) -> List[DependencyRecord]:
    """
    Ask the user which packages to upgrade.

    Args:
        records: Dependency check results.
        groups: Menu sections, in display order.
        builder: Table layout for group rows.
        page_size: Visible rows; defaults to :func:`page_size_hint`.

    Returns:
        The selected records (the caller's own objects), or an empty list
        when everything is up to date.
    """
    entries = build_choice_list(records, groups, builder)
    if not entries:
        print_success(UP_TO_DATE_MESSAGE)
        return []

    shorts = _short_labels(entries)
    height = page_size if page_size is not None else page_size_hint()
    logger.debug("Prompting with %d entries, height %d", len(entries), height)

    selected = inquirer.checkbox(
        message=PROMPT_MESSAGE,
        choices=to_prompt_choices(entries),
        max_height=height,
        instruction="",
        transformer=lambda names: ", ".join(shorts.get(n, n) for n in names),
        cycle=True,
    ).execute()

    result: List[DependencyRecord] = list(selected or [])
    logger.info("Selected %d package(s)", len(result))
    return result

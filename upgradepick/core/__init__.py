"""
Core functionality exports for upgradepick.

The menu pipeline, leaves first: classifier, formatter, table layout,
group assembly, and the final choice list. Importing from here keeps
user-facing imports stable:

    from upgradepick.core import build_choice_list, UI_GROUPS
"""

from __future__ import annotations

from upgradepick.core.classifier import is_actionable, matches
from upgradepick.core.formatter import choice, label, short
from upgradepick.core.table import TableBuilder
from upgradepick.core.groups import UI_GROUPS, assemble_group
from upgradepick.core.choices import build_choice_list, render_choice_list
from upgradepick.core.report import load_records, parse_records

__all__ = [
    "matches",
    "is_actionable",
    "label",
    "short",
    "choice",
    "TableBuilder",
    "UI_GROUPS",
    "assemble_group",
    "build_choice_list",
    "render_choice_list",
    "load_records",
    "parse_records",
]

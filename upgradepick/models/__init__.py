"""
Unified data model exports for upgradepick.

Example:
    >>> from upgradepick.models import DependencyRecord, Choice, Separator
"""

from __future__ import annotations

from upgradepick.models.dependency import Bump, DependencyRecord
from upgradepick.models.display import DisplayField, Fragment
from upgradepick.models.choice import Choice, MenuEntry, Separator
from upgradepick.models.group import FILTERABLE_ATTRIBUTES, GroupDefinition

__all__ = [
    "Bump",
    "DependencyRecord",
    "DisplayField",
    "Fragment",
    "Choice",
    "MenuEntry",
    "Separator",
    "GroupDefinition",
    "FILTERABLE_ATTRIBUTES",
]

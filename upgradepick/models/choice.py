"""
Menu entry models: selectable choices and display-only separators.

The final menu is a flat list of :data:`MenuEntry` values. A
:class:`Choice` wraps the record it was built from; once its row has been
laid out in a group table, :meth:`Choice.with_label` returns a new
Choice carrying the rendered line. The wrapped record is never replaced,
so a selection always hands back the caller's original record.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union

from rich.text import Text

from upgradepick.models.display import DisplayField
from upgradepick.models.dependency import DependencyRecord


@dataclass(frozen=True)
class Choice:
    """
    A selectable menu entry for one dependency.

    Attributes:
        value: The record this entry selects.
        fields: The five unaligned display cells for the record's row.
        short: Label shown once the prompt collapses (``name@latest``).
        label: The aligned table line, set after group layout.
    """

    value: DependencyRecord
    fields: Tuple[DisplayField, ...]
    short: str
    label: Optional[Text] = None

    @property
    def name(self) -> str:
        """Plain-text label; falls back to the space-joined cells before layout."""
        if self.label is not None:
            return self.label.plain
        return " ".join(field.plain for field in self.fields if field)

    def with_label(self, line: Text) -> "Choice":
        """Return a copy of this choice displaying ``line``."""
        return replace(self, label=line)


@dataclass(frozen=True)
class Separator:
    """A non-selectable entry: blank, or carrying a section title."""

    title: Optional[DisplayField] = None

    @property
    def line(self) -> str:
        """Plain-text title, empty for a blank separator."""
        return self.title.plain if self.title else ""

    def to_text(self) -> Text:
        """Render the title with its styles (an empty ``Text`` when blank)."""
        return self.title.to_text() if self.title else Text()


MenuEntry = Union[Choice, Separator]

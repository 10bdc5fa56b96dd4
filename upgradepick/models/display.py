"""
Styled text fragments for menu rendering.

Formatting produces plain strings paired with Rich style names rather
than pre-colored text. Width calculations work on the plain text; the
styles are applied only when a line is converted to a Rich ``Text`` for
the terminal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple

from rich.text import Text


class Fragment(NamedTuple):
    """A run of text sharing one style (``None`` for unstyled)."""

    text: str
    style: Optional[str] = None


@dataclass(frozen=True)
class DisplayField:
    """An ordered sequence of styled fragments forming one cell or title."""

    fragments: Tuple[Fragment, ...] = ()

    @classmethod
    def of(cls, text: Optional[str], style: Optional[str] = None) -> "DisplayField":
        """Build a single-fragment field; ``None`` or empty text gives an empty field."""
        if not text:
            return cls()
        return cls((Fragment(text, style),))

    @property
    def plain(self) -> str:
        """The field's text with all styling removed."""
        return "".join(fragment.text for fragment in self.fragments)

    def __len__(self) -> int:
        return len(self.plain)

    def __bool__(self) -> bool:
        return bool(self.plain)

    def __add__(self, other: "DisplayField") -> "DisplayField":
        return DisplayField(self.fragments + other.fragments)

    def to_text(self) -> Text:
        """Convert to a Rich ``Text`` carrying the fragment styles."""
        text = Text()
        for fragment in self.fragments:
            text.append(fragment.text, style=fragment.style or "")
        return text

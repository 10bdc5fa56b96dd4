"""
Menu group definitions.

A group is a titled section of the menu plus a filter deciding which
records belong to it. The filter is a mapping from record attribute to
expected value where a key's *presence* matters:

- ``{"bump": None}`` requires the record to have no bump;
- leaving ``bump`` out of the mapping means bump is not checked.

The mapping is stored as given (read-only) and never normalized.
"""

from __future__ import annotations

from types import MappingProxyType
from dataclasses import dataclass, field
from typing import Any, FrozenSet, Mapping, Optional

from upgradepick.exceptions import GroupDefinitionError
from upgradepick.models.display import DisplayField

#: Record attributes a group filter may constrain.
FILTERABLE_ATTRIBUTES: FrozenSet[str] = frozenset(
    {"mismatch", "bump", "not_installed"}
)


@dataclass(frozen=True)
class GroupDefinition:
    """
    A titled menu section and its membership filter.

    Attributes:
        key: Stable identifier for the group.
        title: Styled section title.
        filter: Attribute name -> expected value; ``None`` means "must be unset".
        bg_color: Optional background accent for the section.
    """

    key: str
    title: DisplayField
    filter: Mapping[str, Any] = field(default_factory=dict)
    bg_color: Optional[str] = None

    def __post_init__(self) -> None:
        unknown = set(self.filter) - FILTERABLE_ATTRIBUTES
        if unknown:
            raise GroupDefinitionError(
                f"Unsupported filter attribute(s): {', '.join(sorted(unknown))}",
                group=self.key,
                attribute=sorted(unknown)[0],
            )
        # Copy, then freeze: callers keep no handle on the stored mapping
        object.__setattr__(self, "filter", MappingProxyType(dict(self.filter)))

"""
Record classification for menu grouping.

Two questions are answered here: does a record belong to a group (its
filter matches), and does it belong in the menu at all (something about
it needs attention).
"""

from __future__ import annotations

from typing import Any, Mapping

from upgradepick.models.dependency import DependencyRecord


def matches(record: DependencyRecord, filter: Mapping[str, Any]) -> bool:
    """
    Check a record against a group filter.

    Every attribute named in ``filter`` must equal the expected value; an
    expected ``None`` requires the attribute to be unset. Attributes not
    named are ignored, so an empty filter matches every record.

    Args:
        record: The record to test.
        filter: Attribute name -> expected value.

    Returns:
        True if every constraint holds.

    Example::

        >>> rec = DependencyRecord("left-pad", mismatch=True)
        >>> matches(rec, {"mismatch": True, "bump": None})
        True
        >>> matches(rec, {"bump": Bump.PATCH})
        False
    """
    for attribute, expected in filter.items():
        actual = getattr(record, attribute)
        if expected is None:
            if actual is not None:
                return False
        elif actual is None or actual != expected:
            return False
    return True


def is_actionable(record: DependencyRecord) -> bool:
    """Return True if the record is mismatched, missing, or has an update."""
    return bool(record.mismatch or record.bump is not None or record.not_installed)

"""
Custom exception hierarchy for upgradepick.

All exceptions inherit from :class:`UpgradePickError` and carry optional
structured metadata via the ``details`` attribute for diagnostics and
logging. The classification pipeline itself never raises on record
content; these errors cover configuration, input loading and misuse of
the layout primitives.
"""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional


class UpgradePickError(Exception):
    """Base exception for all upgradepick errors.

    Args:
        message: Human-readable error message.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, details={dict(self.details)!r})"
        )


def _add_if(details: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Add a key to ``details`` only if ``value`` is not ``None``."""
    if value is not None:
        details[key] = value


class ConfigError(UpgradePickError):
    """Raised when a configuration file is missing, malformed or invalid.

    Args:
        message: Error description.
        config_path: Path to the configuration file.
        option: Name of the offending option, if any.
    """

    __slots__ = ("config_path", "option")

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        option: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", config_path)
        _add_if(details, "option", option)

        super().__init__(message, details)

        self.config_path = config_path
        self.option = option


class ReportError(UpgradePickError):
    """Raised when a dependency report cannot be turned into records.

    Args:
        message: Error description.
        file_path: Path to the report being loaded.
        index: Position of the offending entry in the report.
        field: Name of the offending field.
    """

    __slots__ = ("file_path", "index", "field")

    def __init__(
        self,
        message: str,
        *,
        file_path: Optional[str] = None,
        index: Optional[int] = None,
        field: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "file", file_path)
        _add_if(details, "entry", index)
        _add_if(details, "field", field)

        super().__init__(message, details)

        self.file_path = file_path
        self.index = index
        self.field = field


class FileOperationError(UpgradePickError):
    """Raised when file system operations fail.

    Args:
        message: Error description.
        file_path: Path to the file involved.
        operation: Operation being performed (read/write).
        original_error: Original exception that triggered this error.
    """

    __slots__ = ("file_path", "operation", "original_error")

    def __init__(
        self,
        message: str,
        *,
        file_path: Optional[str] = None,
        operation: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", file_path)
        _add_if(details, "operation", operation)
        _add_if(
            details,
            "original_error",
            str(original_error) if original_error else None,
        )

        super().__init__(message, details)

        self.file_path = file_path
        self.operation = operation
        self.original_error = original_error


class GroupDefinitionError(UpgradePickError):
    """Raised when a group filter names an attribute that cannot be matched.

    Args:
        message: Error description.
        group: Key of the group being defined.
        attribute: The unsupported filter attribute.
    """

    __slots__ = ("group", "attribute")

    def __init__(
        self,
        message: str,
        *,
        group: Optional[str] = None,
        attribute: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "group", group)
        _add_if(details, "attribute", attribute)

        super().__init__(message, details)

        self.group = group
        self.attribute = attribute


class TableLayoutError(UpgradePickError):
    """Raised when rows or column widths do not fit the table layout.

    Args:
        message: Error description.
        row: Index of the offending row, if any.
        expected: Expected number of cells or minimum width.
        actual: Actual number of cells or width found.
    """

    __slots__ = ("row", "expected", "actual")

    def __init__(
        self,
        message: str,
        *,
        row: Optional[int] = None,
        expected: Optional[int] = None,
        actual: Optional[int] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "row", row)
        _add_if(details, "expected", expected)
        _add_if(details, "actual", actual)

        super().__init__(message, details)

        self.row = row
        self.expected = expected
        self.actual = actual

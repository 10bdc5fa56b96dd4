"""
Dependency record model for upgradepick.

A :class:`DependencyRecord` is one package's check result as reported by
the version-resolution step: installed and latest versions, the version
declared in the manifest, and the status flags that decide which menu
group (if any) the package lands in. Records are read-only; the menu
pipeline never alters them.
"""

from __future__ import annotations

from enum import Enum
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from upgradepick.exceptions import ReportError


class Bump(str, Enum):
    """Severity of an available update."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    NON_SEMVER = "nonSemver"  # versions below 1.0.0


# Report key -> (record attribute, expected kind). Both the camelCase keys
# emitted by npm-check style tools and snake_case keys are accepted.
_TEXT_FIELDS: Dict[str, str] = {
    "installed": "installed",
    "latest": "latest",
    "packageJson": "package_json",
    "package_json": "package_json",
    "homepage": "homepage",
    "regError": "reg_error",
    "reg_error": "reg_error",
    "pkgError": "pkg_error",
    "pkg_error": "pkg_error",
}

_FLAG_FIELDS: Dict[str, str] = {
    "mismatch": "mismatch",
    "notInstalled": "not_installed",
    "not_installed": "not_installed",
    "devDependency": "dev_dependency",
    "dev_dependency": "dev_dependency",
}

_NAME_KEYS: Tuple[str, ...] = ("moduleName", "name")


@dataclass(frozen=True)
class DependencyRecord:
    """
    One package's dependency-check result.

    Attributes:
        name: Package name as reported.
        installed: Installed version, if any.
        latest: Latest available version, if known.
        package_json: Version declared in the project manifest.
        homepage: Project homepage URL.
        reg_error: Registry lookup error message.
        pkg_error: Package-level error message.
        mismatch: Installed version differs from the manifest.
        not_installed: Package is declared but not installed.
        dev_dependency: Package is a development dependency.
        bump: Severity of the available update, or ``None``.
    """

    name: str
    installed: Optional[str] = None
    latest: Optional[str] = None
    package_json: Optional[str] = None
    homepage: Optional[str] = None
    reg_error: Optional[str] = None
    pkg_error: Optional[str] = None
    mismatch: bool = False
    not_installed: bool = False
    dev_dependency: bool = False
    bump: Optional[Bump] = None

    @property
    def error(self) -> Optional[str]:
        """First reported lookup error, registry errors taking precedence."""
        return self.reg_error or self.pkg_error or None

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        *,
        index: Optional[int] = None,
    ) -> "DependencyRecord":
        """
        Build a record from a report entry.

        Args:
            data: Mapping using camelCase (``moduleName``, ``notInstalled``,
                ...) or snake_case keys. Unknown keys are ignored.
            index: Position of the entry in its report, for error messages.

        Returns:
            The parsed record.

        Raises:
            ReportError: If the name is missing or a field has the wrong type.
        """
        name = next((data[key] for key in _NAME_KEYS if data.get(key)), None)
        if not isinstance(name, str) or not name.strip():
            raise ReportError(
                "Report entry has no package name",
                index=index,
                field="moduleName",
            )

        values: Dict[str, Any] = {"name": name.strip()}

        for key, attr in _TEXT_FIELDS.items():
            if key not in data or data[key] is None:
                continue
            value = data[key]
            if not isinstance(value, str):
                raise ReportError(
                    f"Field '{key}' of {name} must be a string, "
                    f"got {type(value).__name__}",
                    index=index,
                    field=key,
                )
            values[attr] = value

        for key, attr in _FLAG_FIELDS.items():
            if key not in data or data[key] is None:
                continue
            value = data[key]
            if not isinstance(value, bool):
                raise ReportError(
                    f"Field '{key}' of {name} must be a boolean, "
                    f"got {type(value).__name__}",
                    index=index,
                    field=key,
                )
            values[attr] = value

        values["bump"] = _parse_bump(data.get("bump"), name=name, index=index)
        return cls(**values)

    def to_json(self) -> Dict[str, Any]:
        """
        Serialize the record using the report's camelCase keys.

        Returns:
            JSON-safe dictionary; unset optional fields are omitted.
        """
        entry: Dict[str, Any] = {"moduleName": self.name}
        optional = {
            "installed": self.installed,
            "latest": self.latest,
            "packageJson": self.package_json,
            "homepage": self.homepage,
            "regError": self.reg_error,
            "pkgError": self.pkg_error,
        }
        entry.update({key: value for key, value in optional.items() if value})
        entry["mismatch"] = self.mismatch
        entry["notInstalled"] = self.not_installed
        entry["devDependency"] = self.dev_dependency
        if self.bump is not None:
            entry["bump"] = self.bump.value
        return entry

    def __str__(self) -> str:
        """Return ``name@latest``, or just the name when latest is unknown."""
        return f"{self.name}@{self.latest}" if self.latest else self.name


def _parse_bump(
    value: Any,
    *,
    name: str,
    index: Optional[int],
) -> Optional[Bump]:
    """Parse a report ``bump`` value; ``None``/``False``/empty mean absent."""
    if value is None or value is False or value == "":
        return None
    if isinstance(value, Bump):
        return value
    try:
        return Bump(value)
    except ValueError as exc:
        allowed = ", ".join(b.value for b in Bump)
        raise ReportError(
            f"Unknown bump '{value}' for {name} (expected one of: {allowed})",
            index=index,
            field="bump",
        ) from exc

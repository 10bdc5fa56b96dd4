from __future__ import annotations

from typing import Any, Callable

import pytest

from upgradepick.models import Bump, DependencyRecord


@pytest.fixture
def make_record() -> Callable[..., DependencyRecord]:
    """Factory for dependency records with sensible version defaults."""

    def _make(name: str = "pkg", **overrides: Any) -> DependencyRecord:
        values: dict = {"installed": "1.0.0", "latest": "1.0.0"}
        values.update(overrides)
        return DependencyRecord(name=name, **values)

    return _make


@pytest.fixture
def left_pad() -> DependencyRecord:
    """Manifest declares 1.1.0 but 1.0.0 is installed; no newer release."""
    return DependencyRecord(
        name="left-pad",
        installed="1.0.0",
        latest="1.0.0",
        package_json="1.1.0",
        homepage="https://github.com/stevemao/left-pad",
        mismatch=True,
    )


@pytest.fixture
def rimraf() -> DependencyRecord:
    """Installed 2.0.0 with a major update to 3.0.0 available."""
    return DependencyRecord(
        name="rimraf",
        installed="2.0.0",
        latest="3.0.0",
        homepage="https://github.com/isaacs/rimraf",
        bump=Bump.MAJOR,
    )

"""
upgradepick: interactive dependency upgrade selection.

upgradepick takes the results of a dependency check (one entry per package
with its installed version, latest version and status flags) and turns
them into a grouped, column-aligned checkbox menu:

    • Manifest mismatches and missing packages first
    • Then patch, minor, major and non-semver updates
    • Up-to-date packages are left out entirely

The classification and layout pipeline is pure; the interactive prompt
is a thin boundary on top of it.
"""

from __future__ import annotations

from upgradepick.__version__ import __version__

# ---------------------------------------------------------------------------
# Package Metadata
# ---------------------------------------------------------------------------

__author__ = "upgradepick Contributors"
__license__ = "Apache-2.0"
__description__ = "Grouped, interactive selection of dependency upgrades."

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

from upgradepick.models import Bump, Choice, DependencyRecord, Separator
from upgradepick.core import UI_GROUPS, build_choice_list

__all__ = [
    "__version__",
    "Bump",
    "Choice",
    "DependencyRecord",
    "Separator",
    "UI_GROUPS",
    "build_choice_list",
]

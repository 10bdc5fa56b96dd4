"""Check command implementation for upgradepick.

Reads a dependency report and prints the grouped menu without prompting,
so the result can be reviewed in CI logs or piped elsewhere.

Typical usage::

    # Grouped, aligned overview
    $ upgradepick check outdated.json

    # Machine-readable grouping
    $ upgradepick check outdated.json --format json
"""

from __future__ import annotations

import sys
import json
from pathlib import Path
from typing import Any, Dict, List, Sequence

import click

from upgradepick.constants import UP_TO_DATE_MESSAGE
from upgradepick.context import pass_context, UpgradePickContext
from upgradepick.core import (
    UI_GROUPS,
    TableBuilder,
    assemble_group,
    build_choice_list,
    load_records,
    render_choice_list,
)
from upgradepick.models import Choice, DependencyRecord
from upgradepick.utils import get_logger, print_lines, print_success, print_warning

logger = get_logger("commands.check")


@click.command()
@click.argument(
    "report",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--format",
    "-f",
    type=click.Choice(["table", "json"], case_sensitive=False),
    default="table",
    help="Output format.",
)
@pass_context
def check(ctx: UpgradePickContext, report: Path, format: str) -> None:
    """Show which packages in REPORT need attention.

    Packages are grouped the same way as in ``select``: manifest
    mismatches, missing packages, then patch, minor, major and
    non-semver updates. Up-to-date packages are omitted.

    Exits:
        0 if everything is up to date, 1 if any package needs attention.
    """
    records = load_records(report)
    logger.info("Loaded %d package(s) from %s", len(records), report)

    builder = TableBuilder(ctx.config.column_widths) if ctx.config else TableBuilder()

    if format == "json":
        groups = _group_json(records, builder)
        click.echo(json.dumps(groups, indent=2))
        sys.exit(1 if groups else 0)

    entries = build_choice_list(
        records, UI_GROUPS, builder, include_instructions=False
    )
    if not entries:
        print_success(UP_TO_DATE_MESSAGE)
        sys.exit(0)

    print_lines(render_choice_list(entries))

    pending = sum(1 for entry in entries if isinstance(entry, Choice))
    print_warning(f"\n{pending} package(s) need attention")
    sys.exit(1)


def _group_json(
    records: Sequence[DependencyRecord],
    builder: TableBuilder,
) -> List[Dict[str, Any]]:
    """Serialize non-empty groups as ``{"group", "title", "packages"}`` objects."""
    groups: List[Dict[str, Any]] = []
    for group in UI_GROUPS:
        choices = [
            entry
            for entry in assemble_group(records, group, builder)
            if isinstance(entry, Choice)
        ]
        if choices:
            groups.append(
                {
                    "group": group.key,
                    "title": group.title.plain,
                    "packages": [entry.value.to_json() for entry in choices],
                }
            )
    return groups

"""Select command implementation for upgradepick.

Shows the grouped checkbox menu for a dependency report and prints the
packages the user picked, ready to hand to an installer.

Typical usage::

    # Pick interactively, print name@latest per line
    $ upgradepick select outdated.json

    # Write the selection as JSON
    $ upgradepick select outdated.json --format json --output picked.json
"""

from __future__ import annotations

import sys
import json
from pathlib import Path
from typing import List, Optional

import click

from upgradepick.context import pass_context, UpgradePickContext
from upgradepick.core import TableBuilder, load_records, short
from upgradepick.models import DependencyRecord
from upgradepick.prompt import page_size_hint, upgrade_interactive
from upgradepick.utils import get_logger, print_success, safe_write_file

logger = get_logger("commands.select")


@click.command()
@click.argument(
    "report",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--format",
    "-f",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    help="Output format for the selection.",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the selection to a file instead of stdout.",
)
@pass_context
def select(
    ctx: UpgradePickContext,
    report: Path,
    format: str,
    output: Optional[Path],
) -> None:
    """Pick packages from REPORT to upgrade.

    \b
    Keys:
      Space      toggle a package
      Enter      confirm the selection
      Control-C  cancel
    """
    records = load_records(report)
    logger.info("Loaded %d package(s) from %s", len(records), report)

    if ctx.config is not None:
        builder = TableBuilder(ctx.config.column_widths)
        page_size = page_size_hint(ctx.config.page_margin)
    else:
        builder = TableBuilder()
        page_size = page_size_hint()

    selected = upgrade_interactive(records, builder=builder, page_size=page_size)
    if not selected:
        sys.exit(0)

    content = _render_selection(selected, format)
    if output is not None:
        path = safe_write_file(output, content)
        print_success(f"Wrote {len(selected)} package(s) to {path}")
    else:
        click.echo(content, nl=False)

    sys.exit(0)


def _render_selection(selected: List[DependencyRecord], format: str) -> str:
    """Render the chosen records as ``name@latest`` lines or a JSON array."""
    if format == "json":
        return json.dumps([record.to_json() for record in selected], indent=2) + "\n"
    return "".join(f"{short(record)}\n" for record in selected)

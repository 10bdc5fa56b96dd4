"""Dependency report loading.

A report is the JSON output of a dependency check: either a list of
package entries or an object whose ``packages`` key holds that list.
Entries use npm-check style keys (``moduleName``, ``packageJson``,
``notInstalled``, ...) or their snake_case equivalents.

Typical usage::

    records = load_records(Path("outdated.json"))
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Union

from upgradepick.exceptions import ReportError
from upgradepick.models.dependency import DependencyRecord
from upgradepick.utils.filesystem import safe_read_file
from upgradepick.utils.logger import get_logger

logger = get_logger("report")


def parse_records(
    payload: Any,
    *,
    source: str = "<report>",
) -> List[DependencyRecord]:
    """
    Convert a decoded JSON report into records.

    Args:
        payload: Decoded JSON (list, or object with a ``packages`` list).
        source: Name used in error messages.

    Returns:
        Records in report order.

    Raises:
        ReportError: If the payload or one of its entries is malformed.
    """
    if isinstance(payload, dict):
        if "packages" not in payload:
            raise ReportError(
                "Report object has no 'packages' list",
                file_path=source,
                field="packages",
            )
        payload = payload["packages"]

    if not isinstance(payload, list):
        raise ReportError(
            f"Report must be a list of packages, got {type(payload).__name__}",
            file_path=source,
        )

    records: List[DependencyRecord] = []
    for index, entry in enumerate(payload):
        if not isinstance(entry, dict):
            raise ReportError(
                f"Report entry must be an object, got {type(entry).__name__}",
                file_path=source,
                index=index,
            )
        try:
            records.append(DependencyRecord.from_dict(entry, index=index))
        except ReportError as exc:
            raise ReportError(
                exc.message,
                file_path=source,
                index=exc.index,
                field=exc.field,
            ) from exc

    logger.debug("Parsed %d record(s) from %s", len(records), source)
    return records


def load_records(path: Union[str, Path]) -> List[DependencyRecord]:
    """
    Read and parse a JSON dependency report.

    Args:
        path: Path to the report file.

    Returns:
        Records in report order.

    Raises:
        FileOperationError: If the file cannot be read.
        ReportError: If the content is not a valid report.
    """
    logger.info("Loading report %s", path)
    content = safe_read_file(path)

    try:
        payload = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ReportError(
            f"Invalid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})",
            file_path=str(path),
        ) from exc

    return parse_records(payload, source=str(path))

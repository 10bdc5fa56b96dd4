"""
Filesystem utilities for upgradepick.

Helpers for reading dependency reports and writing selection results.
All filesystem errors are normalized to ``FileOperationError``.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from upgradepick.constants import MAX_FILE_SIZE
from upgradepick.utils.logger import get_logger
from upgradepick.exceptions import FileOperationError

logger = get_logger("filesystem")

PathLike = Union[str, Path]


def _validated_file(path: Path) -> Path:
    """Validate and resolve an existing file path."""
    if not path.exists():
        raise FileOperationError(
            f"File not found: {path}",
            file_path=str(path),
            operation="read",
        )
    if not path.is_file():
        raise FileOperationError(
            f"Not a file: {path}",
            file_path=str(path),
            operation="read",
        )
    return path.resolve()


def _atomic_write(target: Path, content: str) -> None:
    """Atomically write text to a file using a temporary file + replace."""
    target.parent.mkdir(parents=True, exist_ok=True)
    temp_path: Optional[Path] = None

    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=str(target.parent),
            delete=False,
            prefix=f".{target.name}.",
            suffix=".tmp",
        ) as tmp:
            tmp.write(content)
            temp_path = Path(tmp.name)

        os.replace(temp_path, target)
        logger.debug("Wrote %s", target)
    except OSError as exc:
        if temp_path is not None and temp_path.exists():
            temp_path.unlink()
        raise FileOperationError(
            f"Failed to write file: {exc}",
            file_path=str(target),
            operation="write",
            original_error=exc,
        ) from exc


def safe_read_file(
    file_path: PathLike,
    *,
    max_size: Optional[int] = MAX_FILE_SIZE,
    encoding: str = "utf-8",
) -> str:
    """Safely read a text file with optional size limits.

    Args:
        file_path: Path to the file.
        max_size: Maximum allowed file size in bytes (None disables limit).
        encoding: Text encoding.

    Returns:
        File contents as a string.
    """
    path = _validated_file(Path(file_path))
    size = path.stat().st_size

    if max_size is not None and size > max_size:
        raise FileOperationError(
            f"File too large: {size} bytes (max {max_size})",
            file_path=str(path),
            operation="read",
        )

    try:
        return path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise FileOperationError(
            f"Failed to read file: {exc}",
            file_path=str(path),
            operation="read",
            original_error=exc,
        ) from exc


def safe_write_file(file_path: PathLike, content: str) -> Path:
    """Write text to a file using atomic replacement.

    Args:
        file_path: Destination path.
        content: Text content to write.

    Returns:
        The resolved destination path.
    """
    path = Path(file_path)
    _atomic_write(path, content)
    return path.resolve()

"""
Centralized constants for upgradepick.

This module defines immutable configuration values used across
upgradepick, including table layout, prompt wording, input limits, and
logging formats. All values are intended to be treated as read-only.
"""

from typing import Final, Tuple

# ---------------------------------------------------------------------------
# Table layout
# ---------------------------------------------------------------------------

#: Column widths for name, current, arrow, latest and link/error columns.
#: Each width includes one space of padding on either side.
DEFAULT_COLUMN_WIDTHS: Final[Tuple[int, ...]] = (50, 10, 3, 10, 100)

#: Number of columns every rendered row must have.
COLUMN_COUNT: Final[int] = 5

#: Smallest usable column width (padding plus one character).
MIN_COLUMN_WIDTH: Final[int] = 3

#: Characters placed on each side of a cell's content.
CELL_PADDING: Final[int] = 1

#: Separator between two adjacent cells.
CELL_SEPARATOR: Final[str] = " "


# ---------------------------------------------------------------------------
# Prompt wording
# ---------------------------------------------------------------------------

#: Question shown above the checkbox list.
PROMPT_MESSAGE: Final[str] = "Choose which packages to upgrade"

#: Instruction line appended after the last group.
PROMPT_INSTRUCTIONS: Final[str] = (
    "Space to select. Enter to start upgrading. Control-C to cancel."
)

#: Status line printed when nothing needs attention.
UP_TO_DATE_MESSAGE: Final[str] = "All dependencies are up to date!"

#: Terminal rows kept free below the prompt.
DEFAULT_PAGE_MARGIN: Final[int] = 2

# ---------------------------------------------------------------------------
# Input constraints
# ---------------------------------------------------------------------------

#: Maximum allowed size (in bytes) of a dependency report.
MAX_FILE_SIZE: Final[int] = 10 * 1024 * 1024  # 10 MB

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

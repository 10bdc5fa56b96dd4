"""
Borderless column alignment for menu rows.

:class:`TableBuilder` lays rows of :class:`DisplayField` cells out in
fixed-width columns. Each column width includes one space of padding on
each side; longer content is cut with an ellipsis. Widths are measured
on terminal cells, so styles and wide characters do not break alignment.

The builder only aligns: rows come out in the order they went in, one
line per row.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from rich.text import Text

from upgradepick.models.display import DisplayField
from upgradepick.exceptions import TableLayoutError
from upgradepick.utils.logger import get_logger
from upgradepick.constants import (
    CELL_PADDING,
    CELL_SEPARATOR,
    DEFAULT_COLUMN_WIDTHS,
    MIN_COLUMN_WIDTH,
)

logger = get_logger("table")

Row = Sequence[DisplayField]


class TableBuilder:
    """Aligns rows into fixed-width, space-separated columns.

    Args:
        column_widths: Width of each column, padding included.

    Raises:
        TableLayoutError: If no widths are given or a width is below
            :data:`~upgradepick.constants.MIN_COLUMN_WIDTH`.

    Example::

        >>> builder = TableBuilder((8, 5))
        >>> [line.plain for line in builder.build([(DisplayField.of("abc"), DisplayField.of("1"))])]
        [' abc      1']
    """

    def __init__(self, column_widths: Sequence[int] = DEFAULT_COLUMN_WIDTHS) -> None:
        if not column_widths:
            raise TableLayoutError("At least one column width is required")
        for width in column_widths:
            if isinstance(width, bool) or not isinstance(width, int) or width < MIN_COLUMN_WIDTH:
                raise TableLayoutError(
                    f"Column width must be an integer >= {MIN_COLUMN_WIDTH}, got {width!r}",
                    expected=MIN_COLUMN_WIDTH,
                )
        self.column_widths: Tuple[int, ...] = tuple(column_widths)

    def build(self, rows: Sequence[Row]) -> List[Text]:
        """
        Render rows as aligned lines.

        Args:
            rows: Rows of cells; every row needs one cell per column.

        Returns:
            One Rich ``Text`` line per row, in input order, with trailing
            whitespace removed.

        Raises:
            TableLayoutError: If a row has the wrong number of cells.
        """
        lines = [self._render_row(index, row) for index, row in enumerate(rows)]
        logger.debug("Laid out %d row(s) in %d column(s)", len(lines), len(self.column_widths))
        return lines

    def _render_row(self, index: int, row: Row) -> Text:
        if len(row) != len(self.column_widths):
            raise TableLayoutError(
                f"Row {index} has {len(row)} cell(s), expected {len(self.column_widths)}",
                row=index,
                expected=len(self.column_widths),
                actual=len(row),
            )

        line = Text()
        for column, (cell, width) in enumerate(zip(row, self.column_widths)):
            if column:
                line.append(CELL_SEPARATOR)
            line.append_text(self._render_cell(cell, width))
        line.rstrip()
        return line

    @staticmethod
    def _render_cell(cell: DisplayField, width: int) -> Text:
        padding = " " * CELL_PADDING
        content = cell.to_text()
        content.truncate(width - 2 * CELL_PADDING, overflow="ellipsis", pad=True)
        return Text.assemble(padding, content, padding)

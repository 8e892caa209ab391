"""Table of rows rendered as a bordered text block."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .row import ALIGNMENTS, Row
from .style import DEFAULT_STYLE_NAME, RowPosition, TableStyle


class Table:
    """Render rows of cells as a box-drawing table.

    Example output (style "simple"):
        +--------------+
        | COMMANDS     |
        +-----+--------+
        | ll  | ls -la |
        +-----+--------+
    """

    def __init__(
        self,
        style: TableStyle | str = DEFAULT_STYLE_NAME,
        align: str = "l",
        column_titles: list[str] | None = None,
    ) -> None:
        """Initialize an empty table.

        Args:
            style: A ``TableStyle`` or the name of a built-in one
            align: Placement of text inside its cell ('l', 'r', or 'c')
            column_titles: Informational titles; they are not rendered

        Raises:
            ValueError: If the style name or alignment is unknown
        """
        if align not in ALIGNMENTS:
            raise ValueError(f"Unknown alignment: {align!r} (expected one of: l, r, c)")
        self.style = TableStyle.from_name(style) if isinstance(style, str) else style
        self.align = align
        self.column_titles: list[str] = list(column_titles or [])
        self.rows: list[Row] = []

    def add_row(self, row: Row | Iterable[Any]) -> None:
        """Append a row; plain iterables are converted with ``Row``."""
        self.rows.append(row if isinstance(row, Row) else Row(row))

    def max_column_widths(self) -> list[int]:
        """
        Width of every grid column.

        Each cell contributes its display width to every grid column it
        covers, so a spanning cell's share is applied across its span.
        """
        widths: list[int] = []
        for row in self.rows:
            for cell, start in zip(row.cells, row.column_starts()):
                for index in range(start, start + cell.column_span):
                    if index < len(widths):
                        widths[index] = max(widths[index], cell.display_width)
                    else:
                        widths.append(cell.display_width)
        return widths

    def render(self) -> str:
        """Render the table; an empty table renders to an empty string."""
        if not self.rows:
            return ""

        widths = self.max_column_widths()
        lines: list[str] = []
        previous: str | None = None
        for index, row in enumerate(self.rows):
            position = RowPosition.FIRST if index == 0 else RowPosition.MID
            lines.append(row.separator_line(widths, self.style, position, previous))
            lines.append(row.content_line(widths, self.style, self.align))
            previous = row.separator_line(widths, self.style, position)

        lines.append(self.rows[-1].separator_line(widths, self.style, RowPosition.LAST))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

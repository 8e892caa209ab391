"""A horizontal band of cells."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .cell import Cell
from .merge import merge_separators
from .style import RowPosition, TableStyle

ALIGNMENTS = ("l", "r", "c")


class Row:
    """Ordered sequence of cells forming one band of a table."""

    def __init__(self, cells: Iterable[Any] = ()) -> None:
        self.cells: list[Cell] = [Cell.of(value) for value in cells]

    def __repr__(self) -> str:
        return f"Row({self.cells!r})"

    def __len__(self) -> int:
        return len(self.cells)

    def display_widths(self) -> list[int]:
        """Per-cell display width, one entry per cell (not per grid column)."""
        return [cell.display_width for cell in self.cells]

    def column_starts(self) -> list[int]:
        """Grid column index at which each cell starts."""
        starts: list[int] = []
        next_boundary = 0
        for cell in self.cells:
            starts.append(next_boundary)
            next_boundary += cell.column_span
        return starts

    def grid_width(self) -> int:
        """Number of grid columns covered by this row's cells."""
        return sum(cell.column_span for cell in self.cells)

    def separator_line(
        self,
        max_column_widths: list[int],
        style: TableStyle,
        row_position: RowPosition,
        previous_separator: str | None = None,
    ) -> str:
        """
        Build the horizontal border drawn above this row.

        Column boundaries of this row get the position's intersection glyph.
        Boundaries swallowed by a spanning cell get a horizontal glyph.
        Grid columns past the row's own cells are treated as blank
        single-column cells.

        Args:
            max_column_widths: Width of every grid column
            style: Glyph set to draw with
            row_position: Position of the line within the table
            previous_separator: Unmerged separator of the row above, if any.
                When given, the result is merged with it so that boundaries
                of both rows are drawn.

        Returns:
            The separator line, ``sum(widths) + len(widths) + 1`` characters long
        """
        boundaries = set(self.column_starts())
        covered = self.grid_width()

        parts = [style.edge_start_glyph(row_position)]
        for index, width in enumerate(max_column_widths):
            if index > 0:
                if index in boundaries or index >= covered:
                    parts.append(style.intersection_glyph(row_position))
                else:
                    parts.append(style.horizontal)
            parts.append(style.horizontal * width)
        parts.append(style.edge_end_glyph(row_position))
        line = "".join(parts)

        if previous_separator is not None:
            line = merge_separators(previous_separator, line, style, row_position)
        return line

    def content_line(
        self,
        max_column_widths: list[int],
        style: TableStyle,
        align: str = "l",
    ) -> str:
        """
        Build the text line of this row.

        Each cell is padded to the width of the grid columns it spans plus
        the boundaries between them. Uncovered grid columns are drawn blank.
        Cells starting past the last grid column are dropped.
        """
        parts: list[str] = []
        column_count = len(max_column_widths)
        end = 0
        for cell, start in zip(self.cells, self.column_starts()):
            if start >= column_count:
                break
            end = min(start + cell.column_span, column_count)
            available = sum(max_column_widths[start:end]) + (end - start - 1)
            parts.append(style.vertical + _pad(str(cell), available, align))

        for index in range(end, column_count):
            parts.append(style.vertical + " " * max_column_widths[index])
        parts.append(style.vertical)
        return "".join(parts)


def _pad(text: str, width: int, align: str) -> str:
    if align == "r":
        return text.rjust(width)
    if align == "c":
        return text.center(width)
    return text.ljust(width)

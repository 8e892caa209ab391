"""Tests for table rows."""

from managed_alias.table import EXTENDED, SIMPLE, Cell, Row, RowPosition


class TestRowConstruction:
    """Test building rows from cell-convertible values."""

    def test_mixed_values(self) -> None:
        """Cells, tuples and plain values are all accepted."""
        row = Row([Cell("a"), ("b", 2), 3])
        assert row.cells == [Cell("a"), Cell("b", 2), Cell("3")]
        assert len(row) == 3

    def test_display_widths_one_entry_per_cell(self) -> None:
        """A spanning cell contributes a single entry."""
        row = Row([("COMMANDS", 2), "x"])
        assert row.display_widths() == [5, 3]

    def test_column_starts_follow_spans(self) -> None:
        """Each cell starts where the previous one's span ends."""
        row = Row([("a", 2), "b", ("c", 3), "d"])
        assert row.column_starts() == [0, 2, 3, 6]
        assert row.grid_width() == 7


class TestSeparatorLine:
    """Test separator synthesis."""

    def test_single_span_cells(self) -> None:
        """Every cell boundary gets an intersection glyph."""
        row = Row(["a", "b", "c"])
        assert row.separator_line([3, 3, 3], SIMPLE, RowPosition.MID) == "+---+---+---+"

    def test_spanning_cell_hides_boundary(self) -> None:
        """A boundary covered by a spanning cell is drawn horizontal."""
        row = Row([("title", 2)])
        line = row.separator_line([3, 4], EXTENDED, RowPosition.FIRST)
        assert line == "╔════════╗"

    def test_position_selects_glyphs(self) -> None:
        """Edges and junctions come from the row position."""
        row = Row(["a", "b"])
        assert row.separator_line([3, 3], EXTENDED, RowPosition.FIRST) == "╔═══╦═══╗"
        assert row.separator_line([3, 3], EXTENDED, RowPosition.MID) == "╠═══╬═══╣"
        assert row.separator_line([3, 3], EXTENDED, RowPosition.LAST) == "╚═══╩═══╝"

    def test_short_row_pads_with_boundaries(self) -> None:
        """Columns past the row's cells are separate blank cells."""
        row = Row(["a"])
        assert row.separator_line([3, 3, 3], SIMPLE, RowPosition.MID) == "+---+---+---+"

    def test_line_length(self) -> None:
        """Length is the column widths plus one glyph per boundary."""
        widths = [4, 7, 2]
        line = Row([("x", 2), "y"]).separator_line(widths, SIMPLE, RowPosition.MID)
        assert len(line) == sum(widths) + len(widths) + 1

    def test_merge_with_spanning_row_above(self) -> None:
        """Two cells below a span-2 cell still get their midpoint boundary."""
        above = Row([("ab", 2)]).separator_line([3, 3], EXTENDED, RowPosition.FIRST)
        line = Row(["x", "y"]).separator_line([3, 3], EXTENDED, RowPosition.MID, above)
        assert line == "╠═══╬═══╣"

    def test_merge_keeps_boundary_of_row_above(self) -> None:
        """A span-2 cell below two cells keeps the boundary the row above needs."""
        above = Row(["x", "y"]).separator_line([3, 3], EXTENDED, RowPosition.MID)
        line = Row([("ab", 2)]).separator_line([3, 3], EXTENDED, RowPosition.MID, above)
        assert line == "╠═══╬═══╣"
        assert Row([("ab", 2)]).separator_line([3, 3], EXTENDED, RowPosition.MID) == "╠═══════╣"

    def test_spans_past_grid_are_truncated(self) -> None:
        """Spans wider than the widths list do not fail."""
        row = Row([("wide", 5)])
        assert row.separator_line([3, 3], SIMPLE, RowPosition.MID) == "+-------+"


class TestContentLine:
    """Test content line formatting."""

    def test_left_aligned_cells(self) -> None:
        """Cells are padded on the right by default."""
        row = Row(["ll", "list files"])
        assert row.content_line([6, 17], SIMPLE) == "| ll   | list files      |"

    def test_spanning_cell_absorbs_boundaries(self) -> None:
        """A spanning cell fills its columns plus the boundaries between them."""
        row = Row([("PATHS", 2)])
        assert row.content_line([6, 17], SIMPLE) == "| PATHS                  |"

    def test_short_row_padded_with_blank_cells(self) -> None:
        """Missing cells are drawn blank."""
        row = Row(["c"])
        assert row.content_line([3, 3], EXTENDED) == "║ c ║   ║"

    def test_right_alignment(self) -> None:
        """Right alignment pads on the left."""
        assert Row(["x"]).content_line([6], SIMPLE, align="r") == "|    x |"

    def test_cells_past_grid_are_dropped(self) -> None:
        """Cells starting beyond the last grid column are not drawn."""
        row = Row(["a", "b", "c"])
        assert row.content_line([3, 3], SIMPLE) == "| a | b |"

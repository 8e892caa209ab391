"""Tests for table styles."""

import pytest

from managed_alias.table import EXTENDED, SIMPLE, STYLES, RowPosition, TableStyle


class TestGlyphLookups:
    """Test glyph lookups keyed by row position."""

    def test_extended_edges(self) -> None:
        """Extended style uses distinct double-line glyphs per position."""
        assert EXTENDED.edge_start_glyph(RowPosition.FIRST) == "╔"
        assert EXTENDED.edge_start_glyph(RowPosition.MID) == "╠"
        assert EXTENDED.edge_start_glyph(RowPosition.LAST) == "╚"
        assert EXTENDED.edge_end_glyph(RowPosition.FIRST) == "╗"
        assert EXTENDED.edge_end_glyph(RowPosition.MID) == "╣"
        assert EXTENDED.edge_end_glyph(RowPosition.LAST) == "╝"

    def test_extended_intersections(self) -> None:
        """Intersections are T-junctions on the outer borders, crosses inside."""
        assert EXTENDED.intersection_glyph(RowPosition.FIRST) == "╦"
        assert EXTENDED.intersection_glyph(RowPosition.MID) == "╬"
        assert EXTENDED.intersection_glyph(RowPosition.LAST) == "╩"

    @pytest.mark.parametrize("position", list(RowPosition))
    def test_simple_collapses_to_plus(self, position: RowPosition) -> None:
        """Simple style draws every corner and junction as '+'."""
        assert SIMPLE.edge_start_glyph(position) == "+"
        assert SIMPLE.edge_end_glyph(position) == "+"
        assert SIMPLE.intersection_glyph(position) == "+"
        assert SIMPLE.horizontal == "-"
        assert SIMPLE.vertical == "|"


class TestFromName:
    """Test style lookup by name."""

    def test_builtin_names(self) -> None:
        """Both presets are available by name."""
        assert TableStyle.from_name("simple") is SIMPLE
        assert TableStyle.from_name("extended") is EXTENDED
        assert set(STYLES) == {"simple", "extended"}

    def test_unknown_name_raises(self) -> None:
        """Unknown names raise ValueError listing valid names."""
        with pytest.raises(ValueError, match="extended, simple"):
            TableStyle.from_name("fancy")

    def test_custom_style(self) -> None:
        """Callers may define their own glyph sets."""
        style = TableStyle(*"┌┐└┘├┤┬┴┼│─")
        assert style.intersection_glyph(RowPosition.MID) == "┼"
        assert style.edge_end_glyph(RowPosition.LAST) == "┘"

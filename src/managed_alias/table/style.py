"""Border glyph sets for table rendering."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RowPosition(Enum):
    """Where a separator line sits relative to the table body."""

    FIRST = "first"
    MID = "mid"
    LAST = "last"


@dataclass(frozen=True)
class TableStyle:
    """
    Immutable set of border-drawing glyphs.

    Attributes:
        top_left: Top-left corner
        top_right: Top-right corner
        bottom_left: Bottom-left corner
        bottom_right: Bottom-right corner
        left_mid: Left edge connector for interior separators
        right_mid: Right edge connector for interior separators
        top_intersection: Column boundary on the top border
        bottom_intersection: Column boundary on the bottom border
        intersection: Column boundary on an interior separator
        vertical: Column boundary inside a content line
        horizontal: Separator fill
    """

    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    left_mid: str
    right_mid: str
    top_intersection: str
    bottom_intersection: str
    intersection: str
    vertical: str
    horizontal: str

    def edge_start_glyph(self, position: RowPosition) -> str:
        return {
            RowPosition.FIRST: self.top_left,
            RowPosition.MID: self.left_mid,
            RowPosition.LAST: self.bottom_left,
        }[position]

    def edge_end_glyph(self, position: RowPosition) -> str:
        return {
            RowPosition.FIRST: self.top_right,
            RowPosition.MID: self.right_mid,
            RowPosition.LAST: self.bottom_right,
        }[position]

    def intersection_glyph(self, position: RowPosition) -> str:
        return {
            RowPosition.FIRST: self.top_intersection,
            RowPosition.MID: self.intersection,
            RowPosition.LAST: self.bottom_intersection,
        }[position]

    @classmethod
    def from_name(cls, name: str) -> TableStyle:
        """
        Look up a built-in style.

        Args:
            name: "simple" or "extended"

        Raises:
            ValueError: If the name is not a built-in style
        """
        try:
            return STYLES[name]
        except KeyError:
            valid = ", ".join(sorted(STYLES))
            raise ValueError(f"Unknown table style: {name!r} (expected one of: {valid})") from None


SIMPLE = TableStyle(
    top_left="+",
    top_right="+",
    bottom_left="+",
    bottom_right="+",
    left_mid="+",
    right_mid="+",
    top_intersection="+",
    bottom_intersection="+",
    intersection="+",
    vertical="|",
    horizontal="-",
)

EXTENDED = TableStyle(
    top_left="╔",
    top_right="╗",
    bottom_left="╚",
    bottom_right="╝",
    left_mid="╠",
    right_mid="╣",
    top_intersection="╦",
    bottom_intersection="╩",
    intersection="╬",
    vertical="║",
    horizontal="═",
)

STYLES: dict[str, TableStyle] = {
    "simple": SIMPLE,
    "extended": EXTENDED,
}

DEFAULT_STYLE_NAME = "extended"

"""Merging of separator lines drawn for rows with different column spans."""

from __future__ import annotations

from enum import Enum

from .style import RowPosition, TableStyle


class GlyphKind(Enum):
    """Classification of a separator character."""

    HORIZONTAL = "horizontal"
    JUNCTION = "junction"


# (above, below) -> merged kind. A boundary needed on either side is drawn as
# a full intersection so neither row loses its column divider.
MERGE_RULES: dict[tuple[GlyphKind, GlyphKind], GlyphKind] = {
    (GlyphKind.HORIZONTAL, GlyphKind.HORIZONTAL): GlyphKind.HORIZONTAL,
    (GlyphKind.HORIZONTAL, GlyphKind.JUNCTION): GlyphKind.JUNCTION,
    (GlyphKind.JUNCTION, GlyphKind.HORIZONTAL): GlyphKind.JUNCTION,
    (GlyphKind.JUNCTION, GlyphKind.JUNCTION): GlyphKind.JUNCTION,
}


def classify(glyph: str, style: TableStyle) -> GlyphKind:
    if glyph == style.horizontal:
        return GlyphKind.HORIZONTAL
    return GlyphKind.JUNCTION


def merge_separators(
    above: str,
    below: str,
    style: TableStyle,
    position: RowPosition,
) -> str:
    """
    Merge the separator of the row above into the separator of the row below.

    Both lines are compared character by character. The edge glyphs of
    ``below`` are kept as-is; every inner character is resolved through
    ``MERGE_RULES``. Characters of ``below`` past the end of ``above`` are
    kept unchanged.

    Args:
        above: Unmerged separator computed from the upper row's spans
        below: Separator computed from the lower row's spans
        style: Glyph set both lines were drawn with
        position: Row position of the merged line

    Returns:
        A separator valid for both rows
    """
    if len(below) < 2:
        return below

    joint = style.intersection_glyph(position)
    merged = [below[0]]
    for offset in range(1, len(below) - 1):
        glyph = below[offset]
        if offset < len(above):
            kind = MERGE_RULES[(classify(above[offset], style), classify(glyph, style))]
            glyph = style.horizontal if kind is GlyphKind.HORIZONTAL else joint
        merged.append(glyph)
    merged.append(below[-1])
    return "".join(merged)

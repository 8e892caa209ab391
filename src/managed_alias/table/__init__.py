"""
Text-mode table renderer.

Cells may span several grid columns. Separator lines between rows with
different spans are merged so that every column boundary of both rows is
drawn.

Example:
    from managed_alias.table import Cell, Table

    table = Table(style="simple")
    table.add_row([Cell("COMMANDS", 2)])
    table.add_row(["ll", "ls -la"])
    print(table.render())
"""

from .cell import Cell
from .merge import GlyphKind, merge_separators
from .row import Row
from .style import EXTENDED, SIMPLE, STYLES, RowPosition, TableStyle
from .table import Table

__all__ = [
    "Cell",
    "Row",
    "Table",
    "TableStyle",
    "RowPosition",
    "GlyphKind",
    "merge_separators",
    "SIMPLE",
    "EXTENDED",
    "STYLES",
]

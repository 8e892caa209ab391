"""Single table entry with a column span."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Cell:
    """
    One textual entry in the table grid.

    Attributes:
        text: Single-line content. Embedded newlines are not supported and
            will break the grid.
        column_span: Number of grid columns this cell occupies
    """

    text: str
    column_span: int = 1

    def __post_init__(self) -> None:
        if self.column_span < 1:
            raise ValueError("column_span must be >= 1")

    def __str__(self) -> str:
        return f" {self.text} "

    @property
    def width_real(self) -> int:
        """Character count of the padded text."""
        return len(str(self))

    @property
    def display_width(self) -> int:
        """
        Width this cell needs from each grid column it covers.

        The padded width is split across the spanned columns with ceiling
        division, so the spanned columns plus the boundaries they absorb
        always hold the full text.
        """
        return -(-self.width_real // self.column_span)

    @classmethod
    def of(cls, value: Any) -> Cell:
        """
        Convert a cell-convertible value.

        A ``Cell`` is returned as-is, a ``(text, span)`` tuple becomes a
        spanning cell, anything else is converted with ``str()``.
        """
        if isinstance(value, Cell):
            return value
        if isinstance(value, tuple):
            text, column_span = value
            return cls(str(text), column_span)
        return cls(str(value))

"""
Formatters for listing stored aliases.

Provides two output formats:
- TABLE: Bordered table with COMMANDS and PATHS sections (default)
- PLAIN: One ``key = value`` line per alias, keys right-aligned

Example:
    from managed_alias.listing import ListFormat, format_aliases

    output = format_aliases(store.load(), formatter=ListFormat.PLAIN)
    print(output)
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol

from .launcher import is_path
from .table import Cell, Table, TableStyle
from .table.style import DEFAULT_STYLE_NAME

if TYPE_CHECKING:
    from .store import Alias

COMMANDS_TITLE = "COMMANDS"
PATHS_TITLE = "PATHS"


class ListFormat(Enum):
    """Output format for alias listings."""

    TABLE = "table"
    PLAIN = "plain"


class BaseFormatter(Protocol):
    """Protocol for alias formatters."""

    def format(self, aliases: list[Alias]) -> str: ...


def build_alias_table(
    aliases: list[Alias],
    style: TableStyle | str = DEFAULT_STYLE_NAME,
    path_check: Callable[[str], bool] = is_path,
) -> Table:
    """
    Group aliases into a two-column table.

    Command aliases come first under a COMMANDS header, then path aliases
    under a PATHS header. A section with no aliases is left out.

    Args:
        aliases: Aliases in store order
        style: Table style or built-in style name
        path_check: Predicate deciding whether a value is a path

    Returns:
        Table ready to render
    """
    commands = [a for a in aliases if not path_check(a.value)]
    paths = [a for a in aliases if path_check(a.value)]

    table = Table(style=style, column_titles=["Key", "Value"])
    for title, section in ((COMMANDS_TITLE, commands), (PATHS_TITLE, paths)):
        if not section:
            continue
        table.add_row([Cell(title, 2)])
        for alias in section:
            table.add_row([alias.key, alias.value])
    return table


class TableFormatter:
    """Format aliases as a sectioned table."""

    def __init__(
        self,
        style: TableStyle | str = DEFAULT_STYLE_NAME,
        path_check: Callable[[str], bool] = is_path,
    ) -> None:
        self._style = style
        self._path_check = path_check

    def format(self, aliases: list[Alias]) -> str:
        return build_alias_table(aliases, self._style, self._path_check).render()


class PlainFormatter:
    """Format aliases as ``key = value`` lines."""

    def format(self, aliases: list[Alias]) -> str:
        if not aliases:
            return ""
        longest = max(len(a.key) for a in aliases)
        return "\n".join(f"{a.key:>{longest}} = {a.value}" for a in aliases)


def get_formatter(list_format: ListFormat, **options: Any) -> BaseFormatter:
    """
    Get formatter instance for the requested format.

    Args:
        list_format: Desired format (TABLE or PLAIN)
        **options: Formatter-specific options:
            - style (str | TableStyle): Table style (TABLE only, default: "extended")
            - path_check (callable): Path predicate (TABLE only)

    Raises:
        ValueError: If an unknown format is requested
    """
    if list_format == ListFormat.TABLE:
        return TableFormatter(
            style=options.get("style") or DEFAULT_STYLE_NAME,
            path_check=options.get("path_check") or is_path,
        )
    if list_format == ListFormat.PLAIN:
        return PlainFormatter()
    raise ValueError(f"Unknown list format: {list_format}")


def format_aliases(
    aliases: list[Alias],
    formatter: ListFormat = ListFormat.TABLE,
    **options: Any,
) -> str:
    """Format aliases for display; an empty list formats to an empty string."""
    return get_formatter(formatter, **options).format(aliases)


__all__ = [
    "ListFormat",
    "PlainFormatter",
    "TableFormatter",
    "build_alias_table",
    "format_aliases",
    "get_formatter",
]

"""
managed-alias: short names for paths and command lines.

This package provides:
- A flat-file alias store (``key":"value`` lines)
- Navigation (``go``) and execution (``run``) of stored values
- A text-mode table renderer with multi-column spans and merged borders

Example:
    from managed_alias import AliasStore, format_aliases

    store = AliasStore("~/.managed-alias-store")
    store.set("proj", "/home/u/project")
    print(format_aliases(store.load()))
"""

from importlib.metadata import PackageNotFoundError, version

from .exceptions import (
    AliasNotFoundError,
    ExecutionError,
    ManagedAliasError,
    StoreError,
    ValidationError,
)
from .listing import ListFormat, format_aliases
from .store import Alias, AliasStore
from .table import Cell, Row, RowPosition, Table, TableStyle

try:
    __version__ = version("managed-alias")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Store
    "Alias",
    "AliasStore",
    # Listing
    "ListFormat",
    "format_aliases",
    # Table
    "Cell",
    "Row",
    "RowPosition",
    "Table",
    "TableStyle",
    # Exceptions
    "ManagedAliasError",
    "ValidationError",
    "StoreError",
    "AliasNotFoundError",
    "ExecutionError",
]

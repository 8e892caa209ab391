"""Configuration resolution for managed-alias.

Every setting is resolved in the same order: explicit argument, then
environment variable, then built-in default.
"""

import os
import sys
from pathlib import Path

from .table.style import DEFAULT_STYLE_NAME, STYLES

STORE_FILE_NAME = ".managed-alias-store"
"""File name of the alias store, kept beside the executable by default."""

STORE_ENV_VAR = "MANAGED_ALIAS_STORE"
"""Environment variable for overriding the alias store path."""

STYLE_ENV_VAR = "MANAGED_ALIAS_STYLE"
"""Environment variable for overriding the ``list`` table style."""

DELIMITER = '":"'
"""Separator between key and value on a store line."""


def default_store_path() -> Path:
    """Store path beside the running executable (the console script)."""
    executable = Path(sys.argv[0] or sys.executable).resolve()
    return executable.parent / STORE_FILE_NAME


def resolve_store_path(path: str | os.PathLike[str] | None) -> Path:
    """Resolve the store path from explicit arg, env var, or default.

    Resolution order: ``path`` arg → ``MANAGED_ALIAS_STORE`` env var →
    ``.managed-alias-store`` beside the executable.

    Args:
        path: Explicit store path, or ``None`` to use env/default.

    Returns:
        Path of the store file (user ``~`` expanded).
    """
    explicit = path or os.environ.get(STORE_ENV_VAR)
    if explicit:
        return Path(explicit).expanduser()
    return default_store_path()


def resolve_style_name(name: str | None) -> str:
    """Resolve the table style name from explicit arg, env var, or default.

    Raises:
        ValueError: If the resolved name is not a built-in style
    """
    resolved = name or os.environ.get(STYLE_ENV_VAR) or DEFAULT_STYLE_NAME
    if resolved not in STYLES:
        valid = ", ".join(sorted(STYLES))
        raise ValueError(f"Unknown table style: {resolved!r} (expected one of: {valid})")
    return resolved

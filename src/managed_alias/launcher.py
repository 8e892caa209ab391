"""Navigation and execution of stored values."""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Sequence
from pathlib import Path

from .exceptions import ExecutionError

logger = logging.getLogger(__name__)

GO_MARKER = "*"
"""Prefix a shell wrapper function looks for to ``cd`` into the rest of the line."""


def is_path(value: str) -> bool:
    """Whether the value names an existing filesystem entry."""
    try:
        return Path(value).expanduser().exists()
    except (OSError, ValueError):
        return False


def go(value: str) -> str:
    """Navigation line for a path value."""
    return f"{GO_MARKER}{value}"


def run(value: str, args: Sequence[str] = ()) -> subprocess.Popen[bytes]:
    """
    Start a stored command line without waiting for it.

    Args:
        value: Command line, split with shell-like quoting rules
        args: Extra arguments appended to the command line

    Returns:
        The started process

    Raises:
        ExecutionError: If the command line is empty or cannot be started
    """
    try:
        argv = shlex.split(value)
    except ValueError as e:
        raise ExecutionError(value, str(e)) from e
    if not argv:
        raise ExecutionError(value, "Empty command line")

    argv.extend(args)
    logger.debug("Spawning %s", argv)
    try:
        return subprocess.Popen(argv)
    except OSError as e:
        raise ExecutionError(value, str(e)) from e

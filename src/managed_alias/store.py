"""Flat-file key/value store for aliases.

Each line of the store file holds one binding::

    key":"value

Lines without the delimiter are ignored on read and dropped on rewrite.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .config import DELIMITER, resolve_store_path
from .exceptions import AliasNotFoundError, StoreError, ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Alias:
    """A key bound to a path or a command line."""

    key: str
    value: str

    def to_line(self) -> str:
        return f"{self.key}{DELIMITER}{self.value}\n"

    @classmethod
    def from_line(cls, line: str) -> Alias | None:
        """Parse a store line, returning ``None`` when it holds no binding."""
        parts = line.rstrip("\r\n").split(DELIMITER)
        if len(parts) < 2:
            return None
        return cls(key=parts[0], value=parts[1])


def validate_key(key: str) -> None:
    """
    Validate an alias key.

    Raises:
        ValidationError: If the key is empty or cannot round-trip through the file
    """
    if not key:
        raise ValidationError("key", key, "Key cannot be empty")
    if DELIMITER in key:
        raise ValidationError("key", key, f"Contains the store delimiter {DELIMITER}")
    if any(ch.isspace() for ch in key):
        raise ValidationError("key", key, "Contains whitespace")


def validate_value(value: str) -> None:
    """
    Validate an alias value.

    Raises:
        ValidationError: If the value is empty, spans several lines or
            contains the store delimiter
    """
    if not value:
        raise ValidationError("value", value, "Value cannot be empty")
    if "\n" in value or "\r" in value:
        raise ValidationError("value", value, "Value must be a single line")
    if DELIMITER in value:
        raise ValidationError("value", value, f"Contains the store delimiter {DELIMITER}")


class AliasStore:
    """Aliases persisted in a newline-delimited text file."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.path = resolve_store_path(path)

    def __repr__(self) -> str:
        return f"AliasStore(path={str(self.path)!r})"

    def load(self) -> list[Alias]:
        """Read every binding in file order; a missing file holds none."""
        try:
            contents = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("Store %s does not exist yet", self.path)
            return []
        except OSError as e:
            raise StoreError(str(self.path), f"Failed to read: {e}") from e

        aliases = []
        for line in contents.split("\n"):
            alias = Alias.from_line(line)
            if alias is not None:
                aliases.append(alias)
        logger.debug("Loaded %d aliases from %s", len(aliases), self.path)
        return aliases

    def get(self, key: str) -> str | None:
        for alias in self.load():
            if alias.key == key:
                return alias.value
        return None

    def require(self, key: str) -> str:
        """
        Look up a key.

        Raises:
            AliasNotFoundError: If the key is not bound
        """
        value = self.get(key)
        if value is None:
            raise AliasNotFoundError(key)
        return value

    def set(self, key: str, value: str) -> None:
        """Bind ``key`` to ``value``, replacing an existing binding in place."""
        validate_key(key)
        validate_value(value)

        aliases = self.load()
        replacement = Alias(key=key, value=value)
        overwritten = False
        for index, alias in enumerate(aliases):
            if alias.key == key:
                aliases[index] = replacement
                overwritten = True
        if not overwritten:
            aliases.append(replacement)

        self._write(aliases)
        logger.debug("%s key %r", "Updated" if overwritten else "Added", key)

    def delete(self, key: str) -> None:
        """
        Remove the binding for ``key``.

        Raises:
            AliasNotFoundError: If the key is not bound
        """
        aliases = self.load()
        remaining = [alias for alias in aliases if alias.key != key]
        if len(remaining) == len(aliases):
            raise AliasNotFoundError(key)
        self._write(remaining)
        logger.debug("Deleted key %r", key)

    def _write(self, aliases: list[Alias]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text("".join(a.to_line() for a in aliases), encoding="utf-8")
        except OSError as e:
            raise StoreError(str(self.path), f"Failed to write: {e}") from e

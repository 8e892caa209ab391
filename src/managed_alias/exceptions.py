"""Exceptions for managed-alias."""

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class ManagedAliasError(Exception):
    """
    Base exception for all managed-alias errors.

    The CLI catches this class to report failures without a traceback.
    """

    pass


# ---------------------------------------------------------------------------
# Store Exceptions
# ---------------------------------------------------------------------------


class ValidationError(ManagedAliasError):
    """Raised when a key or value cannot be stored."""

    def __init__(self, field: str, value: str, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field} {value!r}: {reason}")


class StoreError(ManagedAliasError):
    """Raised when the alias store file cannot be read or written."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Alias store {path}: {reason}")


class AliasNotFoundError(ManagedAliasError):
    """Raised when no value is bound to a key."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"No value was found for key '{key}'")


# ---------------------------------------------------------------------------
# Execution Exceptions
# ---------------------------------------------------------------------------


class ExecutionError(ManagedAliasError):
    """Raised when a stored command line cannot be started."""

    def __init__(self, command: str, reason: str) -> None:
        self.command = command
        self.reason = reason
        super().__init__(f"Failed to execute {command}. Error: {reason}")

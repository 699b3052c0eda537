"""
Node Command Errors

Architectural Intent:
- Single error hierarchy for everything that can go wrong while composing a node command
- Every error is terminal for the composition attempt; nothing here is retried
- Callers catch NodeCommandError to handle any composition failure uniformly
"""

from typing import Optional


class NodeCommandError(Exception):
    """Base class for node command composition failures."""


class TypeMismatchError(NodeCommandError):
    """Raised when a parameter bundle does not match the requested command type."""

    def __init__(self, command: str, expected: str, actual: str) -> None:
        super().__init__(
            f"{command} command expects {expected} parameters, got {actual}"
        )
        self.command = command
        self.expected = expected
        self.actual = actual


class MissingConfigurationError(NodeCommandError):
    """Raised when a required process-wide setting is not configured."""

    def __init__(self, setting: str) -> None:
        super().__init__(f"{setting} is not set in the ybnode configuration")
        self.setting = setting


class MissingReferenceError(NodeCommandError):
    """Raised when a bundle or record lacks a required identifier or value."""


class NotFoundError(NodeCommandError):
    """Raised when a referenced record does not exist."""


class ReleaseNotFoundError(NotFoundError):
    def __init__(self, version: Optional[str]) -> None:
        super().__init__(f"Unable to fetch yugabyte release for version: {version}")
        self.version = version


class InvalidPropertyError(NodeCommandError):
    def __init__(self, name: str, value: Optional[str]) -> None:
        super().__init__(f"Invalid {name} property: {value}")
        self.name = name
        self.value = value


class EmptyInputError(NodeCommandError):
    """Raised when a required collection is absent or empty."""

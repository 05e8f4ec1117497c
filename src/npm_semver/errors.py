"""Exception hierarchy shared by the parsers and models."""

from __future__ import annotations


class SemverError(ValueError):
    """Base error for input that does not match the version or range grammar."""

    def __init__(self, message: str, input: str = "") -> None:
        super().__init__(message)
        self.input = input


class InvalidVersion(SemverError):
    """Raised when a string is not a valid version under the active options."""

    def __init__(self, input: str) -> None:
        super().__init__(f"Invalid version: {input!r}", input)


class InvalidRange(SemverError):
    """Raised when a string is not a valid range (or comparator)."""

    def __init__(self, input: str, reason: str | None = None) -> None:
        message = f"Invalid range: {input!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, input)


class SerializationError(ValueError):
    """Raised when a structured record does not describe a valid value."""


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be loaded or is invalid."""

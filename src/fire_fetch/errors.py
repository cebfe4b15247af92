"""Error types raised by fire_fetch."""

from __future__ import annotations

from typing import Optional


class FireFetchError(Exception):
    """Base exception for fetch failures."""

    exit_code = 2

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"


class UsageError(FireFetchError):
    """Raised when the command line cannot be parsed."""

    exit_code = 1


class ConfigError(FireFetchError):
    """Raised when required configuration is missing or malformed."""

    exit_code = 1


class InitError(FireFetchError):
    """Raised when the Firebase app or database client cannot be created."""
    pass


class ReadError(FireFetchError):
    """Raised when reading from the database fails."""
    pass


class EncodeError(FireFetchError):
    """Raised when a fetched value cannot be encoded as JSON."""
    pass

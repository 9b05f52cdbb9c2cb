"""Custom exceptions for tsm."""

from pathlib import Path


class TsmError(Exception):
    """Base exception for all tsm errors."""


class ConfigDirUnreadableError(TsmError):
    """Raised when the config directory cannot be opened."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Cannot read config directory: {path}")


class ConfigFileUnreadableError(TsmError):
    """Raised when a session config is missing, unreadable or malformed."""

    def __init__(self, path: Path, reason: str | None = None) -> None:
        self.path = path
        self.reason = reason
        message = f"Cannot read config file: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class SessionNotOpenError(TsmError):
    """Raised when closing a session that is not running."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Session '{name}' is not open")

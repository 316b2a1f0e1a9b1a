from __future__ import annotations

from typing import Optional


class BugsError(Exception):
    """Base error for the Bugs toolchain."""

    def __init__(
        self,
        message: str,
        *,
        line: Optional[int] = None,
        column: Optional[int] = None,
        details: Optional[dict] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.details = details

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"Line {self.line}: {self.message}"


class BugsSyntaxError(BugsError):
    """Fatal diagnostic raised once a committed construct cannot be completed."""


class PushbackError(BugsError):
    pass


class ConfigError(BugsError):
    pass


__all__ = ["BugsError", "BugsSyntaxError", "ConfigError", "PushbackError"]

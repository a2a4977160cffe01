"""Error types raised while compiling a stylesheet."""

from __future__ import annotations


class TachyonsError(Exception):
    """Base error for all tachyons errors."""


class ConfigError(TachyonsError):
    """Raised when compile-time configuration is malformed."""

    def __init__(self, message: str, key: str | None = None):
        self.key = key
        super().__init__(message)

"""
Exceptions raised at the boundaries of the token engine.

Core matching never raises for a miss; these cover inputs that cannot be
read or converted at all.
"""


class TokensError(Exception):
    """Base class for token engine errors."""


class ThemeSourceError(TokensError):
    """A theme source file is missing, unreadable, or not a mapping."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class DesignValueError(TokensError):
    """An incoming design value record cannot be converted to a typed value."""


class ConfigError(TokensError):
    """A tokens configuration file is invalid."""

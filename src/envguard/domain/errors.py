"""Configuration exceptions raised by the access API.

``InvalidConfigurationError`` means *misconfigured* (a value is present but
breaks its rule); ``MissingConfigurationError`` means *not configured*.
"""

from __future__ import annotations


class ConfigurationError(Exception):
    """Base exception for configuration access failures."""

    def __init__(self, key: str, message: str) -> None:
        super().__init__(message)
        self.key = key


class InvalidConfigurationError(ConfigurationError):
    """Raised when a key's value fails validation."""

    def __init__(self, key: str, reason: str, *, constraint: str | None = None) -> None:
        super().__init__(key, f"{key} is not valid: {reason}")
        self.reason = reason
        self.constraint = constraint


class MissingConfigurationError(ConfigurationError):
    """Raised by ``require`` when a key has no value and no default."""

    def __init__(self, key: str) -> None:
        super().__init__(key, f"{key} is not set")

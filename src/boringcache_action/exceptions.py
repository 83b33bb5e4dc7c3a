"""Custom exceptions for boringcache-action."""

from __future__ import annotations

__all__ = [
    "BoringCacheActionError",
    "CacheMissError",
    "ExternalToolError",
    "InvalidEntryFormatError",
    "MissingInputError",
]


class BoringCacheActionError(Exception):
    """Base exception for all boringcache-action errors."""


class InvalidEntryFormatError(BoringCacheActionError):
    """Raised when an entry segment does not match ``tag:path`` or ``tag:restore=>save``."""

    def __init__(self, message: str, entry: str = "") -> None:
        super().__init__(message)
        self.entry = entry


class MissingInputError(BoringCacheActionError):
    """Raised when a required input combination is absent or malformed."""


class CacheMissError(BoringCacheActionError):
    """Raised when no key produced a hit and the caller asked to fail on miss."""

    def __init__(self, message: str, key: str = "") -> None:
        super().__init__(message)
        self.key = key


class ExternalToolError(BoringCacheActionError):
    """Raised when the boringcache CLI cannot be located or executed."""

"""Exception types for SearchPro."""
from __future__ import annotations


class SearchProError(Exception):
    """Base class for SearchPro errors."""


class InvalidConfiguration(SearchProError, ValueError):
    """Raised when a component is constructed with out-of-range settings."""


class DatasetError(SearchProError):
    """Raised when the record dataset cannot be loaded."""

    def __init__(self, message: str, path: object | None = None):
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        base = super().__str__()
        return f"{base} ({self.path})" if self.path else base


__all__ = ["SearchProError", "InvalidConfiguration", "DatasetError"]

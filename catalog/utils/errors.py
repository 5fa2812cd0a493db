"""
Custom Exception Classes
========================

Application-specific exceptions for proper error handling.
"""

from typing import Any


class CatalogError(Exception):
    """Base exception for the catalog core."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(CatalogError):
    """Raised when caller input violates a contract."""

    pass


class DatabaseError(CatalogError):
    """Raised when database operations fail."""

    pass


class ConfigurationError(CatalogError):
    """Raised when configuration is invalid."""

    pass

"""
Utilities
=========

Logging setup and the exception hierarchy.
"""

from catalog.utils.errors import (
    CatalogError,
    ConfigurationError,
    DatabaseError,
    ValidationError,
)
from catalog.utils.logger import configure_logging, get_logger

__all__ = [
    "CatalogError",
    "ConfigurationError",
    "DatabaseError",
    "ValidationError",
    "configure_logging",
    "get_logger",
]

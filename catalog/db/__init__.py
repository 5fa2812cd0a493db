"""Database module."""
from catalog.db.connection import (
    DatabaseManager,
    close_database,
    get_session,
    health_check,
    init_database,
)
from catalog.db.models import Base, Category, CategoryKeyword, ShopeeProduct

__all__ = [
    "Base",
    "Category",
    "CategoryKeyword",
    "ShopeeProduct",
    "DatabaseManager",
    "init_database",
    "close_database",
    "get_session",
    "health_check",
]

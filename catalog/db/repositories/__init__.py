"""
Database Repositories
=====================

Data access layer following repository pattern.

Components:
    - CategoryKeywordsRepository: categories + category_keywords reads/upserts
    - ProductsRepository: CRUD for shopee_products table
"""

from catalog.db.repositories.category_keywords_repo import CategoryKeywordsRepository
from catalog.db.repositories.products_repo import ProductsRepository

__all__ = [
    "CategoryKeywordsRepository",
    "ProductsRepository",
]

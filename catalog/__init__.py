"""
Catalog Core
============

Backend core of the Shopee affiliate catalog.

Features:
- Category and keyword storage (PostgreSQL via SQLAlchemy async)
- Keyword-based automatic product categorization
- Keyword seeding for the default category sets
- Product save workflow with auto-categorization

"""

__version__ = "1.0.0"

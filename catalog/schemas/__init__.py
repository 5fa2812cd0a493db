"""
Schemas
=======

Pydantic models exchanged between repositories and services.
"""

from catalog.schemas.category import CategoryRecord, KeywordRecord, KeywordSnapshot
from catalog.schemas.product import BulkClassificationReport, ProductPayload, SaveResult

__all__ = [
    "CategoryRecord",
    "KeywordRecord",
    "KeywordSnapshot",
    "ProductPayload",
    "SaveResult",
    "BulkClassificationReport",
]

"""Service layer."""
from catalog.services.classification import CategoryClassifier
from catalog.services.keyword_seeder import KeywordSeeder, SeedReport
from catalog.services.product_service import ProductService

__all__ = [
    "CategoryClassifier",
    "KeywordSeeder",
    "SeedReport",
    "ProductService",
]

"""Product classification service.

This module provides automatic product categorization using:
- Category names and the words inside them
- Keywords registered per category (with high-priority flags)

Key Components:
    - CategoryClassifier: Keyword-scoring classifier
    - KeywordStore: Read interface for categories and keywords
"""
from catalog.services.classification.classifier import (
    CategoryClassifier,
    CategoryScore,
    classify_snapshot,
    score_category,
)
from catalog.services.classification.keyword_store import (
    CachingKeywordStore,
    DatabaseKeywordStore,
    InMemoryKeywordStore,
    KeywordStore,
    load_snapshot,
)

__all__ = [
    "CategoryClassifier",
    "CategoryScore",
    "classify_snapshot",
    "score_category",
    "KeywordStore",
    "InMemoryKeywordStore",
    "DatabaseKeywordStore",
    "CachingKeywordStore",
    "load_snapshot",
]

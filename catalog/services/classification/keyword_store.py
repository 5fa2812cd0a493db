"""Keyword stores feeding the category classifier.

A keyword store answers two reads: the active categories and the
keywords registered under them. The classifier never writes.

Implementations:
    - InMemoryKeywordStore: plain python data (tests, fixtures)
    - DatabaseKeywordStore: PostgreSQL through CategoryKeywordsRepository
    - CachingKeywordStore: TTL cache in front of another store
"""
import asyncio
import time
from contextlib import AbstractAsyncContextManager
from typing import Callable, Iterable, Optional, Protocol, Sequence, runtime_checkable

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.db.connection import get_session
from catalog.db.repositories.category_keywords_repo import CategoryKeywordsRepository
from catalog.schemas.category import CategoryRecord, KeywordRecord, KeywordSnapshot
from catalog.utils.logger import get_logger

logger = get_logger(__name__)

SessionFactory = Callable[[], AbstractAsyncContextManager[AsyncSession]]


@runtime_checkable
class KeywordStore(Protocol):
    """Read interface the classifier depends on."""

    async def list_active_categories(self) -> Sequence[CategoryRecord]:
        ...

    async def list_keywords_for_active_categories(self) -> Sequence[KeywordRecord]:
        ...


async def load_snapshot(store: KeywordStore) -> KeywordSnapshot:
    """Fetch categories and keywords concurrently and join them.

    Errors from the store propagate; the classifier decides how to
    degrade.
    """
    categories, keywords = await asyncio.gather(
        store.list_active_categories(),
        store.list_keywords_for_active_categories(),
    )
    return KeywordSnapshot(categories=tuple(categories), keywords=tuple(keywords))


class InMemoryKeywordStore:
    """Keyword store over in-process data.

    Example:
        store = InMemoryKeywordStore.from_mapping({
            (1, "Fashion"): ["shirt", ("เสื้อ", True)],
        })
    """

    def __init__(
        self,
        categories: Iterable[tuple[int, str, bool]] = (),
        keywords: Iterable[KeywordRecord] = (),
    ):
        """Initialize store.

        Args:
            categories: (id, name, is_active) triples
            keywords: Keyword rows, possibly for inactive categories
        """
        self._categories: dict[int, tuple[str, bool]] = {}
        self._keywords: list[KeywordRecord] = []
        for category_id, name, is_active in categories:
            self.add_category(category_id, name, is_active=is_active)
        for row in keywords:
            self.add_keyword(row.category_id, row.keyword, row.is_high_priority)

    @classmethod
    def from_mapping(
        cls,
        mapping: dict[tuple[int, str], list],
        inactive: Iterable[int] = (),
    ) -> "InMemoryKeywordStore":
        """Build a store from {(id, name): [keyword | (keyword, high_priority)]}."""
        inactive_ids = set(inactive)
        store = cls()
        for (category_id, name), keywords in mapping.items():
            store.add_category(category_id, name, is_active=category_id not in inactive_ids)
            for entry in keywords:
                if isinstance(entry, tuple):
                    store.add_keyword(category_id, entry[0], entry[1])
                else:
                    store.add_keyword(category_id, entry)
        return store

    def add_category(self, category_id: int, name: str, is_active: bool = True) -> None:
        self._categories[category_id] = (name, is_active)

    def set_active(self, category_id: int, is_active: bool) -> None:
        name, _ = self._categories[category_id]
        self._categories[category_id] = (name, is_active)

    def add_keyword(self, category_id: int, keyword: str, is_high_priority: bool = False) -> None:
        """Register a keyword; re-registering updates its priority."""
        if category_id not in self._categories:
            raise KeyError(f"Unknown category {category_id}")
        row = KeywordRecord(
            category_id=category_id,
            keyword=keyword,
            is_high_priority=is_high_priority,
        )
        for i, existing in enumerate(self._keywords):
            if existing.category_id == category_id and existing.keyword == keyword:
                self._keywords[i] = row
                return
        self._keywords.append(row)

    async def list_active_categories(self) -> list[CategoryRecord]:
        return [
            CategoryRecord(id=category_id, name=name)
            for category_id, (name, is_active) in sorted(self._categories.items())
            if is_active
        ]

    async def list_keywords_for_active_categories(self) -> list[KeywordRecord]:
        return [row for row in self._keywords if self._categories[row.category_id][1]]


class DatabaseKeywordStore:
    """Keyword store backed by the categories/category_keywords tables.

    Each read opens its own session so both reads can run concurrently.
    """

    def __init__(self, session_factory: SessionFactory = get_session):
        """Initialize store.

        Args:
            session_factory: Callable returning an async session context
                manager; defaults to the initialized DatabaseManager
        """
        self._session_factory = session_factory

    async def list_active_categories(self) -> list[CategoryRecord]:
        async with self._session_factory() as session:
            return await CategoryKeywordsRepository(session).list_active_categories()

    async def list_keywords_for_active_categories(self) -> list[KeywordRecord]:
        async with self._session_factory() as session:
            return await CategoryKeywordsRepository(session).list_active_keywords()


class CachingKeywordStore:
    """Serves a cached snapshot of another store for a limited time.

    Bulk jobs classify thousands of names; re-reading the keyword table
    for each one is wasted work. Call invalidate() after categories or
    keywords change.
    """

    def __init__(
        self,
        inner: KeywordStore,
        ttl_seconds: float = 300.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._inner = inner
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._snapshot: Optional[KeywordSnapshot] = None
        self._loaded_at = 0.0
        self._lock = asyncio.Lock()

    def invalidate(self) -> None:
        self._snapshot = None

    async def snapshot(self) -> KeywordSnapshot:
        async with self._lock:
            now = self._clock()
            if self._snapshot is None or now - self._loaded_at >= self.ttl_seconds:
                self._snapshot = await load_snapshot(self._inner)
                self._loaded_at = now
                logger.debug(
                    "Keyword snapshot refreshed",
                    categories=len(self._snapshot.categories),
                    keywords=len(self._snapshot.keywords),
                )
            return self._snapshot

    async def list_active_categories(self) -> tuple[CategoryRecord, ...]:
        return (await self.snapshot()).categories

    async def list_keywords_for_active_categories(self) -> tuple[KeywordRecord, ...]:
        return (await self.snapshot()).keywords

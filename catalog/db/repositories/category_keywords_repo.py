"""
Category Keywords Repository
============================

Data access layer for the categories and category_keywords tables.
Supplies the keyword universe consumed by the category classifier
and the upserts used by keyword seeding.

Follows Repository Pattern: Abstracts database operations.
"""

from sqlalchemy import delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.db.models import Category, CategoryKeyword
from catalog.schemas.category import CategoryRecord, KeywordRecord
from catalog.utils.logger import get_logger

logger = get_logger(__name__)


class CategoryKeywordsRepository:
    """
    Repository for category keyword operations.

    Table Schema:
        categories: id (PK), name (unique), is_active
        category_keywords: id (PK), category_id (FK → categories, cascade),
            keyword, is_high_priority, unique (category_id, keyword)
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with async session.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session

    async def list_active_categories(self) -> list[CategoryRecord]:
        """
        Get all active categories ordered by ID.

        Returns:
            List of CategoryRecord
        """
        query = (
            select(Category.id, Category.name)
            .where(Category.is_active == True)  # noqa: E712
            .order_by(Category.id)
        )
        result = await self._session.execute(query)
        return [CategoryRecord(id=row.id, name=row.name) for row in result.all()]

    async def list_active_keywords(self) -> list[KeywordRecord]:
        """
        Get every keyword whose owning category is active.

        Rows are ordered by category, high-priority first, then keyword.
        """
        query = (
            select(
                CategoryKeyword.category_id,
                CategoryKeyword.keyword,
                CategoryKeyword.is_high_priority,
            )
            .join(Category, CategoryKeyword.category_id == Category.id)
            .where(Category.is_active == True)  # noqa: E712
            .order_by(
                CategoryKeyword.category_id,
                CategoryKeyword.is_high_priority.desc(),
                CategoryKeyword.keyword,
            )
        )
        result = await self._session.execute(query)
        return [
            KeywordRecord(
                category_id=row.category_id,
                keyword=row.keyword,
                is_high_priority=row.is_high_priority,
            )
            for row in result.all()
        ]

    async def list_for_category(self, category_id: int) -> list[KeywordRecord]:
        """Get the keywords registered for one category."""
        query = (
            select(CategoryKeyword)
            .where(CategoryKeyword.category_id == category_id)
            .order_by(CategoryKeyword.is_high_priority.desc(), CategoryKeyword.keyword)
        )
        result = await self._session.execute(query)
        return [KeywordRecord.model_validate(row) for row in result.scalars().all()]

    async def count_for_category(self, category_id: int) -> int:
        """Count the keywords registered for one category."""
        query = select(func.count()).select_from(CategoryKeyword).where(
            CategoryKeyword.category_id == category_id
        )
        result = await self._session.execute(query)
        return int(result.scalar_one())

    async def upsert_keyword(
        self,
        category_id: int,
        keyword: str,
        is_high_priority: bool = False,
    ) -> None:
        """
        Register a keyword, or update its priority if already registered.

        Args:
            category_id: Owning category
            keyword: Keyword text (stored trimmed)
            is_high_priority: High-priority flag
        """
        stmt = insert(CategoryKeyword).values(
            category_id=category_id,
            keyword=keyword.strip(),
            is_high_priority=is_high_priority,
        )
        stmt = stmt.on_conflict_do_update(
            constraint="uq_category_keyword",
            set_={
                "is_high_priority": stmt.excluded.is_high_priority,
                "updated_at": func.now(),
            },
        )
        await self._session.execute(stmt)

    async def delete_keyword(self, category_id: int, keyword: str) -> bool:
        """
        Remove a keyword from a category.

        Returns:
            True if a row was deleted
        """
        stmt = delete(CategoryKeyword).where(
            CategoryKeyword.category_id == category_id,
            CategoryKeyword.keyword == keyword.strip(),
        )
        result = await self._session.execute(stmt)
        deleted = (result.rowcount or 0) > 0
        logger.debug(
            "Category keyword delete",
            category_id=category_id,
            keyword=keyword,
            deleted=deleted,
        )
        return deleted

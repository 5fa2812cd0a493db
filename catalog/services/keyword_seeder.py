"""
Category Keyword Seeder
=======================

Bulk-registers the default keyword sets for every active category whose
name matches one of them. Re-running is safe: existing keywords only get
their high-priority flag refreshed.
"""

from dataclasses import dataclass, field

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.db.repositories.category_keywords_repo import CategoryKeywordsRepository
from catalog.services.keyword_sets import DEFAULT_KEYWORD_SETS, KeywordSet, match_keyword_set
from catalog.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class SeedReport:
    """Outcome of a seeding run."""

    inserted: dict[str, int] = field(default_factory=dict)
    failed: int = 0
    unmatched_categories: list[str] = field(default_factory=list)

    @property
    def total_keywords(self) -> int:
        return sum(self.inserted.values())


class KeywordSeeder:
    """
    Seeds category_keywords from keyword sets.

    Example:
        async with get_session() as session:
            report = await KeywordSeeder(session).seed()
            print(report.total_keywords)
    """

    def __init__(
        self,
        session: AsyncSession,
        keyword_sets: tuple[KeywordSet, ...] = DEFAULT_KEYWORD_SETS,
    ) -> None:
        self._repo = CategoryKeywordsRepository(session)
        self._session = session
        self.keyword_sets = keyword_sets

    async def plan(self) -> dict[str, KeywordSet | None]:
        """Map each active category name to the keyword set it would receive."""
        categories = await self._repo.list_active_categories()
        return {c.name: match_keyword_set(c.name, self.keyword_sets) for c in categories}

    async def seed(self) -> SeedReport:
        """
        Upsert keywords for all active categories.

        A keyword that fails to insert is logged and counted; the run
        continues with the next one.
        """
        report = SeedReport()
        categories = await self._repo.list_active_categories()

        if not categories:
            logger.warning("No active categories found, nothing to seed")
            return report

        logger.info("Seeding category keywords", categories=len(categories))

        for category in categories:
            keyword_set = match_keyword_set(category.name, self.keyword_sets)
            if keyword_set is None:
                report.unmatched_categories.append(category.name)
                logger.warning("No keyword set for category", category=category.name)
                continue

            count = 0
            for keyword, is_high_priority in keyword_set.entries():
                try:
                    async with self._session.begin_nested():
                        await self._repo.upsert_keyword(category.id, keyword, is_high_priority)
                    count += 1
                except Exception as e:
                    report.failed += 1
                    logger.error(
                        "Failed to insert keyword",
                        category=category.name,
                        keyword=keyword,
                        error=str(e),
                    )

            report.inserted[category.name] = count
            logger.info(
                "Seeded keywords for category",
                category=category.name,
                keyword_set=keyword_set.key,
                keywords=count,
            )

        logger.info(
            "Keyword seeding completed",
            total=report.total_keywords,
            failed=report.failed,
            unmatched=len(report.unmatched_categories),
        )
        return report

"""
Product Service
===============

Saves Shopee listings and auto-categorizes the ones saved without a
category. A product the classifier cannot place is saved uncategorized;
classification never blocks a save.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.db.repositories.products_repo import ProductsRepository
from catalog.schemas.product import BulkClassificationReport, ProductPayload, SaveResult
from catalog.services.classification.classifier import CategoryClassifier
from catalog.utils.logger import get_logger

logger = get_logger(__name__)


class ProductService:
    """
    Product save and bulk categorization workflow.

    Example:
        async with get_session() as session:
            service = ProductService(session, CategoryClassifier(DatabaseKeywordStore()))
            result = await service.save_product(ProductPayload(item_id="1", product_name="..."))
    """

    def __init__(self, session: AsyncSession, classifier: CategoryClassifier) -> None:
        self._repo = ProductsRepository(session)
        self.classifier = classifier

    async def save_product(self, payload: ProductPayload) -> SaveResult:
        """
        Insert or update a product, classifying it when no category is given.

        Args:
            payload: Validated listing data

        Returns:
            SaveResult with the stored category and whether the row was new
        """
        category_id = payload.category_id
        auto_classified = False

        if category_id is None:
            logger.debug("Analyzing category for product", product=payload.product_name[:50])
            category_id = await self.classifier.classify(payload.product_name)
            if category_id is None:
                logger.info(
                    "No matching category found, product will be uncategorized",
                    item_id=payload.item_id,
                )
            else:
                auto_classified = True
                logger.info(
                    "Auto-assigned category",
                    item_id=payload.item_id,
                    category_id=category_id,
                )

        existing = await self._repo.get_by_item_id(payload.item_id)

        values = payload.model_dump()
        values["category_id"] = category_id
        await self._repo.upsert(values)

        action = "updated" if existing is not None else "inserted"
        logger.info(
            "Product saved",
            item_id=payload.item_id,
            action=action,
            source=payload.source,
        )
        return SaveResult(
            item_id=payload.item_id,
            category_id=category_id,
            action=action,
            auto_classified=auto_classified,
        )

    async def classify_unassigned(
        self, limit: int = 200, after_id: int = 0
    ) -> BulkClassificationReport:
        """
        Categorize active products that have no category.

        One keyword snapshot is read for the whole batch.

        Args:
            limit: Maximum products to process in this run
            after_id: Resume after this product ID (see report.last_id)
        """
        report = BulkClassificationReport(last_id=after_id)
        products = await self._repo.list_uncategorized(limit=limit, after_id=after_id)
        if not products:
            return report

        snapshot = await self.classifier.load_snapshot()

        for product in products:
            report.scanned += 1
            report.last_id = product.id
            if not product.product_name or not product.product_name.strip():
                report.unmatched += 1
                continue

            category_id = self.classifier.classify_with(snapshot, product.product_name)
            if category_id is None:
                report.unmatched += 1
                continue

            await self._repo.assign_category(product.item_id, category_id)
            report.assigned += 1
            report.assignments[product.item_id] = category_id

        logger.info(
            "Bulk classification completed",
            scanned=report.scanned,
            assigned=report.assigned,
            unmatched=report.unmatched,
        )
        return report

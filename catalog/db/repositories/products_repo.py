"""
Products Repository
===================

Data access layer for the shopee_products table.

Follows Repository Pattern: Abstracts database operations.
"""

from typing import Any

from sqlalchemy import func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.db.models import ShopeeProduct
from catalog.utils.logger import get_logger

logger = get_logger(__name__)

# Columns refreshed when an existing item_id is saved again
_UPSERT_COLUMNS = (
    "product_name",
    "shop_name",
    "shop_id",
    "price",
    "price_min",
    "price_max",
    "commission_rate",
    "seller_commission_rate",
    "shopee_commission_rate",
    "commission_amount",
    "image_url",
    "product_link",
    "offer_link",
    "rating_star",
    "sales_count",
    "discount_rate",
    "period_start_time",
    "period_end_time",
    "campaign_active",
    "category_id",
    "is_flash_sale",
    "source",
)


class ProductsRepository:
    """
    Repository for shopee_products table operations.

    Products are keyed by Shopee's item_id; saving the same item again
    refreshes its listing data and reactivates it.
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with async session.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session

    async def get_by_item_id(self, item_id: str) -> ShopeeProduct | None:
        """Get a product by its Shopee item ID."""
        query = select(ShopeeProduct).where(ShopeeProduct.item_id == item_id)
        result = await self._session.execute(query)
        return result.scalar_one_or_none()

    async def upsert(self, values: dict[str, Any]) -> None:
        """
        Insert a product or refresh the existing row with the same item_id.

        Args:
            values: Column values; must include item_id and product_name
        """
        stmt = insert(ShopeeProduct).values(**values, status="active")
        stmt = stmt.on_conflict_do_update(
            index_elements=[ShopeeProduct.item_id],
            set_={
                **{col: stmt.excluded[col] for col in _UPSERT_COLUMNS if col in values},
                "status": "active",
                "updated_at": func.now(),
            },
        )
        await self._session.execute(stmt)
        logger.debug(
            "Product upserted",
            item_id=values.get("item_id"),
            category_id=values.get("category_id"),
        )

    async def list_uncategorized(
        self, limit: int = 200, after_id: int = 0
    ) -> list[ShopeeProduct]:
        """
        Get active products that have no category.

        Args:
            limit: Maximum rows to return
            after_id: Only rows with a larger ID (keyset pagination)

        Returns:
            Products ordered by ID
        """
        query = (
            select(ShopeeProduct)
            .where(
                ShopeeProduct.category_id.is_(None),
                ShopeeProduct.status == "active",
                ShopeeProduct.id > after_id,
            )
            .order_by(ShopeeProduct.id)
            .limit(limit)
        )
        result = await self._session.execute(query)
        return list(result.scalars().all())

    async def assign_category(self, item_id: str, category_id: int | None) -> bool:
        """
        Set (or clear) a product's category.

        Returns:
            True if a product was updated
        """
        stmt = (
            update(ShopeeProduct)
            .where(ShopeeProduct.item_id == item_id)
            .values(category_id=category_id, updated_at=func.now())
        )
        result = await self._session.execute(stmt)
        return (result.rowcount or 0) > 0

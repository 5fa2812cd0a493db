"""
SQLAlchemy ORM Models for the Catalog Core
==========================================

Defines the categories, their classification keywords and the
Shopee product listings that get categorized.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import (
    BigInteger,
    Boolean,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class IntPKMixin:
    """Mixin for integer primary key."""

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        nullable=False,
    )


class TimestampMixin:
    """Mixin for created_at and updated_at timestamps."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class Category(Base, IntPKMixin, TimestampMixin):
    """
    Product category curated by an administrator.

    Inactive categories stay in the table (products may still reference
    them) but are ignored by classification.
    """

    __tablename__ = "categories"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        server_default="true",
        default=True,
        index=True,
        doc="Inactive categories are excluded from classification",
    )

    keywords: Mapped[list["CategoryKeyword"]] = relationship(
        back_populates="category",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    products: Mapped[list["ShopeeProduct"]] = relationship(
        back_populates="category",
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<Category(id={self.id}, name='{self.name}', is_active={self.is_active})>"


class CategoryKeyword(Base, IntPKMixin, TimestampMixin):
    """
    Keyword evidence for auto-categorizing products into a category.

    Constraints:
        - Unique constraint on (category_id, keyword)
    """

    __tablename__ = "category_keywords"
    __table_args__ = (
        UniqueConstraint("category_id", "keyword", name="uq_category_keyword"),
    )

    category_id: Mapped[int] = mapped_column(
        ForeignKey("categories.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    keyword: Mapped[str] = mapped_column(String(255), nullable=False)
    is_high_priority: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        server_default="false",
        default=False,
    )

    category: Mapped["Category"] = relationship(back_populates="keywords")

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<CategoryKeyword(category_id={self.category_id}, "
            f"keyword='{self.keyword}', high_priority={self.is_high_priority})>"
        )


class ShopeeProduct(Base, IntPKMixin, TimestampMixin):
    """
    Shopee marketplace listing saved for the affiliate storefront.

    Rates are stored as fractions (0.1 = 10%).
    """

    __tablename__ = "shopee_products"

    item_id: Mapped[str] = mapped_column(String(50), nullable=False, unique=True, index=True)
    category_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    product_name: Mapped[str] = mapped_column(Text, nullable=False)
    shop_name: Mapped[Optional[str]] = mapped_column(String(255))
    shop_id: Mapped[Optional[str]] = mapped_column(String(50))

    price: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2))
    price_min: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2))
    price_max: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2))
    commission_rate: Mapped[Optional[Decimal]] = mapped_column(Numeric(5, 4))
    seller_commission_rate: Mapped[Optional[Decimal]] = mapped_column(Numeric(5, 4))
    shopee_commission_rate: Mapped[Optional[Decimal]] = mapped_column(Numeric(5, 4))
    commission_amount: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2))

    image_url: Mapped[Optional[str]] = mapped_column(Text)
    product_link: Mapped[Optional[str]] = mapped_column(Text)
    offer_link: Mapped[Optional[str]] = mapped_column(Text)

    rating_star: Mapped[Optional[Decimal]] = mapped_column(Numeric(2, 1))
    sales_count: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0", default=0)
    discount_rate: Mapped[Optional[Decimal]] = mapped_column(Numeric(5, 2))

    period_start_time: Mapped[Optional[int]] = mapped_column(BigInteger)
    period_end_time: Mapped[Optional[int]] = mapped_column(BigInteger)
    campaign_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default="true", default=True
    )
    is_flash_sale: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default="false", default=False
    )

    status: Mapped[str] = mapped_column(
        String(20), nullable=False, server_default="active", default="active", index=True
    )
    source: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        server_default="backend",
        default="backend",
        doc="frontend or backend",
    )

    category: Mapped[Optional["Category"]] = relationship(back_populates="products")

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<ShopeeProduct(item_id='{self.item_id}', "
            f"category_id={self.category_id}, status={self.status})>"
        )

"""
Product Schemas
===============

Input and result models for the product save workflow.
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator


class ProductPayload(BaseModel):
    """
    Shopee listing submitted for saving.

    Rates arrive as fractions (0.1 = 10%). Storefront submissions may send
    commission_rate as a percentage; values above 1 are converted.
    """

    item_id: str = Field(..., min_length=1, max_length=50, description="Shopee item ID")
    product_name: str = Field(..., min_length=1, description="Listing title")
    shop_name: str = ""
    shop_id: str = ""
    price: float = 0.0
    price_min: float | None = None
    price_max: float | None = None
    commission_rate: float = 0.0
    seller_commission_rate: float = 0.0
    shopee_commission_rate: float = 0.0
    commission_amount: float = 0.0
    image_url: str = ""
    product_link: str = ""
    offer_link: str = ""
    rating_star: float = 0.0
    sales_count: int = Field(default=0, ge=0)
    discount_rate: float = 0.0
    period_start_time: int = 0
    period_end_time: int = 0
    campaign_active: bool = False
    is_flash_sale: bool = False
    category_id: int | None = Field(default=None, description="Explicit category, skips auto-classification")
    source: Literal["backend", "frontend"] = "backend"

    @field_validator("item_id", "product_name", mode="before")
    @classmethod
    def strip_required_text(cls, v: object) -> object:
        if isinstance(v, int) and not isinstance(v, bool):
            v = str(v)
        if isinstance(v, str):
            v = v.strip()
        return v

    @field_validator(
        "price",
        "commission_rate",
        "seller_commission_rate",
        "shopee_commission_rate",
        "commission_amount",
        "rating_star",
        "sales_count",
        "discount_rate",
        "period_start_time",
        "period_end_time",
        mode="before",
    )
    @classmethod
    def blank_number_is_zero(cls, v: object) -> object:
        if v is None or (isinstance(v, str) and not v.strip()):
            return 0
        return v

    @field_validator("price_min", "price_max", mode="before")
    @classmethod
    def blank_bound_is_none(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("category_id", mode="before")
    @classmethod
    def falsy_category_is_none(cls, v: object) -> object:
        """Treat 0 / "" as "not chosen"."""
        if v in (0, "", "0"):
            return None
        return v

    @model_validator(mode="after")
    def normalize_frontend_commission(self) -> "ProductPayload":
        if self.source == "frontend" and self.commission_rate > 1:
            self.commission_rate = self.commission_rate / 100
        return self


class SaveResult(BaseModel):
    """Outcome of saving a product."""

    item_id: str
    category_id: int | None
    action: Literal["inserted", "updated"]
    auto_classified: bool = False


class BulkClassificationReport(BaseModel):
    """Outcome of classifying a batch of uncategorized products."""

    scanned: int = 0
    assigned: int = 0
    unmatched: int = 0
    last_id: int = 0
    assignments: dict[str, int] = Field(default_factory=dict)

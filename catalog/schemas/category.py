"""
Category Schemas for Keyword Classification
===========================================

Read models handed from the keyword store to the category classifier.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CategoryRecord(BaseModel):
    """
    An active category as seen by the classifier.

    Attributes:
        id: Category primary key
        name: Human-readable, unique category name
    """

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: int = Field(..., description="Category ID")
    name: str = Field(..., min_length=1, description="Category name")


class KeywordRecord(BaseModel):
    """
    One (category, keyword) row of the keyword table.

    Attributes:
        category_id: Owning category
        keyword: Keyword text, matched case-insensitively
        is_high_priority: Extra scoring weight when matched
    """

    model_config = ConfigDict(frozen=True, from_attributes=True)

    category_id: int = Field(..., description="Owning category ID")
    keyword: str = Field(..., min_length=1, max_length=255, description="Keyword text")
    is_high_priority: bool = Field(default=False, description="High-priority flag")

    @field_validator("keyword")
    @classmethod
    def keyword_not_blank(cls, v: str) -> str:
        """Reject whitespace-only keywords."""
        if not v.strip():
            raise ValueError("keyword must not be blank")
        return v


class KeywordSnapshot(BaseModel):
    """
    Joined read of active categories and their keywords.

    Keyword rows whose category is not in `categories` are ignored by
    the classifier.
    """

    model_config = ConfigDict(frozen=True)

    categories: tuple[CategoryRecord, ...] = Field(default_factory=tuple)
    keywords: tuple[KeywordRecord, ...] = Field(default_factory=tuple)

    @classmethod
    def empty(cls) -> "KeywordSnapshot":
        """Snapshot used when no categories are available."""
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.categories

    def keywords_by_category(self) -> dict[int, list[KeywordRecord]]:
        """Group keyword rows by category, keeping store order."""
        grouped: dict[int, list[KeywordRecord]] = {c.id: [] for c in self.categories}
        for row in self.keywords:
            if row.category_id in grouped:
                grouped[row.category_id].append(row)
        return grouped

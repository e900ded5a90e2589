"""
==============================================================================
Catalog Models Module
==============================================================================

Pydantic models for catalog records and queries.

Records handed out by the stores are frozen, so callers can never mutate
store-owned state through them.

==============================================================================
"""

import enum
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class StockStatus(str, enum.Enum):
    """
    Stock availability of a product.

    The enum inherits from str to enable JSON serialization.
    """

    IN_STOCK = "In Stock"
    LOW_STOCK = "Low Stock"
    OUT_OF_STOCK = "Out of Stock"

    def __str__(self) -> str:
        """Return the enum value as string."""
        return self.value


class ProductInput(BaseModel):
    """
    Validated, normalized product payload ready for insertion.

    Produced only by ProductValidator; the stores trust it as-is.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, max_length=100)
    price: float = Field(..., gt=0)
    category: str = Field(..., min_length=1)
    stock_status: StockStatus


class Product(ProductInput):
    """
    Stored product record.

    Attributes:
        id: Sequential identifier assigned by the store (starts at 1)
        name: Display name, 1-100 characters
        price: Positive price
        category: Category label (exact-match filter key)
        stock_status: Stock availability
        created_at: Insertion timestamp
    """

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: int = Field(..., ge=1)
    created_at: datetime


class UserInput(BaseModel):
    """Validated user payload."""

    model_config = ConfigDict(frozen=True)

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class User(UserInput):
    """Stored user record with an opaque identifier."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: str


class ProductQuery(BaseModel):
    """
    Filter and pagination request for the product listing.

    Attributes:
        category: Exact category; None, empty or "all" disables the filter
        search: Case-insensitive substring of name or category
        limit: Page size; None returns every matching record
        offset: Records to skip; None starts at the first record
    """

    model_config = ConfigDict(frozen=True)

    category: Optional[str] = None
    search: Optional[str] = None
    limit: Optional[int] = Field(default=None, ge=0)
    offset: Optional[int] = Field(default=None, ge=0)


class QueryResult(BaseModel):
    """One page of products plus the total number of matches."""

    items: List[Product]
    total: int = Field(ge=0)

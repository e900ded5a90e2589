"""
==============================================================================
Product Schemas Module
==============================================================================

Response schemas for the product endpoints. Creation payloads are taken
as raw JSON and checked by ProductValidator, so there is no request schema.

==============================================================================
"""

from typing import List
from pydantic import BaseModel, Field

from storefront.catalog.models import Product


class ProductListResponse(BaseModel):
    """One page of products plus the total number of matches."""
    items: List[Product]
    total: int = Field(ge=0)


class CategoryListResponse(BaseModel):
    """Categories present in the catalog, alphabetically."""
    categories: List[str]

"""
==============================================================================
Catalog View Endpoint
==============================================================================

Page-number view used by the browsing UI: display-ready products, page
count, the category list and the empty-state message in one response.

==============================================================================
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query

from storefront.catalog.presentation import CatalogPage
from storefront.config import get_settings
from storefront.core.dependencies import get_product_service
from storefront.services.product_service import ProductService


router = APIRouter(prefix="/catalog", tags=["Catalog"])


@router.get("", response_model=CatalogPage)
async def browse_catalog(
    category: Optional[str] = Query("all"),
    search: Optional[str] = Query(""),
    page: int = Query(1, ge=1),
    page_size: Optional[int] = Query(None, ge=1),
    service: ProductService = Depends(get_product_service)
):
    """Browse the catalog one page at a time."""
    settings = get_settings()
    size = min(page_size or settings.default_page_size, settings.max_page_size)
    return service.browse(category, search, page, size)

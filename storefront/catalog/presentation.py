"""
==============================================================================
Presentation Adapter
==============================================================================

Maps stored products to the shape the browsing UI renders: an image
reference, a formatted price and a stock badge variant. Also builds the
page-number view of the catalog.

==============================================================================
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .models import Product, StockStatus
from .query import category_filter, search_filter


# Artwork shipped for the sample catalog, keyed by product name
PRODUCT_IMAGES: Dict[str, str] = {
    "Wireless Bluetooth Speaker": "wireless-bluetooth-speaker.png",
    "Premium Leather Laptop Bag": "premium-leather-laptop-bag.png",
    "Insulated Water Bottle": "insulated-water-bottle.png",
    "Wireless Ergonomic Mouse": "wireless-ergonomic-mouse.png",
    "Modern Desk Lamp": "modern-desk-lamp.png",
    "Smart Fitness Tracker": "smart-fitness-tracker.png",
}

STOCK_BADGES: Dict[StockStatus, str] = {
    StockStatus.IN_STOCK: "default",
    StockStatus.LOW_STOCK: "secondary",
    StockStatus.OUT_OF_STOCK: "destructive",
}

FILTERED_EMPTY_MESSAGE = "No products match your filters. Try adjusting your search or category."
EMPTY_CATALOG_MESSAGE = "No products yet. Add your first product to get started."


class ProductView(Product):
    """Product with display-only fields attached."""

    image: Optional[str] = None
    price_display: str
    stock_badge: str


class CatalogPage(BaseModel):
    """Page-number view of the catalog."""

    items: List[ProductView]
    total: int = Field(ge=0)
    page: int = Field(ge=1)
    page_size: int = Field(ge=1)
    pages: int = Field(ge=0)
    categories: List[str]
    empty_message: Optional[str] = None


class PresentationAdapter:
    """
    Builds display-ready views from stored records.

    Example:
        >>> adapter = PresentationAdapter("/static/images")
        >>> adapter.to_view(product).price_display
        '$79.99'
    """

    def __init__(self, image_base_url: str = "") -> None:
        self._image_base_url = image_base_url.rstrip("/")

    def image_for(self, product: Product) -> Optional[str]:
        filename = PRODUCT_IMAGES.get(product.name)
        if filename is None:
            return None
        return f"{self._image_base_url}/{filename}"

    def to_view(self, product: Product) -> ProductView:
        return ProductView(
            **product.model_dump(),
            image=self.image_for(product),
            price_display=f"${product.price:.2f}",
            stock_badge=STOCK_BADGES[product.stock_status],
        )

    @staticmethod
    def empty_message(category: Optional[str], search: Optional[str]) -> str:
        """Message shown when a page has no products."""
        if category_filter(category) is not None or search_filter(search) is not None:
            return FILTERED_EMPTY_MESSAGE
        return EMPTY_CATALOG_MESSAGE

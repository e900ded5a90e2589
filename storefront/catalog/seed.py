"""
==============================================================================
Sample Catalog
==============================================================================

Twelve sample products used to populate an empty store on startup.

Seeding goes through ProductValidator and the store's regular create path,
so sample records obey the same constraints and id sequence as any other.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import List

from .models import Product
from .storage import RecordStore
from .validator import ProductValidator


# Module logger
logger = logging.getLogger(__name__)


SAMPLE_PRODUCTS = [
    {"name": "Wireless Bluetooth Speaker", "price": 79.99, "category": "Electronics", "stock_status": "In Stock"},
    {"name": "Premium Leather Laptop Bag", "price": 129.99, "category": "Accessories", "stock_status": "In Stock"},
    {"name": "Insulated Water Bottle", "price": 24.99, "category": "Home & Living", "stock_status": "Low Stock"},
    {"name": "Wireless Ergonomic Mouse", "price": 49.99, "category": "Electronics", "stock_status": "In Stock"},
    {"name": "Modern Desk Lamp", "price": 89.99, "category": "Home & Living", "stock_status": "In Stock"},
    {"name": "Smart Fitness Tracker", "price": 149.99, "category": "Sports & Fitness", "stock_status": "Out of Stock"},
    {"name": "Noise Cancelling Headphones", "price": 199.99, "category": "Electronics", "stock_status": "In Stock"},
    {"name": "Portable Phone Charger", "price": 39.99, "category": "Electronics", "stock_status": "Low Stock"},
    {"name": "Yoga Mat Pro", "price": 59.99, "category": "Sports & Fitness", "stock_status": "In Stock"},
    {"name": "Stainless Steel Coffee Mug", "price": 19.99, "category": "Home & Living", "stock_status": "In Stock"},
    {"name": "Wireless Keyboard", "price": 69.99, "category": "Electronics", "stock_status": "In Stock"},
    {"name": "Running Shoes", "price": 119.99, "category": "Sports & Fitness", "stock_status": "Low Stock"},
]


def seed_products(store: RecordStore, force: bool = False) -> List[Product]:
    """
    Insert the sample catalog.

    Args:
        store: Target record store
        force: Seed even if the store already holds products

    Returns:
        Products created (empty when seeding was skipped)
    """
    if not force and store.count_products() > 0:
        logger.info("Store already holds products, skipping sample seed")
        return []

    validator = ProductValidator()
    created = [store.create_product(validator.validate(item)) for item in SAMPLE_PRODUCTS]

    logger.info(f"✅ Seeded {len(created)} sample products")
    return created

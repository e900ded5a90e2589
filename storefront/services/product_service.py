"""
==============================================================================
Product Service Module
==============================================================================

Business logic for browsing and creating products.

    ┌─────────────────┐
    │   API Router    │
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │ ProductService  │  ← validation, logging, error translation
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │   RecordStore   │  ← identity assignment, query pipeline
    └─────────────────┘

Store failures that are not AppExceptions are logged with their traceback
and re-raised as UnexpectedError; nothing is retried here.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from storefront.catalog.models import Product, ProductQuery, QueryResult
from storefront.catalog.presentation import CatalogPage, PresentationAdapter
from storefront.catalog.query import page_count, page_to_offset
from storefront.catalog.storage import RecordStore
from storefront.catalog.validator import ProductValidator
from storefront.core import exceptions
from storefront.core.exceptions import AppException


# Module logger
logger = logging.getLogger(__name__)


class ProductService:
    """
    Product catalog service.

    Attributes:
        _store: Record store owning the products
        _validator: Creation validator
        _presenter: Presentation adapter for the catalog view

    Example:
        >>> service = ProductService(MemoryRecordStore())
        >>> product = service.create_product({
        ...     "name": "Yoga Mat Pro",
        ...     "price": "59.99",
        ...     "category": "Sports & Fitness",
        ...     "stock_status": "In Stock",
        ... })
        >>> service.get_product(product.id) == product
        True
    """

    def __init__(
        self,
        store: RecordStore,
        validator: Optional[ProductValidator] = None,
        presenter: Optional[PresentationAdapter] = None
    ) -> None:
        self._store = store
        self._validator = validator or ProductValidator()
        self._presenter = presenter or PresentationAdapter()

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    def list_products(self, query: ProductQuery) -> QueryResult:
        """Return one filtered, sorted page and the total match count."""
        try:
            result = self._store.get_products(query)
        except AppException:
            raise
        except Exception as e:
            logger.exception("Error fetching products")
            raise exceptions.internal_error("Failed to fetch products") from e

        logger.debug(
            f"Product query {query.model_dump()} -> "
            f"{len(result.items)} of {result.total}"
        )
        return result

    def get_product(self, product_id: int) -> Product:
        """
        Get product by id.

        Raises:
            NotFoundError: PRODUCT_NOT_FOUND if no product has this id
        """
        try:
            product = self._store.get_product_by_id(product_id)
        except AppException:
            raise
        except Exception as e:
            logger.exception(f"Error fetching product {product_id}")
            raise exceptions.internal_error("Failed to fetch product") from e

        if product is None:
            raise exceptions.product_not_found(product_id)

        return product

    def list_categories(self) -> List[str]:
        try:
            return self._store.list_categories()
        except Exception as e:
            logger.exception("Error fetching categories")
            raise exceptions.internal_error("Failed to fetch categories") from e

    def browse(
        self,
        category: Optional[str],
        search: Optional[str],
        page: int,
        page_size: int
    ) -> CatalogPage:
        """
        Page-number view of the catalog for the browsing UI.

        Args:
            category: Category filter ("all" or empty disables it)
            search: Search text
            page: 1-based page number
            page_size: Products per page (must be positive)
        """
        result = self.list_products(ProductQuery(
            category=category,
            search=search,
            limit=page_size,
            offset=page_to_offset(page, page_size),
        ))

        items = [self._presenter.to_view(p) for p in result.items]

        return CatalogPage(
            items=items,
            total=result.total,
            page=page,
            page_size=page_size,
            pages=page_count(result.total, page_size),
            categories=self.list_categories(),
            empty_message=None if items else self._presenter.empty_message(category, search),
        )

    # =========================================================================
    # CREATE OPERATIONS
    # =========================================================================

    def create_product(self, payload: Any) -> Product:
        """
        Validate a raw payload and store the product.

        Raises:
            ValidationError: If any field fails validation (nothing is stored)
            UnexpectedError: If the store fails
        """
        data = self._validator.validate(payload)

        try:
            product = self._store.create_product(data)
        except AppException:
            raise
        except Exception as e:
            logger.exception("Error creating product")
            raise exceptions.internal_error("Failed to create product") from e

        logger.info(f"✅ Product created: {product.id} {product.name!r} ({product.category})")
        return product

"""
==============================================================================
Product Endpoints
==============================================================================

Listing, lookup and creation of catalog products.

    GET  /products?category=&search=&limit=&offset=
    GET  /products/categories
    GET  /products/{product_id}
    POST /products

Malformed or negative limit/offset values are treated as absent.

==============================================================================
"""

import re
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query

from storefront.catalog.models import Product, ProductQuery
from storefront.core import exceptions
from storefront.core.dependencies import get_product_service
from storefront.schemas.common import ErrorResponse
from storefront.schemas.product import CategoryListResponse, ProductListResponse
from storefront.services.product_service import ProductService


router = APIRouter(prefix="/products", tags=["Products"])


INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")


def parse_int(raw: Optional[str]) -> Optional[int]:
    """Parse a decimal integer, returning None for anything else."""
    if raw is None:
        return None
    raw = raw.strip()
    if not INTEGER_PATTERN.match(raw):
        return None
    return int(raw)


def parse_page_param(raw: Optional[str]) -> Optional[int]:
    """Parse limit/offset; malformed or negative values count as absent."""
    value = parse_int(raw)
    if value is None or value < 0:
        return None
    return value


class ProductController:
    """Controller for product catalog operations."""

    def __init__(self, service: ProductService):
        self._service = service

    def list_products(
        self,
        category: Optional[str],
        search: Optional[str],
        limit: Optional[str],
        offset: Optional[str]
    ) -> ProductListResponse:
        """List products with filters and pagination."""
        query = ProductQuery(
            category=category,
            search=search,
            limit=parse_page_param(limit),
            offset=parse_page_param(offset),
        )
        result = self._service.list_products(query)
        return ProductListResponse(items=result.items, total=result.total)

    def get_categories(self) -> CategoryListResponse:
        """Get all categories."""
        return CategoryListResponse(categories=self._service.list_categories())

    def get_by_id(self, raw_id: str) -> Product:
        """Get product by id."""
        product_id = parse_int(raw_id)
        if product_id is None:
            raise exceptions.invalid_product_id(raw_id)
        return self._service.get_product(product_id)

    def create(self, payload: Any) -> Product:
        """Create a product from a raw JSON payload."""
        return self._service.create_product(payload)


@router.get("", response_model=ProductListResponse)
async def list_products(
    category: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    offset: Optional[str] = Query(None),
    service: ProductService = Depends(get_product_service)
):
    """
    List products, newest first.

    Filters by exact category (unless empty or "all") and by a
    case-insensitive search over name and category.
    """
    controller = ProductController(service)
    return controller.list_products(category, search, limit, offset)


@router.get("/categories", response_model=CategoryListResponse)
async def get_categories(service: ProductService = Depends(get_product_service)):
    """Get all categories present in the catalog."""
    controller = ProductController(service)
    return controller.get_categories()


@router.get(
    "/{product_id}",
    response_model=Product,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def get_product(product_id: str, service: ProductService = Depends(get_product_service)):
    """Get a single product by id."""
    controller = ProductController(service)
    return controller.get_by_id(product_id)


@router.post(
    "",
    response_model=Product,
    status_code=201,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def create_product(
    payload: Any = Body(None),
    service: ProductService = Depends(get_product_service)
):
    """Create a new product."""
    controller = ProductController(service)
    return controller.create(payload)

"""
==============================================================================
Service Layer Tests
==============================================================================

Product and user services, the catalog view and the presentation adapter.

==============================================================================
"""

import pytest
from datetime import datetime, timezone

from storefront.catalog.models import Product, ProductQuery, StockStatus
from storefront.catalog.presentation import (
    EMPTY_CATALOG_MESSAGE,
    FILTERED_EMPTY_MESSAGE,
    PresentationAdapter,
)
from storefront.catalog.storage import MemoryRecordStore
from storefront.core.exceptions import (
    ConflictError,
    NotFoundError,
    UnexpectedError,
    ValidationError,
)
from storefront.services import ProductService, UserService


def make_product(**overrides) -> Product:
    data = {
        "id": 1,
        "name": "Wireless Bluetooth Speaker",
        "price": 79.99,
        "category": "Electronics",
        "stock_status": StockStatus.IN_STOCK,
        "created_at": datetime(2024, 1, 1, tzinfo=timezone.utc),
    }
    data.update(overrides)
    return Product(**data)


class FailingStore(MemoryRecordStore):
    """Store whose every product and user operation fails unexpectedly."""

    def create_product(self, data):
        raise RuntimeError("storage offline")

    def get_product_by_id(self, product_id):
        raise RuntimeError("storage offline")

    def get_products(self, query):
        raise RuntimeError("storage offline")

    def create_user(self, data):
        raise RuntimeError("storage offline")

    def get_user(self, user_id):
        raise RuntimeError("storage offline")

    def get_user_by_username(self, username):
        raise RuntimeError("storage offline")


class TestProductService:

    def test_get_product(self, product_service):
        assert product_service.get_product(1).name == "Wireless Bluetooth Speaker"

    def test_get_missing_product(self, product_service):
        with pytest.raises(NotFoundError) as exc_info:
            product_service.get_product(999)
        assert exc_info.value.code == "PRODUCT_NOT_FOUND"

    def test_create_product(self, product_service):
        product = product_service.create_product({
            "name": "Bamboo Cutting Board",
            "price": "34.50",
            "category": "Home & Living",
            "stock_status": "In Stock",
        })
        assert product.id == 13
        assert product_service.get_product(13) == product

    def test_invalid_payload_stores_nothing(self, product_service):
        with pytest.raises(ValidationError):
            product_service.create_product({"name": "Lamp", "price": -1})
        assert product_service.list_products(ProductQuery()).total == 12

    def test_list_categories(self, product_service):
        assert product_service.list_categories() == [
            "Accessories",
            "Electronics",
            "Home & Living",
            "Sports & Fitness",
        ]

    @pytest.mark.parametrize("call,message", [
        (lambda s: s.list_products(ProductQuery()), "Failed to fetch products"),
        (lambda s: s.get_product(1), "Failed to fetch product"),
        (lambda s: s.create_product({
            "name": "Lamp",
            "price": 10,
            "category": "Home & Living",
            "stock_status": "In Stock",
        }), "Failed to create product"),
    ])
    def test_store_failures_become_unexpected_errors(self, call, message):
        service = ProductService(FailingStore())

        with pytest.raises(UnexpectedError) as exc_info:
            call(service)

        assert exc_info.value.message == message
        assert exc_info.value.status_code == 500
        assert isinstance(exc_info.value.__cause__, RuntimeError)


class TestCatalogBrowse:

    def test_first_page(self, product_service):
        page = product_service.browse("all", "", page=1, page_size=5)
        assert [p.id for p in page.items] == [12, 11, 10, 9, 8]
        assert page.total == 12
        assert page.pages == 3
        assert page.empty_message is None

    def test_last_page(self, product_service):
        page = product_service.browse(None, None, page=3, page_size=5)
        assert [p.id for p in page.items] == [2, 1]

    def test_page_past_end(self, product_service):
        page = product_service.browse(None, None, page=9, page_size=5)
        assert page.items == []
        assert page.total == 12
        assert page.pages == 3

    def test_filtered_page(self, product_service):
        page = product_service.browse("Electronics", "wireless", page=1, page_size=10)
        assert page.total == 3
        assert page.pages == 1
        assert all(p.category == "Electronics" for p in page.items)

    def test_no_matches(self, product_service):
        page = product_service.browse("Electronics", "yoga", page=1, page_size=10)
        assert page.items == []
        assert page.pages == 0
        assert page.empty_message == FILTERED_EMPTY_MESSAGE

    def test_empty_catalog(self, store):
        page = ProductService(store).browse("all", "", page=1, page_size=10)
        assert page.categories == []
        assert page.empty_message == EMPTY_CATALOG_MESSAGE


class TestPresentationAdapter:

    @pytest.fixture
    def adapter(self) -> PresentationAdapter:
        return PresentationAdapter("/static/images/")

    def test_known_product_has_image(self, adapter):
        assert adapter.image_for(make_product()) == "/static/images/wireless-bluetooth-speaker.png"

    def test_unknown_product_has_no_image(self, adapter):
        assert adapter.image_for(make_product(name="Garden Hose")) is None

    @pytest.mark.parametrize("price,display", [(79.99, "$79.99"), (5, "$5.00"), (0.5, "$0.50")])
    def test_price_display(self, adapter, price, display):
        assert adapter.to_view(make_product(price=price)).price_display == display

    @pytest.mark.parametrize("status,badge", [
        (StockStatus.IN_STOCK, "default"),
        (StockStatus.LOW_STOCK, "secondary"),
        (StockStatus.OUT_OF_STOCK, "destructive"),
    ])
    def test_stock_badge(self, adapter, status, badge):
        assert adapter.to_view(make_product(stock_status=status)).stock_badge == badge

    def test_view_keeps_record_fields(self, adapter):
        product = make_product()
        view = adapter.to_view(product)
        assert view.id == product.id
        assert view.created_at == product.created_at

    @pytest.mark.parametrize("category,search,expected", [
        ("all", "", EMPTY_CATALOG_MESSAGE),
        (None, "   ", EMPTY_CATALOG_MESSAGE),
        ("Electronics", "", FILTERED_EMPTY_MESSAGE),
        ("all", "lamp", FILTERED_EMPTY_MESSAGE),
    ])
    def test_empty_message(self, category, search, expected):
        assert PresentationAdapter.empty_message(category, search) == expected


class TestUserService:

    def test_create_and_lookup(self, user_service):
        user = user_service.create_user({"username": "john", "password": "secret"})
        assert user_service.get_by_username("john") == user
        assert user_service.get_by_id(user.id) == user

    def test_duplicate_username(self, user_service):
        user_service.create_user({"username": "john", "password": "secret"})
        with pytest.raises(ConflictError):
            user_service.create_user({"username": "john", "password": "secret"})

    def test_unknown_user(self, user_service):
        assert user_service.get_by_username("nobody") is None

    @pytest.mark.parametrize("call,message", [
        (lambda s: s.create_user({"username": "john", "password": "secret"}), "Failed to create user"),
        (lambda s: s.get_by_id("some-id"), "Failed to fetch user"),
        (lambda s: s.get_by_username("john"), "Failed to fetch user"),
    ])
    def test_store_failures_become_unexpected_errors(self, call, message):
        service = UserService(FailingStore())

        with pytest.raises(UnexpectedError) as exc_info:
            call(service)

        assert exc_info.value.message == message
        assert exc_info.value.status_code == 500
        assert isinstance(exc_info.value.__cause__, RuntimeError)

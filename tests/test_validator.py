"""
==============================================================================
Creation Validator Tests
==============================================================================

Parse-or-reject checks for product and user payloads.

==============================================================================
"""

import pytest

from storefront.catalog.models import StockStatus
from storefront.catalog.validator import ProductValidator, UserValidator
from storefront.core.exceptions import ValidationError


def payload(**overrides):
    data = {
        "name": "Yoga Mat Pro",
        "price": 59.99,
        "category": "Sports & Fitness",
        "stock_status": "In Stock",
    }
    data.update(overrides)
    return data


def failing_fields(exc_info):
    return [detail["field"] for detail in exc_info.value.details]


@pytest.fixture
def validator() -> ProductValidator:
    return ProductValidator()


class TestProductName:
    """Name must be 1-100 characters."""

    def test_empty_name_fails(self, validator):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate(payload(name=""))
        assert failing_fields(exc_info) == ["name"]

    def test_100_character_name_passes(self, validator):
        assert validator.validate(payload(name="x" * 100)).name == "x" * 100

    def test_101_character_name_fails(self, validator):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate(payload(name="x" * 101))
        assert failing_fields(exc_info) == ["name"]

    @pytest.mark.parametrize("name", [None, 42, ["Mat"]])
    def test_non_text_name_fails(self, validator, name):
        assert not validator.is_valid(payload(name=name))


class TestProductPrice:
    """Price must parse to a finite number greater than zero."""

    @pytest.mark.parametrize("price", [0, 0.0, "0", -1, -0.01, "-5"])
    def test_zero_or_negative_fails(self, validator, price):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate(payload(price=price))
        assert failing_fields(exc_info) == ["price"]

    @pytest.mark.parametrize("price,expected", [
        (0.01, 0.01),
        ("0.01", 0.01),
        (79.99, 79.99),
        ("79.99", 79.99),
        (" 12 ", 12.0),
        (5, 5.0),
        ("1e2", 100.0),
    ])
    def test_valid_prices_are_coerced_to_float(self, validator, price, expected):
        data = validator.validate(payload(price=price))
        assert data.price == expected
        assert isinstance(data.price, float)

    @pytest.mark.parametrize("price", [
        "abc", "", "12abc", "nan", "inf", "1_000", float("nan"), float("inf"),
        True, None, [1], {"amount": 1}, 10 ** 400,
    ])
    def test_unparseable_prices_fail(self, validator, price):
        assert not validator.is_valid(payload(price=price))


class TestProductCategoryAndStatus:

    def test_empty_category_fails(self, validator):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate(payload(category=""))
        assert failing_fields(exc_info) == ["category"]

    @pytest.mark.parametrize("status", ["In Stock", "Low Stock", "Out of Stock"])
    def test_known_stock_statuses_pass(self, validator, status):
        assert validator.validate(payload(stock_status=status)).stock_status == StockStatus(status)

    @pytest.mark.parametrize("status", ["in stock", "Backordered", "", None, 1])
    def test_unknown_stock_status_fails(self, validator, status):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate(payload(stock_status=status))
        assert failing_fields(exc_info) == ["stock_status"]


class TestProductPayload:

    def test_all_failures_are_reported(self, validator):
        """Every failing field appears in the details."""
        with pytest.raises(ValidationError) as exc_info:
            validator.validate({})
        assert failing_fields(exc_info) == ["name", "price", "category", "stock_status"]
        assert exc_info.value.status_code == 400

    @pytest.mark.parametrize("body", [None, [], "name", 12])
    def test_non_object_payload_fails(self, validator, body):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate(body)
        assert failing_fields(exc_info) == ["body"]

    def test_unknown_fields_are_dropped(self, validator):
        data = validator.validate(payload(id=99, created_at="yesterday"))
        assert "id" not in data.model_dump()

    def test_validation_does_not_modify_payload(self, validator):
        raw = payload(price="59.99")
        validator.validate(raw)
        assert raw["price"] == "59.99"


class TestUserValidator:

    def test_valid_user(self):
        data = UserValidator().validate({"username": "john", "password": "secret"})
        assert data.username == "john"

    @pytest.mark.parametrize("body", [
        {"username": "", "password": "secret"},
        {"username": "john"},
        {"username": 1, "password": "secret"},
        None,
    ])
    def test_invalid_user(self, body):
        with pytest.raises(ValidationError):
            UserValidator().validate(body)

"""Tests for product payload validation."""
import pytest

from product_api.api.validation import validate_product_payload
from product_api.exceptions import ValidationError


VALID = {
    "name": "Laptop",
    "description": "",
    "price": 10,
    "category": "Electronics",
    "inStock": False
}


def test_valid_payload():
    product = validate_product_payload(dict(VALID, extra="ignored"))

    assert product.name == "Laptop"
    assert product.description == ""
    assert product.price == 10
    assert product.in_stock is False
    assert not hasattr(product, "extra")


@pytest.mark.parametrize(
    "field, value, message",
    [
        ("name", "", "'name' must be a non-empty string"),
        ("name", 42, "'name' must be a non-empty string"),
        ("description", None, "'description' must be a string"),
        ("price", "10", "'price' must be a non-negative number"),
        ("price", -1, "'price' must be a non-negative number"),
        ("price", True, "'price' must be a non-negative number"),
        ("price", float("nan"), "'price' must be a non-negative number"),
        ("price", float("inf"), "'price' must be a non-negative number"),
        ("category", "", "'category' must be a non-empty string"),
        ("inStock", "true", "'inStock' must be a boolean"),
        ("inStock", 1, "'inStock' must be a boolean"),
    ]
)
def test_invalid_field(field, value, message):
    with pytest.raises(ValidationError) as exc_info:
        validate_product_payload(dict(VALID, **{field: value}))

    assert exc_info.value.message == message
    assert exc_info.value.status_code == 400


def test_price_type_is_preserved():
    assert isinstance(validate_product_payload(VALID).price, int)
    assert validate_product_payload(dict(VALID, price=9.5)).price == 9.5


def test_snake_case_key_does_not_satisfy_in_stock():
    payload = dict(VALID)
    del payload["inStock"]
    payload["in_stock"] = True

    with pytest.raises(ValidationError, match="'inStock' is required"):
        validate_product_payload(payload)


def test_missing_field():
    payload = dict(VALID)
    del payload["category"]

    with pytest.raises(ValidationError, match="'category' is required"):
        validate_product_payload(payload)


def test_reports_first_failing_field():
    with pytest.raises(ValidationError) as exc_info:
        validate_product_payload({"price": -1})

    assert exc_info.value.message == "'name' is required"


@pytest.mark.parametrize("payload", [None, [], "product"])
def test_non_object_payload(payload):
    with pytest.raises(ValidationError, match="must be a JSON object"):
        validate_product_payload(payload)

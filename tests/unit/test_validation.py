from __future__ import annotations

import uuid

import pytest

from catalog.api.validation import (
    validate_create_payload,
    validate_product_id,
    validate_update_payload,
)
from catalog.errors import BadRequestError, ValidationFailedError

VALID_BODY = {
    "name": "  Desk Lamp ",
    "description": " Adjustable LED desk lamp ",
    "price": 29.99,
    "category": " home ",
}


def test_create_payload_is_trimmed_and_defaults_in_stock():
    payload = validate_create_payload(VALID_BODY)
    assert payload.name == "Desk Lamp"
    assert payload.description == "Adjustable LED desk lamp"
    assert payload.category == "home"
    assert payload.in_stock is True


def test_create_collects_every_error():
    with pytest.raises(ValidationFailedError) as excinfo:
        validate_create_payload({"name": "A", "description": "short", "price": -1, "inStock": "yes"})
    assert excinfo.value.errors == [
        "Name must be at least 2 characters long",
        "Description must be at least 10 characters long",
        "Price must be greater than 0",
        "Category is required and cannot be empty",
        "inStock must be a boolean value (true or false)",
    ]


def test_create_requires_fields():
    with pytest.raises(ValidationFailedError) as excinfo:
        validate_create_payload({})
    assert excinfo.value.errors == [
        "Name is required and cannot be empty",
        "Description is required and cannot be empty",
        "Price is required",
        "Category is required and cannot be empty",
    ]


@pytest.mark.parametrize("price", ["12", True])
def test_price_must_be_a_number(price):
    with pytest.raises(ValidationFailedError) as excinfo:
        validate_create_payload({**VALID_BODY, "price": price})
    assert excinfo.value.errors == ["Price must be a number"]


@pytest.mark.parametrize("price", [float("nan"), float("inf"), float("-inf")])
def test_price_must_be_finite(price):
    with pytest.raises(ValidationFailedError) as excinfo:
        validate_create_payload({**VALID_BODY, "price": price})
    assert excinfo.value.errors == ["Price must be a finite number"]


def test_update_rejects_non_finite_price():
    with pytest.raises(ValidationFailedError) as excinfo:
        validate_update_payload({"price": float("nan")})
    assert excinfo.value.errors == ["Price must be a finite number"]


def test_create_treats_null_fields_as_missing():
    with pytest.raises(ValidationFailedError) as excinfo:
        validate_create_payload({**VALID_BODY, "price": None, "inStock": None})
    assert excinfo.value.errors == ["Price is required"]


@pytest.mark.parametrize("body", [[], "text", 3])
def test_non_object_body_is_bad_request(body):
    with pytest.raises(BadRequestError):
        validate_create_payload(body)


def test_update_requires_at_least_one_field():
    with pytest.raises(ValidationFailedError, match="At least one field"):
        validate_update_payload({"unknown": 1})


def test_update_keeps_absent_fields_unset():
    patch = validate_update_payload({"price": 10, "name": " Lamp "})
    assert patch.changes() == {"name": "Lamp", "price": 10}


def test_update_validates_present_fields():
    with pytest.raises(ValidationFailedError) as excinfo:
        validate_update_payload({"name": " ", "category": "", "price": 0})
    assert excinfo.value.errors == [
        "Name cannot be empty",
        "Price must be greater than 0",
        "Category cannot be empty",
    ]


def test_update_accepts_false_in_stock():
    assert validate_update_payload({"inStock": False}).changes() == {"in_stock": False}


@pytest.mark.parametrize("product_id", ["1", "42", str(uuid.uuid4())])
def test_valid_product_ids(product_id):
    assert validate_product_id(product_id) == product_id


@pytest.mark.parametrize(
    ("product_id", "message"),
    [("", "Product ID is required"), ("  ", "Product ID is required"), ("abc", "Invalid product ID format")],
)
def test_invalid_product_ids(product_id, message):
    with pytest.raises(ValidationFailedError, match=message):
        validate_product_id(product_id)

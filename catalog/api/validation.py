"""
Request validation for product payloads and id path parameters.

The field rules themselves are declared on `ProductCreate` / `ProductPatch`.
This module runs those models over a decoded JSON body and turns pydantic's
error list into the messages clients see in `ValidationFailedError.errors`,
one per offending field, in field order. Accepted string fields come back
trimmed.
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Mapping, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from catalog.domain.models import (
    DESCRIPTION_MIN_LENGTH,
    NAME_MIN_LENGTH,
    ProductCreate,
    ProductPatch,
)
from catalog.errors import BadRequestError, ValidationFailedError

_UUID_RE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)
_NUMERIC_ID_RE = re.compile(r"^[0-9]+$")

_UPDATABLE_FIELDS = ("name", "description", "price", "category", "inStock")

# error locations may carry either the alias or the attribute name
_WIRE_NAMES = {"in_stock": "inStock"}

_PRICE_MESSAGES = {
    "missing": "Price is required",
    "greater_than": "Price must be greater than 0",
    "finite_number": "Price must be a finite number",
}

ModelT = TypeVar("ModelT", bound=BaseModel)


def _require_object(body: Any) -> Mapping[str, Any]:
    if not isinstance(body, Mapping):
        raise BadRequestError("Request body must be a JSON object")
    return body


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def _message(field: str, error_type: str, raw: Any, required: bool) -> str:
    empty = " is required and cannot be empty" if required else " cannot be empty"
    if field == "name":
        if _is_blank(raw):
            return "Name" + empty
        return f"Name must be at least {NAME_MIN_LENGTH} characters long"
    if field == "description":
        if _is_blank(raw):
            return "Description" + empty
        return f"Description must be at least {DESCRIPTION_MIN_LENGTH} characters long"
    if field == "price":
        return _PRICE_MESSAGES.get(error_type, "Price must be a number")
    if field == "category":
        return "Category" + empty
    if field == "inStock":
        return "inStock must be a boolean value (true or false)"
    return f"{field} is invalid"


def _validate(model: Type[ModelT], data: Mapping[str, Any], required: bool) -> ModelT:
    # JSON null means "not provided" for every product field
    provided: Dict[str, Any] = {key: value for key, value in data.items() if value is not None}
    try:
        return model.model_validate(provided)
    except PydanticValidationError as exc:
        errors: List[str] = []
        seen = set()
        for error in exc.errors():
            loc = error["loc"][0] if error["loc"] else ""
            field = _WIRE_NAMES.get(str(loc), str(loc))
            if field in seen:
                continue
            seen.add(field)
            errors.append(_message(field, error["type"], provided.get(field), required))
        raise ValidationFailedError("Validation failed", errors) from None


def validate_create_payload(body: Any) -> ProductCreate:
    return _validate(ProductCreate, _require_object(body), required=True)


def validate_update_payload(body: Any) -> ProductPatch:
    data = _require_object(body)
    if all(data.get(field) is None for field in _UPDATABLE_FIELDS):
        raise ValidationFailedError("At least one field must be provided for update")
    return _validate(ProductPatch, data, required=False)


def validate_product_id(product_id: str | None) -> str:
    """Accept UUIDs (v1-v5) and the numeric ids of the seeded catalog."""
    if product_id is None or not product_id.strip():
        raise ValidationFailedError("Product ID is required")
    if not (_UUID_RE.match(product_id) or _NUMERIC_ID_RE.match(product_id)):
        raise ValidationFailedError("Invalid product ID format")
    return product_id


__all__ = [
    "validate_create_payload",
    "validate_update_payload",
    "validate_product_id",
]

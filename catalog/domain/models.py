"""
Domain models for the product catalog.

Field names are snake_case in Python and camelCase on the wire (`inStock`,
`totalPages`, ...). Serialize with `model_dump(by_alias=True)` when building
response payloads.

Field constraints live on the annotated types below so that every way a
product enters the system (request payloads, seed files) is held to the
same rules.
"""
from __future__ import annotations

from typing import Annotated, Any, Dict, List, Optional

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictBool,
    StringConstraints,
)
from pydantic.alias_generators import to_camel

NAME_MIN_LENGTH = 2
DESCRIPTION_MIN_LENGTH = 10


def _require_number(value: Any) -> Any:
    # bool is an int subclass and numeric strings coerce in lax mode
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("price must be a number")
    return value


ProductName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=NAME_MIN_LENGTH)]
ProductDescription = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=DESCRIPTION_MIN_LENGTH)
]
CategoryLabel = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Price = Annotated[float, Field(gt=0, allow_inf_nan=False), BeforeValidator(_require_number)]


class CamelModel(BaseModel):
    """Base model accepting either snake_case or camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Product(CamelModel):
    """
    A single catalog item as held by the store.
    """

    id: str = Field(..., description="Store-generated key, never reassigned.")
    name: ProductName = Field(..., description="Display name.")
    description: ProductDescription = Field(..., description="Free-text description.")
    price: Price = Field(..., description="Unit price, strictly positive and finite.")
    category: CategoryLabel = Field(..., description="Category label, case preserved.")
    in_stock: StrictBool = Field(True, description="Whether the item is available.")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class ProductCreate(CamelModel):
    """Validated payload for creating a product (no id yet)."""

    name: ProductName
    description: ProductDescription
    price: Price
    category: CategoryLabel
    in_stock: StrictBool = True


class ProductPatch(CamelModel):
    """Validated partial update; `None` means "leave the stored value alone"."""

    name: Optional[ProductName] = None
    description: Optional[ProductDescription] = None
    price: Optional[Price] = None
    category: Optional[CategoryLabel] = None
    in_stock: Optional[StrictBool] = None

    def changes(self) -> Dict[str, object]:
        return {key: value for key, value in self.model_dump().items() if value is not None}


class QuerySpec(CamelModel):
    """
    Parameters controlling one listing or search request, already coerced.
    """

    category: Optional[str] = None
    text: Optional[str] = None
    sort_by: str = "name"
    sort_order: str = "asc"
    page: int = 1
    limit: int = 10


class PaginationMeta(CamelModel):
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int
    has_next_page: bool
    has_prev_page: bool


class Overview(CamelModel):
    total_products: int
    total_categories: int
    total_value: float
    average_price: Optional[float] = None


class StockStatus(CamelModel):
    in_stock: int
    out_of_stock: int
    stock_percentage: Optional[float] = None


class PriceHighlight(CamelModel):
    name: str
    price: float


class PriceAnalysis(CamelModel):
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    average_price: Optional[float] = None
    price_range: Optional[float] = None
    most_expensive: Optional[PriceHighlight] = None
    cheapest: Optional[PriceHighlight] = None


class CatalogStats(CamelModel):
    """
    Summary statistics over the whole catalog.

    Ratios and averages are `None` when the catalog is empty.
    """

    overview: Overview
    category_breakdown: Dict[str, int]
    stock_status: StockStatus
    price_analysis: PriceAnalysis
    categories: List[str]


def merge_product(existing: Product, patch: ProductPatch) -> Product:
    """
    Return `existing` with every field set in `patch` overwritten.

    Fields the patch leaves as `None` keep their stored value verbatim; the id
    is never part of a patch.
    """
    return existing.model_copy(update=patch.changes())


__all__ = [
    "NAME_MIN_LENGTH",
    "DESCRIPTION_MIN_LENGTH",
    "CamelModel",
    "Product",
    "ProductCreate",
    "ProductPatch",
    "QuerySpec",
    "PaginationMeta",
    "Overview",
    "StockStatus",
    "PriceHighlight",
    "PriceAnalysis",
    "CatalogStats",
    "merge_product",
]

import math
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema exposing snake_case fields as camelCase JSON keys."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True
    )


class ProductCreate(BaseModel):
    """
    Payload for creating or fully replacing a product.

    Validation is strict: numbers are not accepted as strings and
    booleans are not accepted as numbers. Fields are only read from their
    camelCase keys, so `in_stock` cannot stand in for `inStock`.
    """
    model_config = ConfigDict(alias_generator=to_camel, strict=True, extra="ignore")

    name: str = Field(..., min_length=1, description="Product name")
    description: str = Field(..., description="Product description")
    price: Union[StrictInt, StrictFloat] = Field(..., description="Product price (non-negative)")
    category: str = Field(..., min_length=1, description="Product category")
    in_stock: bool = Field(..., description="Whether the product is in stock")

    @field_validator("price")
    @classmethod
    def check_price(cls, value):
        # Integers stay integers so the price is echoed back as sent
        if not math.isfinite(value) or value < 0:
            raise ValueError("price must be a finite, non-negative number")
        return value


class ProductResponse(CamelModel):
    """Schema for a product in API responses."""
    id: str
    name: str
    description: str
    price: Union[int, float]
    category: str
    in_stock: bool


class ProductEnvelope(CamelModel):
    """Single product response."""
    success: bool = True
    data: ProductResponse


class ProductMutationEnvelope(ProductEnvelope):
    """Response for create, update and delete, with a confirmation message."""
    message: str


class ProductSearchEnvelope(CamelModel):
    """Search results in store order."""
    success: bool = True
    count: int
    data: list[ProductResponse]


class ProductListEnvelope(CamelModel):
    """Filtered, paginated product list."""
    success: bool = True
    count: int
    total: int
    page: int
    limit: int
    data: list[ProductResponse]


class ProductStats(CamelModel):
    """Aggregate counts over the whole store."""
    total: int
    in_stock: int
    out_of_stock: int
    by_category: dict[str, int]


class ProductStatsEnvelope(CamelModel):
    success: bool = True
    data: ProductStats


class ErrorResponse(BaseModel):
    """Uniform error envelope returned for every failure."""
    success: bool = False
    message: str

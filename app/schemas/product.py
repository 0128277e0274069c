"""Pydantic schemas for product requests and responses (camelCase on the wire)."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Upper bound of a 32-bit signed INTEGER column.
MAX_STOCK = 2**31 - 1


class ProductFields(BaseModel):
    """
    Product field-set as stored. Acts as the storage-layer check for each item:
    name and a positive price are required, everything else has a default.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    name: str = Field(..., min_length=1, max_length=255)
    price: float = Field(..., gt=0, allow_inf_nan=False)
    description: str = ""
    image_url: str = Field(default="", max_length=2048)
    category: str = Field(default="General", max_length=255)
    stock: int = Field(default=0, ge=0, le=MAX_STOCK)
    is_active: bool = True


class ProductRead(BaseModel):
    """Product as returned to clients."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: str
    name: str
    price: float
    description: str
    image_url: str
    category: str
    stock: int
    is_active: bool
    created_at: datetime
    updated_at: datetime


class ProductCreatedResponse(BaseModel):
    """Response for POST /products."""

    message: str
    product: ProductRead


class ProductBulkResponse(BaseModel):
    """Response for POST /products/bulk."""

    message: str
    created: list[ProductRead]

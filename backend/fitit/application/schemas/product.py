"""Pydantic DTOs (Data Transfer Objects) for the Product feature."""

from pydantic import Field

from .base import CamelModel


class ProductCreate(CamelModel):
    """Schema for creating a new product."""

    name: str = Field(..., min_length=1, max_length=200, examples=["Claw Hammer"])
    category: str = Field(..., min_length=1, max_length=100, examples=["General"])
    price: float = Field(..., ge=0, examples=[19.99])
    description: str = Field("", max_length=2000)
    rating: float = Field(0.0, ge=0, le=5)
    image_url: str | None = None
    in_stock: bool = True


class ProductUpdate(CamelModel):
    """Schema for updating an existing product — all fields optional."""

    name: str | None = Field(None, min_length=1, max_length=200)
    category: str | None = Field(None, min_length=1, max_length=100)
    price: float | None = Field(None, ge=0)
    description: str | None = Field(None, max_length=2000)
    rating: float | None = Field(None, ge=0, le=5)
    image_url: str | None = None
    in_stock: bool | None = None


class ProductResponse(CamelModel):
    """Schema returned to the client."""

    id: str
    name: str
    category: str
    price: float
    description: str
    rating: float
    image_url: str | None
    in_stock: bool
    created_at: str | None
    updated_at: str | None

    model_config = {"from_attributes": True}

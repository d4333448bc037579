"""Product sold in the FitIt tools store."""

from pydantic import Field

from .base import Entity


class Product(Entity):
    name: str
    category: str
    price: float = Field(..., ge=0)
    description: str = ""
    rating: float = Field(0.0, ge=0, le=5)
    image_url: str | None = None
    in_stock: bool = True

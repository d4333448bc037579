"""Application service (use case) for Product operations."""

import uuid

from fitit.application.interfaces import ProductRepository
from fitit.application.schemas import ProductCreate, ProductUpdate
from fitit.domain.entities import Product
from fitit.domain.exceptions import ValidationError


class ProductService:
    """Orchestrates product business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ProductRepository):
        self._repository = repository

    async def get_product(self, product_id: str) -> Product:
        return await self._repository.get_by_id_or_throw(product_id)

    async def list_products(self, limit: int | None = None) -> list[Product]:
        return await self._repository.get_all(limit=limit)

    async def list_by_category(self, category: str) -> list[Product]:
        return await self._repository.get_by_category(category)

    async def search_products(self, query: str) -> list[Product]:
        query = query.strip()
        if not query:
            raise ValidationError("Search query must not be empty", {"field": "q"})
        return await self._repository.search(query)

    async def top_rated(self, limit: int = 10) -> list[Product]:
        return await self._repository.get_top_rated(limit)

    async def create_product(self, data: ProductCreate) -> Product:
        product = Product(id=str(uuid.uuid4()), **data.model_dump())
        return await self._repository.create(product)

    async def update_product(self, product_id: str, data: ProductUpdate) -> Product:
        return await self._repository.update(product_id, data.model_dump(exclude_unset=True))

    async def delete_product(self, product_id: str) -> None:
        await self._repository.delete(product_id)

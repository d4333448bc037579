"""Abstract product repository interface (port)."""

from abc import abstractmethod

from fitit.domain.entities import Product

from .entity_repository import EntityRepository


class ProductRepository(EntityRepository[Product]):
    @abstractmethod
    async def get_by_category(self, category: str) -> list[Product]:
        ...

    @abstractmethod
    async def search(self, query: str) -> list[Product]:
        """Products whose name or description contains ``query``."""
        ...

    @abstractmethod
    async def get_top_rated(self, limit: int = 10) -> list[Product]:
        ...

"""Products table repository."""

from fitit.application.interfaces import DocumentStore, ProductRepository
from fitit.domain.entities import Product
from fitit.infrastructure.dynamodb.expressions import build_contains_filter
from fitit.infrastructure.dynamodb.repository import DynamoRepository
from fitit.infrastructure.dynamodb.tables import CATEGORY_INDEX, TableConfig


class DynamoProductRepository(DynamoRepository[Product], ProductRepository):
    """Product persistence with category lookup, search and ranking."""

    def __init__(self, store: DocumentStore, config: TableConfig, **kwargs):
        super().__init__(store, config, Product, **kwargs)

    async def get_by_category(self, category: str) -> list[Product]:
        return await self.query_by_index(CATEGORY_INDEX, "category", category)

    async def search(self, query: str) -> list[Product]:
        """Substring match on name or description (case-sensitive, as DynamoDB ``contains`` is)."""
        expression = build_contains_filter(["name", "description"], query)
        return await self._scan_with_filter(
            expression.expression, expression.names, expression.values
        )

    async def get_top_rated(self, limit: int = 10) -> list[Product]:
        products = await self.get_all()
        products.sort(key=lambda p: p.rating, reverse=True)
        return products[:limit]

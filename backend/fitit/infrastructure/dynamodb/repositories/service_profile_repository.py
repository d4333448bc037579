"""Service profiles table repository."""

from fitit.application.interfaces import DocumentStore, ServiceProfileRepository
from fitit.domain.entities import ServiceProfile
from fitit.infrastructure.dynamodb.expressions import build_equality_filter
from fitit.infrastructure.dynamodb.repository import DynamoRepository
from fitit.infrastructure.dynamodb.tables import PROFESSION_INDEX, TableConfig


class DynamoServiceProfileRepository(DynamoRepository[ServiceProfile], ServiceProfileRepository):
    def __init__(self, store: DocumentStore, config: TableConfig, **kwargs):
        super().__init__(store, config, ServiceProfile, **kwargs)

    async def get_by_profession(self, profession: str) -> list[ServiceProfile]:
        return await self.query_by_index(PROFESSION_INDEX, "profession", profession)

    async def get_available(self) -> list[ServiceProfile]:
        expression = build_equality_filter({"available": True})
        return await self._scan_with_filter(
            expression.expression, expression.names, expression.values
        )

    async def get_top_rated(self, limit: int = 10) -> list[ServiceProfile]:
        profiles = await self.get_all()
        profiles.sort(key=lambda p: p.rating, reverse=True)
        return profiles[:limit]

    async def update_availability(self, profile_id: str, available: bool) -> ServiceProfile:
        return await self.update(profile_id, {"available": available})

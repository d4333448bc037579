"""Abstract service profile repository interface (port)."""

from abc import abstractmethod

from fitit.domain.entities import ServiceProfile

from .entity_repository import EntityRepository


class ServiceProfileRepository(EntityRepository[ServiceProfile]):
    @abstractmethod
    async def get_by_profession(self, profession: str) -> list[ServiceProfile]:
        ...

    @abstractmethod
    async def get_available(self) -> list[ServiceProfile]:
        ...

    @abstractmethod
    async def get_top_rated(self, limit: int = 10) -> list[ServiceProfile]:
        ...

    @abstractmethod
    async def update_availability(self, profile_id: str, available: bool) -> ServiceProfile:
        ...

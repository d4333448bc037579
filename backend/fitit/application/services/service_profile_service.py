"""Application service (use case) for ServiceProfile operations."""

import uuid

from fitit.application.interfaces import ServiceProfileRepository
from fitit.application.schemas import ServiceProfileCreate, ServiceProfileUpdate
from fitit.domain.entities import ServiceProfile


class ServiceProfileService:
    def __init__(self, repository: ServiceProfileRepository):
        self._repository = repository

    async def get_profile(self, profile_id: str) -> ServiceProfile:
        return await self._repository.get_by_id_or_throw(profile_id)

    async def list_profiles(self, limit: int | None = None) -> list[ServiceProfile]:
        return await self._repository.get_all(limit=limit)

    async def list_available(self) -> list[ServiceProfile]:
        return await self._repository.get_available()

    async def list_by_profession(self, profession: str) -> list[ServiceProfile]:
        return await self._repository.get_by_profession(profession)

    async def top_rated(self, limit: int = 10) -> list[ServiceProfile]:
        return await self._repository.get_top_rated(limit)

    async def create_profile(self, data: ServiceProfileCreate) -> ServiceProfile:
        profile = ServiceProfile(id=str(uuid.uuid4()), **data.model_dump())
        return await self._repository.create(profile)

    async def update_profile(self, profile_id: str, data: ServiceProfileUpdate) -> ServiceProfile:
        return await self._repository.update(profile_id, data.model_dump(exclude_unset=True))

    async def set_availability(self, profile_id: str, available: bool) -> ServiceProfile:
        return await self._repository.update_availability(profile_id, available)

    async def delete_profile(self, profile_id: str) -> None:
        await self._repository.delete(profile_id)

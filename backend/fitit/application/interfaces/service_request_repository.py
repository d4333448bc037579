"""Abstract service request repository interface (port)."""

from abc import abstractmethod

from fitit.domain.entities import ServiceRequest, ServiceRequestStatus

from .entity_repository import EntityRepository


class ServiceRequestRepository(EntityRepository[ServiceRequest]):
    @abstractmethod
    async def get_by_customer_id(self, customer_id: str) -> list[ServiceRequest]:
        ...

    @abstractmethod
    async def get_by_status(self, status: ServiceRequestStatus) -> list[ServiceRequest]:
        ...

    @abstractmethod
    async def get_open(self) -> list[ServiceRequest]:
        ...

    @abstractmethod
    async def get_by_professional_id(self, professional_id: str) -> list[ServiceRequest]:
        ...

    @abstractmethod
    async def get_recent(self, limit: int = 20) -> list[ServiceRequest]:
        """Newest requests first."""
        ...

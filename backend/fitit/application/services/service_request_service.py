"""Application service (use case) for ServiceRequest operations.

Owns the job lifecycle::

    open ──accept──▶ accepted ──▶ in_progress ──complete──▶ completed

Any state before ``completed`` may also move to ``cancelled``; an accepted
job may be completed directly.
"""

import logging
import uuid

from fitit.application.interfaces import ServiceRequestRepository
from fitit.application.schemas import ServiceRequestCreate
from fitit.domain.entities import ServiceRequest, ServiceRequestStatus
from fitit.domain.exceptions import ConflictError, ValidationError

logger = logging.getLogger(__name__)

_ALLOWED_TRANSITIONS: dict[ServiceRequestStatus, frozenset[ServiceRequestStatus]] = {
    ServiceRequestStatus.OPEN: frozenset(
        {ServiceRequestStatus.ACCEPTED, ServiceRequestStatus.CANCELLED}
    ),
    ServiceRequestStatus.ACCEPTED: frozenset(
        {
            ServiceRequestStatus.IN_PROGRESS,
            ServiceRequestStatus.COMPLETED,
            ServiceRequestStatus.CANCELLED,
        }
    ),
    ServiceRequestStatus.IN_PROGRESS: frozenset(
        {ServiceRequestStatus.COMPLETED, ServiceRequestStatus.CANCELLED}
    ),
    ServiceRequestStatus.COMPLETED: frozenset(),
    ServiceRequestStatus.CANCELLED: frozenset(),
}


class ServiceRequestService:
    """Orchestrates service request business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ServiceRequestRepository):
        self._repository = repository

    async def get_request(self, request_id: str) -> ServiceRequest:
        return await self._repository.get_by_id_or_throw(request_id)

    async def list_requests(self, limit: int | None = None) -> list[ServiceRequest]:
        return await self._repository.get_all(limit=limit)

    async def list_open(self) -> list[ServiceRequest]:
        return await self._repository.get_open()

    async def list_recent(self, limit: int = 20) -> list[ServiceRequest]:
        return await self._repository.get_recent(limit)

    async def list_by_status(self, status: ServiceRequestStatus) -> list[ServiceRequest]:
        return await self._repository.get_by_status(status)

    async def list_by_customer(self, customer_id: str) -> list[ServiceRequest]:
        return await self._repository.get_by_customer_id(customer_id)

    async def list_by_professional(self, professional_id: str) -> list[ServiceRequest]:
        return await self._repository.get_by_professional_id(professional_id)

    async def create_request(self, data: ServiceRequestCreate) -> ServiceRequest:
        request = ServiceRequest(
            id=str(uuid.uuid4()),
            status=ServiceRequestStatus.OPEN,
            **data.model_dump(),
        )
        return await self._repository.create(request)

    async def update_status(
        self,
        request_id: str,
        status: ServiceRequestStatus,
        professional_id: str | None = None,
    ) -> ServiceRequest:
        """Move a request to ``status`` if the lifecycle allows it."""
        current = await self._repository.get_by_id_or_throw(request_id)
        if status == current.status:
            return current
        if status not in _ALLOWED_TRANSITIONS[current.status]:
            raise ConflictError(
                f"Cannot move service request from '{current.status.value}' to '{status.value}'",
                {"id": request_id, "from": current.status.value, "to": status.value},
            )
        if status == ServiceRequestStatus.ACCEPTED and not (professional_id or current.professional_id):
            raise ValidationError(
                "A professional ID is required to accept a request",
                {"field": "professional_id"},
            )

        logger.info("Service request %s: %s → %s", request_id, current.status.value, status.value)
        return await self._repository.update(
            request_id,
            {"status": status, "professional_id": professional_id},
            expected={"status": current.status},
        )

    async def accept_job(self, request_id: str, professional_id: str) -> ServiceRequest:
        current = await self._repository.get_by_id_or_throw(request_id)
        if current.status != ServiceRequestStatus.OPEN:
            raise ConflictError(
                "Only open requests can be accepted",
                {"id": request_id, "status": current.status.value},
            )
        return await self.update_status(request_id, ServiceRequestStatus.ACCEPTED, professional_id)

    async def complete_job(self, request_id: str) -> ServiceRequest:
        return await self.update_status(request_id, ServiceRequestStatus.COMPLETED)

    async def delete_request(self, request_id: str) -> None:
        await self._repository.delete(request_id)

"""Service requests table repository."""

from fitit.application.interfaces import DocumentStore, ServiceRequestRepository
from fitit.domain.entities import ServiceRequest, ServiceRequestStatus
from fitit.infrastructure.dynamodb.expressions import build_equality_filter
from fitit.infrastructure.dynamodb.repository import DynamoRepository
from fitit.infrastructure.dynamodb.tables import CUSTOMER_ID_INDEX, STATUS_INDEX, TableConfig


class DynamoServiceRequestRepository(DynamoRepository[ServiceRequest], ServiceRequestRepository):
    """Service request persistence with customer / status / professional lookups."""

    def __init__(self, store: DocumentStore, config: TableConfig, **kwargs):
        super().__init__(store, config, ServiceRequest, **kwargs)

    async def get_by_customer_id(self, customer_id: str) -> list[ServiceRequest]:
        return await self.query_by_index(CUSTOMER_ID_INDEX, "customer_id", customer_id)

    async def get_by_status(self, status: ServiceRequestStatus) -> list[ServiceRequest]:
        return await self.query_by_index(STATUS_INDEX, "status", ServiceRequestStatus(status).value)

    async def get_open(self) -> list[ServiceRequest]:
        return await self.get_by_status(ServiceRequestStatus.OPEN)

    async def get_by_professional_id(self, professional_id: str) -> list[ServiceRequest]:
        expression = build_equality_filter({"professionalId": professional_id})
        return await self._scan_with_filter(
            expression.expression, expression.names, expression.values
        )

    async def get_recent(self, limit: int = 20) -> list[ServiceRequest]:
        """Newest requests first, by ``createdAt``."""
        requests = await self.get_all()
        requests.sort(key=lambda r: r.created_at or "", reverse=True)
        return requests[:limit]

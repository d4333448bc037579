"""Customer job request and its lifecycle states."""

from enum import Enum

from .base import Entity


class ServiceRequestStatus(str, Enum):
    OPEN = "open"
    ACCEPTED = "accepted"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class ServiceRequest(Entity):
    """A customer's request for a professional.

    ``professional_id`` is set once a professional accepts the job.
    """

    customer_id: str
    customer_name: str
    description: str
    category: str
    status: ServiceRequestStatus = ServiceRequestStatus.OPEN
    professional_id: str | None = None

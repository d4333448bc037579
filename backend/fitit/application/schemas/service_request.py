"""Pydantic DTOs for the ServiceRequest feature."""

from pydantic import Field

from fitit.domain.entities import ServiceRequestStatus
from .base import CamelModel


class ServiceRequestCreate(CamelModel):
    """Schema for a customer opening a new request."""

    customer_id: str = Field(..., min_length=1, max_length=128)
    customer_name: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1, max_length=4000)
    category: str = Field(..., min_length=1, max_length=100, examples=["Plumbing"])


class StatusUpdate(CamelModel):
    status: ServiceRequestStatus
    professional_id: str | None = None


class AcceptRequest(CamelModel):
    professional_id: str = Field(..., min_length=1, max_length=128)


class ServiceRequestResponse(CamelModel):
    id: str
    customer_id: str
    customer_name: str
    description: str
    category: str
    status: ServiceRequestStatus
    professional_id: str | None
    created_at: str | None
    updated_at: str | None

    model_config = {"from_attributes": True}

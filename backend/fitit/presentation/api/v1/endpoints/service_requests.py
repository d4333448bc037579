"""Service request endpoints — CRUD plus the job lifecycle actions."""

from fastapi import APIRouter, Depends, Query, status

from fitit.application.schemas import (
    AcceptRequest,
    ServiceRequestCreate,
    ServiceRequestResponse,
    StatusUpdate,
)
from fitit.application.services import ServiceRequestService
from fitit.domain.entities import ServiceRequestStatus
from fitit.infrastructure.dependencies import get_service_request_service

router = APIRouter(prefix="/service-requests", tags=["Service Requests"])


def _to_response(requests) -> list[ServiceRequestResponse]:
    return [ServiceRequestResponse.model_validate(r, from_attributes=True) for r in requests]


@router.get("", response_model=list[ServiceRequestResponse])
async def list_requests(
    limit: int | None = Query(None, ge=1, le=1000),
    service: ServiceRequestService = Depends(get_service_request_service),
) -> list[ServiceRequestResponse]:
    return _to_response(await service.list_requests(limit=limit))


@router.get("/open", response_model=list[ServiceRequestResponse])
async def open_requests(
    service: ServiceRequestService = Depends(get_service_request_service),
) -> list[ServiceRequestResponse]:
    return _to_response(await service.list_open())


@router.get("/recent", response_model=list[ServiceRequestResponse])
async def recent_requests(
    limit: int = Query(20, ge=1, le=100),
    service: ServiceRequestService = Depends(get_service_request_service),
) -> list[ServiceRequestResponse]:
    return _to_response(await service.list_recent(limit))


@router.get("/status/{request_status}", response_model=list[ServiceRequestResponse])
async def requests_by_status(
    request_status: ServiceRequestStatus,
    service: ServiceRequestService = Depends(get_service_request_service),
) -> list[ServiceRequestResponse]:
    return _to_response(await service.list_by_status(request_status))


@router.get("/customer/{customer_id}", response_model=list[ServiceRequestResponse])
async def requests_by_customer(
    customer_id: str,
    service: ServiceRequestService = Depends(get_service_request_service),
) -> list[ServiceRequestResponse]:
    return _to_response(await service.list_by_customer(customer_id))


@router.get("/professional/{professional_id}", response_model=list[ServiceRequestResponse])
async def requests_by_professional(
    professional_id: str,
    service: ServiceRequestService = Depends(get_service_request_service),
) -> list[ServiceRequestResponse]:
    return _to_response(await service.list_by_professional(professional_id))


@router.get("/{request_id}", response_model=ServiceRequestResponse)
async def get_request(
    request_id: str,
    service: ServiceRequestService = Depends(get_service_request_service),
) -> ServiceRequestResponse:
    request = await service.get_request(request_id)
    return ServiceRequestResponse.model_validate(request, from_attributes=True)


@router.post("", response_model=ServiceRequestResponse, status_code=status.HTTP_201_CREATED)
async def create_request(
    data: ServiceRequestCreate,
    service: ServiceRequestService = Depends(get_service_request_service),
) -> ServiceRequestResponse:
    request = await service.create_request(data)
    return ServiceRequestResponse.model_validate(request, from_attributes=True)


@router.patch("/{request_id}/status", response_model=ServiceRequestResponse)
async def update_status(
    request_id: str,
    data: StatusUpdate,
    service: ServiceRequestService = Depends(get_service_request_service),
) -> ServiceRequestResponse:
    request = await service.update_status(request_id, data.status, data.professional_id)
    return ServiceRequestResponse.model_validate(request, from_attributes=True)


@router.post("/{request_id}/accept", response_model=ServiceRequestResponse)
async def accept_request(
    request_id: str,
    data: AcceptRequest,
    service: ServiceRequestService = Depends(get_service_request_service),
) -> ServiceRequestResponse:
    request = await service.accept_job(request_id, data.professional_id)
    return ServiceRequestResponse.model_validate(request, from_attributes=True)


@router.post("/{request_id}/complete", response_model=ServiceRequestResponse)
async def complete_request(
    request_id: str,
    service: ServiceRequestService = Depends(get_service_request_service),
) -> ServiceRequestResponse:
    request = await service.complete_job(request_id)
    return ServiceRequestResponse.model_validate(request, from_attributes=True)


@router.delete("/{request_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_request(
    request_id: str,
    service: ServiceRequestService = Depends(get_service_request_service),
) -> None:
    await service.delete_request(request_id)

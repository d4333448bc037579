"""Service profile endpoints."""

from fastapi import APIRouter, Depends, Query, status

from fitit.application.schemas import (
    AvailabilityUpdate,
    ServiceProfileCreate,
    ServiceProfileResponse,
    ServiceProfileUpdate,
)
from fitit.application.services import ServiceProfileService
from fitit.infrastructure.dependencies import get_service_profile_service

router = APIRouter(prefix="/service-profiles", tags=["Service Profiles"])


def _to_response(profiles) -> list[ServiceProfileResponse]:
    return [ServiceProfileResponse.model_validate(p, from_attributes=True) for p in profiles]


@router.get("", response_model=list[ServiceProfileResponse])
async def list_profiles(
    limit: int | None = Query(None, ge=1, le=1000),
    service: ServiceProfileService = Depends(get_service_profile_service),
) -> list[ServiceProfileResponse]:
    return _to_response(await service.list_profiles(limit=limit))


@router.get("/available", response_model=list[ServiceProfileResponse])
async def available_profiles(
    service: ServiceProfileService = Depends(get_service_profile_service),
) -> list[ServiceProfileResponse]:
    return _to_response(await service.list_available())


@router.get("/top-rated", response_model=list[ServiceProfileResponse])
async def top_rated_profiles(
    limit: int = Query(10, ge=1, le=100),
    service: ServiceProfileService = Depends(get_service_profile_service),
) -> list[ServiceProfileResponse]:
    return _to_response(await service.top_rated(limit))


@router.get("/profession/{profession}", response_model=list[ServiceProfileResponse])
async def profiles_by_profession(
    profession: str,
    service: ServiceProfileService = Depends(get_service_profile_service),
) -> list[ServiceProfileResponse]:
    return _to_response(await service.list_by_profession(profession))


@router.get("/{profile_id}", response_model=ServiceProfileResponse)
async def get_profile(
    profile_id: str,
    service: ServiceProfileService = Depends(get_service_profile_service),
) -> ServiceProfileResponse:
    profile = await service.get_profile(profile_id)
    return ServiceProfileResponse.model_validate(profile, from_attributes=True)


@router.post("", response_model=ServiceProfileResponse, status_code=status.HTTP_201_CREATED)
async def create_profile(
    data: ServiceProfileCreate,
    service: ServiceProfileService = Depends(get_service_profile_service),
) -> ServiceProfileResponse:
    profile = await service.create_profile(data)
    return ServiceProfileResponse.model_validate(profile, from_attributes=True)


@router.put("/{profile_id}", response_model=ServiceProfileResponse)
async def update_profile(
    profile_id: str,
    data: ServiceProfileUpdate,
    service: ServiceProfileService = Depends(get_service_profile_service),
) -> ServiceProfileResponse:
    profile = await service.update_profile(profile_id, data)
    return ServiceProfileResponse.model_validate(profile, from_attributes=True)


@router.patch("/{profile_id}/availability", response_model=ServiceProfileResponse)
async def set_availability(
    profile_id: str,
    data: AvailabilityUpdate,
    service: ServiceProfileService = Depends(get_service_profile_service),
) -> ServiceProfileResponse:
    """Toggle whether a professional is taking new jobs."""
    profile = await service.set_availability(profile_id, data.available)
    return ServiceProfileResponse.model_validate(profile, from_attributes=True)


@router.delete("/{profile_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_profile(
    profile_id: str,
    service: ServiceProfileService = Depends(get_service_profile_service),
) -> None:
    await service.delete_profile(profile_id)

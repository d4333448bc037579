"""User account endpoints."""

from fastapi import APIRouter, Depends, Query, status

from fitit.application.schemas import UserCreate, UserResponse, UserUpdate
from fitit.application.services import UserService
from fitit.infrastructure.dependencies import get_user_service

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("/by-email", response_model=UserResponse)
async def get_user_by_email(
    email: str = Query(..., min_length=3),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    user = await service.get_by_email(email)
    return UserResponse.model_validate(user, from_attributes=True)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    user = await service.get_user(user_id)
    return UserResponse.model_validate(user, from_attributes=True)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(
    data: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    user = await service.register(data)
    return UserResponse.model_validate(user, from_attributes=True)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    data: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    user = await service.update_user(user_id, data)
    return UserResponse.model_validate(user, from_attributes=True)

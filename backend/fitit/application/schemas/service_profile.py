"""Pydantic DTOs for the ServiceProfile feature."""

from pydantic import Field

from .base import CamelModel


class ServiceProfileCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=200, examples=["Dana Electric"])
    profession: str = Field(..., min_length=1, max_length=100, examples=["Electrician"])
    hourly_rate: float = Field(..., ge=0, examples=[65.0])
    rating: float = Field(0.0, ge=0, le=5)
    available: bool = True
    bio: str = Field("", max_length=2000)
    location: str | None = None
    user_id: str | None = None


class ServiceProfileUpdate(CamelModel):
    name: str | None = Field(None, min_length=1, max_length=200)
    profession: str | None = Field(None, min_length=1, max_length=100)
    hourly_rate: float | None = Field(None, ge=0)
    rating: float | None = Field(None, ge=0, le=5)
    available: bool | None = None
    bio: str | None = Field(None, max_length=2000)
    location: str | None = None


class AvailabilityUpdate(CamelModel):
    available: bool


class ServiceProfileResponse(CamelModel):
    id: str
    name: str
    profession: str
    hourly_rate: float
    rating: float
    available: bool
    bio: str
    location: str | None
    user_id: str | None
    created_at: str | None
    updated_at: str | None

    model_config = {"from_attributes": True}

"""Pydantic DTOs for the User feature."""

from pydantic import Field

from fitit.domain.entities import UserRole
from .base import CamelModel


class UserCreate(CamelModel):
    """Schema for registering a user.

    ``id`` is the identity provider's UID when available; otherwise one is generated.
    """

    id: str | None = Field(None, min_length=1, max_length=128)
    email: str = Field(..., min_length=3, max_length=320, pattern=r"^[^@\s]+@[^@\s]+$")
    display_name: str = Field(..., min_length=1, max_length=200)
    role: UserRole = "customer"
    phone: str | None = Field(None, max_length=32)


class UserUpdate(CamelModel):
    display_name: str | None = Field(None, min_length=1, max_length=200)
    role: UserRole | None = None
    phone: str | None = Field(None, max_length=32)


class UserResponse(CamelModel):
    id: str
    email: str
    display_name: str
    role: UserRole
    phone: str | None
    created_at: str | None
    updated_at: str | None

    model_config = {"from_attributes": True}

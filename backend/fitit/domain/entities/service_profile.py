"""Public profile of a service professional."""

from pydantic import Field

from .base import Entity


class ServiceProfile(Entity):
    name: str
    profession: str
    hourly_rate: float = Field(..., ge=0)
    rating: float = Field(0.0, ge=0, le=5)
    available: bool = True
    bio: str = ""
    location: str | None = None
    user_id: str | None = None

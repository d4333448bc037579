"""Marketplace account."""

from typing import Literal

from .base import Entity

UserRole = Literal["customer", "professional", "admin"]


class User(Entity):
    email: str
    display_name: str
    role: UserRole = "customer"
    phone: str | None = None

"""Application service (use case) for User operations."""

import uuid

from fitit.application.interfaces import UserRepository
from fitit.application.schemas import UserCreate, UserUpdate
from fitit.domain.entities import User
from fitit.domain.exceptions import ConflictError, NotFoundError


class UserService:
    def __init__(self, repository: UserRepository):
        self._repository = repository

    async def get_user(self, user_id: str) -> User:
        return await self._repository.get_by_id_or_throw(user_id)

    async def get_by_email(self, email: str) -> User:
        user = await self._repository.get_by_email(email.lower())
        if user is None:
            raise NotFoundError("User", email)
        return user

    async def register(self, data: UserCreate) -> User:
        """Create a user; emails are unique (case-insensitive)."""
        email = data.email.lower()
        if await self._repository.get_by_email(email) is not None:
            raise ConflictError("A user with this email already exists", {"email": email})

        user = User(
            id=data.id or str(uuid.uuid4()),
            email=email,
            display_name=data.display_name,
            role=data.role,
            phone=data.phone,
        )
        return await self._repository.create(user)

    async def update_user(self, user_id: str, data: UserUpdate) -> User:
        return await self._repository.update(user_id, data.model_dump(exclude_unset=True))

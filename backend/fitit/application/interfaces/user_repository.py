"""Abstract user repository interface (port)."""

from abc import abstractmethod

from fitit.domain.entities import User

from .entity_repository import EntityRepository


class UserRepository(EntityRepository[User]):
    @abstractmethod
    async def get_by_email(self, email: str) -> User | None:
        ...

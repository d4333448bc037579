"""Generic repository interface (port) shared by every entity kind."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from fitit.domain.entities import Entity

T = TypeVar("T", bound=Entity)


class EntityRepository(ABC, Generic[T]):
    """Port for single-table entity persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, entity_id: str) -> T | None:
        """Retrieve an entity by ID; ``None`` when it does not exist."""
        ...

    @abstractmethod
    async def get_by_id_or_throw(self, entity_id: str) -> T:
        """Retrieve an entity by ID or raise ``NotFoundError``."""
        ...

    @abstractmethod
    async def get_all(self, limit: int | None = None) -> list[T]:
        """Retrieve all entities, optionally capped at ``limit``."""
        ...

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Persist a new entity; raises ``DuplicateEntityError`` when the ID is taken."""
        ...

    @abstractmethod
    async def update(
        self,
        entity_id: str,
        changes: Mapping[str, Any],
        expected: Mapping[str, Any] | None = None,
    ) -> T:
        """Merge partial changes into an existing entity and return it.

        Raises ``ValidationError`` for invalid changes and ``ConflictError`` when
        the stored values no longer match ``expected``.
        """
        ...

    @abstractmethod
    async def delete(self, entity_id: str) -> None:
        """Delete an existing entity; raises ``NotFoundError`` when missing."""
        ...

    @abstractmethod
    async def query_by_index(self, index_name: str, key_field: str, key_value: Any) -> list[T]:
        """Exact-match lookup on a secondary index."""
        ...

"""Abstract chat history repository interface (port)."""

from abc import abstractmethod

from fitit.domain.entities import ChatMessage

from .entity_repository import EntityRepository


class ChatRepository(EntityRepository[ChatMessage]):
    @abstractmethod
    async def append(self, session_id: str, role: str, content: str) -> ChatMessage:
        """Store a new message at the end of a session."""
        ...

    @abstractmethod
    async def get_session_history(self, session_id: str, limit: int | None = None) -> list[ChatMessage]:
        """Messages of a session in chronological order."""
        ...

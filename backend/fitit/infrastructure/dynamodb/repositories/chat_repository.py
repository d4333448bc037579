"""Chat history table repository."""

import uuid
from datetime import datetime

from fitit.application.interfaces import ChatRepository, DocumentStore
from fitit.domain.entities import ChatMessage
from fitit.infrastructure.dynamodb.repository import DynamoRepository
from fitit.infrastructure.dynamodb.tables import SESSION_ID_INDEX, TableConfig

_SECONDS_PER_DAY = 24 * 60 * 60


class DynamoChatRepository(DynamoRepository[ChatMessage], ChatRepository):
    """Chat messages grouped by session and expired by DynamoDB TTL."""

    def __init__(self, store: DocumentStore, config: TableConfig, ttl_days: int = 30, **kwargs):
        super().__init__(store, config, ChatMessage, **kwargs)
        self._ttl_seconds = ttl_days * _SECONDS_PER_DAY

    async def append(self, session_id: str, role: str, content: str) -> ChatMessage:
        """Store a new message in ``session_id`` with an expiry ``ttl_days`` from now."""
        timestamp = self._clock()
        message = ChatMessage(
            id=str(uuid.uuid4()),
            session_id=session_id,
            timestamp=timestamp,
            role=role,
            content=content,
            ttl=int(datetime.fromisoformat(timestamp).timestamp()) + self._ttl_seconds,
        )
        return await self.create(message)

    async def get_session_history(self, session_id: str, limit: int | None = None) -> list[ChatMessage]:
        """Messages of a session in chronological order; ``limit`` keeps the most recent ones."""
        messages = await self.query_by_index(SESSION_ID_INDEX, "session_id", session_id)
        messages.sort(key=lambda m: m.timestamp)
        if limit is not None:
            messages = messages[-limit:] if limit > 0 else []
        return messages

"""Persisted chat history entry."""

from typing import Literal

from .base import Entity


class ChatMessage(Entity):
    """One message of a chat session.

    ``timestamp`` orders messages within a session; ``ttl`` is an epoch
    second after which DynamoDB expires the item.
    """

    session_id: str
    timestamp: str
    role: Literal["user", "assistant", "system"]
    content: str
    ttl: int | None = None

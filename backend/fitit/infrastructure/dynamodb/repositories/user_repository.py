"""Users table repository."""

from fitit.application.interfaces import DocumentStore, UserRepository
from fitit.domain.entities import User
from fitit.infrastructure.dynamodb.expressions import build_equality_filter
from fitit.infrastructure.dynamodb.repository import DynamoRepository
from fitit.infrastructure.dynamodb.tables import TableConfig


class DynamoUserRepository(DynamoRepository[User], UserRepository):
    def __init__(self, store: DocumentStore, config: TableConfig, **kwargs):
        super().__init__(store, config, User, **kwargs)

    async def get_by_email(self, email: str) -> User | None:
        expression = build_equality_filter({"email": email})
        users = await self._scan_with_filter(
            expression.expression, expression.names, expression.values
        )
        return users[0] if users else None

"""Abstract document store interface (port) — key/value tables with conditional writes."""

from abc import ABC, abstractmethod
from typing import Any


class StoreError(Exception):
    """Raised when a store command fails."""

    def __init__(self, operation: str, table_name: str, message: str):
        self.operation = operation
        self.table_name = table_name
        super().__init__(f"{operation} on '{table_name}' failed: {message}")


class ConditionCheckFailedError(StoreError):
    """Raised when a conditional write was rejected by the store."""


class DocumentStore(ABC):
    """Port for table-per-entity document persistence.

    Expressions use DynamoDB syntax with ``#name`` / ``:value`` placeholders.
    Every method raises ``StoreError`` on failure and
    ``ConditionCheckFailedError`` when a ``condition_expression`` does not hold.
    """

    @abstractmethod
    async def get_item(self, table_name: str, key: dict[str, Any]) -> dict[str, Any] | None:
        """Fetch one item by primary key; ``None`` when missing."""
        ...

    @abstractmethod
    async def put_item(
        self,
        table_name: str,
        item: dict[str, Any],
        *,
        condition_expression: str | None = None,
    ) -> None:
        """Write a whole item."""
        ...

    @abstractmethod
    async def update_item(
        self,
        table_name: str,
        key: dict[str, Any],
        *,
        update_expression: str,
        expression_attribute_names: dict[str, str],
        expression_attribute_values: dict[str, Any],
        condition_expression: str | None = None,
    ) -> dict[str, Any]:
        """Apply an update expression and return all attributes after the update."""
        ...

    @abstractmethod
    async def delete_item(
        self,
        table_name: str,
        key: dict[str, Any],
        *,
        condition_expression: str | None = None,
    ) -> None:
        """Remove one item by primary key."""
        ...

    @abstractmethod
    async def scan(
        self,
        table_name: str,
        *,
        limit: int | None = None,
        filter_expression: str | None = None,
        expression_attribute_names: dict[str, str] | None = None,
        expression_attribute_values: dict[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        """Read one page of the table, optionally filtered."""
        ...

    @abstractmethod
    async def query(
        self,
        table_name: str,
        *,
        key_condition_expression: str,
        expression_attribute_names: dict[str, str],
        expression_attribute_values: dict[str, Any],
        index_name: str | None = None,
    ) -> list[dict[str, Any]]:
        """Return items matching a key condition on the table or a secondary index."""
        ...

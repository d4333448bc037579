"""DynamoDB-backed DocumentStore using aioboto3.

One store is created per process (in the FastAPI lifespan) and shared by
every repository. It owns the aioboto3 resource, converts numbers between
Python floats and DynamoDB decimals, and translates botocore failures into
``StoreError`` / ``ConditionCheckFailedError``.
"""

import logging
from collections.abc import AsyncIterator, Iterable
from contextlib import AsyncExitStack, asynccontextmanager
from decimal import Decimal
from typing import Any

import aioboto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from fitit.application.interfaces import ConditionCheckFailedError, DocumentStore, StoreError
from fitit.config import Settings
from fitit.infrastructure.dynamodb.tables import TableConfig

logger = logging.getLogger(__name__)

_CONDITION_FAILED = "ConditionalCheckFailedException"
_TABLE_NOT_FOUND = "ResourceNotFoundException"


def to_store_value(value: Any) -> Any:
    """Prepare a Python value for DynamoDB: floats → Decimal, drop None map entries."""
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, dict):
        return {k: to_store_value(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [to_store_value(v) for v in value]
    return value


def from_store_value(value: Any) -> Any:
    """Convert a DynamoDB value back: integral decimals → int, others → float."""
    if isinstance(value, Decimal):
        if value == value.to_integral_value():
            return int(value)
        return float(value)
    if isinstance(value, dict):
        return {k: from_store_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [from_store_value(v) for v in value]
    return value


class DynamoDBDocumentStore(DocumentStore):
    """Implements the DocumentStore port on top of an aioboto3 DynamoDB resource."""

    def __init__(
        self,
        *,
        region_name: str,
        endpoint_url: str | None = None,
        aws_access_key_id: str | None = None,
        aws_secret_access_key: str | None = None,
        max_attempts: int = 3,
        session: aioboto3.Session | None = None,
    ):
        self._session = session or aioboto3.Session(
            aws_access_key_id=aws_access_key_id,
            aws_secret_access_key=aws_secret_access_key,
            region_name=region_name,
        )
        self._resource_kwargs: dict[str, Any] = {
            "region_name": region_name,
            "config": Config(retries={"max_attempts": max_attempts, "mode": "standard"}),
        }
        if endpoint_url:
            self._resource_kwargs["endpoint_url"] = endpoint_url

        self._exit_stack: AsyncExitStack | None = None
        self._resource: Any = None
        self._tables: dict[str, Any] = {}

    @classmethod
    def from_settings(cls, settings: Settings) -> "DynamoDBDocumentStore":
        return cls(
            region_name=settings.aws_region,
            endpoint_url=settings.dynamodb_endpoint_url or None,
            aws_access_key_id=settings.aws_access_key_id if settings.has_static_credentials else None,
            aws_secret_access_key=settings.aws_secret_access_key if settings.has_static_credentials else None,
            max_attempts=settings.dynamodb_max_attempts,
        )

    # ── Lifecycle ───────────────────────────────────────────────────

    async def open(self) -> None:
        """Create the underlying DynamoDB resource. Idempotent."""
        if self._resource is not None:
            return
        stack = AsyncExitStack()
        self._resource = await stack.enter_async_context(
            self._session.resource("dynamodb", **self._resource_kwargs)
        )
        self._exit_stack = stack
        logger.debug("DynamoDB resource opened (%s)", self._resource_kwargs.get("endpoint_url", "aws"))

    async def close(self) -> None:
        if self._exit_stack is not None:
            await self._exit_stack.aclose()
        self._exit_stack = None
        self._resource = None
        self._tables.clear()

    async def __aenter__(self) -> "DynamoDBDocumentStore":
        await self.open()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    # ── DocumentStore port ─────────────────────────────────────────

    async def get_item(self, table_name: str, key: dict[str, Any]) -> dict[str, Any] | None:
        async with self._command("GetItem", table_name):
            table = await self._table(table_name)
            response = await table.get_item(Key=key)
        item = response.get("Item")
        return from_store_value(item) if item is not None else None

    async def put_item(
        self,
        table_name: str,
        item: dict[str, Any],
        *,
        condition_expression: str | None = None,
    ) -> None:
        params: dict[str, Any] = {"Item": to_store_value(item)}
        if condition_expression:
            params["ConditionExpression"] = condition_expression
        async with self._command("PutItem", table_name):
            table = await self._table(table_name)
            await table.put_item(**params)

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
        params: dict[str, Any] = {
            "Key": key,
            "UpdateExpression": update_expression,
            "ExpressionAttributeNames": expression_attribute_names,
            "ExpressionAttributeValues": {
                placeholder: to_store_value(value)
                for placeholder, value in expression_attribute_values.items()
            },
            "ReturnValues": "ALL_NEW",
        }
        if condition_expression:
            params["ConditionExpression"] = condition_expression
        async with self._command("UpdateItem", table_name):
            table = await self._table(table_name)
            response = await table.update_item(**params)
        return from_store_value(response.get("Attributes", {}))

    async def delete_item(
        self,
        table_name: str,
        key: dict[str, Any],
        *,
        condition_expression: str | None = None,
    ) -> None:
        params: dict[str, Any] = {"Key": key}
        if condition_expression:
            params["ConditionExpression"] = condition_expression
        async with self._command("DeleteItem", table_name):
            table = await self._table(table_name)
            await table.delete_item(**params)

    async def scan(
        self,
        table_name: str,
        *,
        limit: int | None = None,
        filter_expression: str | None = None,
        expression_attribute_names: dict[str, str] | None = None,
        expression_attribute_values: dict[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        params: dict[str, Any] = {}
        if limit:
            params["Limit"] = limit
        if filter_expression:
            params["FilterExpression"] = filter_expression
        if expression_attribute_names:
            params["ExpressionAttributeNames"] = expression_attribute_names
        if expression_attribute_values:
            params["ExpressionAttributeValues"] = to_store_value(expression_attribute_values)
        async with self._command("Scan", table_name):
            table = await self._table(table_name)
            response = await table.scan(**params)
        return [from_store_value(item) for item in response.get("Items", [])]

    async def query(
        self,
        table_name: str,
        *,
        key_condition_expression: str,
        expression_attribute_names: dict[str, str],
        expression_attribute_values: dict[str, Any],
        index_name: str | None = None,
    ) -> list[dict[str, Any]]:
        params: dict[str, Any] = {
            "KeyConditionExpression": key_condition_expression,
            "ExpressionAttributeNames": expression_attribute_names,
            "ExpressionAttributeValues": to_store_value(expression_attribute_values),
        }
        if index_name:
            params["IndexName"] = index_name
        async with self._command("Query", table_name):
            table = await self._table(table_name)
            response = await table.query(**params)
        return [from_store_value(item) for item in response.get("Items", [])]

    # ── Local development ─────────────────────────────────────────

    async def create_missing_tables(self, configs: Iterable[TableConfig]) -> list[str]:
        """Create any table (and its secondary indexes) that does not exist yet.

        Intended for DynamoDB Local; deployed tables are provisioned elsewhere.
        Returns the names of the tables that were created.
        """
        created: list[str] = []
        for config in configs:
            async with self._command("CreateTable", config.table_name):
                client = self._require_resource(config.table_name).meta.client
                try:
                    await client.describe_table(TableName=config.table_name)
                    continue
                except ClientError as exc:
                    if exc.response.get("Error", {}).get("Code") != _TABLE_NOT_FOUND:
                        raise
                await client.create_table(**_create_table_params(config))
                waiter = client.get_waiter("table_exists")
                await waiter.wait(TableName=config.table_name)
            logger.info("Created DynamoDB table '%s'", config.table_name)
            created.append(config.table_name)
        return created

    # ── Internals ─────────────────────────────────────────────────

    def _require_resource(self, table_name: str) -> Any:
        if self._resource is None:
            raise StoreError("Connect", table_name, "document store is not open")
        return self._resource

    async def _table(self, table_name: str) -> Any:
        table = self._tables.get(table_name)
        if table is None:
            table = await self._require_resource(table_name).Table(table_name)
            self._tables[table_name] = table
        return table

    @asynccontextmanager
    async def _command(self, operation: str, table_name: str) -> AsyncIterator[None]:
        """Translate botocore failures raised inside the block into StoreError."""
        try:
            yield
        except ClientError as exc:
            error = exc.response.get("Error", {})
            code = error.get("Code", "Unknown")
            message = error.get("Message", str(exc))
            if code == _CONDITION_FAILED:
                raise ConditionCheckFailedError(operation, table_name, message) from exc
            raise StoreError(operation, table_name, f"{code}: {message}") from exc
        except BotoCoreError as exc:
            raise StoreError(operation, table_name, str(exc)) from exc


def _create_table_params(config: TableConfig) -> dict[str, Any]:
    attribute_names = ["id", *dict.fromkeys(config.secondary_indexes.values())]
    params: dict[str, Any] = {
        "TableName": config.table_name,
        "KeySchema": [{"AttributeName": "id", "KeyType": "HASH"}],
        "AttributeDefinitions": [
            {"AttributeName": name, "AttributeType": "S"} for name in attribute_names
        ],
        "BillingMode": "PAY_PER_REQUEST",
    }
    if config.secondary_indexes:
        params["GlobalSecondaryIndexes"] = [
            {
                "IndexName": index_name,
                "KeySchema": [{"AttributeName": key_attr, "KeyType": "HASH"}],
                "Projection": {"ProjectionType": "ALL"},
            }
            for index_name, key_attr in config.secondary_indexes.items()
        ]
    return params

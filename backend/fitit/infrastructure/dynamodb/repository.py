"""Generic DynamoDB repository — CRUD with conditional writes and typed errors.

Every entity kind uses one ``DynamoRepository`` configured by a
``TableConfig``; per-entity repositories only add named queries on top.

Writes are guarded by store-enforced existence conditions:

* ``create`` → ``attribute_not_exists(id)`` (duplicate IDs are rejected)
* ``update`` / ``delete`` → ``attribute_exists(id)`` (missing IDs are rejected),
  optionally AND-ed with expected field values (stale writes are rejected)

so a concurrent check-then-act race can never overwrite or resurrect a
record. Failed conditional writes are never retried.
"""

import logging
from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from typing import Any, TypeVar

from pydantic import ValidationError as PydanticValidationError

from fitit.application.interfaces import (
    ConditionCheckFailedError,
    DocumentStore,
    EntityRepository,
    StoreError,
)
from fitit.domain.entities import Entity
from fitit.domain.exceptions import (
    ConflictError,
    DuplicateEntityError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from fitit.infrastructure.dynamodb.expressions import (
    attribute_exists,
    attribute_not_exists,
    build_key_condition,
    build_precondition,
    build_update_expression,
)
from fitit.infrastructure.dynamodb.tables import TableConfig

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Entity)

_KEY_FIELD = "id"
_MANAGED_ATTRIBUTES = frozenset({_KEY_FIELD, "createdAt", "updatedAt"})


def utc_timestamp() -> str:
    """Current UTC time as an ISO-8601 string with microsecond precision."""
    return datetime.now(timezone.utc).isoformat(timespec="microseconds").replace("+00:00", "Z")


class DynamoRepository(EntityRepository[T]):
    """CRUD access to a single table holding entities of type ``T``."""

    def __init__(
        self,
        store: DocumentStore,
        config: TableConfig,
        entity_type: type[T],
        clock: Callable[[], str] = utc_timestamp,
    ):
        self._store = store
        self._config = config
        self._entity_type = entity_type
        self._clock = clock

    @property
    def table_name(self) -> str:
        return self._config.table_name

    @property
    def entity_name(self) -> str:
        return self._config.entity_name

    # ── Reads ────────────────────────────────────────────────────

    async def get_by_id(self, entity_id: str) -> T | None:
        try:
            item = await self._store.get_item(self.table_name, {_KEY_FIELD: entity_id})
        except StoreError as exc:
            self._log_failure("get", exc, id=entity_id)
            raise StorageError(
                f"Failed to retrieve {self.entity_name}", {"id": entity_id}
            ) from exc
        return self._to_entity(item) if item is not None else None

    async def get_by_id_or_throw(self, entity_id: str) -> T:
        entity = await self.get_by_id(entity_id)
        if entity is None:
            raise NotFoundError(self.entity_name, entity_id)
        return entity

    async def get_all(self, limit: int | None = None) -> list[T]:
        """Scan the table, optionally capped at ``limit`` items.

        Returns a single scan page; there is no continuation cursor, so this
        is only suitable for small tables.
        """
        try:
            items = await self._store.scan(self.table_name, limit=limit)
        except StoreError as exc:
            self._log_failure("scan", exc)
            raise StorageError(f"Failed to retrieve {self.entity_name} list") from exc
        return [self._to_entity(item) for item in items]

    # ── Writes ───────────────────────────────────────────────────

    async def create(self, entity: T) -> T:
        now = self._clock()
        item = entity.to_item()
        item["createdAt"] = now
        item["updatedAt"] = now

        try:
            await self._store.put_item(
                self.table_name,
                item,
                condition_expression=attribute_not_exists(_KEY_FIELD),
            )
        except ConditionCheckFailedError as exc:
            logger.warning("%s '%s' already exists", self.entity_name, entity.id)
            raise DuplicateEntityError(self.entity_name, entity.id) from exc
        except StoreError as exc:
            self._log_failure("create", exc, id=entity.id)
            raise StorageError(
                f"Failed to create {self.entity_name}", {"id": entity.id}
            ) from exc

        logger.info("Created %s id=%s", self.entity_name, entity.id)
        return self._to_entity(item)

    async def update(
        self,
        entity_id: str,
        changes: Mapping[str, Any],
        expected: Mapping[str, Any] | None = None,
    ) -> T:
        """Merge ``changes`` into the stored entity and return the result.

        The ``id`` and timestamp fields are never taken from ``changes`` and
        ``None`` values count as "not supplied". Every change is validated
        against the entity model before anything is written. When nothing
        is left to apply, the stored entity is returned without a write.

        ``expected`` makes the write conditional on the stored values of
        those fields; if another writer changed them first, ``ConflictError``
        is raised and nothing is written.
        """
        attributes = self._validated_attributes(changes)
        if not attributes:
            return await self.get_by_id_or_throw(entity_id)

        expression = build_update_expression(
            {**attributes, "updatedAt": self._clock()}, key_field=_KEY_FIELD
        )
        condition = build_precondition(self._validated_attributes(expected or {}), _KEY_FIELD)
        try:
            attributes_after = await self._store.update_item(
                self.table_name,
                {_KEY_FIELD: entity_id},
                update_expression=expression.expression,
                expression_attribute_names={**expression.names, **condition.names},
                expression_attribute_values={**expression.values, **condition.values},
                condition_expression=condition.expression,
            )
        except ConditionCheckFailedError as exc:
            if expected and await self.get_by_id(entity_id) is not None:
                logger.warning("Cannot update %s '%s': it was modified concurrently", self.entity_name, entity_id)
                raise ConflictError(
                    f"{self.entity_name} was modified by another request",
                    {"id": entity_id, "expected": dict(zip(condition.names.values(), condition.values.values()))},
                ) from exc
            logger.warning("Cannot update %s '%s': it does not exist", self.entity_name, entity_id)
            raise NotFoundError(self.entity_name, entity_id) from exc
        except StoreError as exc:
            self._log_failure("update", exc, id=entity_id)
            raise StorageError(
                f"Failed to update {self.entity_name}", {"id": entity_id}
            ) from exc

        logger.info("Updated %s id=%s", self.entity_name, entity_id)
        return self._to_entity(attributes_after)

    async def delete(self, entity_id: str) -> None:
        try:
            await self._store.delete_item(
                self.table_name,
                {_KEY_FIELD: entity_id},
                condition_expression=attribute_exists(_KEY_FIELD),
            )
        except ConditionCheckFailedError as exc:
            logger.warning("Cannot delete %s '%s': it does not exist", self.entity_name, entity_id)
            raise NotFoundError(self.entity_name, entity_id) from exc
        except StoreError as exc:
            self._log_failure("delete", exc, id=entity_id)
            raise StorageError(
                f"Failed to delete {self.entity_name}", {"id": entity_id}
            ) from exc

        logger.info("Deleted %s id=%s", self.entity_name, entity_id)

    # ── Secondary access paths ──────────────────────────────────

    async def query_by_index(self, index_name: str, key_field: str, key_value: Any) -> list[T]:
        """Return every entity whose ``key_field`` equals ``key_value`` on a secondary index.

        No matches yields an empty list. An unknown index is reported by the
        store as a generic failure and surfaces as ``StorageError``.
        """
        condition = build_key_condition(self._entity_type.attribute_name(key_field), key_value)
        try:
            items = await self._store.query(
                self.table_name,
                index_name=index_name,
                key_condition_expression=condition.expression,
                expression_attribute_names=condition.names,
                expression_attribute_values=condition.values,
            )
        except StoreError as exc:
            self._log_failure("query", exc, index=index_name, key=key_field)
            raise StorageError(
                f"Failed to query {self.entity_name}", {"index": index_name}
            ) from exc
        return [self._to_entity(item) for item in items]

    async def _scan_with_filter(
        self,
        filter_expression: str,
        expression_attribute_names: dict[str, str],
        expression_attribute_values: dict[str, Any],
    ) -> list[T]:
        try:
            items = await self._store.scan(
                self.table_name,
                filter_expression=filter_expression,
                expression_attribute_names=expression_attribute_names,
                expression_attribute_values=expression_attribute_values,
            )
        except StoreError as exc:
            self._log_failure("filter", exc, filter=filter_expression)
            raise StorageError(f"Failed to filter {self.entity_name}") from exc
        return [self._to_entity(item) for item in items]

    # ── Helpers ──────────────────────────────────────────────────

    def _validated_attributes(self, changes: Mapping[str, Any]) -> dict[str, Any]:
        """Map ``changes`` to stored attribute names, validating each value against the model."""
        attributes: dict[str, Any] = {}
        for name, value in changes.items():
            field_name = self._entity_type.field_name(name)
            if field_name is None:
                raise ValidationError(
                    f"Unknown {self.entity_name} field '{name}'", {"field": name}
                )
            attr = self._entity_type.attribute_name(field_name)
            if value is None or attr in _MANAGED_ATTRIBUTES:
                continue
            try:
                attributes[attr] = self._entity_type.validate_field(field_name, value)
            except PydanticValidationError as exc:
                raise ValidationError(
                    f"Invalid value for {self.entity_name} field '{field_name}'",
                    {"field": field_name, "reason": exc.errors()[0]["msg"]},
                ) from exc
        return attributes

    def _to_entity(self, item: dict[str, Any]) -> T:
        return self._entity_type.from_item(item)

    def _log_failure(self, operation: str, error: Exception, **context: Any) -> None:
        details = " ".join(f"{k}={v}" for k, v in context.items())
        logger.error(
            "Failed to %s %s (table=%s %s): %s",
            operation,
            self.entity_name,
            self.table_name,
            details,
            error,
        )

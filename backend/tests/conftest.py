"""Shared test fixtures — an in-memory DocumentStore that honours DynamoDB conditions."""

import copy
import re
from typing import Any

import pytest

from fitit.application.interfaces import ConditionCheckFailedError, DocumentStore, StoreError
from fitit.config import Settings
from fitit.infrastructure.dynamodb.tables import TableConfig, build_table_configs

_EXISTS = re.compile(r"^attribute_exists\((\w+)\)$")
_NOT_EXISTS = re.compile(r"^attribute_not_exists\((\w+)\)$")
_CONTAINS = re.compile(r"^contains\((#\w+), (:\w+)\)$")
_EQUALS = re.compile(r"^(#\w+) = (:\w+)$")


class InMemoryDocumentStore(DocumentStore):
    """Dict-backed fake store.

    Understands exactly the expression shapes the repositories emit:
    existence conditions, ``SET`` updates, ``#k = :v`` key conditions and
    AND/OR filters of equality and ``contains`` clauses.
    """

    def __init__(self, tables: dict[str, TableConfig] | None = None):
        configs = tables or build_table_configs(Settings())
        self._indexes = {c.table_name: dict(c.secondary_indexes) for c in configs.values()}
        self.tables: dict[str, dict[str, dict[str, Any]]] = {name: {} for name in self._indexes}
        self.calls: list[str] = []
        self._failures: dict[str, Exception] = {}

    # ── Test helpers ──

    def fail_on(self, operation: str, error: Exception | None = None) -> None:
        """Make every subsequent ``operation`` call raise ``error``."""
        self._failures[operation] = error or StoreError(operation, "*", "ProvisionedThroughputExceededException")

    @property
    def writes(self) -> list[str]:
        return [c for c in self.calls if c in {"put_item", "update_item", "delete_item"}]

    def raw(self, table_name: str, key: str) -> dict[str, Any] | None:
        return self.tables[table_name].get(key)

    # ── DocumentStore ──

    async def get_item(self, table_name, key):
        table = self._enter("get_item", table_name)
        item = table.get(key["id"])
        return copy.deepcopy(item) if item is not None else None

    async def put_item(self, table_name, item, *, condition_expression=None):
        table = self._enter("put_item", table_name)
        self._check(table_name, table.get(item["id"]), condition_expression)
        table[item["id"]] = copy.deepcopy({k: v for k, v in item.items() if v is not None})

    async def update_item(
        self,
        table_name,
        key,
        *,
        update_expression,
        expression_attribute_names,
        expression_attribute_values,
        condition_expression=None,
    ):
        table = self._enter("update_item", table_name)
        existing = table.get(key["id"])
        self._check(
            table_name, existing, condition_expression, expression_attribute_names, expression_attribute_values
        )

        item = copy.deepcopy(existing) if existing is not None else dict(key)
        assert update_expression.startswith("SET ")
        for assignment in update_expression[len("SET "):].split(", "):
            name, value = assignment.split(" = ")
            item[expression_attribute_names[name]] = copy.deepcopy(expression_attribute_values[value])
        table[key["id"]] = item
        return copy.deepcopy(item)

    async def delete_item(self, table_name, key, *, condition_expression=None):
        table = self._enter("delete_item", table_name)
        self._check(table_name, table.get(key["id"]), condition_expression)
        table.pop(key["id"], None)

    async def scan(
        self,
        table_name,
        *,
        limit=None,
        filter_expression=None,
        expression_attribute_names=None,
        expression_attribute_values=None,
    ):
        table = self._enter("scan", table_name)
        items = list(table.values())
        if limit:
            items = items[:limit]
        if filter_expression:
            items = [
                item
                for item in items
                if _matches(item, filter_expression, expression_attribute_names, expression_attribute_values)
            ]
        return copy.deepcopy(items)

    async def query(
        self,
        table_name,
        *,
        key_condition_expression,
        expression_attribute_names,
        expression_attribute_values,
        index_name=None,
    ):
        table = self._enter("query", table_name)
        if index_name is not None and index_name not in self._indexes[table_name]:
            raise StoreError("Query", table_name, "ValidationException: The table does not have the specified index")
        items = [
            item
            for item in table.values()
            if _matches(item, key_condition_expression, expression_attribute_names, expression_attribute_values)
        ]
        return copy.deepcopy(items)

    # ── Internals ──

    def _enter(self, operation: str, table_name: str) -> dict[str, dict[str, Any]]:
        self.calls.append(operation)
        if operation in self._failures:
            raise self._failures[operation]
        if table_name not in self.tables:
            raise StoreError(operation, table_name, "ResourceNotFoundException: table not found")
        return self.tables[table_name]

    @staticmethod
    def _check(
        table_name: str,
        existing: dict | None,
        condition: str | None,
        names: dict | None = None,
        values: dict | None = None,
    ) -> None:
        if condition is None:
            return
        for clause in condition.split(" AND "):
            if match := _EXISTS.match(clause):
                holds = existing is not None and match.group(1) in existing
            elif match := _NOT_EXISTS.match(clause):
                holds = existing is None or match.group(1) not in existing
            else:
                holds = existing is not None and _matches(existing, clause, names, values)
            if not holds:
                raise ConditionCheckFailedError("Write", table_name, "The conditional request failed")


def _matches(item: dict, expression: str, names: dict | None, values: dict | None) -> bool:
    names = names or {}
    values = values or {}

    def clause(text: str) -> bool:
        if match := _CONTAINS.match(text):
            actual = item.get(names[match.group(1)])
            return isinstance(actual, str) and values[match.group(2)] in actual
        if match := _EQUALS.match(text):
            attr = names[match.group(1)]
            return attr in item and item[attr] == values[match.group(2)]
        raise AssertionError(f"Unsupported expression clause: {text}")

    return any(
        all(clause(part) for part in disjunct.split(" AND "))
        for disjunct in expression.split(" OR ")
    )


class TickingClock:
    """Deterministic timestamp source; each call is one second later."""

    def __init__(self) -> None:
        self._tick = 0

    def __call__(self) -> str:
        self._tick += 1
        minutes, seconds = divmod(self._tick, 60)
        return f"2026-01-01T00:{minutes:02d}:{seconds:02d}.000000Z"


@pytest.fixture
def store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture
def tables() -> dict[str, TableConfig]:
    return build_table_configs(Settings())


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()

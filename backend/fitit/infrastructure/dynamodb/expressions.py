"""DynamoDB expression builders — pure functions, no store dependency.

All attribute names are referenced through synthetic ``#`` placeholders and
all values through ``:`` placeholders, so fields named after DynamoDB
reserved words (``name``, ``status``, ``timestamp`` ...) are always safe.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Expression:
    """A DynamoDB expression with its placeholder tables."""

    expression: str
    names: dict[str, str] = field(default_factory=dict)
    values: dict[str, Any] = field(default_factory=dict)


def build_update_expression(
    fields: Mapping[str, Any],
    key_field: str = "id",
) -> Expression | None:
    """Translate a field→value mapping into a ``SET`` update expression.

    The key field is never written. Returns ``None`` when nothing is left
    to set, so callers can skip the write entirely.

    >>> build_update_expression({"name": "Drill", "id": "p1"}).expression
    'SET #attr0 = :val0'
    """
    assignments: list[str] = []
    names: dict[str, str] = {}
    values: dict[str, Any] = {}

    for attr, value in fields.items():
        if attr == key_field:
            continue
        index = len(assignments)
        name_placeholder = f"#attr{index}"
        value_placeholder = f":val{index}"
        assignments.append(f"{name_placeholder} = {value_placeholder}")
        names[name_placeholder] = attr
        values[value_placeholder] = value

    if not assignments:
        return None
    return Expression(f"SET {', '.join(assignments)}", names, values)


def build_key_condition(key_field: str, key_value: Any) -> Expression:
    """Exact-match key condition for a query."""
    return Expression("#key = :value", {"#key": key_field}, {":value": key_value})


def build_equality_filter(criteria: Mapping[str, Any]) -> Expression:
    """AND-ed equality filter, e.g. ``#f0 = :v0 AND #f1 = :v1``."""
    if not criteria:
        raise ValueError("At least one filter criterion is required")

    clauses: list[str] = []
    names: dict[str, str] = {}
    values: dict[str, Any] = {}
    for index, (attr, value) in enumerate(criteria.items()):
        clauses.append(f"#f{index} = :v{index}")
        names[f"#f{index}"] = attr
        values[f":v{index}"] = value
    return Expression(" AND ".join(clauses), names, values)


def build_contains_filter(attributes: Iterable[str], needle: str) -> Expression:
    """OR-ed substring filter over several string attributes."""
    attributes = list(attributes)
    if not attributes:
        raise ValueError("At least one attribute is required")

    names = {f"#f{index}": attr for index, attr in enumerate(attributes)}
    clauses = [f"contains({placeholder}, :needle)" for placeholder in names]
    return Expression(" OR ".join(clauses), names, {":needle": needle})


def attribute_exists(key_field: str = "id") -> str:
    return f"attribute_exists({key_field})"


def attribute_not_exists(key_field: str = "id") -> str:
    return f"attribute_not_exists({key_field})"


def build_precondition(expected: Mapping[str, Any], key_field: str = "id") -> Expression:
    """Existence check plus equality on ``expected``, e.g. ``attribute_exists(id) AND #c0 = :c0``.

    Uses its own placeholder prefixes so it can be merged with an update expression.
    """
    clauses = [attribute_exists(key_field)]
    names: dict[str, str] = {}
    values: dict[str, Any] = {}
    for index, (attr, value) in enumerate(expected.items()):
        clauses.append(f"#c{index} = :c{index}")
        names[f"#c{index}"] = attr
        values[f":c{index}"] = value
    return Expression(" AND ".join(clauses), names, values)

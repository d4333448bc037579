"""Base entity shared by every stored document."""

from functools import lru_cache
from typing import Annotated, Any, Self

from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic.alias_generators import to_camel


class Entity(BaseModel):
    """A stored document identified by a string ``id``.

    Python attributes are snake_case; the stored attribute names are their
    camelCase aliases (``customer_id`` is stored as ``customerId``).
    ``created_at`` / ``updated_at`` are ISO-8601 strings managed by the
    repository, never by callers.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    id: str
    created_at: str | None = None
    updated_at: str | None = None

    def to_item(self) -> dict[str, Any]:
        """Serialize to a stored item keyed by attribute name."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> Self:
        return cls.model_validate(item)

    @classmethod
    def attribute_name(cls, field_name: str) -> str:
        """Map a Python field name to its stored attribute name.

        Names that are already attribute names (or unknown to the model)
        pass through unchanged.
        """
        field = cls.model_fields.get(field_name)
        if field is not None and field.alias:
            return field.alias
        return field_name

    @classmethod
    def field_name(cls, name: str) -> str | None:
        """Resolve a field or stored attribute name to the field name; ``None`` if unknown."""
        if name in cls.model_fields:
            return name
        for field_name, field in cls.model_fields.items():
            if field.alias == name:
                return field_name
        return None

    @classmethod
    def validate_field(cls, field_name: str, value: Any) -> Any:
        """Validate one field value and return it in stored (JSON) form.

        Raises ``pydantic.ValidationError`` when the value breaks the field's
        type or constraints.
        """
        adapter = _field_adapter(cls, field_name)
        return adapter.dump_python(adapter.validate_python(value), mode="json")


@lru_cache(maxsize=None)
def _field_adapter(entity_type: type[Entity], field_name: str) -> TypeAdapter:
    field = entity_type.model_fields[field_name]
    annotation = field.annotation
    if field.metadata:
        annotation = Annotated[(annotation, *field.metadata)]
    return TypeAdapter(annotation)

"""Per-entity table configuration — table name, entity label, secondary indexes."""

from collections.abc import Mapping
from dataclasses import dataclass, field

from fitit.config import Settings

CATEGORY_INDEX = "category-index"
PROFESSION_INDEX = "profession-index"
CUSTOMER_ID_INDEX = "customerId-index"
STATUS_INDEX = "status-index"
SESSION_ID_INDEX = "sessionId-index"


@dataclass(frozen=True)
class TableConfig:
    """Everything a repository needs to know about its table.

    ``secondary_indexes`` maps index name → partition key attribute.
    """

    table_name: str
    entity_name: str
    secondary_indexes: Mapping[str, str] = field(default_factory=dict)


def build_table_configs(settings: Settings) -> dict[str, TableConfig]:
    """Table configuration for every entity kind, keyed by entity name."""
    configs = [
        TableConfig(
            table_name=settings.dynamodb_products_table,
            entity_name="Product",
            secondary_indexes={CATEGORY_INDEX: "category"},
        ),
        TableConfig(
            table_name=settings.dynamodb_service_profiles_table,
            entity_name="ServiceProfile",
            secondary_indexes={PROFESSION_INDEX: "profession"},
        ),
        TableConfig(
            table_name=settings.dynamodb_service_requests_table,
            entity_name="ServiceRequest",
            secondary_indexes={
                CUSTOMER_ID_INDEX: "customerId",
                STATUS_INDEX: "status",
            },
        ),
        TableConfig(
            table_name=settings.dynamodb_chat_table,
            entity_name="ChatMessage",
            secondary_indexes={SESSION_ID_INDEX: "sessionId"},
        ),
        TableConfig(
            table_name=settings.dynamodb_users_table,
            entity_name="User",
        ),
    ]
    return {config.entity_name: config for config in configs}

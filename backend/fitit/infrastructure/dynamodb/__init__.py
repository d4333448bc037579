from .repository import DynamoRepository, utc_timestamp
from .store import DynamoDBDocumentStore
from .tables import TableConfig, build_table_configs

__all__ = [
    "DynamoRepository",
    "DynamoDBDocumentStore",
    "TableConfig",
    "build_table_configs",
    "utc_timestamp",
]

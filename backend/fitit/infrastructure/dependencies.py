"""FastAPI dependency injection — wires infrastructure to application layer.

The document store is created once in the application lifespan and kept on
``app.state``; repositories and services are cheap per-request wrappers
around it.
"""

from fastapi import Depends, Request

from fitit.application.interfaces import DocumentStore
from fitit.application.services import (
    ProductService,
    ServiceProfileService,
    ServiceRequestService,
    UserService,
)
from fitit.config import get_settings
from fitit.infrastructure.dynamodb.repositories import (
    DynamoProductRepository,
    DynamoServiceProfileRepository,
    DynamoServiceRequestRepository,
    DynamoUserRepository,
)
from fitit.infrastructure.dynamodb.tables import TableConfig, build_table_configs


def get_document_store(request: Request) -> DocumentStore:
    """Provides the process-wide document store opened in the lifespan."""
    return request.app.state.document_store


def get_table_configs() -> dict[str, TableConfig]:
    return build_table_configs(get_settings())


def get_product_service(
    store: DocumentStore = Depends(get_document_store),
    tables: dict[str, TableConfig] = Depends(get_table_configs),
) -> ProductService:
    return ProductService(DynamoProductRepository(store, tables["Product"]))


def get_service_profile_service(
    store: DocumentStore = Depends(get_document_store),
    tables: dict[str, TableConfig] = Depends(get_table_configs),
) -> ServiceProfileService:
    return ServiceProfileService(DynamoServiceProfileRepository(store, tables["ServiceProfile"]))


def get_service_request_service(
    store: DocumentStore = Depends(get_document_store),
    tables: dict[str, TableConfig] = Depends(get_table_configs),
) -> ServiceRequestService:
    return ServiceRequestService(DynamoServiceRequestRepository(store, tables["ServiceRequest"]))


def get_user_service(
    store: DocumentStore = Depends(get_document_store),
    tables: dict[str, TableConfig] = Depends(get_table_configs),
) -> UserService:
    return UserService(DynamoUserRepository(store, tables["User"]))

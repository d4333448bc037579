from .document_store import ConditionCheckFailedError, DocumentStore, StoreError
from .entity_repository import EntityRepository
from .product_repository import ProductRepository
from .service_profile_repository import ServiceProfileRepository
from .service_request_repository import ServiceRequestRepository
from .chat_repository import ChatRepository
from .user_repository import UserRepository

__all__ = [
    "ConditionCheckFailedError",
    "DocumentStore",
    "StoreError",
    "EntityRepository",
    "ProductRepository",
    "ServiceProfileRepository",
    "ServiceRequestRepository",
    "ChatRepository",
    "UserRepository",
]

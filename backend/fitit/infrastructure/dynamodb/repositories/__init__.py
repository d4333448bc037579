from .product_repository import DynamoProductRepository
from .service_profile_repository import DynamoServiceProfileRepository
from .service_request_repository import DynamoServiceRequestRepository
from .chat_repository import DynamoChatRepository
from .user_repository import DynamoUserRepository

__all__ = [
    "DynamoProductRepository",
    "DynamoServiceProfileRepository",
    "DynamoServiceRequestRepository",
    "DynamoChatRepository",
    "DynamoUserRepository",
]

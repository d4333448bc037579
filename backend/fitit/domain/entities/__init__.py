from .base import Entity
from .product import Product
from .service_profile import ServiceProfile
from .service_request import ServiceRequest, ServiceRequestStatus
from .chat_message import ChatMessage
from .user import User, UserRole

__all__ = [
    "Entity",
    "Product",
    "ServiceProfile",
    "ServiceRequest",
    "ServiceRequestStatus",
    "ChatMessage",
    "User",
    "UserRole",
]

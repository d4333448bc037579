from .product_service import ProductService
from .service_profile_service import ServiceProfileService
from .service_request_service import ServiceRequestService
from .user_service import UserService

__all__ = [
    "ProductService",
    "ServiceProfileService",
    "ServiceRequestService",
    "UserService",
]

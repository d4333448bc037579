from .product import ProductCreate, ProductUpdate, ProductResponse
from .service_profile import (
    AvailabilityUpdate,
    ServiceProfileCreate,
    ServiceProfileUpdate,
    ServiceProfileResponse,
)
from .service_request import (
    AcceptRequest,
    ServiceRequestCreate,
    ServiceRequestResponse,
    StatusUpdate,
)
from .user import UserCreate, UserUpdate, UserResponse

__all__ = [
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "AvailabilityUpdate",
    "ServiceProfileCreate",
    "ServiceProfileUpdate",
    "ServiceProfileResponse",
    "AcceptRequest",
    "ServiceRequestCreate",
    "ServiceRequestResponse",
    "StatusUpdate",
    "UserCreate",
    "UserUpdate",
    "UserResponse",
]

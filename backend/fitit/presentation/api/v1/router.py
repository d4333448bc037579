"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from fitit.presentation.api.v1.endpoints.health import router as health_router
from fitit.presentation.api.v1.endpoints.products import router as products_router
from fitit.presentation.api.v1.endpoints.service_profiles import router as service_profiles_router
from fitit.presentation.api.v1.endpoints.service_requests import router as service_requests_router
from fitit.presentation.api.v1.endpoints.users import router as users_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(products_router)
router.include_router(service_profiles_router)
router.include_router(service_requests_router)
router.include_router(users_router)

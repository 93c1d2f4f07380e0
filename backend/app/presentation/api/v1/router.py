"""V1 API router — aggregates all v1 endpoint routers under /api/v1."""

from fastapi import APIRouter

from app.presentation.api.v1.endpoints.health import router as health_router
from app.presentation.api.v1.endpoints.attributes import router as attributes_router
from app.presentation.api.v1.endpoints.attribute_meta import router as attribute_meta_router
from app.presentation.api.v1.endpoints.host_records import router as host_records_router

router = APIRouter(prefix="/api/v1")
router.include_router(health_router)
router.include_router(attributes_router)
router.include_router(attribute_meta_router)
router.include_router(host_records_router)

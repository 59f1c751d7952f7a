"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from cms.presentation.api.v1.endpoints.health import router as health_router
from cms.presentation.api.v1.endpoints.contents import router as contents_router
from cms.presentation.api.v1.endpoints.authors import router as authors_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(contents_router)
router.include_router(authors_router)

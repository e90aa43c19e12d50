"""V1 API router: aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from homekeep.presentation.api.v1.endpoints.health import router as health_router
from homekeep.presentation.api.v1.endpoints.categories import router as categories_router
from homekeep.presentation.api.v1.endpoints.photos import router as photos_router
from homekeep.presentation.api.v1.endpoints.notes import router as notes_router
from homekeep.presentation.api.v1.endpoints.warranties import router as warranties_router
from homekeep.presentation.api.v1.endpoints.maintenance_events import router as events_router
from homekeep.presentation.api.v1.endpoints.dashboard import router as dashboard_router
from homekeep.presentation.api.v1.endpoints.export import router as export_router
from homekeep.presentation.api.v1.endpoints.users import router as users_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(categories_router)
router.include_router(photos_router)
router.include_router(notes_router)
router.include_router(warranties_router)
router.include_router(events_router)
router.include_router(dashboard_router)
router.include_router(export_router)
router.include_router(users_router)

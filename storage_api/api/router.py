from fastapi import APIRouter

from storage_api.api.endpoints.health import router as health_router
from storage_api.api.endpoints.me import router as me_router
from storage_api.api.endpoints.manager_storage_listings import router as manager_storage_listings_router
from storage_api.api.endpoints.manager_overstay_defaults import router as manager_overstay_defaults_router
from storage_api.api.endpoints.chef_storage_listings import router as chef_storage_listings_router


router = APIRouter(prefix="/api")
router.include_router(health_router, tags=["health"])
router.include_router(me_router, tags=["me"])
router.include_router(manager_storage_listings_router, tags=["manager"])
router.include_router(manager_overstay_defaults_router, tags=["manager"])
router.include_router(chef_storage_listings_router, tags=["chef"])

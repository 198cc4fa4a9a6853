from fastapi import APIRouter

from habitvault.api.analytics import router as analytics_router
from habitvault.api.habits import router as habits_router
from habitvault.api.settings import router as settings_router
from habitvault.api.users import router as users_router

router = APIRouter()
router.include_router(users_router)
router.include_router(habits_router)
router.include_router(analytics_router)
router.include_router(settings_router)

__all__ = ["router"]

"""Reference store router configuration."""

from fastapi import APIRouter

from api.routes.profile import router as profile_router
from api.routes.projects import router as projects_router
from api.routes.upload import router as upload_router

router = APIRouter()
router.include_router(profile_router)
router.include_router(projects_router)
router.include_router(upload_router)

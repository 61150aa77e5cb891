from fastapi import APIRouter

from signoff.backend.app.api.v1.events import router as events_router
from signoff.backend.app.api.v1.projects import router as project_router
from signoff.backend.app.api.v1.storage import router as storage_router

api_router = APIRouter()
api_router.include_router(project_router.router)
api_router.include_router(storage_router.router)
api_router.include_router(events_router.router)

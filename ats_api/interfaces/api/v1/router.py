from fastapi import APIRouter

from ats_api.interfaces.api.v1.routes.candidates import router as candidates_router
from ats_api.interfaces.api.v1.routes.jobs import router as jobs_router
from ats_api.interfaces.api.v1.routes.ping import router as ping_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(candidates_router)
api_router.include_router(jobs_router)
api_router.include_router(ping_router)

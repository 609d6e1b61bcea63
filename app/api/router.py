"""API router aggregating the per-entity routers."""

from fastapi import APIRouter

from app.api.routes.resources import router as resources_router
from app.api.routes.resources_skills import router as resources_skills_router
from app.api.routes.skills import router as skills_router
from app.api.routes.themes import router as themes_router

api_router = APIRouter()
api_router.include_router(resources_router)
api_router.include_router(themes_router)
api_router.include_router(skills_router)
api_router.include_router(resources_skills_router)

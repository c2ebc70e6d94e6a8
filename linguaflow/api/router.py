from fastapi import APIRouter

from linguaflow.api.routes import health, languages, translation

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(languages.router, prefix="/languages", tags=["languages"])
api_router.include_router(translation.router, prefix="/translate", tags=["translation"])

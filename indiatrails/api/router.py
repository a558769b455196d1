"""
API router - aggregates all endpoint modules (RESTful structure).
"""

from fastapi import APIRouter

from indiatrails.api.endpoints import auth, difficulties, health, regions, walks
from indiatrails.api.v1.router import api_router as v1_router
from indiatrails.api.v2.router import api_router as v2_router

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(regions.router, prefix="/regions", tags=["regions"])
api_router.include_router(difficulties.router, prefix="/difficulties", tags=["difficulties"])
api_router.include_router(walks.router, prefix="/walks", tags=["walks"])
api_router.include_router(v1_router)
api_router.include_router(v2_router)

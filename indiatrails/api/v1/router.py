"""
API v1 router - versioned walk listing.
"""

from fastapi import APIRouter

from indiatrails.api.v1.endpoints import walks

api_router = APIRouter(prefix="/v1")

api_router.include_router(walks.router, prefix="/walks", tags=["walks v1"])

"""
API v2 router - versioned walk listing.
"""

from fastapi import APIRouter

from indiatrails.api.v2.endpoints import walks

api_router = APIRouter(prefix="/v2")

api_router.include_router(walks.router, prefix="/walks", tags=["walks v2"])

"""
Region CRUD endpoints - RESTful resource (GET/POST/PUT/DELETE).
Challenge: Public reads, authenticated writes, 404 handling.
Design: Thin controller; repository does the data access, mappings shape the payload.
"""

import logging
import uuid

from fastapi import APIRouter, HTTPException, Request, Response, status

from indiatrails.core.dependencies import CurrentUser
from indiatrails.db.repositories.region_repository import RegionRepository
from indiatrails.db.session import DbSession
from indiatrails.mappings import region_from_request, region_to_response
from indiatrails.schemas.region import AddRegionRequest, RegionResponse, UpdateRegionRequest

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=list[RegionResponse])
async def list_regions(session: DbSession):
    """List all regions. Public."""
    regions = await RegionRepository(session).get_all()
    logger.info("Found %d regions", len(regions))
    return [region_to_response(r) for r in regions]


@router.get("/{region_id}", response_model=RegionResponse, name="get_region_by_id")
async def get_region(session: DbSession, region_id: uuid.UUID):
    """Get single region. Public."""
    region = await RegionRepository(session).get_by_id(region_id)
    if not region:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No region found with given id!")
    return region_to_response(region)


@router.post("", response_model=RegionResponse, status_code=status.HTTP_201_CREATED)
async def create_region(
    request: Request,
    response: Response,
    session: DbSession,
    data: AddRegionRequest,
    user: CurrentUser,
):
    """Create region (authenticated). Location header points at the new resource."""
    region = await RegionRepository(session).create(region_from_request(data))
    response.headers["Location"] = str(request.url_for("get_region_by_id", region_id=region.id))
    return region_to_response(region)


@router.put("/{region_id}", response_model=RegionResponse)
async def update_region(session: DbSession, region_id: uuid.UUID, data: UpdateRegionRequest, user: CurrentUser):
    region = await RegionRepository(session).update(region_id, region_from_request(data))
    if not region:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="No region found with given id to update!"
        )
    return region_to_response(region)


@router.delete("/{region_id}", response_model=RegionResponse)
async def delete_region(session: DbSession, region_id: uuid.UUID, user: CurrentUser):
    """Delete region and, by cascade, its walks. Returns the deleted region."""
    region = await RegionRepository(session).delete(region_id)
    if not region:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="No region found with given id to delete!"
        )
    return region_to_response(region)

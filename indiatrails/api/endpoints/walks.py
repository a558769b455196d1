"""
Walk CRUD endpoints - RESTful resource with filtered, sorted and paged listing.
"""

import uuid

from fastapi import APIRouter, HTTPException, Request, Response, status

from indiatrails.api.walk_listing import WalkListQuery, fetch_walks
from indiatrails.db.repositories.walk_repository import WalkRepository
from indiatrails.db.session import DbSession
from indiatrails.mappings import walk_from_request, walk_to_response
from indiatrails.schemas.walk import AddWalkRequest, UpdateWalkRequest, WalkResponse

router = APIRouter()


@router.get("", response_model=list[WalkResponse])
async def list_walks(session: DbSession, params: WalkListQuery):
    walks = await fetch_walks(session, params)
    return [walk_to_response(w) for w in walks]


@router.get("/{walk_id}", response_model=WalkResponse, name="get_walk_by_id")
async def get_walk(session: DbSession, walk_id: uuid.UUID):
    walk = await WalkRepository(session).get_by_id(walk_id)
    if not walk:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No walk found with given id!")
    return walk_to_response(walk)


@router.post("", response_model=WalkResponse, status_code=status.HTTP_201_CREATED)
async def create_walk(request: Request, response: Response, session: DbSession, data: AddWalkRequest):
    """Create walk. Unknown regionId/difficultyId is a 400."""
    walk = await WalkRepository(session).create(walk_from_request(data))
    response.headers["Location"] = str(request.url_for("get_walk_by_id", walk_id=walk.id))
    return walk_to_response(walk)


@router.put("/{walk_id}", response_model=WalkResponse)
async def update_walk(session: DbSession, walk_id: uuid.UUID, data: UpdateWalkRequest):
    walk = await WalkRepository(session).update(walk_id, walk_from_request(data))
    if not walk:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No walk found with given id to update!")
    return walk_to_response(walk)


@router.delete("/{walk_id}", response_model=WalkResponse)
async def delete_walk(session: DbSession, walk_id: uuid.UUID):
    walk = await WalkRepository(session).delete(walk_id)
    if not walk:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No walk found with given id to delete!")
    return walk_to_response(walk)

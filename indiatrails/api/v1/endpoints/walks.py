"""Walk listing, API version 1: length exposed as lengthInKm."""

from fastapi import APIRouter

from indiatrails.api.walk_listing import WalkListQuery, fetch_walks
from indiatrails.db.session import DbSession
from indiatrails.mappings import walk_to_v1
from indiatrails.schemas.walk import WalkResponseV1

router = APIRouter()


@router.get("", response_model=list[WalkResponseV1])
async def list_walks_v1(session: DbSession, params: WalkListQuery):
    walks = await fetch_walks(session, params)
    return [walk_to_v1(w) for w in walks]

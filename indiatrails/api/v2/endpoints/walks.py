"""Walk listing, API version 2: length exposed as length."""

from fastapi import APIRouter

from indiatrails.api.walk_listing import WalkListQuery, fetch_walks
from indiatrails.db.session import DbSession
from indiatrails.mappings import walk_to_v2
from indiatrails.schemas.walk import WalkResponseV2

router = APIRouter()


@router.get("", response_model=list[WalkResponseV2])
async def list_walks_v2(session: DbSession, params: WalkListQuery):
    walks = await fetch_walks(session, params)
    return [walk_to_v2(w) for w in walks]

"""
Walk listing shared by the unversioned and versioned endpoints.
Only the response shape differs between versions; query parsing and the repository call live here.
"""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, HTTPException, Query, status

from indiatrails.config import get_settings
from indiatrails.db.models.walk import Walk
from indiatrails.db.repositories.walk_repository import WalkRepository
from indiatrails.db.session import DbSession

settings = get_settings()

# Keeps (pageNumber - 1) * pageSize inside a signed 64-bit OFFSET
MAX_PAGE_NUMBER = (2**63 - 1) // settings.max_page_size


@dataclass
class WalkListParams:
    filter_on: str | None
    filter_query: str | None
    sort_by: str | None
    is_ascending: bool
    page_number: int
    page_size: int


def walk_list_params(
    filter_on: str | None = Query(None, alias="filterOn", description="Name or Description"),
    filter_query: str | None = Query(None, alias="filterQuery"),
    sort_by: str | None = Query(None, alias="sortBy", description="Name or Length"),
    is_ascending: bool = Query(True, alias="isAscending"),
    page_number: int = Query(1, alias="pageNumber", ge=1, le=MAX_PAGE_NUMBER),
    page_size: int = Query(settings.default_page_size, alias="pageSize", ge=1, le=settings.max_page_size),
) -> WalkListParams:
    """GET /walks?filterOn=Name&filterQuery=Track&sortBy=Name&isAscending=true&pageNumber=1&pageSize=10"""
    return WalkListParams(filter_on, filter_query, sort_by, is_ascending, page_number, page_size)


WalkListQuery = Annotated[WalkListParams, Depends(walk_list_params)]


async def fetch_walks(session: DbSession, params: WalkListParams) -> list[Walk]:
    """Run the listing query. An empty page is a 404 for every API version."""
    walks = await WalkRepository(session).get_all(
        filter_on=params.filter_on,
        filter_query=params.filter_query,
        sort_by=params.sort_by,
        is_ascending=params.is_ascending,
        page_number=params.page_number,
        page_size=params.page_size,
    )
    if not walks:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No walks found!")
    return walks

"""
Walk repository - CRUD plus filtered, sorted and paged listing.
Challenge: Keep region/difficulty loading explicit (selectinload) so nothing lazy-loads in async code.
"""

import uuid

from sqlalchemy import Select, select
from sqlalchemy.orm import selectinload

from indiatrails.db.models.difficulty import Difficulty
from indiatrails.db.models.region import Region
from indiatrails.db.models.walk import Walk
from indiatrails.db.repositories.base_repository import BaseRepository
from indiatrails.exceptions import InvalidReferenceError

# Public selector names (case-insensitive) -> column
FILTER_FIELDS = {
    "name": Walk.name,
    "description": Walk.description,
}
SORT_FIELDS = {
    "name": Walk.name,
    "length": Walk.length_in_km,
}

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 1000


def _with_relations(stmt: Select) -> Select:
    return stmt.options(selectinload(Walk.region), selectinload(Walk.difficulty))


class WalkRepository(BaseRepository[Walk]):
    """Walk-specific queries. Unknown filter/sort selectors are ignored rather than rejected."""

    def __init__(self, session):
        super().__init__(session, Walk)

    async def get_by_id(self, id: uuid.UUID) -> Walk | None:
        result = await self.session.execute(_with_relations(select(Walk).where(Walk.id == id)))
        return result.scalar_one_or_none()

    async def get_all(
        self,
        filter_on: str | None = None,
        filter_query: str | None = None,
        sort_by: str | None = None,
        is_ascending: bool = True,
        page_number: int = DEFAULT_PAGE_NUMBER,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> list[Walk]:
        stmt = _with_relations(select(Walk))

        filter_column = FILTER_FIELDS.get((filter_on or "").strip().lower())
        if filter_column is not None and filter_query:
            stmt = stmt.where(filter_column.icontains(filter_query, autoescape=True))

        sort_column = SORT_FIELDS.get((sort_by or "").strip().lower())
        if sort_column is not None:
            # id as tie-breaker so descending is the exact reverse of ascending
            if is_ascending:
                stmt = stmt.order_by(sort_column.asc(), Walk.id.asc())
            else:
                stmt = stmt.order_by(sort_column.desc(), Walk.id.desc())
        else:
            stmt = stmt.order_by(Walk.id)

        skip = (page_number - 1) * page_size
        stmt = stmt.offset(skip).limit(page_size)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def _check_references(self, walk: Walk) -> None:
        if not await BaseRepository(self.session, Region).exists(walk.region_id):
            raise InvalidReferenceError("Region", walk.region_id)
        if not await BaseRepository(self.session, Difficulty).exists(walk.difficulty_id):
            raise InvalidReferenceError("Difficulty", walk.difficulty_id)

    async def _load_relations(self, walk: Walk) -> Walk:
        await self.session.refresh(walk, attribute_names=["region", "difficulty"])
        return walk

    async def create(self, walk: Walk) -> Walk:
        """Insert a walk. Raises InvalidReferenceError for an unknown region or difficulty."""
        await self._check_references(walk)
        walk = await self.add(walk)
        return await self._load_relations(walk)

    async def update(self, id: uuid.UUID, walk: Walk) -> Walk | None:
        """Overwrite every mutable field. None when the walk does not exist."""
        existing = await self.get_by_id(id)
        if existing is None:
            return None
        await self._check_references(walk)
        existing.name = walk.name
        existing.description = walk.description
        existing.length_in_km = walk.length_in_km
        existing.walk_image_url = walk.walk_image_url
        existing.difficulty_id = walk.difficulty_id
        existing.region_id = walk.region_id
        await self.session.flush()
        return await self._load_relations(existing)

    async def delete(self, id: uuid.UUID) -> Walk | None:
        return await self.delete_by_id(id)

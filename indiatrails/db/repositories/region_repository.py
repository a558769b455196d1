"""
Region repository - plain CRUD over regions, no filtering or paging.
"""

import uuid

from indiatrails.db.models.region import Region
from indiatrails.db.repositories.base_repository import BaseRepository


class RegionRepository(BaseRepository[Region]):
    def __init__(self, session):
        super().__init__(session, Region)

    async def create(self, region: Region) -> Region:
        return await self.add(region)

    async def update(self, id: uuid.UUID, region: Region) -> Region | None:
        """Overwrite code, name and image URL. None when the region does not exist."""
        existing = await self.get_by_id(id)
        if existing is None:
            return None
        existing.code = region.code
        existing.name = region.name
        existing.region_image_url = region.region_image_url
        await self.session.flush()
        return existing

    async def delete(self, id: uuid.UUID) -> Region | None:
        """Delete a region and, through the FK cascade, all of its walks."""
        return await self.delete_by_id(id)

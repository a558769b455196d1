"""
Difficulty repository - read-only; rows are seeded by the initial migration.
"""

from sqlalchemy import select

from indiatrails.db.models.difficulty import Difficulty
from indiatrails.db.repositories.base_repository import BaseRepository


class DifficultyRepository(BaseRepository[Difficulty]):
    def __init__(self, session):
        super().__init__(session, Difficulty)

    async def get_all(self) -> list[Difficulty]:
        result = await self.session.execute(select(Difficulty).order_by(Difficulty.name))
        return list(result.scalars().all())

"""Difficulty response schema."""

import uuid

from indiatrails.schemas.common import CamelModel


class DifficultyResponse(CamelModel):
    id: uuid.UUID
    name: str

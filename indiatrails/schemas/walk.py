"""Walk request/response schemas, including the two versioned listing shapes."""

import uuid

from pydantic import Field, field_validator

from indiatrails.schemas.common import CamelModel, optional_absolute_url, require_text
from indiatrails.schemas.difficulty import DifficultyResponse
from indiatrails.schemas.region import RegionResponse


class WalkRequest(CamelModel):
    name: str = Field(..., max_length=100)
    description: str = Field(..., max_length=1000)
    length_in_km: float = Field(..., gt=0)
    walk_image_url: str | None = None
    difficulty_id: uuid.UUID
    region_id: uuid.UUID

    @field_validator("name")
    @classmethod
    def _name_required(cls, v: str) -> str:
        return require_text(v, "Name")

    @field_validator("description")
    @classmethod
    def _description_required(cls, v: str) -> str:
        return require_text(v, "Description")

    @field_validator("walk_image_url")
    @classmethod
    def _image_url(cls, v: str | None) -> str | None:
        return optional_absolute_url(v, "WalkImageUrl")


class AddWalkRequest(WalkRequest):
    pass


class UpdateWalkRequest(WalkRequest):
    pass


class WalkResponse(CamelModel):
    id: uuid.UUID
    name: str
    description: str
    length_in_km: float
    walk_image_url: str | None = None
    region: RegionResponse
    difficulty: DifficultyResponse


class WalkResponseV1(CamelModel):
    id: uuid.UUID
    name: str
    description: str
    length_in_km: float


class WalkResponseV2(CamelModel):
    id: uuid.UUID
    name: str
    description: str
    length: float

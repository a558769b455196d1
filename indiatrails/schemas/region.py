"""Region request/response schemas - REST API contract."""

import uuid

from pydantic import Field, field_validator

from indiatrails.schemas.common import CamelModel, optional_absolute_url, require_text


class RegionRequest(CamelModel):
    name: str = Field(..., max_length=100)
    code: str = Field(..., max_length=10)
    region_image_url: str | None = None

    @field_validator("name")
    @classmethod
    def _name_required(cls, v: str) -> str:
        return require_text(v, "Region name")

    @field_validator("code")
    @classmethod
    def _code_required(cls, v: str) -> str:
        return require_text(v, "Region code")

    @field_validator("region_image_url")
    @classmethod
    def _image_url(cls, v: str | None) -> str | None:
        return optional_absolute_url(v, "RegionImageUrl")


class AddRegionRequest(RegionRequest):
    pass


class UpdateRegionRequest(RegionRequest):
    pass


class RegionResponse(CamelModel):
    id: uuid.UUID
    code: str
    name: str
    region_image_url: str | None = None

"""
Field-by-field mapping between request/response schemas and ORM models.
Kept explicit so each API shape (including the versioned walk listings) is visible in one place.
"""

from indiatrails.db.models.difficulty import Difficulty
from indiatrails.db.models.region import Region
from indiatrails.db.models.walk import Walk
from indiatrails.schemas.difficulty import DifficultyResponse
from indiatrails.schemas.region import RegionRequest, RegionResponse
from indiatrails.schemas.walk import WalkRequest, WalkResponse, WalkResponseV1, WalkResponseV2


def region_from_request(data: RegionRequest) -> Region:
    return Region(
        code=data.code,
        name=data.name,
        region_image_url=data.region_image_url,
    )


def region_to_response(region: Region) -> RegionResponse:
    return RegionResponse(
        id=region.id,
        code=region.code,
        name=region.name,
        region_image_url=region.region_image_url,
    )


def difficulty_to_response(difficulty: Difficulty) -> DifficultyResponse:
    return DifficultyResponse(id=difficulty.id, name=difficulty.name)


def walk_from_request(data: WalkRequest) -> Walk:
    return Walk(
        name=data.name,
        description=data.description,
        length_in_km=data.length_in_km,
        walk_image_url=data.walk_image_url,
        difficulty_id=data.difficulty_id,
        region_id=data.region_id,
    )


def walk_to_response(walk: Walk) -> WalkResponse:
    """Full walk shape. Region and difficulty must already be loaded."""
    return WalkResponse(
        id=walk.id,
        name=walk.name,
        description=walk.description,
        length_in_km=walk.length_in_km,
        walk_image_url=walk.walk_image_url,
        region=region_to_response(walk.region),
        difficulty=difficulty_to_response(walk.difficulty),
    )


def walk_to_v1(walk: Walk) -> WalkResponseV1:
    return WalkResponseV1(
        id=walk.id,
        name=walk.name,
        description=walk.description,
        length_in_km=walk.length_in_km,
    )


def walk_to_v2(walk: Walk) -> WalkResponseV2:
    # v2 renamed lengthInKm -> length
    return WalkResponseV2(
        id=walk.id,
        name=walk.name,
        description=walk.description,
        length=walk.length_in_km,
    )

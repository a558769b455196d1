"""
Difficulty endpoints - read-only lookup of the seeded ratings.
"""

import uuid

from fastapi import APIRouter, HTTPException, status

from indiatrails.db.repositories.difficulty_repository import DifficultyRepository
from indiatrails.db.session import DbSession
from indiatrails.mappings import difficulty_to_response
from indiatrails.schemas.difficulty import DifficultyResponse

router = APIRouter()


@router.get("", response_model=list[DifficultyResponse])
async def list_difficulties(session: DbSession):
    difficulties = await DifficultyRepository(session).get_all()
    return [difficulty_to_response(d) for d in difficulties]


@router.get("/{difficulty_id}", response_model=DifficultyResponse)
async def get_difficulty(session: DbSession, difficulty_id: uuid.UUID):
    difficulty = await DifficultyRepository(session).get_by_id(difficulty_id)
    if not difficulty:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No difficulty found with given id!")
    return difficulty_to_response(difficulty)

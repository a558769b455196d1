# Repository pattern: abstract data access (SOLID - Dependency Inversion)

from indiatrails.db.repositories.auth_repository import AuthRepository
from indiatrails.db.repositories.difficulty_repository import DifficultyRepository
from indiatrails.db.repositories.region_repository import RegionRepository
from indiatrails.db.repositories.walk_repository import WalkRepository

__all__ = ["AuthRepository", "DifficultyRepository", "RegionRepository", "WalkRepository"]

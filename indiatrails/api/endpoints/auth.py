"""
Auth endpoints - registration and login (RESTful API).
Challenge: Secure auth, validation, clear status codes.
"""

from fastapi import APIRouter, HTTPException, status

from indiatrails.db.models.user import User
from indiatrails.db.repositories.auth_repository import AuthRepository
from indiatrails.db.session import DbSession
from indiatrails.schemas.auth import AuthResponse, LoginRequest, RegisterRequest

router = APIRouter()


@router.post("/register", response_model=AuthResponse)
async def register(session: DbSession, data: RegisterRequest):
    """Create a user and return a token for it. Duplicate email (any case) is a 400."""
    repo = AuthRepository(session)
    if await repo.user_exists(data.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User with this email already exists",
        )
    user = await repo.register(User(username=data.username, email=data.email), data.password)
    return AuthResponse(token=repo.generate_token(user), username=user.username, email=user.email)


@router.post("/login", response_model=AuthResponse)
async def login(session: DbSession, data: LoginRequest):
    """Authenticate and return JWT."""
    repo = AuthRepository(session)
    user = await repo.login(data.email, data.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )
    return AuthResponse(token=repo.generate_token(user), username=user.username, email=user.email)

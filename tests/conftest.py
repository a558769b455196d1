"""
Pytest fixtures - test DB, client, auth, sample walks.
Challenge: Isolated tests; nothing is committed, every test starts from the seeded lookups.
"""

from datetime import datetime, timezone
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from indiatrails.core.security import create_access_token, hash_password
from indiatrails.db.base import Base
from indiatrails.db.models import Difficulty, Region, User, Walk
from indiatrails.db.seed import DIFFICULTIES, EASY_ID, HARD_ID, MEDIUM_ID, REGIONS
from indiatrails.db.session import build_engine, get_db
from indiatrails.main import app

HP_ID = REGIONS[0]["id"]
UK_ID = REGIONS[1]["id"]
LD_ID = REGIONS[2]["id"]


@pytest_asyncio.fixture
async def engine(tmp_path):
    # File-backed SQLite; build_engine turns on foreign keys so cascades behave like production
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    async_session = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )
    async with async_session() as s:
        s.add_all([Difficulty(**row) for row in DIFFICULTIES])
        s.add_all([Region(**row) for row in REGIONS])
        await s.flush()
        yield s


@pytest_asyncio.fixture
async def client(session: AsyncSession):
    async def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_user(session: AsyncSession) -> User:
    user = User(
        username="tester",
        email="test@example.com",
        password_hash=hash_password("password123"),
        created_at=datetime.now(timezone.utc),
    )
    session.add(user)
    await session.flush()
    await session.refresh(user)
    return user


@pytest.fixture
def auth_headers(test_user: User) -> dict:
    token = create_access_token(test_user.id, test_user.username, test_user.email)
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def walks(session: AsyncSession) -> list[Walk]:
    """Four walks across three regions, lengths 9 < 17 < 26 < 65."""
    rows = [
        Walk(
            name="Triund Trek",
            description="Ridge walk above Dharamshala",
            length_in_km=9.0,
            region_id=HP_ID,
            difficulty_id=EASY_ID,
        ),
        Walk(
            name="Valley of Flowers",
            description="Alpine meadow trek in the Garhwal",
            length_in_km=17.0,
            region_id=UK_ID,
            difficulty_id=MEDIUM_ID,
        ),
        Walk(
            name="Hampta Pass",
            description="Crossing from Kullu into Lahaul",
            length_in_km=26.0,
            walk_image_url="https://example.com/hampta.jpg",
            region_id=HP_ID,
            difficulty_id=MEDIUM_ID,
        ),
        Walk(
            name="Markha Valley",
            description="High altitude TREK through Hemis National Park",
            length_in_km=65.0,
            region_id=LD_ID,
            difficulty_id=HARD_ID,
        ),
    ]
    session.add_all(rows)
    await session.flush()
    return rows
